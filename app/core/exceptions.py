"""Domain errors and request validation message formatting."""
from typing import Any, Dict, Sequence


class MeetupError(Exception):
    """Base error carrying the HTTP status and the message sent to clients."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MeetupError):
    """Malformed input or a reference to a row that does not exist.

    Schema violations caught by FastAPI are rendered with the same 400
    status by the request validation handler in ``app.main``.
    """

    status_code = 400


class BusinessRuleError(MeetupError):
    """A rule such as 'no past dates' was violated."""

    status_code = 400


class AuthorizationError(MeetupError):
    """The caller does not own the resource."""

    status_code = 401


class NotFoundError(MeetupError):
    status_code = 404


# Pydantic error types mapped to the type name shown to clients
EXPECTED_TYPES = {
    "string_type": "string",
    "datetime_type": "date",
    "datetime_parsing": "date",
    "datetime_from_date_parsing": "date",
    "datetime_object_invalid": "date",
    "int_type": "number",
    "int_parsing": "number",
    "int_from_float": "number",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


def describe_validation_error(error: Dict[str, Any]) -> str:
    """Turn one Pydantic error dict into a short client-facing message."""
    loc = [part for part in error.get("loc", ()) if part != "body"]
    field = str(loc[-1]) if loc else "body"
    kind = error.get("type", "")

    if kind == "missing" or kind == "string_too_short":
        return f"{field} is a required field"
    if kind in EXPECTED_TYPES:
        return f"{field} must be a `{EXPECTED_TYPES[kind]}` type"
    if kind == "value_error" and "error" in error.get("ctx", {}):
        return f"{field} {error['ctx']['error']}"
    return f"{field}: {error.get('msg', 'is invalid')}"


def first_validation_message(errors: Sequence[Dict[str, Any]]) -> str:
    """Message for the first validation error, or a generic one."""
    if not errors:
        return "Validation fails"
    return describe_validation_error(errors[0])
