"""Common response schemas."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    error: str
