"""Application constants.

This module contains magic strings and numbers used throughout the application.
Centralizing these values makes them easier to maintain and modify.
"""

# Error messages returned in the {"error": ...} envelope
PAST_DATE_NOT_PERMITTED = "Past dates are not permitted"
CANNOT_UPDATE_PAST_MEETUP = "You can't update past meetup"
CANNOT_DELETE_PAST_MEETUP = "You can't delete past meetup"
NO_UPDATE_PERMISSION = "You don't have permission to cancel this appointment."
NOT_AUTHORIZED = "Not authorized."
MEETUP_NOT_FOUND = "Meetup not found"
BANNER_NOT_FOUND = "Banner file not found"
INVALID_REFERENCE = "Meetup references a missing user or file"
TOKEN_NOT_PROVIDED = "Token not provided"
TOKEN_INVALID = "Token invalid"

# JWT Token Configuration
# Token expiration time in minutes (7 days)
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7

# Public path prefix for uploaded files (banner URLs)
FILES_URL_PREFIX = "/files"
