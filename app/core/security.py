"""Security and authentication utilities."""
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core import config
from app.core.constants import TOKEN_INVALID, TOKEN_NOT_PROVIDED

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=config.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, config.settings.SECRET_KEY, algorithm=config.settings.ALGORITHM)
    return encoded_jwt


def create_user_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Create an access token whose subject is the given user id."""
    return create_access_token({"sub": str(user_id)}, expires_delta)


def decode_user_id(token: str) -> int:
    """
    Decode a JWT and return the user id held in its ``sub`` claim.

    Raises:
        ValueError: if the token is expired, badly signed or has no numeric subject
    """
    try:
        payload = jwt.decode(token, config.settings.SECRET_KEY, algorithms=[config.settings.ALGORITHM])
    except jwt.PyJWTError as e:
        raise ValueError(str(e)) from e

    subject = payload.get("sub")
    if subject is None:
        raise ValueError("Token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise ValueError("Token subject is not a user id") from e


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    """Resolve the authenticated user id from the Authorization header.

    The id is also stored on ``request.state.user_id`` for middleware and logs.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail=TOKEN_NOT_PROVIDED)

    try:
        user_id = decode_user_id(credentials.credentials)
    except ValueError:
        raise HTTPException(status_code=401, detail=TOKEN_INVALID)

    request.state.user_id = user_id
    return user_id
