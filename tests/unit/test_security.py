"""Unit tests for security functions."""
from datetime import timedelta

import jwt
import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from unittest.mock import Mock

from app.core import config
from app.core.security import (
    create_access_token,
    create_user_token,
    decode_user_id,
    get_current_user_id,
)


@pytest.mark.unit
class TestJWT:
    """Test JWT token creation and decoding."""

    def test_create_access_token(self):
        """Should create valid JWT token."""
        token = create_access_token({"sub": "1"})

        assert isinstance(token, str)
        # JWT format: header.payload.signature
        assert token.count(".") == 2

    def test_user_token_round_trip(self):
        token = create_user_token(42)
        assert decode_user_id(token) == 42

    def test_expired_token_rejected(self):
        token = create_user_token(42, expires_delta=timedelta(seconds=-1))
        with pytest.raises(ValueError):
            decode_user_id(token)

    def test_wrong_secret_rejected(self):
        token = jwt.encode({"sub": "42"}, "not-the-secret", algorithm=config.settings.ALGORITHM)
        with pytest.raises(ValueError):
            decode_user_id(token)

    def test_missing_subject_rejected(self):
        token = create_access_token({"role": "organizer"})
        with pytest.raises(ValueError, match="no subject"):
            decode_user_id(token)

    def test_non_numeric_subject_rejected(self):
        token = create_access_token({"sub": "ada@example.com"})
        with pytest.raises(ValueError, match="not a user id"):
            decode_user_id(token)


@pytest.mark.unit
class TestGetCurrentUserId:
    """Test the authentication dependency."""

    def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id(Mock(), None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token not provided"

    def test_invalid_token(self):
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="garbage")
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id(Mock(), credentials)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token invalid"

    def test_valid_token_sets_request_state(self):
        request = Mock()
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=create_user_token(7))

        assert get_current_user_id(request, credentials) == 7
        assert request.state.user_id == 7
