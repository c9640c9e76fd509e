"""
Unit tests for camstream.core.security
"""
import jwt
import pytest
from camstream.core.security import decode_jwt_token, issue_access_token


class TestAccessTokens:
    """Tests for issue_access_token and decode_jwt_token"""

    def test_issue_and_decode(self, mock_settings):
        token = issue_access_token("user-123", email="test@example.com")
        decoded = decode_jwt_token(token)
        assert decoded["sub"] == "user-123"
        assert decoded["email"] == "test@example.com"
        assert decoded["exp"] - decoded["iat"] == 1440 * 60

    def test_custom_lifetime(self, mock_settings):
        decoded = decode_jwt_token(issue_access_token("user-1", expires_in_minutes=5))
        assert decoded["exp"] - decoded["iat"] == 300

    def test_decode_invalid_token_raises(self, mock_settings):
        with pytest.raises(ValueError, match="Invalid token"):
            decode_jwt_token("not.a.jwt")

    def test_decode_wrong_secret_raises(self, mock_settings):
        token = jwt.encode({"sub": "user-1", "exp": 4102444800}, "another_secret", algorithm="HS256")
        with pytest.raises(ValueError):
            decode_jwt_token(token)

    def test_decode_expired_token_raises(self, mock_settings):
        token = issue_access_token("user-1", expires_in_minutes=-1)
        with pytest.raises(ValueError):
            decode_jwt_token(token)

    def test_decode_requires_subject(self, mock_settings):
        token = jwt.encode({"exp": 4102444800}, mock_settings.jwt_secret_key, algorithm="HS256")
        with pytest.raises(ValueError, match="sub"):
            decode_jwt_token(token)
