"""
Unit tests for GetCurrentUserUseCase.
"""
from unittest.mock import AsyncMock

import jwt
import pytest
from camstream.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from camstream.core.security import issue_access_token
from camstream.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_current_user_success(self, mock_user_repo, mock_settings):
        user = User(id="usr-1", username="owner", email="owner@example.com")
        mock_user_repo.find_by_id.return_value = user
        token = issue_access_token("usr-1")

        result = await GetCurrentUserUseCase(mock_user_repo).execute(token)

        assert result is user
        mock_user_repo.find_by_id.assert_awaited_once_with("usr-1")

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, mock_user_repo, mock_settings):
        with pytest.raises(ValueError, match="Invalid or expired token"):
            await GetCurrentUserUseCase(mock_user_repo).execute("garbage")
        mock_user_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_subject_raises(self, mock_user_repo, mock_settings):
        token = issue_access_token("")
        with pytest.raises(ValueError, match="missing user ID"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)

    @pytest.mark.asyncio
    async def test_user_not_found_raises(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_id.return_value = None
        token = issue_access_token("usr-gone")
        with pytest.raises(ValueError, match="User not found"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)

    @pytest.mark.asyncio
    async def test_token_without_subject_claim_raises(self, mock_user_repo, mock_settings):
        token = jwt.encode({"exp": 4102444800}, mock_settings.jwt_secret_key, algorithm="HS256")
        with pytest.raises(ValueError, match="Invalid or expired token"):
            await GetCurrentUserUseCase(mock_user_repo).execute(token)
