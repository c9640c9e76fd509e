"""
Unit tests for CameraDirectory (cached lookups and invalidation fan-out)
"""
from unittest.mock import AsyncMock

import pytest
from camstream.application.services.camera_directory import CameraDirectory, list_cache_key
from camstream.domain.models.camera import Camera
from camstream.domain.models.user import User
from camstream.infrastructure.cache.camera_cache import CameraCache


@pytest.fixture
def repo():
    repo = AsyncMock()
    repo.find_share_users.return_value = []
    return repo


@pytest.fixture
def directory(repo):
    return CameraDirectory(camera_repository=repo, cache=CameraCache())


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_by_id_is_memoised(self, directory, repo, camera):
        repo.find_by_exid.return_value = camera
        assert await directory.get_by_id("cam1") is camera
        assert await directory.get_by_id("cam1") is camera
        repo.find_by_exid.assert_awaited_once_with("cam1")

    @pytest.mark.asyncio
    async def test_missing_camera_is_not_cached(self, directory, repo, camera):
        repo.find_by_exid_with_associations.side_effect = [None, camera]
        assert await directory.get_full("cam1") is None
        assert await directory.get_full("cam1") is camera

    @pytest.mark.asyncio
    async def test_for_user_includes_shared(self, directory, repo, owner, camera):
        shared = Camera(id="cam-id-2", exid="cam2", name="Shared")
        repo.find_owned_by.return_value = [camera]
        repo.find_shared_with.return_value = [shared]

        assert await directory.for_user(owner) == [camera, shared]
        assert await directory.for_user(owner, include_shared=False) == [camera]
        repo.find_shared_with.assert_awaited_once_with(owner)
        assert repo.find_owned_by.await_count == 2

    def test_list_cache_key(self, owner):
        assert list_cache_key(owner, True) == "owner_true"
        assert list_cache_key(owner, False) == "owner_false"


class TestInvalidation:
    @pytest.mark.asyncio
    async def test_invalidate_camera_returns_fresh_record(self, directory, repo, camera):
        repo.find_by_exid_with_associations.return_value = camera
        await directory.get_full("cam1")

        renamed = Camera(id=camera.id, exid="cam1", name="Renamed", owner_id=camera.owner_id)
        repo.find_by_exid_with_associations.return_value = renamed
        await directory.invalidate_camera(camera)

        assert (await directory.get_full("cam1")).name == "Renamed"

    @pytest.mark.asyncio
    async def test_invalidate_camera_evicts_affected_user_lists(self, directory, repo, owner, viewer, stranger, camera):
        repo.find_owned_by.return_value = [camera]
        repo.find_shared_with.return_value = []
        repo.find_share_users.return_value = [viewer]
        for user in (owner, viewer, stranger):
            await directory.for_user(user)
            await directory.for_user(user, include_shared=False)
        assert repo.find_owned_by.await_count == 6

        await directory.invalidate_camera(camera)

        cache = directory.cache
        for user in (owner, viewer):
            assert cache.get("cameras", list_cache_key(user, True)) is None
            assert cache.get("cameras", list_cache_key(user, False)) is None
        assert cache.get("cameras", list_cache_key(stranger, True)) == [camera]
        repo.find_share_users.assert_awaited_once_with(camera)

    @pytest.mark.asyncio
    async def test_invalidate_camera_is_idempotent(self, directory, repo, camera):
        await directory.invalidate_camera(camera)
        await directory.invalidate_camera(camera)
        assert repo.find_share_users.await_count == 2

    @pytest.mark.asyncio
    async def test_invalidate_camera_without_hydrated_owner(self, directory, repo):
        bare = Camera(id="cam-id-9", exid="cam9", name="Bare", owner_id="usr-x")
        repo.find_share_users.return_value = [User(id="usr-y", username="y")]
        directory.cache.set("cameras", "y_true", [bare])
        await directory.invalidate_camera(bare)
        assert directory.cache.get("cameras", "y_true") is None


class TestRights:
    def test_delegates_to_rights_computation(self, directory, camera, owner, stranger):
        assert "grant~delete" in directory.rights(camera, owner)
        assert directory.rights(camera, stranger) == "snapshot,list"
        assert directory.is_owner(owner, camera) is True
        assert directory.is_owner(None, camera) is False
