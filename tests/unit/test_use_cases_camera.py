"""
Unit tests for camera use cases (ListCameras, GetCameraStreams).
"""
from unittest.mock import AsyncMock

import pytest
from camstream.application.services.camera_directory import CameraDirectory
from camstream.application.use_cases.camera.get_camera_streams import GetCameraStreamsUseCase
from camstream.application.use_cases.camera.list_cameras import ListCamerasUseCase
from camstream.domain.models.camera import Camera
from camstream.infrastructure.cache.camera_cache import CameraCache


def _make_camera(exid: str, owner_id: str, name: str = "Cam 1", **kwargs) -> Camera:
    return Camera(id=f"id-{exid}", exid=exid, name=name, owner_id=owner_id, **kwargs)


@pytest.fixture
def repo():
    return AsyncMock()


@pytest.fixture
def directory(repo):
    return CameraDirectory(camera_repository=repo, cache=CameraCache())


class TestListCamerasUseCase:
    """Tests for ListCamerasUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, repo, directory, owner):
        repo.find_owned_by.return_value = []
        repo.find_shared_with.return_value = []
        use_case = ListCamerasUseCase(directory)
        result = await use_case.execute(owner)
        assert result == []

    @pytest.mark.asyncio
    async def test_list_returns_owned_and_shared(self, repo, directory, owner, camera, viewer_right):
        shared = _make_camera("cam2", "usr-other", "Backyard", access_rights=[viewer_right("view", "id-cam2")])
        repo.find_owned_by.return_value = [camera]
        repo.find_shared_with.return_value = [shared]
        use_case = ListCamerasUseCase(directory)

        result = await use_case.execute(owner)

        assert [c.id for c in result] == ["cam1", "cam2"]
        assert result[0].name == "Front Gate"
        assert result[0].vendor_name == "Hikvision"
        assert result[0].model_name == "DS-2CD"
        assert result[0].timezone == "Europe/Dublin"
        assert "grant~delete" in result[0].rights
        assert result[1].rights == "snapshot,list"
        assert result[1].vendor_name == ""

    @pytest.mark.asyncio
    async def test_list_rights_for_shared_user(self, repo, directory, viewer, viewer_right):
        shared = _make_camera("cam2", "usr-other", access_rights=[viewer_right("view", "id-cam2")])
        repo.find_owned_by.return_value = []
        repo.find_shared_with.return_value = [shared]

        result = await ListCamerasUseCase(directory).execute(viewer)

        assert result[0].rights == "snapshot,list,view"

    @pytest.mark.asyncio
    async def test_list_without_shared(self, repo, directory, owner, camera):
        repo.find_owned_by.return_value = [camera]
        result = await ListCamerasUseCase(directory).execute(owner, include_shared=False)
        assert len(result) == 1
        repo.find_shared_with.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_response_never_exposes_config(self, repo, directory, owner, camera):
        repo.find_owned_by.return_value = [camera]
        repo.find_shared_with.return_value = []
        result = await ListCamerasUseCase(directory).execute(owner)
        dumped = result[0].model_dump()
        assert "config" not in dumped
        assert "p" not in dumped.values()


class TestGetCameraStreamsUseCase:
    """Tests for GetCameraStreamsUseCase"""

    @pytest.mark.asyncio
    async def test_owner_gets_urls(self, repo, directory, owner, camera):
        repo.find_by_exid_with_associations.return_value = camera
        use_case = GetCameraStreamsUseCase(directory, "http://localhost:4000/")

        result = await use_case.execute("cam1", owner)

        assert result.id == "cam1"
        assert result.external_url == "http://1.2.3.4:8080"
        assert result.snapshot_url == "http://1.2.3.4:8080/snapshot.jpg"
        assert result.hls_url.startswith("http://localhost:4000/live/")
        assert result.hls_url.endswith("/index.m3u8?camera_id=cam1")
        assert result.rtmp_url.startswith("rtmp://localhost:1935/live/")
        assert result.timezone == "Europe/Dublin"
        assert "grant~delete" in result.rights

    @pytest.mark.asyncio
    async def test_not_found_raises(self, repo, directory, owner):
        repo.find_by_exid_with_associations.return_value = None
        use_case = GetCameraStreamsUseCase(directory, "http://localhost:4000")
        with pytest.raises(ValueError, match="Camera not found"):
            await use_case.execute("missing", owner)

    @pytest.mark.asyncio
    async def test_private_camera_hidden_from_stranger(self, repo, directory, stranger, camera):
        repo.find_by_exid_with_associations.return_value = camera
        use_case = GetCameraStreamsUseCase(directory, "http://localhost:4000")
        with pytest.raises(ValueError, match="Camera not found"):
            await use_case.execute("cam1", stranger)

    @pytest.mark.asyncio
    async def test_public_camera_visible_to_stranger(self, repo, directory, stranger, camera):
        camera.is_public = True
        repo.find_by_exid_with_associations.return_value = camera
        use_case = GetCameraStreamsUseCase(directory, "http://localhost:4000")
        result = await use_case.execute("cam1", stranger)
        assert result.rights == "snapshot,list"

    @pytest.mark.asyncio
    async def test_shared_camera_visible_to_grantee(self, repo, directory, viewer, camera, viewer_right):
        camera.access_rights = [viewer_right("view")]
        repo.find_by_exid_with_associations.return_value = camera
        use_case = GetCameraStreamsUseCase(directory, "http://localhost:4000")
        result = await use_case.execute("cam1", viewer)
        assert result.rights == "snapshot,list,view"

    @pytest.mark.asyncio
    async def test_incomplete_config_gives_empty_stream_urls(self, repo, directory, owner, camera):
        del camera.config["external_rtsp_port"]
        repo.find_by_exid_with_associations.return_value = camera
        use_case = GetCameraStreamsUseCase(directory, "http://localhost:4000")
        result = await use_case.execute("cam1", owner)
        assert result.hls_url == ""
        assert result.rtmp_url == ""
        assert result.external_url == "http://1.2.3.4:8080"
