"""
Shared pytest fixtures for camstream tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from camstream.domain.models import AccessRight, AccessToken, Camera, User, Vendor, VendorModel


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_camstream_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "HLS_DIR": "/tmp/test_hls",
        "STREAM_IDLE_TIMEOUT_SEC": "0",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.public_base_url = "http://localhost:4000"
    mock.hls_url = "http://hls.example.com/hls"
    mock.hls_dir = "/tmp/test_hls"
    mock.stream_idle_timeout_sec = 0
    mock.cors_origins = ["*"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("camstream.core.config.get_settings", return_value=mock), patch(
        "camstream.core.security.get_settings", return_value=mock
    ), patch("camstream.api.v1.stream_controller.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def owner():
    return User(id="usr-owner", username="owner", email="owner@example.com")


@pytest.fixture
def viewer():
    return User(id="usr-viewer", username="viewer")


@pytest.fixture
def stranger():
    return User(id="usr-stranger", username="stranger")


@pytest.fixture
def camera_config():
    """A complete config: credentials, external host, RTSP/HTTP ports and paths."""
    return {
        "auth": {"basic": {"username": "u", "password": "p"}},
        "external_host": "1.2.3.4",
        "external_rtsp_port": 554,
        "external_http_port": 8080,
        "snapshots": {"h264": "/stream", "jpg": "snapshot.jpg"},
    }


@pytest.fixture
def camera(camera_config, owner):
    """cam1 with associations hydrated, owned by `owner`."""
    return Camera(
        id="cam-id-1",
        exid="cam1",
        name="Front Gate",
        owner_id=owner.id,
        config=camera_config,
        timezone="Europe/Dublin",
        owner=owner,
        vendor_model=VendorModel(
            id="model-1",
            name="DS-2CD",
            vendor=Vendor(id="vendor-1", exid="hikvision", name="Hikvision"),
        ),
    )


@pytest.fixture
def viewer_right():
    """Factory for an access right granted to the `viewer` user's token."""
    def make(right: str, camera_id: str = "cam-id-1") -> AccessRight:
        return AccessRight(
            camera_id=camera_id,
            right=right,
            token=AccessToken(id="tok-viewer", user_id="usr-viewer"),
        )
    return make
