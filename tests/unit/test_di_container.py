"""
Unit tests for the DI container wiring.
"""
from unittest.mock import patch

import pytest
from camstream.application.services.camera_directory import CameraDirectory
from camstream.application.use_cases.camera.list_cameras import ListCamerasUseCase
from camstream.application.use_cases.stream.request_stream import RequestStreamUseCase
from camstream.core.config import Settings
from camstream.di.base_container import BaseContainer
from camstream.di.container import DIContainer
from camstream.infrastructure.streaming import StreamActivityTracker, TranscoderProcessRegistry


class TestBaseContainer:
    def test_singleton(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_reregistering_replaces(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        container.register_singleton("thing", 42)
        assert container.get("thing") == 42

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="No dependency registered"):
            BaseContainer().get("missing")


class TestDIContainer:
    def test_stream_bridge_shares_process_state(self):
        container = DIContainer()

        first = container.get(RequestStreamUseCase)
        second = container.get(RequestStreamUseCase)

        assert first is not second
        assert first.process_registry is second.process_registry
        assert first.process_registry is container.get(TranscoderProcessRegistry)
        assert first.camera_directory is container.get(CameraDirectory)

    def test_activity_not_tracked_when_reaping_disabled(self, monkeypatch):
        monkeypatch.setenv("STREAM_IDLE_TIMEOUT_SEC", "0")
        with patch("camstream.di.providers.streaming_provider.get_settings", return_value=Settings()):
            container = DIContainer()
        assert container.get(RequestStreamUseCase).activity_tracker is None

    def test_activity_tracked_when_reaping_enabled(self, monkeypatch):
        monkeypatch.setenv("STREAM_IDLE_TIMEOUT_SEC", "300")
        with patch("camstream.di.providers.streaming_provider.get_settings", return_value=Settings()):
            container = DIContainer()

        first = container.get(RequestStreamUseCase)
        second = container.get(RequestStreamUseCase)

        assert first.activity_tracker is container.get(StreamActivityTracker)
        assert first.activity_tracker is second.activity_tracker

    def test_camera_use_cases_share_directory(self):
        container = DIContainer()
        assert container.get(ListCamerasUseCase).camera_directory is container.get(CameraDirectory)
