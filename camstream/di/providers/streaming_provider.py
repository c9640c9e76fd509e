from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...application.services.camera_directory import CameraDirectory
from ...application.use_cases.stream.request_stream import RequestStreamUseCase
from ...infrastructure.streaming import (
    HlsReadinessPoller,
    StreamActivityTracker,
    TranscoderProcessRegistry,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StreamingProvider:
    """Streaming provider - registers transcoder control and the stream bridge use case."""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register streaming services.
        Registry, poller and activity tracker are singletons: the registry's
        per-URL locks and the tracker's timestamps must be shared by all requests.
        """
        settings = get_settings()

        container.register_singleton(
            TranscoderProcessRegistry,
            TranscoderProcessRegistry(
                ffmpeg_path=settings.ffmpeg_path,
                rtmp_ingest_url=settings.rtmp_ingest_url,
                control_timeout_sec=settings.process_control_timeout_sec,
            ),
        )
        container.register_singleton(HlsReadinessPoller, HlsReadinessPoller(hls_dir=settings.hls_dir))
        container.register_singleton(StreamActivityTracker, StreamActivityTracker())

        # Activity is only recorded when the idle reaper will consume it
        reaping_enabled = settings.stream_idle_timeout_sec > 0

        container.register_factory(
            RequestStreamUseCase,
            lambda: RequestStreamUseCase(
                camera_directory=container.get(CameraDirectory),
                process_registry=container.get(TranscoderProcessRegistry),
                readiness_poller=container.get(HlsReadinessPoller),
                activity_tracker=container.get(StreamActivityTracker) if reaping_enabled else None,
                poll_attempts=settings.hls_poll_attempts,
                poll_interval=settings.hls_poll_interval_sec,
            ),
        )
