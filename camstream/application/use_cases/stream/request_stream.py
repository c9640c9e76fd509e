# Standard library imports
import logging
from typing import Awaitable, Callable, Optional, Tuple

# Local application imports
from ....core.exceptions import (
    CameraNotFoundError,
    CredentialMismatchError,
    ProcessControlError,
    StreamBridgeError,
)
from ....core.stream_token import decode_stream_token
from ....domain.models.camera import Camera
from ....domain.services import camera_config
from ....infrastructure.streaming.hls_readiness import HlsReadinessPoller, ReadinessResult
from ....infrastructure.streaming.stream_activity import StreamActivityTracker
from ....infrastructure.streaming.transcoder_processes import TranscoderProcessRegistry
from ...dto.stream_dto import StreamCommand, StreamOutcome
from ...services.camera_directory import CameraDirectory

logger = logging.getLogger(__name__)


class RequestStreamUseCase:
    """
    Use case bridging a viewer request to the camera's transcoder

    Runs, in order: validate the token, authorize it against the camera's
    current config, ensure (or restart) the transcoder, then, for CHECK only,
    wait for the HLS playlist.

    Only token/credential checks produce UNAUTHORIZED. Once a request is
    authorized, process-control trouble is logged and shows up as a timeout.
    """

    def __init__(
        self,
        camera_directory: CameraDirectory,
        process_registry: TranscoderProcessRegistry,
        readiness_poller: HlsReadinessPoller,
        activity_tracker: Optional[StreamActivityTracker] = None,
        poll_attempts: int = 30,
        poll_interval: float = 0.5,
    ) -> None:
        self.camera_directory = camera_directory
        self.process_registry = process_registry
        self.readiness_poller = readiness_poller
        self.activity_tracker = activity_tracker
        self.poll_attempts = poll_attempts
        self.poll_interval = poll_interval

    async def execute(
        self,
        camera_exid: str,
        token: str,
        command: StreamCommand = StreamCommand.CHECK,
        is_cancelled: Optional[Callable[[], Awaitable[bool]]] = None,
    ) -> StreamOutcome:
        """
        Handle a stream request

        Args:
            camera_exid: External ID of the requested camera
            token: Stream token presented by the caller
            command: CHECK to ensure + wait, KILL to restart
            is_cancelled: Optional async predicate telling whether the caller went away

        Returns:
            StreamOutcome; use .status_code for the HTTP status
        """
        try:
            camera, source_url = await self._authorize(camera_exid, token)
        except StreamBridgeError as e:
            # Same outcome for every reason, details only in logs
            logger.warning(
                "Unauthorized stream request for camera %s: %s (%s)",
                camera_exid,
                e.message,
                type(e).__name__,
            )
            return StreamOutcome.UNAUTHORIZED
        except RuntimeError as e:
            # Repository failure: fail closed without touching processes
            logger.error("Camera lookup failed for stream request %s: %s", camera_exid, e)
            return StreamOutcome.UNAUTHORIZED

        if self.activity_tracker is not None:
            self.activity_tracker.touch(camera.exid, source_url)

        await self._ensure(camera.exid, source_url, token, command)

        if command == StreamCommand.KILL:
            return StreamOutcome.RESTARTED

        result = await self.readiness_poller.wait_for_artifact(
            camera.exid,
            max_attempts=self.poll_attempts,
            interval=self.poll_interval,
            is_cancelled=is_cancelled,
        )
        if result == ReadinessResult.READY:
            return StreamOutcome.READY
        if result == ReadinessResult.CANCELLED:
            return StreamOutcome.CANCELLED
        return StreamOutcome.TIMED_OUT

    async def _authorize(self, camera_exid: str, token: str) -> Tuple[Camera, str]:
        """
        Decode the token and check it against the camera's current config

        Returns:
            (camera, source_url) where source_url is derived server-side

        Raises:
            MalformedTokenError, CameraNotFoundError, CredentialMismatchError
        """
        username, password, token_source_url = decode_stream_token(token)

        camera = await self.camera_directory.get_full(camera_exid)
        if camera is None:
            raise CameraNotFoundError(camera_exid)

        if camera_config.credentials(camera) != (username, password):
            raise CredentialMismatchError("Stream token credentials do not match camera config")

        # Never spawn a URL taken from the token; it must equal what the config yields
        source_url = camera_config.rtsp_url(camera)
        if not source_url:
            raise CredentialMismatchError("Camera has no complete RTSP configuration")
        if token_source_url != source_url:
            raise CredentialMismatchError("Stream token source URL does not match camera config")

        return camera, source_url

    async def _ensure(self, camera_exid: str, source_url: str, token: str, command: StreamCommand) -> None:
        try:
            if command == StreamCommand.KILL:
                await self.process_registry.kill_and_restart(source_url, camera_exid, token)
            else:
                await self.process_registry.ensure_running(source_url, camera_exid, token)
        except ProcessControlError as e:
            # An already running transcoder may still serve the request
            logger.error(
                "Transcoder %s failed for camera %s: %s",
                e.operation or command.value,
                camera_exid,
                e.message,
            )
