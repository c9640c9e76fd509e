import asyncio
import logging
import os
from enum import Enum
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

PLAYLIST_NAME = "index.m3u8"


class ReadinessResult(str, Enum):
    READY = "ready"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


class HlsReadinessPoller:
    """
    Waits for the HLS playlist the RTMP server writes for a camera.

    Layout (written by the RTMP server, never by this service):
        <hls_dir>/<camera_exid>/index.m3u8 plus sibling segment files
    """

    def __init__(self, hls_dir: str = "/tmp/hls") -> None:
        self._hls_dir = hls_dir

    def playlist_path(self, camera_exid: str) -> str:
        return os.path.join(self._hls_dir, camera_exid, PLAYLIST_NAME)

    def is_ready(self, camera_exid: str) -> bool:
        return os.path.exists(self.playlist_path(camera_exid))

    async def wait_for_artifact(
        self,
        camera_exid: str,
        max_attempts: int = 30,
        interval: float = 0.5,
        is_cancelled: Optional[Callable[[], Awaitable[bool]]] = None,
    ) -> ReadinessResult:
        """
        Check for the playlist up to max_attempts times, sleeping interval
        seconds between checks.

        Args:
            camera_exid: Camera external ID (playlist namespace)
            max_attempts: Number of existence checks before giving up
            interval: Seconds to sleep between checks
            is_cancelled: Optional async predicate, e.g. request.is_disconnected

        Returns:
            READY on the first hit, CANCELLED when is_cancelled turns true,
            TIMED_OUT otherwise
        """
        for attempt in range(1, max_attempts + 1):
            if self.is_ready(camera_exid):
                logger.debug("Playlist for camera %s ready after %d check(s)", camera_exid, attempt)
                return ReadinessResult.READY

            if attempt == max_attempts:
                break

            if is_cancelled is not None and await is_cancelled():
                logger.info("Stopped waiting for camera %s playlist: client went away", camera_exid)
                return ReadinessResult.CANCELLED

            await asyncio.sleep(interval)

        logger.info("Playlist for camera %s not ready after %d checks", camera_exid, max_attempts)
        return ReadinessResult.TIMED_OUT
