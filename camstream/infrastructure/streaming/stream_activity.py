"""
Idle transcoder reaping.

Transcoders otherwise outlive their last viewer. The stream bridge records
every authorized request here; a background sweep kills transcoders whose
camera has not been requested within the idle timeout.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...core.exceptions import ProcessControlError
from .transcoder_processes import TranscoderProcessRegistry

logger = logging.getLogger(__name__)


@dataclass
class _StreamActivity:
    source_url: str
    last_access: float


class StreamActivityTracker:
    """Last-access timestamp per camera, keyed by external ID."""

    def __init__(self) -> None:
        self._activity: Dict[str, _StreamActivity] = {}

    def touch(self, camera_exid: str, source_url: str, now: Optional[float] = None) -> None:
        self._activity[camera_exid] = _StreamActivity(
            source_url=source_url,
            last_access=time.monotonic() if now is None else now,
        )

    def touch_existing(self, camera_exid: str, now: Optional[float] = None) -> None:
        """Refresh a camera already being tracked (e.g. on segment requests)."""
        activity = self._activity.get(camera_exid)
        if activity is not None:
            activity.last_access = time.monotonic() if now is None else now

    def idle_streams(self, idle_timeout: float, now: Optional[float] = None) -> Dict[str, str]:
        """Return {camera_exid: source_url} for cameras idle longer than idle_timeout."""
        current = time.monotonic() if now is None else now
        return {
            exid: activity.source_url
            for exid, activity in self._activity.items()
            if current - activity.last_access > idle_timeout
        }

    def forget(self, camera_exid: str) -> None:
        self._activity.pop(camera_exid, None)

    def tracked(self) -> List[str]:
        return list(self._activity.keys())


async def reap_idle_streams(
    tracker: StreamActivityTracker,
    registry: TranscoderProcessRegistry,
    idle_timeout: float,
    now: Optional[float] = None,
) -> int:
    """
    Kill transcoders of idle cameras once.

    Returns:
        Number of processes killed
    """
    killed = 0
    for camera_exid, source_url in tracker.idle_streams(idle_timeout, now=now).items():
        try:
            count = await registry.kill(source_url)
        except ProcessControlError as e:
            # Keep tracking so the next sweep retries
            logger.warning("Could not reap idle transcoder for camera %s: %s", camera_exid, e.message)
            continue
        tracker.forget(camera_exid)
        if count:
            logger.info("Reaped %d idle transcoder(s) for camera %s", count, camera_exid)
        killed += count
    return killed


async def run_idle_reaper(
    tracker: StreamActivityTracker,
    registry: TranscoderProcessRegistry,
    idle_timeout: float,
    interval: float,
) -> None:
    """Background task: sweep idle transcoders every interval seconds until cancelled."""
    logger.info("Idle transcoder reaper started (idle_timeout=%ss, interval=%ss)", idle_timeout, interval)
    while True:
        try:
            await asyncio.sleep(interval)
            await reap_idle_streams(tracker, registry, idle_timeout)
        except asyncio.CancelledError:
            logger.info("Idle transcoder reaper cancelled")
            break
        except Exception as e:
            logger.error(f"Error reaping idle transcoders: {e}", exc_info=True)
