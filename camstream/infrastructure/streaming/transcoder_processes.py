import asyncio
import logging
import os
import subprocess
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, List, Set

import psutil

from ...core.exceptions import ProcessControlError

logger = logging.getLogger(__name__)


class TranscoderProcessRegistry:
    """
    Start, find and kill ffmpeg processes that restream a camera's RTSP feed.

    Design goals:
    - The OS process table is the only source of truth: a process belongs to a
      source URL when it is an ffmpeg invocation with that URL in its argv. Nothing is tracked in memory, so processes started by a
      previous instance of the service are found and reused.
    - 1 ffmpeg process per source URL. ensure_running/kill_and_restart hold a
      per-URL asyncio.Lock so concurrent requests in this process cannot spawn
      duplicates; unrelated cameras never wait on each other. A lock is dropped
      once no request holds or waits for it.
    - A process matches a source URL only when one of its argv elements equals
      the URL, so .../stream never matches a transcoder for .../stream2.
    - Every OS call runs in a worker thread, bounded by control_timeout_sec.
      Failures surface as ProcessControlError. A timed-out call keeps running in
      its worker thread after the lock is released; a late spawn can leave a
      duplicate process, which the next kill_and_restart removes.
    """

    def __init__(
        self,
        ffmpeg_path: str = "ffmpeg",
        rtmp_ingest_url: str = "rtmp://localhost:1935/live",
        control_timeout_sec: float = 5.0,
    ) -> None:
        self._ffmpeg_path = ffmpeg_path
        self._rtmp_ingest_url = rtmp_ingest_url.rstrip("/")
        self._control_timeout_sec = control_timeout_sec
        self._locks: Dict[str, asyncio.Lock] = {}
        self._lock_users: Dict[str, int] = {}

        logger.info("TranscoderProcessRegistry initialized (ffmpeg=%s)", ffmpeg_path)

    def build_command(self, source_url: str, camera_exid: str, token: str) -> List[str]:
        """
        Build the ffmpeg command that pulls RTSP and pushes FLV to the RTMP ingest.

        The RTMP server turns the pushed stream into <hls_dir>/<exid>/index.m3u8
        and authorizes the publish with the token query parameter.
        """
        return [
            self._ffmpeg_path,
            # RTSP input over TCP
            "-rtsp_transport",
            "tcp",
            "-i",
            source_url,
            # Silent audio track; some players refuse video-only FLV
            "-f",
            "lavfi",
            "-i",
            "aevalsrc=0",
            # Passthrough video, encode the synthesized audio
            "-vcodec",
            "copy",
            "-acodec",
            "aac",
            "-map",
            "0:0",
            "-map",
            "1:0",
            "-shortest",
            "-strict",
            "experimental",
            # Push target namespaced by camera
            "-f",
            "flv",
            f"{self._rtmp_ingest_url}/{camera_exid}?token={token}",
        ]

    async def find_live_pids(self, source_url: str) -> Set[int]:
        """Return PIDs of running ffmpeg processes whose command line contains source_url."""
        return await self._run_os_call("list", source_url, self._scan_process_table, source_url)

    async def start(self, source_url: str, camera_exid: str, token: str) -> int:
        """Spawn a detached ffmpeg process without waiting for it. Returns its PID."""
        command = self.build_command(source_url, camera_exid, token)
        pid = await self._run_os_call("spawn", source_url, self._spawn, command)
        logger.info("Started transcoder for camera %s (pid=%s)", camera_exid, pid)
        return pid

    async def ensure_running(self, source_url: str, camera_exid: str, token: str) -> bool:
        """
        Start a transcoder for source_url unless one is already running.

        Returns:
            True when a new process was spawned
        """
        async with self._locked(source_url):
            pids = await self.find_live_pids(source_url)
            if pids:
                logger.debug("Transcoder already running for camera %s (pids=%s)", camera_exid, sorted(pids))
                return False
            await self.start(source_url, camera_exid, token)
            return True

    async def kill_and_restart(self, source_url: str, camera_exid: str, token: str) -> int:
        """
        SIGKILL every transcoder for source_url, then always start a fresh one.

        Returns:
            PID of the new process
        """
        async with self._locked(source_url):
            killed = await self._kill_all(source_url)
            if killed:
                logger.info("Killed %d transcoder(s) for camera %s", killed, camera_exid)
            return await self.start(source_url, camera_exid, token)

    async def kill(self, source_url: str) -> int:
        """SIGKILL every transcoder for source_url. Returns the number killed."""
        async with self._locked(source_url):
            return await self._kill_all(source_url)

    async def _kill_all(self, source_url: str) -> int:
        pids = await self.find_live_pids(source_url)
        if not pids:
            return 0
        return await self._run_os_call("kill", source_url, self._kill_pids, pids)

    @asynccontextmanager
    async def _locked(self, source_url: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(source_url, asyncio.Lock())
        self._lock_users[source_url] = self._lock_users.get(source_url, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[source_url] -= 1
            if self._lock_users[source_url] == 0:
                del self._lock_users[source_url]
                del self._locks[source_url]

    async def _run_os_call(self, operation: str, source_url: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args),
                timeout=self._control_timeout_sec,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Transcoder %s for %s exceeded %ss; the call may still complete in the background",
                operation,
                source_url,
                self._control_timeout_sec,
            )
            raise ProcessControlError(
                f"Transcoder {operation} timed out after {self._control_timeout_sec}s",
                operation=operation,
                source_url=source_url,
            )
        except (OSError, psutil.Error, subprocess.SubprocessError) as e:
            raise ProcessControlError(
                f"Transcoder {operation} failed: {e}",
                operation=operation,
                source_url=source_url,
            ) from e

    def _is_transcoder(self, name: str, cmdline: List[str]) -> bool:
        binary = os.path.basename(self._ffmpeg_path)
        if name and name == binary:
            return True
        return bool(cmdline) and os.path.basename(cmdline[0]) == binary

    def _scan_process_table(self, source_url: str) -> Set[int]:
        own_pid = os.getpid()
        pids: Set[int] = set()
        for proc in psutil.process_iter(["pid", "name", "cmdline"]):
            try:
                info = proc.info
                cmdline = info.get("cmdline") or []
                if info["pid"] == own_pid:
                    continue
                if not self._is_transcoder(info.get("name") or "", cmdline):
                    continue
                if source_url in cmdline:
                    pids.add(info["pid"])
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                continue
        return pids

    @staticmethod
    def _spawn(command: List[str]) -> int:
        process = subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
        return process.pid

    @staticmethod
    def _kill_pids(pids: Set[int]) -> int:
        killed = 0
        for pid in pids:
            try:
                psutil.Process(pid).kill()
                killed += 1
            except psutil.NoSuchProcess:
                # Exited between scan and kill
                continue
        return killed
