"""
Unit tests for HlsReadinessPoller
"""
from unittest.mock import AsyncMock, patch

import pytest
from camstream.infrastructure.streaming.hls_readiness import HlsReadinessPoller, ReadinessResult

SLEEP = "camstream.infrastructure.streaming.hls_readiness.asyncio.sleep"


def _write_playlist(root, exid="cam1"):
    folder = root / exid
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "index.m3u8").write_text("#EXTM3U\n")


class TestHlsReadinessPoller:
    def test_playlist_path(self, tmp_path):
        poller = HlsReadinessPoller(str(tmp_path))
        assert poller.playlist_path("cam1") == str(tmp_path / "cam1" / "index.m3u8")

    @pytest.mark.asyncio
    async def test_ready_immediately(self, tmp_path):
        _write_playlist(tmp_path)
        poller = HlsReadinessPoller(str(tmp_path))
        with patch(SLEEP, new_callable=AsyncMock) as sleep:
            result = await poller.wait_for_artifact("cam1")
        assert result == ReadinessResult.READY
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ready_on_third_attempt(self, tmp_path):
        poller = HlsReadinessPoller(str(tmp_path))
        calls = []

        async def fake_sleep(interval):
            calls.append(interval)
            if len(calls) == 2:
                _write_playlist(tmp_path)

        with patch(SLEEP, side_effect=fake_sleep):
            result = await poller.wait_for_artifact("cam1", max_attempts=30, interval=0.5)
        assert result == ReadinessResult.READY
        assert calls == [0.5, 0.5]

    @pytest.mark.asyncio
    async def test_timed_out_without_trailing_sleep(self, tmp_path):
        poller = HlsReadinessPoller(str(tmp_path))
        with patch(SLEEP, new_callable=AsyncMock) as sleep:
            result = await poller.wait_for_artifact("cam1", max_attempts=30, interval=0.5)
        assert result == ReadinessResult.TIMED_OUT
        assert sleep.await_count == 29

    @pytest.mark.asyncio
    async def test_other_camera_playlist_does_not_count(self, tmp_path):
        _write_playlist(tmp_path, "cam2")
        poller = HlsReadinessPoller(str(tmp_path))
        with patch(SLEEP, new_callable=AsyncMock):
            result = await poller.wait_for_artifact("cam1", max_attempts=3)
        assert result == ReadinessResult.TIMED_OUT

    @pytest.mark.asyncio
    async def test_cancelled(self, tmp_path):
        poller = HlsReadinessPoller(str(tmp_path))
        is_cancelled = AsyncMock(side_effect=[False, True])
        with patch(SLEEP, new_callable=AsyncMock) as sleep:
            result = await poller.wait_for_artifact("cam1", max_attempts=30, is_cancelled=is_cancelled)
        assert result == ReadinessResult.CANCELLED
        assert sleep.await_count == 1
