# Infrastructure streaming layer exports
from .hls_readiness import HlsReadinessPoller, ReadinessResult
from .stream_activity import StreamActivityTracker, reap_idle_streams, run_idle_reaper
from .transcoder_processes import TranscoderProcessRegistry

__all__ = [
    "HlsReadinessPoller",
    "ReadinessResult",
    "StreamActivityTracker",
    "TranscoderProcessRegistry",
    "reap_idle_streams",
    "run_idle_reaper",
]
