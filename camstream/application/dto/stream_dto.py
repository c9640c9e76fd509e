from enum import Enum


class StreamCommand(str, Enum):
    """What the stream bridge should do with the transcoder"""
    CHECK = "check"  # ensure running, then wait for the playlist
    KILL = "kill"  # kill and restart, no waiting


class StreamOutcome(str, Enum):
    """Terminal state of a stream request"""
    READY = "ready"
    TIMED_OUT = "timed_out"
    RESTARTED = "restarted"
    UNAUTHORIZED = "unauthorized"
    CANCELLED = "cancelled"
    
    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


# TIMED_OUT is not an error: the playlist may still appear, the client retries.
_STATUS_CODES = {
    StreamOutcome.READY: 200,
    StreamOutcome.TIMED_OUT: 200,
    StreamOutcome.RESTARTED: 200,
    StreamOutcome.UNAUTHORIZED: 401,
    StreamOutcome.CANCELLED: 499,
}
