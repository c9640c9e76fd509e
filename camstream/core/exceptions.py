"""
Exception hierarchy for the stream bridge.

Raised by the token codec, the camera directory and the transcoder process
registry. The bridge maps every authorization failure to the same
UNAUTHORIZED outcome, so the distinct types only surface in logs.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class StreamBridgeError(Exception):
    """Base exception for all stream bridge errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Authorization
# -----------------------------------------------------------------------------


class MalformedTokenError(StreamBridgeError):
    """Raised when a stream token does not decode to (username, password, source url)."""
    pass


class CredentialMismatchError(StreamBridgeError):
    """Raised when token credentials do not match the camera's current config."""
    pass


class CameraNotFoundError(StreamBridgeError):
    """Raised when no camera matches an external identifier."""

    def __init__(self, camera_exid: str):
        super().__init__(
            f"Camera '{camera_exid}' not found",
            details={"camera_exid": camera_exid},
        )
        self.camera_exid = camera_exid


# -----------------------------------------------------------------------------
# Process control
# -----------------------------------------------------------------------------


class ProcessControlError(StreamBridgeError):
    """Raised when listing, spawning or killing a transcoder process fails."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        source_url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        payload = {"operation": operation}
        if details:
            payload.update(details)
        super().__init__(message, details=payload)
        self.operation = operation
        self.source_url = source_url
