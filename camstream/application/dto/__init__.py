from .user_dto import UserResponse
from .camera_dto import CameraResponse, CameraStreamsResponse
from .stream_dto import StreamCommand, StreamOutcome

__all__ = [
    "UserResponse",
    "CameraResponse",
    "CameraStreamsResponse",
    "StreamCommand",
    "StreamOutcome",
]
