from .list_cameras import ListCamerasUseCase
from .get_camera_streams import GetCameraStreamsUseCase

__all__ = [
    "ListCamerasUseCase",
    "GetCameraStreamsUseCase",
]
