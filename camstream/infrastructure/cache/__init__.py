from .camera_cache import CameraCache

__all__ = ["CameraCache"]
