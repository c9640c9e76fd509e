from .camera_directory import CameraDirectory

__all__ = ["CameraDirectory"]
