from .user_repository import UserRepository
from .camera_repository import CameraRepository

__all__ = ["UserRepository", "CameraRepository"]
