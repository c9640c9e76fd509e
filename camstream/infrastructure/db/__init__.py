from .mongo_connection import get_database, get_user_collection, get_camera_collection
from .mongo_user_repository import MongoUserRepository
from .mongo_camera_repository import MongoCameraRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_camera_collection",
    "MongoUserRepository",
    "MongoCameraRepository",
]
