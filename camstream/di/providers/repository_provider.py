from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.camera_repository import CameraRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_camera_repository import MongoCameraRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        
        container.register_singleton(
            CameraRepository,
            MongoCameraRepository(
                camera_collection=container.get("camera_collection"),
                user_collection=container.get("user_collection"),
                vendor_collection=container.get("vendor_collection"),
                vendor_model_collection=container.get("vendor_model_collection"),
                access_token_collection=container.get("access_token_collection"),
                access_right_collection=container.get("access_right_collection"),
                camera_share_collection=container.get("camera_share_collection"),
            )
        )
