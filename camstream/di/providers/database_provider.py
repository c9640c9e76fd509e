from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_camera_collection,
    get_vendor_collection,
    get_vendor_model_collection,
    get_access_token_collection,
    get_access_right_collection,
    get_camera_share_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and all collections in the container.
        This is the ONLY place where database connections are registered.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("camera_collection", get_camera_collection())
        container.register_singleton("vendor_collection", get_vendor_collection())
        container.register_singleton("vendor_model_collection", get_vendor_model_collection())
        container.register_singleton("access_token_collection", get_access_token_collection())
        container.register_singleton("access_right_collection", get_access_right_collection())
        container.register_singleton("camera_share_collection", get_camera_share_collection())
