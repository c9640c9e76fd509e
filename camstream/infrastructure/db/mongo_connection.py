# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    return get_database()["users"]


def get_camera_collection() -> AsyncIOMotorCollection:
    return get_database()["cameras"]


def get_vendor_collection() -> AsyncIOMotorCollection:
    return get_database()["vendors"]


def get_vendor_model_collection() -> AsyncIOMotorCollection:
    return get_database()["vendor_models"]


def get_access_token_collection() -> AsyncIOMotorCollection:
    return get_database()["access_tokens"]


def get_access_right_collection() -> AsyncIOMotorCollection:
    return get_database()["access_rights"]


def get_camera_share_collection() -> AsyncIOMotorCollection:
    """
    Get camera_shares collection from MongoDB
    
    Returns:
        MongoDB collection linking cameras to the users they are shared with
    """
    return get_database()["camera_shares"]
