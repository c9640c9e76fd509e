# Standard library imports
from typing import Optional, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection
from .mongo_ids import id_filter, document_id


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: MongoDB ObjectId string or custom user ID
            
        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None
        
        try:
            document = await self.user_collection.find_one(id_filter(user_id))
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        
        if document is None:
            return None
        return document_to_user(document)


def document_to_user(document: Dict[str, Any]) -> User:
    """Convert MongoDB document to User domain model"""
    return User(
        id=document_id(document),
        username=document.get(UserFields.USERNAME, ""),
        email=document.get(UserFields.EMAIL),
    )
