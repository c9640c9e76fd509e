# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ....core.security import decode_jwt_token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: str) -> User:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            User domain model
            
        Raises:
            ValueError: If token is invalid or user not found
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise ValueError(f"Invalid or expired token: {exception}")
        
        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")
        
        return user
