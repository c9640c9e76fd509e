from typing import Optional
from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for the authenticated API user"""
    id: str
    username: str
    email: Optional[str] = None
