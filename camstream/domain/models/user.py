from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    email: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or len(self.username.strip()) < 1:
            raise ValueError("Username is required")
