from dataclasses import dataclass
from typing import Optional


@dataclass
class AccessToken:
    """API access token of a user; rights are granted to tokens, not users"""
    id: Optional[str]
    user_id: str
    is_revoked: bool = False


@dataclass
class AccessRight:
    """A single capability (e.g. "snapshot", "grant~edit") on one camera"""
    camera_id: Optional[str]
    right: str
    token: Optional[AccessToken] = None
    
    @property
    def user_id(self) -> Optional[str]:
        """User the right was granted to, via its access token"""
        return self.token.user_id if self.token else None
