from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.camera import Camera
from ..models.user import User


class CameraRepository(ABC):
    """Repository interface - defines contract for camera data access"""
    
    @abstractmethod
    async def find_by_exid(self, exid: str) -> Optional[Camera]:
        """Find camera by external ID, without associations"""
        pass
    
    @abstractmethod
    async def find_by_exid_with_associations(self, exid: str) -> Optional[Camera]:
        """Find camera by external ID with owner, vendor model/vendor and access rights (with tokens)"""
        pass
    
    @abstractmethod
    async def find_owned_by(self, user: User) -> List[Camera]:
        """Find all cameras owned by a user, rights restricted to the user's active token"""
        pass
    
    @abstractmethod
    async def find_shared_with(self, user: User) -> List[Camera]:
        """Find all cameras shared with a user, rights restricted to the user's active token"""
        pass
    
    @abstractmethod
    async def find_share_users(self, camera: Camera) -> List[User]:
        """Find every user the camera is shared with"""
        pass
