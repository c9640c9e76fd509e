"""
Camera directory: cached camera lookups and their invalidation.

Single-record lookups are keyed by external ID. List lookups are keyed by
"<username>_<include_shared>", so a change to a camera's ownership or shares
must evict the list entries of every affected user; see invalidate_camera.
"""

# Standard library imports
import logging
from typing import List, Optional

# Local application imports
from ...domain.models.camera import Camera
from ...domain.models.user import User
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.services import camera_rights
from ...infrastructure.cache.camera_cache import CameraCache

logger = logging.getLogger(__name__)

CAMERA_NAMESPACE = "camera"
CAMERA_FULL_NAMESPACE = "camera_full"
CAMERA_LIST_NAMESPACE = "cameras"


def list_cache_key(user: User, include_shared: bool) -> str:
    return f"{user.username}_{'true' if include_shared else 'false'}"


class CameraDirectory:
    """Read model over CameraRepository with explicit cache invalidation"""
    
    def __init__(self, camera_repository: CameraRepository, cache: CameraCache) -> None:
        self.camera_repository = camera_repository
        self.cache = cache
    
    async def get_by_id(self, exid: str) -> Optional[Camera]:
        """
        Get a camera by external ID, without associations
        
        Returns:
            Camera, or None when no camera has this external ID
        """
        return await self.cache.get_or_store(
            CAMERA_NAMESPACE,
            exid,
            lambda: self.camera_repository.find_by_exid(exid),
        )
    
    async def get_full(self, exid: str) -> Optional[Camera]:
        """
        Get a camera by external ID with owner, vendor model/vendor and
        access rights
        
        Returns:
            Camera, or None when no camera has this external ID
        """
        return await self.cache.get_or_store(
            CAMERA_FULL_NAMESPACE,
            exid,
            lambda: self.camera_repository.find_by_exid_with_associations(exid),
        )
    
    async def for_user(self, user: User, include_shared: bool = True) -> List[Camera]:
        """
        Cameras owned by a user, plus those shared with them when include_shared
        """
        async def load() -> List[Camera]:
            cameras = list(await self.camera_repository.find_owned_by(user))
            if include_shared:
                cameras.extend(await self.camera_repository.find_shared_with(user))
            return cameras
        
        return await self.cache.get_or_store(
            CAMERA_LIST_NAMESPACE,
            list_cache_key(user, include_shared),
            load,
        )
    
    def invalidate_user(self, user: User) -> None:
        """Evict both list entries (with and without shared cameras) of a user"""
        self.cache.delete(CAMERA_LIST_NAMESPACE, list_cache_key(user, True))
        self.cache.delete(CAMERA_LIST_NAMESPACE, list_cache_key(user, False))
    
    async def invalidate_camera(self, camera: Camera) -> None:
        """
        Evict a camera's cached records and the lists of every user who can
        see it (its owner and everyone it is shared with)
        
        Idempotent and safe to retry.
        """
        self.cache.delete(CAMERA_FULL_NAMESPACE, camera.exid)
        self.cache.delete(CAMERA_NAMESPACE, camera.exid)
        
        affected: List[User] = list(await self.camera_repository.find_share_users(camera))
        if camera.owner is not None:
            affected.append(camera.owner)
        
        for user in affected:
            self.invalidate_user(user)
        
        logger.debug("Invalidated camera %s and %d user list(s)", camera.exid, len(affected))
    
    def rights(self, camera: Camera, user: Optional[User]) -> str:
        return camera_rights.rights(camera, user)
    
    def is_owner(self, user: Optional[User], camera: Camera) -> bool:
        return camera_rights.is_owner(user, camera)
