# Standard library imports
from typing import List

# Local application imports
from ....domain.models.camera import Camera
from ....domain.models.user import User
from ....domain.services import camera_config
from ...dto.camera_dto import CameraResponse
from ...services.camera_directory import CameraDirectory


class ListCamerasUseCase:
    """Use case for listing the cameras a user can see"""
    
    def __init__(self, camera_directory: CameraDirectory) -> None:
        self.camera_directory = camera_directory
    
    async def execute(self, user: User, include_shared: bool = True) -> List[CameraResponse]:
        """
        List cameras owned by a user, and optionally those shared with them
        
        Args:
            user: Authenticated user
            include_shared: Include cameras shared with the user
            
        Returns:
            List of CameraResponse objects with the user's rights on each
        """
        cameras = await self.camera_directory.for_user(user, include_shared=include_shared)
        return [self._to_response(camera, user) for camera in cameras]
    
    def _to_response(self, camera: Camera, user: User) -> CameraResponse:
        return CameraResponse(
            id=camera.exid,
            name=camera.name,
            owner_id=camera.owner_id,
            vendor_name=camera_config.vendor_attr(camera, "name") or "",
            model_name=camera_config.model_attr(camera, "name") or "",
            timezone=camera_config.timezone_name(camera),
            is_public=camera.is_public,
            is_online=camera.is_online,
            rights=self.camera_directory.rights(camera, user),
        )
