# Local application imports
from ....domain.models.camera import Camera
from ....domain.models.user import User
from ....domain.services import camera_config
from ...dto.camera_dto import CameraStreamsResponse
from ...services.camera_directory import CameraDirectory


class GetCameraStreamsUseCase:
    """Use case for building the viewing URLs of a camera"""
    
    def __init__(self, camera_directory: CameraDirectory, public_base_url: str) -> None:
        self.camera_directory = camera_directory
        self.public_base_url = public_base_url.rstrip("/")
    
    async def execute(self, camera_exid: str, user: User) -> CameraStreamsResponse:
        """
        Get HLS/RTMP/snapshot URLs of a camera
        
        Args:
            camera_exid: External ID of the camera
            user: Authenticated user (for the visibility check and rights)
            
        Returns:
            CameraStreamsResponse
            
        Raises:
            ValueError: If camera not found or not visible to the user
        """
        camera = await self.camera_directory.get_full(camera_exid)
        
        if camera is None:
            raise ValueError("Camera not found")
        
        if not self._is_visible(camera, user):
            raise ValueError("Camera not found")
        
        return CameraStreamsResponse(
            id=camera.exid,
            external_url=camera_config.external_url(camera),
            snapshot_url=camera_config.snapshot_url(camera),
            hls_url=camera_config.hls_url(camera, self.public_base_url),
            rtmp_url=camera_config.rtmp_url(camera, self.public_base_url),
            rights=self.camera_directory.rights(camera, user),
            timezone=camera_config.timezone_name(camera),
            offset=camera_config.utc_offset(camera),
        )
    
    def _is_visible(self, camera: Camera, user: User) -> bool:
        if self.camera_directory.is_owner(user, camera) or camera.is_public:
            return True
        return any(access_right.user_id == user.id for access_right in camera.access_rights)
