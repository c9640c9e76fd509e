# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.camera_dto import CameraResponse, CameraStreamsResponse
from ...application.use_cases.camera.list_cameras import ListCamerasUseCase
from ...application.use_cases.camera.get_camera_streams import GetCameraStreamsUseCase
from ...domain.models.user import User
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["cameras"])


@router.get("", response_model=List[CameraResponse])
async def list_cameras(
    include_shared: bool = True,
    current_user: User = Depends(get_current_user),
) -> List[CameraResponse]:
    """
    List cameras of the current user
    
    Args:
        include_shared: Also list cameras shared with the user
        current_user: Current authenticated user (from dependency)
        
    Returns:
        List of CameraResponse objects
    """
    container = get_container()
    list_cameras_use_case = container.get(ListCamerasUseCase)
    
    cameras = await list_cameras_use_case.execute(user=current_user, include_shared=include_shared)
    return cameras


@router.get("/{camera_id}/streams", response_model=CameraStreamsResponse)
async def get_camera_streams(
    camera_id: str,
    current_user: User = Depends(get_current_user),
) -> CameraStreamsResponse:
    """
    Get the viewing URLs of a camera
    
    Args:
        camera_id: Camera external ID
        current_user: Current authenticated user (from dependency)
        
    Returns:
        CameraStreamsResponse with HLS, RTMP, snapshot and external URLs
    """
    container = get_container()
    get_camera_streams_use_case = container.get(GetCameraStreamsUseCase)
    
    try:
        return await get_camera_streams_use_case.execute(
            camera_exid=camera_id,
            user=current_user,
        )
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
