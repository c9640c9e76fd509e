"""Access right computation for a (camera, user) pair."""

# Standard library imports
from typing import Optional

# Local application imports
from ..constants import Rights
from ..models.camera import Camera
from ..models.user import User


def is_owner(user: Optional[User], camera: Camera) -> bool:
    if user is None:
        return False
    return user.id == camera.owner_id


def rights(camera: Camera, user: Optional[User]) -> str:
    """
    Comma separated rights of a user on a camera
    
    Owners hold every right. Everybody else holds "snapshot,list" plus
    whatever was granted to their access token. Expects camera.access_rights
    to be hydrated.
    """
    if is_owner(user, camera):
        return ",".join(Rights.OWNER)
    if not camera.access_rights:
        return ",".join(Rights.BASELINE)
    
    user_id = user.id if user else None
    granted = [
        access_right.right
        for access_right in camera.access_rights
        if user_id is not None and access_right.user_id == user_id
    ]
    
    # dict.fromkeys keeps first-seen order while de-duplicating
    merged = dict.fromkeys([*Rights.BASELINE, *granted])
    return ",".join(merged)
