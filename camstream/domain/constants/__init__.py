"""Constants for domain model field names"""

from .camera_fields import CameraFields, CameraConfigKeys
from .user_fields import UserFields, AccessFields, VendorFields
from .rights import Rights

__all__ = [
    "CameraFields",
    "CameraConfigKeys",
    "UserFields",
    "AccessFields",
    "VendorFields",
    "Rights",
]
