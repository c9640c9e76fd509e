from .user import User
from .camera import Camera, Vendor, VendorModel
from .access_right import AccessRight, AccessToken

__all__ = ["User", "Camera", "Vendor", "VendorModel", "AccessRight", "AccessToken"]
