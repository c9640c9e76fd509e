# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .access_right import AccessRight
    from .user import User


@dataclass
class Vendor:
    """Camera manufacturer"""
    id: Optional[str]
    exid: str
    name: str


@dataclass
class VendorModel:
    """
    Camera model of a vendor.
    
    Its config uses the same layout as Camera.config and serves as the
    fallback when a camera does not define a snapshot/stream path itself.
    """
    id: Optional[str]
    name: str
    config: Dict[str, Any] = field(default_factory=dict)
    vendor: Optional[Vendor] = None


@dataclass
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.
    
    `config` is a semi-structured blob. Recognised paths:
    auth.basic.{username,password}, {network}_host,
    {network}_{protocol}_port and snapshots.{type}. Any of them may be
    missing; see domain.services.camera_config for how that is handled.
    """
    id: Optional[str]
    exid: str
    name: str
    owner_id: Optional[str] = None
    config: Dict[str, Any] = field(default_factory=dict)
    timezone: Optional[str] = None
    is_public: bool = False
    is_online: bool = False
    last_polled_at: Optional[datetime] = None
    last_online_at: Optional[datetime] = None
    mac_address: Optional[str] = None
    location: Optional[Tuple[float, float]] = None  # (lng, lat)
    
    # Associations, hydrated only by the "with associations" lookups
    owner: Optional["User"] = None
    vendor_model: Optional[VendorModel] = None
    access_rights: List["AccessRight"] = field(default_factory=list)
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.exid or len(self.exid.strip()) < 1:
            raise ValueError("Camera external ID is required")
        if self.config is None:
            self.config = {}
