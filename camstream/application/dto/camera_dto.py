from typing import Optional
from pydantic import BaseModel


class CameraResponse(BaseModel):
    """DTO for camera response (config and credentials are never exposed)"""
    id: str
    name: str
    owner_id: Optional[str] = None
    vendor_name: str = ""
    model_name: str = ""
    timezone: str
    is_public: bool = False
    is_online: bool = False
    rights: str


class CameraStreamsResponse(BaseModel):
    """DTO with every URL a client needs to view a camera"""
    id: str
    external_url: str
    snapshot_url: str
    hls_url: str
    rtmp_url: str
    rights: str
    timezone: str
    offset: str
