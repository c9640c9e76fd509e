"""
Camera configuration resolver.

Pure functions that turn a camera's semi-structured ``config`` blob into
hosts, ports and URLs. Every function is total: a missing or malformed key
resolves to an empty string, never an exception.
"""

# Standard library imports
from datetime import datetime
from typing import Any, Dict, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Local application imports
from ...core.stream_token import encode_stream_token
from ..constants import CameraConfigKeys
from ..models.camera import Camera, VendorModel

DEFAULT_TIMEZONE = "Etc/UTC"

ConfigHolder = Union[Camera, VendorModel]


def _dig(config: Any, *keys: str) -> Any:
    """Walk nested dicts, returning None as soon as a level is missing"""
    value = config
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _config(holder: Any) -> Dict[str, Any]:
    config = getattr(holder, "config", None)
    return config if isinstance(config, dict) else {}


def credentials(camera: Camera) -> Tuple[str, str]:
    """Basic-auth (username, password) from config.auth.basic, each "" when absent"""
    basic = _dig(_config(camera), CameraConfigKeys.AUTH, CameraConfigKeys.BASIC)
    return (
        _text(_dig(basic, CameraConfigKeys.USERNAME)),
        _text(_dig(basic, CameraConfigKeys.PASSWORD)),
    )


def username(camera: Camera) -> str:
    return credentials(camera)[0]


def password(camera: Camera) -> str:
    return credentials(camera)[1]


def auth(camera: Camera) -> str:
    """Credentials as "username:password", the form embedded in RTSP URLs"""
    user, secret = credentials(camera)
    return f"{user}:{secret}"


def host(camera: Camera, network: str = CameraConfigKeys.NETWORK_EXTERNAL) -> str:
    return _text(_config(camera).get(f"{network}{CameraConfigKeys.HOST_SUFFIX}"))


def port(camera: Camera, network: str, protocol: str) -> str:
    return _text(_config(camera).get(f"{network}_{protocol}{CameraConfigKeys.PORT_SUFFIX}"))


def external_url(camera: Camera, protocol: str = "http") -> str:
    """
    Base URL of the camera on its external network
    
    Returns:
        "" without a host, "<protocol>://<host>" without a port,
        "<protocol>://<host>:<port>" otherwise
    """
    camera_host = host(camera)
    camera_port = port(camera, CameraConfigKeys.NETWORK_EXTERNAL, protocol)
    if not camera_host:
        return ""
    if not camera_port:
        return f"{protocol}://{camera_host}"
    return f"{protocol}://{camera_host}:{camera_port}"


def resource_path(holder: ConfigHolder, type: str = "jpg") -> str:
    """
    Path of a snapshot/stream resource from config.snapshots[type]
    
    Works for both cameras and vendor models. A non-empty path always starts
    with "/".
    """
    path = _text(_dig(_config(holder), CameraConfigKeys.SNAPSHOTS, type))
    if path == "" or path.startswith("/"):
        return path
    return f"/{path}"


def snapshot_url(camera: Camera, type: str = "jpg") -> str:
    base = external_url(camera)
    if not base:
        return ""
    return f"{base}{resource_path(camera, type)}"


def resolved_path(camera: Camera, type: str) -> str:
    """Camera's own resource path, falling back to its vendor model's"""
    own = resource_path(camera, type)
    if own:
        return own
    if model_attr(camera, "config"):
        return resource_path(camera.vendor_model, type)
    return ""


def _port_present(value: str) -> bool:
    if value == "":
        return False
    try:
        return float(value) != 0
    except ValueError:
        return True


def rtsp_url(
    camera: Camera,
    network: str = CameraConfigKeys.NETWORK_EXTERNAL,
    type: str = "h264",
    include_auth: bool = True,
) -> str:
    """
    RTSP URL of the camera feed
    
    All-or-nothing: returns "" unless the path, the host and a non-zero port
    are all known.
    """
    path = resolved_path(camera, type)
    camera_host = host(camera, network)
    camera_port = port(camera, network, "rtsp")
    
    if not (path and camera_host and _port_present(camera_port)):
        return ""
    
    userinfo = f"{auth(camera)}@" if include_auth else ""
    return f"rtsp://{userinfo}{camera_host}:{camera_port}{path}"


def streaming_token(camera: Camera) -> str:
    user, secret = credentials(camera)
    return encode_stream_token(user, secret, rtsp_url(camera))


def hls_url(camera: Camera, base_url: str) -> str:
    if rtsp_url(camera) == "":
        return ""
    return f"{base_url}/live/{streaming_token(camera)}/index.m3u8?camera_id={camera.exid}"


def rtmp_url(camera: Camera, base_url: str) -> str:
    if rtsp_url(camera) == "":
        return ""
    rtmp_base = base_url.replace("http", "rtmp").replace("4000", "1935")
    return f"{rtmp_base}/live/{streaming_token(camera)}?camera_id={camera.exid}"


def camera_info(camera: Camera) -> Dict[str, str]:
    return {"url": external_url(camera), "auth": auth(camera)}


def model_attr(camera: Camera, attr: str) -> Any:
    if camera.vendor_model is None:
        return ""
    return getattr(camera.vendor_model, attr, "")


def vendor_attr(camera: Camera, attr: str) -> Any:
    if camera.vendor_model is None or camera.vendor_model.vendor is None:
        return ""
    return getattr(camera.vendor_model.vendor, attr, "")


def timezone_name(camera: Camera) -> str:
    return camera.timezone or DEFAULT_TIMEZONE


def utc_offset(camera: Camera) -> str:
    """Current UTC offset of the camera's timezone, such as +0100"""
    try:
        zone = ZoneInfo(timezone_name(camera))
    except (ZoneInfoNotFoundError, ValueError):
        zone = ZoneInfo(DEFAULT_TIMEZONE)
    return datetime.now(zone).strftime("%z")


def mac_address(camera: Camera) -> str:
    return camera.mac_address or ""


def location(camera: Camera) -> Dict[str, float]:
    lng, lat = camera.location if camera.location else (0, 0)
    return {"lng": lng, "lat": lat}
