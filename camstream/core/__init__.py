from .config import Settings, get_settings
from .security import issue_access_token, decode_jwt_token
from .stream_token import encode_stream_token, decode_stream_token

__all__ = [
    "Settings",
    "get_settings",
    "issue_access_token",
    "decode_jwt_token",
    "encode_stream_token",
    "decode_stream_token",
]
