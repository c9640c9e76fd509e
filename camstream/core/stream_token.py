"""
Stream token codec.

A stream token carries (username, password, source url) inside a URL query
parameter or path segment. It is a reversible encoding, not a signature: the
bridge re-checks every decoded field against the camera's current config.
"""

# Standard library imports
import base64
import binascii
import json
from typing import Tuple

# Local application imports
from .exceptions import MalformedTokenError


def encode_stream_token(username: str, password: str, source_url: str) -> str:
    """
    Encode credentials and source URL into an opaque, URL-safe token
    
    Args:
        username: Camera basic-auth username
        password: Camera basic-auth password
        source_url: RTSP URL of the camera feed
        
    Returns:
        URL-safe base64 string without padding
    """
    payload = json.dumps([username, password, source_url], separators=(",", ":"))
    encoded = base64.urlsafe_b64encode(payload.encode("utf-8"))
    return encoded.decode("ascii").rstrip("=")


def decode_stream_token(token: str) -> Tuple[str, str, str]:
    """
    Decode a token produced by encode_stream_token
    
    Args:
        token: Opaque stream token
        
    Returns:
        (username, password, source_url)
        
    Raises:
        MalformedTokenError: If the token is not a base64 JSON list of three strings
    """
    if not token or not isinstance(token, str):
        raise MalformedTokenError("Empty stream token")
    
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        fields = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise MalformedTokenError(f"Undecodable stream token: {e}")
    
    if not isinstance(fields, list) or len(fields) != 3:
        raise MalformedTokenError("Stream token must hold exactly three fields")
    if not all(isinstance(field, str) for field in fields):
        raise MalformedTokenError("Stream token fields must be strings")
    
    username, password, source_url = fields
    return username, password, source_url
