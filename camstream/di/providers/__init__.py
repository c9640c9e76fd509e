from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .camera_provider import CameraProvider
from .streaming_provider import StreamingProvider
from .auth_provider import AuthProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "CameraProvider",
    "StreamingProvider",
    "AuthProvider",
]
