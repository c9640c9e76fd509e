from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.camera_repository import CameraRepository
from ...application.services.camera_directory import CameraDirectory
from ...application.use_cases.camera.list_cameras import ListCamerasUseCase
from ...application.use_cases.camera.get_camera_streams import GetCameraStreamsUseCase
from ...infrastructure.cache.camera_cache import CameraCache

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CameraProvider:
    """Camera provider - registers the cached camera directory and camera use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the camera cache and directory as singletons (the cache must
        be shared for invalidation to work) and camera use cases as factories.
        """
        settings = get_settings()
        
        container.register_singleton(
            CameraCache,
            CameraCache(
                max_size=settings.camera_cache_max_size,
                ttl=settings.camera_cache_ttl_sec,
            )
        )
        
        container.register_singleton(
            CameraDirectory,
            CameraDirectory(
                camera_repository=container.get(CameraRepository),
                cache=container.get(CameraCache),
            )
        )
        
        container.register_factory(
            ListCamerasUseCase,
            lambda: ListCamerasUseCase(
                camera_directory=container.get(CameraDirectory)
            )
        )
        
        container.register_factory(
            GetCameraStreamsUseCase,
            lambda: GetCameraStreamsUseCase(
                camera_directory=container.get(CameraDirectory),
                public_base_url=settings.public_base_url,
            )
        )
