# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    CameraProvider,
    DatabaseProvider,
    RepositoryProvider,
    StreamingProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Camera directory and camera use cases (CameraProvider) - depend on repositories
    4. Stream bridge (StreamingProvider) - depends on the camera directory
    5. Auth use cases (AuthProvider) - depend on repositories
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → camera directory → streaming
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        CameraProvider.register(self)
        StreamingProvider.register(self)
        AuthProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
