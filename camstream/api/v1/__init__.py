from .camera_controller import router as camera_router
from .stream_controller import router as stream_router


__all__ = ["camera_router", "stream_router"]
