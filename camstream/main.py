# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Dict
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import camera_router, stream_router
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.streaming import (
    StreamActivityTracker,
    TranscoderProcessRegistry,
    run_idle_reaper,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Starts the idle transcoder reaper when STREAM_IDLE_TIMEOUT_SEC > 0
    and stops it on shutdown.
    """
    settings = get_settings()
    
    reaper_task = None
    if settings.stream_idle_timeout_sec > 0:
        try:
            container = get_container()
            reaper_task = asyncio.create_task(
                run_idle_reaper(
                    tracker=container.get(StreamActivityTracker),
                    registry=container.get(TranscoderProcessRegistry),
                    idle_timeout=settings.stream_idle_timeout_sec,
                    interval=settings.stream_reap_interval_sec,
                )
            )
            logger.info("Idle transcoder reaper task started")
        except Exception as e:
            logger.error(f"Failed to start idle transcoder reaper: {e}", exc_info=True)
    
    yield
    
    # Shutdown: stop background tasks (transcoders keep running)
    if reaper_task:
        reaper_task.cancel()
        try:
            await reaper_task
        except asyncio.CancelledError:
            pass
        logger.info("Idle transcoder reaper task stopped")
    
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Log level for the camstream loggers
    - CORS middleware configuration
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.getLogger("camstream").setLevel(settings.log_level.upper())
    
    # Create FastAPI app
    application = FastAPI(
        title="Camera Stream Bridge",
        version="1.0.0",
        description="Authorizes camera stream tokens and bridges RTSP feeds to HLS",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register API routers
    application.include_router(stream_router)
    application.include_router(camera_router, prefix="/api/v1/cameras")
    
    @application.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
