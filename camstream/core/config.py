# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "camstream")
        
        # JWT Configuration (API bearer tokens are issued elsewhere, only verified here)
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        
        # Public URLs
        self.public_base_url: Final[str] = os.getenv("PUBLIC_BASE_URL", "http://localhost:4000")
        self.hls_url: Final[str] = os.getenv("HLS_URL", "http://localhost:8080/hls")
        self.rtmp_ingest_url: Final[str] = os.getenv("RTMP_INGEST_URL", "rtmp://localhost:1935/live")
        
        # Transcoder Configuration
        self.ffmpeg_path: Final[str] = os.getenv("FFMPEG_PATH", "ffmpeg")
        self.hls_dir: Final[str] = os.getenv("HLS_DIR", "/tmp/hls")
        self.hls_poll_attempts: Final[int] = int(os.getenv("HLS_POLL_ATTEMPTS", "30"))
        self.hls_poll_interval_sec: Final[float] = float(os.getenv("HLS_POLL_INTERVAL_SEC", "0.5"))
        self.process_control_timeout_sec: Final[float] = float(
            os.getenv("PROCESS_CONTROL_TIMEOUT_SEC", "5.0")
        )
        
        # Idle transcoder reaping (0 disables the sweep)
        self.stream_idle_timeout_sec: Final[float] = float(os.getenv("STREAM_IDLE_TIMEOUT_SEC", "0"))
        self.stream_reap_interval_sec: Final[float] = float(os.getenv("STREAM_REAP_INTERVAL_SEC", "60"))
        
        # Camera directory cache
        self.camera_cache_max_size: Final[int] = int(os.getenv("CAMERA_CACHE_MAX_SIZE", "5000"))
        self.camera_cache_ttl_sec: Final[int] = int(os.getenv("CAMERA_CACHE_TTL_SEC", "3600"))
        
        # HTTP / logging
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
