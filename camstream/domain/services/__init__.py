from . import camera_config, camera_rights

__all__ = ["camera_config", "camera_rights"]
