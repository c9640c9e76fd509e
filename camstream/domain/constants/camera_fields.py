"""Constants for Camera model field names"""


class CameraFields:
    """Field name constants for Camera documents"""
    ID = "id"
    EXID = "exid"
    NAME = "name"
    OWNER_ID = "owner_id"
    MODEL_ID = "model_id"
    CONFIG = "config"
    TIMEZONE = "timezone"
    IS_PUBLIC = "is_public"
    IS_ONLINE = "is_online"
    LAST_POLLED_AT = "last_polled_at"
    LAST_ONLINE_AT = "last_online_at"
    MAC_ADDRESS = "mac_address"
    LOCATION = "location"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class CameraConfigKeys:
    """Keys inside Camera.config"""
    AUTH = "auth"
    BASIC = "basic"
    USERNAME = "username"
    PASSWORD = "password"
    SNAPSHOTS = "snapshots"
    HOST_SUFFIX = "_host"
    PORT_SUFFIX = "_port"
    
    NETWORK_EXTERNAL = "external"
    NETWORK_INTERNAL = "internal"
