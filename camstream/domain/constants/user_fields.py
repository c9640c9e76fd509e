"""Constants for User, AccessToken, AccessRight and CameraShare field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    
    # MongoDB specific
    MONGO_ID = "_id"


class AccessFields:
    """Field name constants for access tokens, rights and shares"""
    ID = "id"
    USER_ID = "user_id"
    CAMERA_ID = "camera_id"
    TOKEN_ID = "token_id"
    RIGHT = "right"
    IS_REVOKED = "is_revoked"
    
    # MongoDB specific
    MONGO_ID = "_id"


class VendorFields:
    """Field name constants for vendor and vendor model documents"""
    ID = "id"
    EXID = "exid"
    NAME = "name"
    CONFIG = "config"
    VENDOR_ID = "vendor_id"
    
    # MongoDB specific
    MONGO_ID = "_id"
