"""Camera access right names"""


class Rights:
    """Right names stored on AccessRight.right"""
    SNAPSHOT = "snapshot"
    LIST = "list"
    EDIT = "edit"
    DELETE = "delete"
    VIEW = "view"
    GRANT_PREFIX = "grant~"
    
    # Every non-owner implicitly holds these
    BASELINE = (SNAPSHOT, LIST)
    
    OWNER = (
        SNAPSHOT,
        LIST,
        EDIT,
        DELETE,
        VIEW,
        "grant~snapshot",
        "grant~view",
        "grant~edit",
        "grant~delete",
        "grant~list",
    )
