from .content_permissions import ContentPermissions, DefaultContentPermissions
from .content_service import ContentService

__all__ = [
    "ContentPermissions",
    "DefaultContentPermissions",
    "ContentService",
]
