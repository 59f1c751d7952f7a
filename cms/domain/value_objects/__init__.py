from .content_state import ContentState
from .user_role import UserRole

__all__ = [
    "ContentState",
    "UserRole",
]
