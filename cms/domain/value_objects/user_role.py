"""Closed set of editorial roles recognised by the content permission policy."""

from enum import Enum


class UserRole(str, Enum):
    """Role of the caller, resolved by the (external) authentication layer."""

    AUTHOR = "Author"
    EDITOR = "Editor"
    ADMIN = "Admin"

    @property
    def is_staff(self) -> bool:
        """Editors and Admins act on any author's content."""
        return self in (UserRole.EDITOR, UserRole.ADMIN)
