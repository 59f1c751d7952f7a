"""Role/ownership policy deciding who may edit, publish or delete content."""

from abc import ABC, abstractmethod

from cms.domain.entities import Content
from cms.domain.value_objects import UserRole


class ContentPermissions(ABC):
    """Port for the content authorization policy — pure predicates, no I/O."""

    @abstractmethod
    def can_edit(self, content: Content, user_id: str, role: UserRole) -> bool:
        ...

    @abstractmethod
    def can_publish(self, content: Content, user_id: str, role: UserRole) -> bool:
        ...

    @abstractmethod
    def can_delete(self, content: Content, user_id: str, role: UserRole) -> bool:
        ...


class DefaultContentPermissions(ContentPermissions):
    """Default editorial policy.

    Authors manage their own content, Editors manage everyone's content
    except deleting published pieces, Admins may do anything.
    """

    def can_edit(self, content: Content, user_id: str, role: UserRole) -> bool:
        if role is UserRole.AUTHOR:
            return content.is_owned_by(user_id)
        return role.is_staff

    def can_publish(self, content: Content, user_id: str, role: UserRole) -> bool:
        return self.can_edit(content, user_id, role)

    def can_delete(self, content: Content, user_id: str, role: UserRole) -> bool:
        if role is UserRole.ADMIN:
            return True
        if content.state.is_published():
            return False
        if role is UserRole.AUTHOR:
            return content.is_owned_by(user_id)
        return role is UserRole.EDITOR
