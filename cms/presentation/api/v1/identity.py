"""Caller identity as resolved by the upstream authentication layer."""

from dataclasses import dataclass

from fastapi import Header

from cms.domain.value_objects import UserRole


@dataclass(frozen=True)
class Caller:
    user_id: str
    role: UserRole


async def get_caller(
    x_user_id: str = Header(..., description="Authenticated user ID"),
    x_user_role: UserRole = Header(..., description="Author, Editor or Admin"),
) -> Caller:
    """Read the caller's identity from the X-User-Id / X-User-Role headers."""
    return Caller(user_id=x_user_id, role=x_user_role)
