from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account from the static user list.

    ``role`` is kept as loaded; it is only trusted once resolved into a
    ``Viewer`` and matched against ``Role``.
    """

    user_id: str
    full_name: str
    email: str
    role: str
    child_id: Optional[str] = None
    class_ids: tuple[str, ...] = ()
    created_at: Optional[str] = None


@dataclass(frozen=True)
class Viewer:
    """Who is looking at the dashboard, supplied by the auth collaborator."""

    viewer_id: str
    role: Role | str
    child_id: Optional[str] = None
    owned_class_ids: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_user(cls, user: User) -> "Viewer":
        try:
            role: Role | str = Role(user.role)
        except ValueError:
            role = user.role
        return cls(
            viewer_id=user.user_id,
            role=role,
            child_id=user.child_id,
            owned_class_ids=frozenset(user.class_ids or ()),
        )
