from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.enums import Role
from ..core.exceptions import UnknownRoleError
from ..core.issues import IssueCollector
from ..students.model import Student
from ..users.model import Viewer
from .policies.base import VisibilityPolicy
from .policies.owner_policy import DenyAllPolicy, SchoolOwnerPolicy
from .policies.parent_policy import ParentPolicy
from .policies.teacher_policy import TeacherPolicy


def resolve_role(viewer: Viewer) -> Optional[Role]:
    try:
        return Role(viewer.role)
    except ValueError:
        return None


@dataclass
class VisibilityPolicyFactory:
    """Factory Pattern: choose the visibility policy for a viewer's role."""

    def for_viewer(
        self,
        viewer: Viewer,
        students_by_id: Mapping[str, Student],
        issues: Optional[IssueCollector] = None,
    ) -> VisibilityPolicy:
        if not isinstance(viewer, Viewer):
            raise TypeError(f"viewer must be a Viewer, got {type(viewer).__name__}")

        role = resolve_role(viewer)
        if role == Role.PARENT:
            return ParentPolicy(viewer.child_id)
        if role == Role.TEACHER:
            return TeacherPolicy(viewer.owned_class_ids, students_by_id)
        if role == Role.SCHOOL_OWNER:
            return SchoolOwnerPolicy()

        if issues is not None:
            issues.report(UnknownRoleError(viewer.viewer_id, viewer.role))
        return DenyAllPolicy()
