"""Which course roles a given role may hand out.

Actor-agnostic: the hierarchy is stated without reference to requestors.
"""

from __future__ import annotations

from typing import Iterable, Union

from ..core.enums import CourseRole
from .roles import CourseRoles, parse_course_role

HIERARCHY = (CourseRole.OWNER, CourseRole.INSTRUCTOR, CourseRole.STAFF, CourseRole.STUDENT)

ASSIGNABLE = {
    CourseRole.OWNER: (CourseRole.OWNER, CourseRole.INSTRUCTOR, CourseRole.STAFF, CourseRole.STUDENT),
    CourseRole.INSTRUCTOR: (CourseRole.STAFF, CourseRole.STUDENT),
    CourseRole.STAFF: (CourseRole.STUDENT,),
    CourseRole.STUDENT: (),
}


def assignable_roles(role: Union[str, CourseRole]) -> list[CourseRole]:
    """Roles that ``role`` may assign; raises ``UnknownRoleError`` for bad names."""
    return list(ASSIGNABLE[parse_course_role(role)])


def for_enrollment(roles: Union[CourseRoles, Iterable[Union[str, CourseRole]]]) -> list[CourseRole]:
    """Assignable roles of the highest role held; none when no role is held."""
    if not isinstance(roles, CourseRoles):
        roles = CourseRoles.from_names(roles)

    highest = next((role for role in HIERARCHY if role in roles.roles), None)
    if highest is None:
        return []
    return assignable_roles(highest)
