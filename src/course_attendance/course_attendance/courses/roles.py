from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from ..core.enums import TEACHING_ROLES, CourseRole
from ..core.exceptions import UnknownRoleError


def parse_course_role(value: Union[str, CourseRole]) -> CourseRole:
    try:
        return CourseRole(value)
    except ValueError:
        raise UnknownRoleError(f"Unknown course role: '{value}'")


@dataclass(frozen=True)
class CourseRoles:
    """The course-level roles one person holds in one course."""

    roles: frozenset = frozenset()

    @classmethod
    def from_names(cls, names: Iterable[Union[str, CourseRole]] = ()) -> "CourseRoles":
        return cls(roles=frozenset(parse_course_role(n) for n in (names or ())))

    def has(self, role: Union[str, CourseRole]) -> bool:
        return parse_course_role(role) in self.roles

    @property
    def owner(self) -> bool:
        return CourseRole.OWNER in self.roles

    @property
    def instructor(self) -> bool:
        return CourseRole.INSTRUCTOR in self.roles

    @property
    def staff(self) -> bool:
        return CourseRole.STAFF in self.roles

    @property
    def student(self) -> bool:
        return CourseRole.STUDENT in self.roles

    @property
    def teaching(self) -> bool:
        return bool(self.roles & TEACHING_ROLES)

    def __iter__(self):
        return iter(self.roles)

    def __len__(self) -> int:
        return len(self.roles)

    def __bool__(self) -> bool:
        return bool(self.roles)
