from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..common.validators import require_email
from ..core.enums import SystemRole
from ..core.exceptions import UnknownRoleError
from ..shared.loading import Collection, Loaded, loaded_or_unloaded


def parse_system_role(value: Union[str, SystemRole]) -> SystemRole:
    try:
        return SystemRole(value)
    except ValueError:
        raise UnknownRoleError(f"Unknown system role: '{value}'")


def system_roles(names: Iterable[Union[str, SystemRole]]) -> frozenset:
    return frozenset(parse_system_role(n) for n in names)


@dataclass(frozen=True)
class Requestor:
    """Authenticated identity behind a request (account id + system roles)."""

    account_id: int
    roles: frozenset = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "roles", system_roles(self.roles))

    def has_role(self, role: Union[str, SystemRole]) -> bool:
        return parse_system_role(role) in self.roles

    @property
    def admin(self) -> bool:
        return SystemRole.ADMIN in self.roles

    @property
    def creator(self) -> bool:
        return SystemRole.CREATOR in self.roles

    @property
    def member(self) -> bool:
        return SystemRole.MEMBER in self.roles


@dataclass(frozen=True)
class Account:
    """Domain entity: a user account.

    ``roles`` stays unloaded unless given, and role queries then raise
    ``NotLoadedError``.
    """

    id: Optional[int]
    email: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    roles: Collection = None

    def __post_init__(self):
        require_email(self.email)
        roles = loaded_or_unloaded(self.roles, "Roles")
        if isinstance(roles, Loaded):
            roles = Loaded.of(system_roles(roles))
        object.__setattr__(self, "roles", roles)

    @property
    def roles_loaded(self) -> bool:
        return self.roles.loaded

    def has_role(self, role: Union[str, SystemRole]) -> bool:
        wanted = parse_system_role(role)
        return self.roles.find(lambda r: r == wanted) is not None

    @property
    def admin(self) -> bool:
        return self.has_role(SystemRole.ADMIN)

    @property
    def creator(self) -> bool:
        return self.has_role(SystemRole.CREATOR)

    @property
    def member(self) -> bool:
        return self.has_role(SystemRole.MEMBER)

    @property
    def role_count(self) -> int:
        return len(self.roles)

    def as_requestor(self) -> Requestor:
        return Requestor(account_id=self.id, roles=frozenset(self.roles))
