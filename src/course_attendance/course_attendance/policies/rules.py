"""Authorization as a rule table.

Each entity maps its actions to a predicate over the request context. The
predicates only combine a handful of facts: admin, creator, enrolled,
teaching staff, course owner, and "is this my own account".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..accounts.model import Requestor
from ..courses.model import Enrollment


@dataclass(frozen=True)
class PolicyContext:
    requestor: Optional[Requestor]
    enrollment: Optional[Enrollment] = None
    account_id: Optional[int] = None


Rule = Callable[[PolicyContext], bool]


def is_admin(ctx: PolicyContext) -> bool:
    return ctx.requestor is not None and ctx.requestor.admin


def is_creator(ctx: PolicyContext) -> bool:
    return ctx.requestor is not None and ctx.requestor.creator


def is_enrolled(ctx: PolicyContext) -> bool:
    return ctx.enrollment is not None and ctx.enrollment.active


def is_teaching(ctx: PolicyContext) -> bool:
    return ctx.enrollment is not None and ctx.enrollment.teaching


def is_owner(ctx: PolicyContext) -> bool:
    return ctx.enrollment is not None and ctx.enrollment.owner


def is_self(ctx: PolicyContext) -> bool:
    if ctx.requestor is None or ctx.account_id is None:
        return False
    return ctx.requestor.account_id == int(ctx.account_id)


def is_authenticated(ctx: PolicyContext) -> bool:
    return ctx.requestor is not None


def any_of(*rules: Rule) -> Rule:
    return lambda ctx: any(rule(ctx) for rule in rules)


RULES: dict[str, dict[str, Rule]] = {
    "account": {
        "view_all": is_admin,
        "create": is_authenticated,
        "view": any_of(is_admin, is_self),
        "update": any_of(is_admin, is_self),
        "delete": any_of(is_admin, is_self),
    },
    "course": {
        "view_all": is_admin,
        "create": is_creator,
        "view": is_enrolled,
        "update": is_teaching,
        "delete": any_of(is_admin, is_owner),
    },
    "event": {
        "create": is_teaching,
        "view": is_teaching,
        "update": is_teaching,
        "delete": is_teaching,
    },
    "location": {
        "create": is_teaching,
        "view": is_enrolled,
        "update": is_teaching,
        "delete": is_teaching,
    },
    "attendance": {
        "create": is_enrolled,
        "view": is_enrolled,
        "attend": is_enrolled,
        "view_all": is_teaching,
    },
}


def can(
    entity: str,
    action: str,
    requestor: Optional[Requestor],
    *,
    enrollment: Optional[Enrollment] = None,
    account_id: Optional[int] = None,
) -> bool:
    """Raises ``KeyError`` for an entity/action pair that has no rule."""
    rule = RULES[entity][action]
    return rule(PolicyContext(requestor=requestor, enrollment=enrollment, account_id=account_id))


def summary(
    entity: str,
    requestor: Optional[Requestor],
    *,
    enrollment: Optional[Enrollment] = None,
    account_id: Optional[int] = None,
) -> dict[str, bool]:
    ctx = PolicyContext(requestor=requestor, enrollment=enrollment, account_id=account_id)
    return {f"can_{action}": rule(ctx) for action, rule in RULES[entity].items()}
