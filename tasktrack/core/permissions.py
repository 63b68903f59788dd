"""
Capability gate for engine operations.

Every operation's access rule lives in ``RULES``. A rule is a tuple of guards
applied in order; the first guard that rejects the caller's role decides the
PermissionDenied message. Row-level checks (e.g. "only the assignee may
complete") stay in the operation itself because they need the task row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from tasktrack.core.errors import PermissionDenied
from tasktrack.models.user import UserRole

log = logging.getLogger(__name__)


class Operation(str, Enum):
    CREATE_USER = "create_user"
    CREATE_TASK = "create_task"
    LIST_TASKS = "list_tasks"
    UPDATE_TASK = "update_task"
    DELETE_TASK = "delete_task"
    COMPLETE_TASK = "complete_task"


@dataclass(frozen=True)
class Guard:
    name: str
    check: Callable[[Optional[UserRole]], bool]
    denial: str


def _role(value) -> Optional[UserRole]:
    if value is None:
        return None
    try:
        return UserRole(value)
    except ValueError:
        return None


authenticated = Guard(
    name="authenticated",
    check=lambda role: role is not None,
    denial="Authentication required",
)

admin_only = Guard(
    name="admin_only",
    check=lambda role: role == UserRole.ADMIN,
    denial="Only admins can {action}",
)


@dataclass(frozen=True)
class Rule:
    action: str
    guards: Tuple[Guard, ...]


RULES: Dict[Operation, Rule] = {
    Operation.CREATE_USER: Rule("create users", (authenticated, admin_only)),
    Operation.CREATE_TASK: Rule("create tasks", (authenticated, admin_only)),
    Operation.LIST_TASKS: Rule("list tasks", (authenticated,)),
    Operation.UPDATE_TASK: Rule("update tasks", (authenticated, admin_only)),
    Operation.DELETE_TASK: Rule("delete tasks", (authenticated, admin_only)),
    Operation.COMPLETE_TASK: Rule("complete tasks", (authenticated,)),
}


def authorize(operation: Operation, role) -> None:
    """Raise PermissionDenied unless every guard of the operation's rule passes."""
    rule = RULES[operation]
    caller_role = _role(role)
    for guard in rule.guards:
        if not guard.check(caller_role):
            log.warning("denied %s for role=%s (%s)", operation.value, role, guard.name)
            raise PermissionDenied(guard.denial.format(action=rule.action))
