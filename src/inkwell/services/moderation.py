"""Moderation state machines for articles, reports, applications and users."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from inkwell.models.states import (
    ApplicationStatus,
    ArticleStatus,
    ReportStatus,
    UserRole,
    UserStatus,
)


class IllegalTransition(Exception):
    """Raised when an action is not allowed from the record's current state."""

    def __init__(self, machine: str, state: str, action: str) -> None:
        self.machine = machine
        self.state = state
        self.action = action
        super().__init__(f"{machine}: cannot {action} from {state}")


class StateMachine:
    """Table of legal ``(state, action) -> state`` transitions.

    States with no outgoing transition are terminal.
    """

    def __init__(self, name: str, transitions: Mapping[tuple[StrEnum, str], StrEnum]) -> None:
        self.name = name
        self._transitions = dict(transitions)

    def can_apply(self, current: StrEnum, action: str) -> bool:
        return (current, action) in self._transitions

    def apply(self, current: StrEnum, action: str) -> StrEnum:
        """Return the state reached by ``action``.

        Raises:
            IllegalTransition: If ``action`` is not legal from ``current``.
        """
        try:
            return self._transitions[(current, action)]
        except KeyError:
            raise IllegalTransition(self.name, str(current), action) from None

    def is_terminal(self, state: StrEnum) -> bool:
        return not any(source == state for source, _ in self._transitions)


ARTICLE_MACHINE = StateMachine(
    "article",
    {
        (ArticleStatus.PENDING, "approve"): ArticleStatus.APPROVED,
        (ArticleStatus.PENDING, "reject"): ArticleStatus.REJECTED,
    },
)

REPORT_MACHINE = StateMachine(
    "report",
    {(ReportStatus.PENDING, "resolve"): ReportStatus.RESOLVED},
)

APPLICATION_MACHINE = StateMachine(
    "writer_application",
    {
        (ApplicationStatus.PENDING, "approve"): ApplicationStatus.APPROVED,
        (ApplicationStatus.PENDING, "reject"): ApplicationStatus.REJECTED,
    },
)

# The only two-way machine: admins ban and unban freely.
USER_STATUS_MACHINE = StateMachine(
    "user_status",
    {
        (UserStatus.ACTIVE, "ban"): UserStatus.BANNED,
        (UserStatus.BANNED, "unban"): UserStatus.ACTIVE,
    },
)


class RoleChange(StrEnum):
    """How a role change was requested."""

    APPLICATION = "application"
    ADMIN_EDIT = "admin_edit"


def initial_article_status(role: UserRole) -> ArticleStatus:
    """Admins publish directly; everyone else goes through moderation."""
    if role == UserRole.ADMIN:
        return ArticleStatus.APPROVED
    return ArticleStatus.PENDING


def can_author(role: UserRole) -> bool:
    return role in (UserRole.WRITER, UserRole.ADMIN)


def check_role_change(current: UserRole, new: UserRole, via: RoleChange) -> UserRole:
    """Validate a role change and return the new role.

    An approved application only ever promotes user to writer. A direct
    admin edit may set any role.

    Raises:
        IllegalTransition: If the change is not allowed through ``via``.
    """
    if via == RoleChange.ADMIN_EDIT:
        return new
    if current == UserRole.USER and new == UserRole.WRITER:
        return new
    raise IllegalTransition("user_role", str(current), f"{via}:{new}")


def status_action(target: UserStatus) -> str:
    """Map a requested user status onto the machine action reaching it."""
    return "ban" if target == UserStatus.BANNED else "unban"
