"""
Validation rules shared by issue creation and update.

These are plain predicates; the services decide which error to raise
when one of them fails.
"""

from typing import Any

from ..schemas.issue import IssueStatus

VALID_STATUSES = frozenset(status.value for status in IssueStatus)
TERMINAL_STATUSES = frozenset({IssueStatus.COMPLETED.value, IssueStatus.CANCELLED.value})


def is_valid_status(status: Any) -> bool:
    """Return True if ``status`` is one of the four known status literals."""
    return isinstance(status, str) and status in VALID_STATUSES


def is_assignment_consistent(status: str, has_assignee: bool) -> bool:
    """An issue without an assignee may only be ``PENDING``."""
    return has_assignee or status == IssueStatus.PENDING.value


def is_terminal_status(status: str) -> bool:
    """Completed and cancelled issues can no longer be changed."""
    return status in TERMINAL_STATUSES
