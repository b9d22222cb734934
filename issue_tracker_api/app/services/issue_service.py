"""
Service layer for issues.

Implements the issue lifecycle: creation, merge‑patch updates and
reads.  The rules enforced here are:

* an issue without an assignee must be ``PENDING``;
* a ``COMPLETED`` or ``CANCELLED`` issue can no longer be changed.

Create and update are all‑or‑nothing.  Updates are applied to a copy of
the stored record which is written back only once every check has
passed.  Both run while holding ``store.lock``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.errors import ImmutableStateError, NotFoundError, ValidationError
from ..core.store import IssueRecord, IssueStore, utcnow
from ..schemas.issue import IssueCreate, IssueRead, IssueStatus, IssueUpdate
from ..schemas.user import UserRead
from .user_service import UserService
from .validation import is_assignment_consistent, is_terminal_status, is_valid_status

logger = logging.getLogger(__name__)

MSG_TITLE_REQUIRED = "Title and description are required"
MSG_INVALID_STATUS = "Invalid status"
MSG_USER_NOT_FOUND = "User not found"
MSG_PENDING_WITHOUT_USER = "Cannot set status other than PENDING without a user"
MSG_ISSUE_NOT_FOUND = "Issue not found"
MSG_TERMINAL = "Cannot update completed or cancelled issues"


class IssueService:
    """Service for creating, updating and reading issues."""

    @classmethod
    async def create_issue(cls, store: IssueStore, data: IssueCreate) -> IssueRead:
        """Validate ``data`` and store it as a new issue.

        The requested status is stored as given; having an assignee does
        not move a ``PENDING`` issue forward.

        Raises
        ------
        ValidationError
            If title or description is empty, the status is unknown, the
            assignee does not exist, or a non‑pending status is requested
            without an assignee.
        """
        if not data.title or not data.description:
            raise ValidationError(MSG_TITLE_REQUIRED)
        if not is_valid_status(data.status):
            raise ValidationError(MSG_INVALID_STATUS)

        assignee_id: Optional[int] = None
        if data.assignee is not None:
            user = UserService.find_user(store, data.assignee.id)
            if user is None:
                raise ValidationError(MSG_USER_NOT_FOUND)
            assignee_id = user.id

        if not is_assignment_consistent(data.status, assignee_id is not None):
            raise ValidationError(MSG_PENDING_WITHOUT_USER)

        with store.lock:
            now = utcnow()
            record = IssueRecord(
                id=store.next_id(),
                title=data.title,
                description=data.description,
                status=data.status,
                assignee_id=assignee_id,
                created_at=now,
                updated_at=now,
            )
            store.add(record)
        logger.info("Created issue %s (status=%s, assignee=%s)", record.id, record.status, assignee_id)
        return cls._to_read(store, record)

    @classmethod
    async def update_issue(cls, store: IssueStore, issue_id: int, data: IssueUpdate) -> IssueRead:
        """Apply a merge‑patch to an existing issue.

        Steps run in a fixed order: text fields, then the assignee, then
        the status (checked against the assignee as it stands after the
        assignee step), and finally a reset to ``PENDING`` if this patch
        removed the assignee.  That reset wins over a status sent in the
        same request.

        Raises
        ------
        NotFoundError
            If the issue does not exist.
        ImmutableStateError
            If the issue is completed or cancelled.
        ValidationError
            If the new assignee does not exist or the requested status
            needs an assignee the issue does not have.
        """
        with store.lock:
            issue = store.get(issue_id)
            if issue is None:
                raise NotFoundError(MSG_ISSUE_NOT_FOUND)
            if is_terminal_status(issue.status):
                raise ImmutableStateError(MSG_TERMINAL)

            if data.title:
                issue.title = data.title
            # An empty description is a real value, unlike an empty title.
            if data.description is not None:
                issue.description = data.description

            assignee_touched = False
            if data.is_set("assignee"):
                if data.assignee is None:
                    issue.assignee_id = None
                else:
                    user = UserService.find_user(store, data.assignee.id)
                    if user is None:
                        raise ValidationError(MSG_USER_NOT_FOUND)
                    issue.assignee_id = user.id
                assignee_touched = True

            assignee_cleared = assignee_touched and issue.assignee_id is None
            if is_valid_status(data.status):
                # A status sent together with "assignee": null is superseded
                # by the reset below rather than rejected.
                if not assignee_cleared and not is_assignment_consistent(
                    data.status, issue.assignee_id is not None
                ):
                    raise ValidationError(MSG_PENDING_WITHOUT_USER)
                issue.status = data.status

            if assignee_cleared:
                issue.status = IssueStatus.PENDING.value

            issue.updated_at = utcnow()
            store.replace(issue)
        logger.info(
            "Updated issue %s (fields=%s, status=%s)",
            issue_id,
            sorted(data.model_fields_set),
            issue.status,
        )
        return cls._to_read(store, issue)

    @classmethod
    async def get_issue(cls, store: IssueStore, issue_id: int) -> Optional[IssueRead]:
        """Retrieve a single issue by its ID, or ``None``."""
        issue = store.get(issue_id)
        if issue is None:
            return None
        return cls._to_read(store, issue)

    @classmethod
    async def list_issues(cls, store: IssueStore, status: Optional[str] = None) -> List[IssueRead]:
        """Return issues sorted by id descending.

        ``status`` filters the result only when it is a known status;
        any other value returns every issue.
        """
        issues = store.all_issues()
        if status and is_valid_status(status):
            issues = [issue for issue in issues if issue.status == status]
        issues.sort(key=lambda issue: issue.id, reverse=True)
        return [cls._to_read(store, issue) for issue in issues]

    @staticmethod
    def _to_read(store: IssueStore, issue: IssueRecord) -> IssueRead:
        """Convert a stored record to ``IssueRead``, resolving the assignee."""
        assignee = None
        if issue.assignee_id is not None:
            user = UserService.find_user(store, issue.assignee_id)
            if user is not None:
                assignee = UserRead.model_validate(user)
        return IssueRead(
            id=issue.id,
            title=issue.title,
            description=issue.description,
            status=issue.status,
            assignee=assignee,
            created_at=issue.created_at,
            updated_at=issue.updated_at,
        )
