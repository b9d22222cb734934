"""
In‑memory storage for users and issues.

The ``IssueStore`` owns both collections.  One store is created per
application in ``create_app`` and handed to the services through the
``get_store`` dependency, so tests can build isolated instances.

Stored issues keep the assignee as a bare user id; the user record is
looked up whenever an issue is rendered.  Every accessor hands out
copies so that callers cannot modify stored records in place: changes
only reach the store through ``add`` and ``replace``.

The async handlers of this app all run on the event loop, but the
store is also used from plain threads (sync callers, a multi‑worker
host embedding it).  Services hold ``store.lock`` around any sequence
of reads and writes that has to be atomic, such as computing the next
id and inserting the issue.  Nothing awaits while the lock is held.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace as dc_replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from fastapi import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    id: int
    name: str


@dataclass
class IssueRecord:
    """An issue as kept in the store."""

    id: int
    title: str
    description: str
    status: str
    assignee_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    def copy(self) -> "IssueRecord":
        return dc_replace(self)


DEFAULT_USERS = (
    User(id=1, name="김개발"),
    User(id=2, name="이디자인"),
    User(id=3, name="박기획"),
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IssueStore:
    """Container for the static user set and the mutable issue list."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS) -> None:
        self._users: tuple = tuple(users)
        self._issues: List[IssueRecord] = []
        self.lock = threading.RLock()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    @property
    def users(self) -> tuple:
        return self._users

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------
    def next_id(self) -> int:
        """Return ``max(id) + 1`` over the current issues, or 1 if empty.

        Recomputed on every call; nothing is cached.
        """
        with self.lock:
            return max((issue.id for issue in self._issues), default=0) + 1

    def all_issues(self) -> List[IssueRecord]:
        """Return a snapshot of all issues in insertion order."""
        with self.lock:
            return [issue.copy() for issue in self._issues]

    def get(self, issue_id: int) -> Optional[IssueRecord]:
        """Return a copy of the first issue with ``issue_id`` or None."""
        with self.lock:
            for issue in self._issues:
                if issue.id == issue_id:
                    return issue.copy()
            return None

    def add(self, issue: IssueRecord) -> None:
        with self.lock:
            self._issues.append(issue.copy())

    def replace(self, issue: IssueRecord) -> None:
        """Overwrite the stored issue that has the same id.

        Raises
        ------
        KeyError
            If no issue with that id is stored.
        """
        with self.lock:
            for index, current in enumerate(self._issues):
                if current.id == issue.id:
                    self._issues[index] = issue.copy()
                    return
            raise KeyError(issue.id)

    def __len__(self) -> int:
        return len(self._issues)


def seed_sample_issues(store: IssueStore, now: Optional[datetime] = None) -> None:
    """Populate ``store`` with the demo issues shown by the frontend.

    Creates one pending unassigned issue, one in progress and one
    completed issue, with timestamps spread over the last two days.
    """
    now = now or utcnow()
    samples: Dict[int, tuple] = {
        1: ("첫 번째 이슈", "이것은 첫 번째 이슈입니다.", "PENDING", None, 48, 48),
        2: ("두 번째 이슈", "이것은 두 번째 이슈입니다.", "IN_PROGRESS", 1, 24, 24),
        3: ("세 번째 이슈", "이것은 세 번째 이슈입니다.", "COMPLETED", 2, 12, 6),
    }
    for issue_id, (title, description, status, assignee_id, created_ago, updated_ago) in samples.items():
        store.add(
            IssueRecord(
                id=issue_id,
                title=title,
                description=description,
                status=status,
                assignee_id=assignee_id,
                created_at=now - timedelta(hours=created_ago),
                updated_at=now - timedelta(hours=updated_ago),
            )
        )
    logger.info("Seeded %d sample issues", len(samples))


def get_store(request: Request) -> IssueStore:
    """FastAPI dependency returning the store attached to the app."""
    return request.app.state.store
