"""
Issue endpoints for API v1.

The paths keep the singular/plural split the frontend relies on:
``POST /issue`` creates, ``GET /issues`` lists, and ``/issue/{id}``
reads or patches a single issue.  Business rule violations raised by
``IssueService`` are turned into plain‑text 400/404 responses by the
application's exception handlers.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from issue_tracker_api.app.core.errors import NotFoundError
from issue_tracker_api.app.core.store import IssueStore, get_store
from issue_tracker_api.app.schemas.issue import IssueCreate, IssueRead, IssueUpdate
from issue_tracker_api.app.services.issue_service import MSG_ISSUE_NOT_FOUND, IssueService

router = APIRouter()


@router.post("/issue", response_model=IssueRead, status_code=status.HTTP_201_CREATED)
async def create_issue(issue_in: IssueCreate, store: IssueStore = Depends(get_store)) -> IssueRead:
    """Create a new issue.

    Without an assignee the status must be ``PENDING``.  The status is
    stored exactly as sent.
    """
    return await IssueService.create_issue(store, issue_in)


@router.get("/issues", response_model=List[IssueRead])
async def list_issues(
    status_filter: Optional[str] = Query(
        None,
        alias="status",
        description="Only return issues with this status. Unknown values are ignored.",
    ),
    store: IssueStore = Depends(get_store),
) -> List[IssueRead]:
    """Return all issues, newest first, optionally filtered by status."""
    return await IssueService.list_issues(store, status=status_filter)


@router.get("/issue/{issue_id}", response_model=IssueRead)
async def get_issue(issue_id: int, store: IssueStore = Depends(get_store)) -> IssueRead:
    """Retrieve a single issue by ID."""
    issue = await IssueService.get_issue(store, issue_id)
    if issue is None:
        raise NotFoundError(MSG_ISSUE_NOT_FOUND)
    return issue


@router.patch("/issue/{issue_id}", response_model=IssueRead)
async def update_issue(
    issue_id: int,
    issue_in: IssueUpdate,
    store: IssueStore = Depends(get_store),
) -> IssueRead:
    """Apply a merge‑patch to an issue.

    Only keys present in the body are changed.  Sending
    ``"assignee": null`` removes the assignee and resets the status to
    ``PENDING``.  Completed and cancelled issues are read‑only.
    """
    return await IssueService.update_issue(store, issue_id, issue_in)
