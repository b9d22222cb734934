"""
User endpoints for API v1.

The user set is static, so only listing is exposed.  Clients use it to
populate the assignee picker.
"""

from typing import List

from fastapi import APIRouter, Depends

from issue_tracker_api.app.core.store import IssueStore, get_store
from issue_tracker_api.app.schemas.user import UserRead
from issue_tracker_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/users", response_model=List[UserRead])
async def list_users(store: IssueStore = Depends(get_store)) -> List[UserRead]:
    """Return every user that issues can be assigned to."""
    return await UserService.list_users(store)
