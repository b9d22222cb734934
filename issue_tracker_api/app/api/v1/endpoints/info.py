"""
Information endpoint for API v1.

Returns the service name and version together with the list of
status values, so that clients can build their status filters without
hard‑coding them.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from issue_tracker_api.app.schemas.issue import IssueStatus

router = APIRouter()


@router.get("/info", response_model=Dict[str, Any])
async def get_info(request: Request) -> Dict[str, Any]:
    """Return basic service metadata and the known issue statuses."""
    app_settings = request.app.state.settings
    return {
        "project": app_settings.project_name,
        "version": app_settings.api_version,
        "statuses": [status.value for status in IssueStatus],
    }
