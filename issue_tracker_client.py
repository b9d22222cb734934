"""Issue tracker API client.

A thin wrapper around the REST API exposed by ``issue_tracker_api``.
The client uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`list_issues` – return issues, optionally filtered by status.
* :meth:`get_issue` – fetch a single issue by its identifier.
* :meth:`create_issue` – create a new issue.
* :meth:`update_issue` – apply a merge‑patch to an issue.
* :meth:`list_users` – return the users issues can be assigned to.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The API reports
business rule violations as plain text, which ends up in ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class IssueTrackerAPI:
    """Client for interacting with the issue tracker API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for every request.  ``None`` leaves
                the session's own default in place.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``).
            path: Path relative to :attr:`base_url` (e.g. ``/issues``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        options: Dict[str, Any] = {}
        if self.timeout is not None:
            options["timeout"] = self.timeout
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                **options,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = response.text.strip() or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Issue operations
    # ------------------------------------------------------------------
    def list_issues(self, status: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve issues, newest first.

        Args:
            status: Only return issues in this status.
        """
        params = {"status": status} if status else None
        data, error = self._request("GET", "/issues", params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_issue(self, issue_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/issue/{issue_id}")

    def create_issue(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an issue.

        Args:
            payload: ``title``, ``description``, ``status`` and an
                optional ``assignee`` of the form ``{"id": <user id>}``.
        """
        return self._request("POST", "/issue", json_body=payload)

    def update_issue(self, issue_id: int, patch: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Apply a merge‑patch to an issue.

        Only keys present in ``patch`` are changed.  Pass
        ``{"assignee": None}`` to remove the assignee.
        """
        return self._request("PATCH", f"/issue/{issue_id}", json_body=patch)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
