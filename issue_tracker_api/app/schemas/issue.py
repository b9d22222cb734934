"""
Pydantic schemas for issues.

``IssueCreate`` and ``IssueUpdate`` describe request bodies,
``IssueRead`` the representation returned by the API.  Field names on
the wire follow the frontend's camelCase convention (``createdAt``,
``updatedAt``).  Status values are accepted as plain strings so that an
unknown value is reported by the service layer as a validation error
instead of a schema error.

``IssueUpdate`` is a merge‑patch: only keys present in the request are
considered.  Presence is tracked by pydantic in ``model_fields_set``,
which lets the service tell an absent ``assignee`` apart from an
explicit ``null``.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from .user import UserRead


class IssueStatus(str, Enum):
    """Lifecycle states of an issue."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class AssigneeRef(BaseModel):
    """Reference to an existing user by id."""

    id: int


# Older clients send the assignee under ``user``.
_ASSIGNEE_ALIASES = AliasChoices("assignee", "user")


class IssueCreate(BaseModel):
    """Schema for creating an issue.

    Missing text fields default to an empty string and are rejected by
    the service with a readable message.
    """

    title: str = Field("", examples=["Login page is broken"])
    description: str = Field("", examples=["The submit button does nothing."])
    status: str = Field("", examples=[IssueStatus.PENDING.value])
    assignee: Optional[AssigneeRef] = Field(None, validation_alias=_ASSIGNEE_ALIASES)


class IssueUpdate(BaseModel):
    """Merge‑patch for an existing issue.

    All fields are optional.  ``assignee`` distinguishes three cases:
    absent (left untouched), ``null`` (cleared) and ``{"id": n}``
    (assigned to user ``n``).
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    assignee: Optional[AssigneeRef] = Field(None, validation_alias=_ASSIGNEE_ALIASES)

    def is_set(self, name: str) -> bool:
        """Return True if ``name`` was present in the request body."""
        return name in self.model_fields_set


class IssueRead(BaseModel):
    """Schema for an issue returned by the API."""

    id: int
    title: str
    description: str
    status: IssueStatus
    assignee: Optional[UserRead] = None
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
    }
