from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from issue_tracker_api.app.core.config import Settings
from issue_tracker_api.app.core.store import IssueStore, seed_sample_issues
from issue_tracker_api.app.main import create_app


@pytest.fixture
def empty_store() -> IssueStore:
    """Store with the default users and no issues."""
    return IssueStore()


@pytest.fixture
def store() -> IssueStore:
    """Store with the default users and the three sample issues."""
    seeded = IssueStore()
    seed_sample_issues(seeded)
    return seeded


@pytest.fixture
def test_settings() -> Settings:
    return Settings(project_name="Issue Tracker Test", api_version="9.9.9", seed_sample_data=False)


@pytest.fixture
def client(store, test_settings) -> Iterator[TestClient]:
    app = create_app(test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
