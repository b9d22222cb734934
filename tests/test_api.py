from fastapi.testclient import TestClient

from issue_tracker_api.app.core.store import IssueStore
from issue_tracker_api.app.main import create_app


def _create(client, **payload):
    return client.post("/issue", json=payload)


def test_scenario_a_create_pending(client):
    resp = _create(client, title="T", description="D", status="PENDING")
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert isinstance(data["id"], int) and data["id"] > 0
    assert data["status"] == "PENDING"
    assert data["assignee"] is None
    assert data["createdAt"] == data["updatedAt"]


def test_scenario_b_in_progress_without_assignee(client):
    resp = _create(client, title="T", description="D", status="IN_PROGRESS")
    assert resp.status_code == 400
    assert resp.text == "Cannot set status other than PENDING without a user"
    assert resp.headers["content-type"].startswith("text/plain")


def test_scenario_c_create_with_assignee_keeps_status(client):
    resp = _create(client, title="T", description="D", status="IN_PROGRESS", assignee={"id": 1})
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["status"] == "IN_PROGRESS"
    assert data["assignee"] == {"id": 1, "name": "김개발"}


def test_scenarios_d_and_e_assign_then_clear(client):
    resp = client.patch("/issue/1", json={"assignee": {"id": 1}, "status": "IN_PROGRESS"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "IN_PROGRESS"
    assert resp.json()["assignee"]["id"] == 1

    resp = client.patch("/issue/1", json={"assignee": None, "status": "IN_PROGRESS"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "PENDING"
    assert resp.json()["assignee"] is None


def test_scenario_f_completed_issue_is_read_only(client):
    before = client.get("/issue/3").json()
    resp = client.patch("/issue/3", json={"title": "Reopen", "assignee": None})
    assert resp.status_code == 400
    assert resp.text == "Cannot update completed or cancelled issues"
    assert client.get("/issue/3").json() == before


def test_create_with_unknown_user(client):
    resp = _create(client, title="T", description="D", status="IN_PROGRESS", assignee={"id": 42})
    assert resp.status_code == 400
    assert resp.text == "User not found"


def test_create_with_legacy_user_key(client):
    resp = _create(client, title="T", description="D", status="IN_PROGRESS", user={"id": 2})
    assert resp.status_code == 201, resp.text
    assert resp.json()["assignee"]["id"] == 2


def test_create_missing_fields(client):
    resp = _create(client, status="PENDING")
    assert resp.status_code == 400
    assert resp.text == "Title and description are required"


def test_invalid_json_body(client):
    resp = client.post("/issue", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.text == "Invalid request body"


def test_assignee_without_id_is_rejected(client):
    resp = client.patch("/issue/1", json={"assignee": {}})
    assert resp.status_code == 400
    assert resp.text == "Invalid request body"


def test_created_issue_is_visible(client):
    created = _create(client, title="Visible", description="D", status="PENDING").json()
    fetched = client.get(f"/issue/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created
    assert client.get("/issues").json()[0]["id"] == created["id"]


def test_list_issues_sorted_and_filtered(client):
    data = client.get("/issues").json()
    assert [issue["id"] for issue in data] == [3, 2, 1]

    pending = client.get("/issues", params={"status": "PENDING"}).json()
    assert [issue["id"] for issue in pending] == [1]

    unknown = client.get("/issues", params={"status": "nope"}).json()
    assert len(unknown) == 3


def test_get_unknown_issue(client):
    resp = client.get("/issue/999")
    assert resp.status_code == 404
    assert resp.text == "Issue not found"


def test_patch_unknown_issue(client):
    resp = client.patch("/issue/999", json={"title": "x"})
    assert resp.status_code == 404


def test_non_integer_issue_id(client):
    resp = client.get("/issue/abc")
    assert resp.status_code == 400
    assert resp.text == "Invalid issue ID"


def test_patch_merges_fields(client):
    resp = client.patch("/issue/2", json={"description": ""})
    assert resp.status_code == 200
    data = resp.json()
    assert data["description"] == ""
    assert data["title"] == "두 번째 이슈"
    assert data["status"] == "IN_PROGRESS"
    assert data["assignee"]["id"] == 1


def test_patch_status_without_assignee(client):
    resp = client.patch("/issue/1", json={"status": "COMPLETED"})
    assert resp.status_code == 400
    assert client.get("/issue/1").json()["status"] == "PENDING"


def test_list_users(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "name": "김개발"},
        {"id": 2, "name": "이디자인"},
        {"id": 3, "name": "박기획"},
    ]


def test_versioned_prefix(client):
    assert client.get("/api/v1/issues").json() == client.get("/issues").json()
    assert client.get("/api/v1/users").status_code == 200


def test_info(client):
    resp = client.get("/info")
    assert resp.json() == {
        "project": "Issue Tracker Test",
        "version": "9.9.9",
        "statuses": ["PENDING", "IN_PROGRESS", "COMPLETED", "CANCELLED"],
    }


def test_cors_preflight(client):
    resp = client.options(
        "/issue/1",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PATCH",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "PATCH" in resp.headers["access-control-allow-methods"]


def test_bare_options_is_answered(client):
    resp = client.options("/issue/1")
    assert resp.status_code == 200
    assert resp.content == b""
    assert resp.headers["access-control-allow-methods"] == "GET, POST, PATCH, OPTIONS"
    assert resp.headers["access-control-allow-headers"] == "Content-Type, Authorization"


def test_options_on_collection_paths(client):
    for path in ("/issue", "/issues", "/users", "/api/v1/issues"):
        assert client.options(path).status_code == 200


def test_preflight_with_disallowed_header(client):
    resp = client.options(
        "/issue",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-Requested-With",
        },
    )
    assert resp.status_code == 400


def test_cors_header_on_simple_request(client):
    resp = client.get("/users", headers={"Origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_method_not_allowed(client):
    resp = client.put("/issue/1", json={})
    assert resp.status_code == 405


def test_unseeded_app_starts_empty(test_settings):
    with TestClient(create_app(test_settings)) as client:
        assert client.get("/issues").json() == []
        assert client.get("/users").status_code == 200


def test_apps_do_not_share_state(test_settings):
    first = TestClient(create_app(test_settings, store=IssueStore()))
    second = TestClient(create_app(test_settings, store=IssueStore()))
    first.post("/issue", json={"title": "T", "description": "D", "status": "PENDING"})
    assert len(first.get("/issues").json()) == 1
    assert second.get("/issues").json() == []
