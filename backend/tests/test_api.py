"""HTTP surface: auth, error mapping and the main user journeys."""

import base64
import uuid

import pytest


@pytest.fixture()
def signup(client, auth_headers):
    """Create a profile through the API; returns (user_id, headers)."""

    def _signup(role="teacher", name="Ada", email=None, **fields):
        user_id = str(uuid.uuid4())
        headers = auth_headers(user_id, email or f"{user_id[:8]}@uni.edu")
        res = client.post(
            "/profile", headers=headers, json={"name": name, "role": role, **fields}
        )
        assert res.status_code == 201, res.text
        return user_id, headers

    return _signup


def upload_body(title="Paper", domain_id=None, data=b"%PDF-1.4 body", data_url=False):
    encoded = base64.b64encode(data).decode()
    if data_url:
        encoded = f"data:application/pdf;base64,{encoded}"
    body = {"title": title, "fileName": "paper.pdf", "fileData": encoded}
    if domain_id:
        body["domainId"] = domain_id
    return body


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "kv_backend": "memory"}


def test_requests_without_token_are_unauthenticated(client):
    res = client.get("/profile")
    assert res.status_code == 401
    assert res.json()["kind"] == "Unauthenticated"

    res = client.get("/profile", headers={"Authorization": "Bearer nonsense"})
    assert res.status_code == 401


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_profile_lifecycle(client, signup):
    user_id, headers = signup(role="student", name="Bob", institution="MIT")

    res = client.get("/profile", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == user_id
    assert res.json()["role"] == "student"

    res = client.put("/profile", headers=headers, json={"bio": "Likes graphs"})
    assert res.status_code == 200
    body = res.json()
    assert (body["bio"], body["name"], body["institution"]) == ("Likes graphs", "Bob", "MIT")

    # Second signup for the same identity
    res = client.post("/profile", headers=headers, json={"name": "Bob", "role": "student"})
    assert res.status_code == 422
    assert res.json()["kind"] == "InvalidInput"


def test_profile_missing_and_bad_body(client, auth_headers):
    headers = auth_headers(str(uuid.uuid4()))

    res = client.get("/profile", headers=headers)
    assert res.status_code == 404
    assert res.json()["kind"] == "NotFound"

    res = client.post("/profile", headers=headers, json={"role": "student"})
    assert res.status_code == 400
    assert res.json()["error"] == "Validation error"


def test_teacher_directory(client, signup):
    teacher_id, _ = signup(role="teacher", name="Ada", research_interests=["Graphs"])
    student_id, headers = signup(role="student", name="Bob")

    res = client.get("/teachers", headers=headers)
    assert [t["id"] for t in res.json()["teachers"]] == [teacher_id]

    res = client.get("/teachers", headers=headers, params={"search": "graph"})
    assert len(res.json()["teachers"]) == 1
    res = client.get("/teachers", headers=headers, params={"search": "chemistry"})
    assert res.json()["teachers"] == []

    assert client.get(f"/teachers/{teacher_id}", headers=headers).status_code == 200
    assert client.get(f"/teachers/{student_id}", headers=headers).status_code == 404
    assert client.get("/teachers/not-a-uuid", headers=headers).status_code == 422


def test_domains_and_papers_journey(client, signup):
    teacher_id, teacher = signup(role="teacher")
    _, student = signup(role="student", name="Bob")

    res = client.post("/domains", headers=student, json={"name": "Optics"})
    assert res.status_code == 403
    assert res.json()["kind"] == "Unauthorized"

    res = client.post("/domains", headers=teacher, json={"name": "Graph Theory"})
    assert res.status_code == 201
    domain_id = res.json()["id"]

    res = client.post("/papers", headers=teacher, json=upload_body("P1", domain_id, data_url=True))
    assert res.status_code == 201, res.text
    paper = res.json()
    assert paper["domain_id"] == domain_id
    assert paper["file_path"] == f"{teacher_id}/{paper['id']}_paper.pdf"

    res = client.get(f"/teachers/{teacher_id}/domains", headers=student)
    assert [d["id"] for d in res.json()["domains"]] == [domain_id]
    res = client.get(f"/teachers/{teacher_id}/papers", headers=student)
    assert [p["title"] for p in res.json()["papers"]] == ["P1"]

    # Any signed-in user can fetch the file through a signed URL
    res = client.get(f"/papers/{paper['id']}/download", headers=student)
    assert res.status_code == 200
    download = client.get(res.json()["url"])
    assert download.status_code == 200
    assert download.content == b"%PDF-1.4 body"
    assert download.headers["content-type"].startswith("application/pdf")

    assert client.delete(f"/papers/{paper['id']}", headers=student).status_code == 403
    res = client.delete(f"/papers/{paper['id']}", headers=teacher)
    assert res.json() == {"success": True}

    res = client.get(f"/domains/{domain_id}/papers", headers=student)
    assert res.json()["papers"] == []
    assert client.get(f"/papers/{paper['id']}/download", headers=student).status_code == 404


def test_upload_validation(client, signup):
    _, teacher = signup(role="teacher")

    body = upload_body()
    body["fileData"] = "***not base64***"
    assert client.post("/papers", headers=teacher, json=body).status_code == 422

    res = client.post("/papers", headers=teacher, json=upload_body(domain_id=str(uuid.uuid4())))
    assert res.status_code == 404


def test_blob_route_rejects_bad_tokens(client):
    res = client.get("/blobs/some/file.pdf", params={"token": "forged"})
    assert res.status_code == 403


def test_messaging_journey(client, signup):
    teacher_id, teacher = signup(role="teacher", name="Dr. Smith", email="smith@uni.edu")
    student_id, student = signup(role="student", name="Bob")

    res = client.post(
        "/messages",
        headers=student,
        json={"receiverId": teacher_id, "subject": "Thesis", "content": "Can we meet?"},
    )
    assert res.status_code == 201
    message_id = res.json()["id"]

    res = client.get("/messages/inbox", headers=teacher)
    inbox = res.json()
    assert inbox["unread_count"] == 1
    assert inbox["poll_seconds"] > 0
    (entry,) = inbox["messages"]
    assert (entry["sender_name"], entry["subject"], entry["read"]) == ("Bob", "Thesis", False)

    res = client.get("/messages/sent", headers=student)
    assert [m["id"] for m in res.json()["messages"]] == [message_id]

    assert client.put(f"/messages/{message_id}/read", headers=student).status_code == 403
    for _ in range(2):
        res = client.put(f"/messages/{message_id}/read", headers=teacher)
        assert res.status_code == 200
        assert res.json()["read"] is True
    assert client.get("/messages/inbox", headers=teacher).json()["unread_count"] == 0


def test_message_to_unknown_receiver(client, signup):
    _, student = signup(role="student")

    res = client.post(
        "/messages",
        headers=student,
        json={"receiver_id": str(uuid.uuid4()), "subject": "Hi", "content": "Hello"},
    )
    assert res.status_code == 404
    assert res.json()["kind"] == "NotFound"


def test_message_to_malformed_receiver_id_is_unknown_receiver(client, signup):
    _, student = signup(role="student")

    res = client.post(
        "/messages",
        headers=student,
        json={"receiverId": "not-a-uuid", "subject": "Hi", "content": "Hello"},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "Receiver not-a-uuid not found", "kind": "NotFound"}
