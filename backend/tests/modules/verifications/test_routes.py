"""
Tests for verification API endpoints.

Runs against a seeded store and a recording mirror.
"""

import pytest


class TestValidateEmail:
    """Tests for POST /api/validate-email"""

    def test_valid_email(self, client):
        response = client.post("/api/validate-email", json={"email": "x@mit.edu"})
        assert response.status_code == 200
        assert response.json() == {"valid": True, "message": "Email domain is valid"}

    def test_invalid_domain(self, client):
        response = client.post("/api/validate-email", json={"email": "x@gmail.com"})
        assert response.status_code == 400
        data = response.json()
        assert data["valid"] is False
        assert data["message"] == "Email must be from a recognized educational institution"

    def test_malformed_email(self, client):
        response = client.post("/api/validate-email", json={"email": "nope"})
        assert response.status_code == 400
        assert response.json()["valid"] is False

    def test_missing_email(self, client):
        response = client.post("/api/validate-email", json={})
        assert response.status_code == 400
        assert response.json() == {"valid": False, "message": "Email is required"}

    def test_non_string_email(self, client):
        response = client.post("/api/validate-email", json={"email": 42})
        assert response.status_code == 400
        data = response.json()
        assert data["valid"] is False
        assert "success" not in data


class TestSubmitVerification:
    """Tests for POST /api/verify-student"""

    def test_submit_returns_id(self, client, store):
        response = client.post("/api/verify-student", json={
            "email": "new@stanford.edu",
            "fullName": "New Student",
            "college": "Stanford University",
            "status": "approved",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Verification request submitted successfully"
        assert data["id"] == 4
        assert store.verifications.get(4).status.value == "pending"

    def test_missing_field(self, client):
        response = client.post("/api/verify-student", json={"email": "new@stanford.edu"})
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Validation failed"
        fields = {error["field"] for error in data["errors"]}
        assert "fullName" in fields

    def test_empty_field(self, client):
        response = client.post("/api/verify-student", json={
            "email": "new@stanford.edu",
            "fullName": "",
            "college": "Stanford",
        })
        assert response.status_code == 400

    def test_non_educational_email(self, client):
        response = client.post("/api/verify-student", json={
            "email": "new@gmail.com",
            "fullName": "New Student",
            "college": "Nowhere",
        })
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "EMAIL_DOMAIN_NOT_ALLOWED"
        assert data["details"]["field"] == "email"


class TestListVerifications:
    def test_list_all(self, client):
        response = client.get("/api/verifications")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [item["fullName"] for item in data["data"]] == [
            "Sarah Johnson",
            "Michael Chen",
            "Priya Sharma",
        ]

    def test_list_filtered(self, client):
        client.put("/api/verifications/3", json={"status": "rejected"})
        response = client.get("/api/verifications", params={"status": "rejected"})
        assert [item["id"] for item in response.json()["data"]] == [3]

    def test_list_bad_filter(self, client):
        response = client.get("/api/verifications", params={"status": "archived"})
        assert response.status_code == 400

    def test_pending(self, client):
        response = client.get("/api/verifications/pending")
        assert response.status_code == 200
        items = response.json()["data"]
        assert len(items) == 3
        assert all(item["status"] == "pending" for item in items)
        assert items[0]["reviewedAt"] is None

    def test_get_one(self, client):
        response = client.get("/api/verifications/2")
        assert response.status_code == 200
        assert response.json()["data"]["email"] == "mchen@mit.edu"

    def test_get_unknown(self, client):
        response = client.get("/api/verifications/999")
        assert response.status_code == 404
        assert response.json()["message"] == "Verification request not found"


class TestReviewVerification:
    """Tests for PUT /api/verifications/{id}"""

    def test_approve(self, client, mirror):
        response = client.put("/api/verifications/1", json={"status": "approved", "notes": "ok"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Verification approved successfully"
        assert data["data"]["status"] == "approved"
        assert data["data"]["reviewedBy"] == "admin"
        assert data["data"]["reviewedAt"] is not None
        assert mirror.operations() == ["push_verification"]

    def test_invalid_status(self, client):
        response = client.put("/api/verifications/1", json={"status": "pending"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid status. Must be 'approved' or 'rejected'"

    def test_unknown_id(self, client):
        response = client.put("/api/verifications/999", json={"status": "approved"})
        assert response.status_code == 404

    def test_version_conflict(self, client):
        first = client.put("/api/verifications/1", json={"status": "approved", "version": 1})
        assert first.status_code == 200

        second = client.put("/api/verifications/1", json={"status": "rejected", "version": 1})
        assert second.status_code == 409
        assert second.json()["error"] == "VERSION_CONFLICT"

    @pytest.mark.parametrize("mirror_fixture", ["failing_mirror", "raising_mirror"])
    def test_mirror_failure_still_succeeds(self, request, settings, store, mirror_fixture):
        from fastapi.testclient import TestClient
        from api.app import create_app
        from api.dependencies import ServiceContainer, get_container

        container = ServiceContainer(
            settings=settings,
            store=store,
            mirror=request.getfixturevalue(mirror_fixture),
        )
        app = create_app()
        app.dependency_overrides[get_container] = lambda: container

        response = TestClient(app).put("/api/verifications/1", json={"status": "approved"})

        assert response.status_code == 200
        assert store.verifications.get(1).status.value == "approved"


class TestBulkAction:
    """Tests for POST /api/verifications/bulk-action"""

    def test_partial_success(self, client):
        response = client.post("/api/verifications/bulk-action", json={
            "ids": [1, 999],
            "action": "approve",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["skipped"] == [999]
        assert [item["id"] for item in data["data"]] == [1]

    def test_invalid_action(self, client):
        response = client.post("/api/verifications/bulk-action", json={
            "ids": [1],
            "action": "archive",
        })
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid action. Must be 'approve' or 'reject'"

    def test_empty_ids(self, client):
        response = client.post("/api/verifications/bulk-action", json={"ids": [], "action": "approve"})
        assert response.status_code == 400
