"""API tests for the recorder dashboard endpoints."""

from __future__ import annotations

LOGIN_PAYLOAD = {
    "name": "Login",
    "description": "Verify user can login",
    "steps": "Enter credentials and submit",
    "browser": "chromium",
    "url": "https://example.com/login",
    "timestamp": "2024-01-15T10:30:00",
    "playwrightCode": (
        "await page.getByPlaceholder('Email').fill('a@b.com');\n"
        "await page.locator('#submitBtn').click();\n"
    ),
}


# ---------------------------------------------------------------------------
# 1. POST /api/v1/testcases
# ---------------------------------------------------------------------------


class TestSaveTestCase:
    def test_saves_test_case(self, client_for, context_path):
        client = client_for(context_path)

        response = client.post("/api/v1/testcases", json=LOGIN_PAYLOAD)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Test case saved successfully with 2 page elements",
            "elements_extracted": 2,
            "placement": "anchor_section",
        }

        content = context_path.read_text(encoding="utf-8")
        assert "### Login Page Elements" in content
        assert 'TEXTBOX_2 = "Email"' in content
        assert "- Type: UI\n" in content
        assert "- Recorded: 1/15/2024, 10:30:00 AM" in content

    def test_explicit_test_case_type(self, client_for, context_path):
        client = client_for(context_path)

        client.post("/api/v1/testcases", json={**LOGIN_PAYLOAD, "testCaseType": "API"})

        assert "- Type: API\n" in context_path.read_text(encoding="utf-8")

    def test_missing_document(self, client_for, missing_context_path):
        client = client_for(missing_context_path)

        response = client.post("/api/v1/testcases", json=LOGIN_PAYLOAD)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "PROJECT_CONTEXT.md file not found"
        assert body["placement"] is None

    def test_malformed_json(self, client_for, context_path, sample_context):
        client = client_for(context_path)

        response = client.post(
            "/api/v1/testcases",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("Malformed request")
        assert context_path.read_text(encoding="utf-8") == sample_context

    def test_missing_name(self, client_for, context_path):
        client = client_for(context_path)
        payload = {k: v for k, v in LOGIN_PAYLOAD.items() if k != "name"}

        response = client.post("/api/v1/testcases", json=payload)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_unreadable_document(self, client_for, context_path):
        context_path.write_bytes(b"\xff\xfe")
        client = client_for(context_path)

        response = client.post("/api/v1/testcases", json=LOGIN_PAYLOAD)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("Failed to save test case:")
        assert context_path.read_bytes() == b"\xff\xfe"

    def test_null_and_non_string_fields_rendered_as_is(self, client_for, context_path):
        client = client_for(context_path)

        response = client.post(
            "/api/v1/testcases",
            json={"name": "X", "description": None, "steps": None, "browser": 3},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        content = context_path.read_text(encoding="utf-8")
        assert "**X**: \n" in content
        assert "- \n- Browser: 3\n" in content

    def test_epoch_timestamp_accepted(self, client_for, context_path):
        client = client_for(context_path)

        response = client.post(
            "/api/v1/testcases", json={**LOGIN_PAYLOAD, "timestamp": 1705314600000}
        )

        assert response.json()["success"] is True


# ---------------------------------------------------------------------------
# 2. POST /api/v1/testcases/extract
# ---------------------------------------------------------------------------


class TestExtractPreview:
    def test_lists_elements(self, client_for, context_path, sample_context):
        client = client_for(context_path)

        response = client.post(
            "/api/v1/testcases/extract",
            json={"playwrightCode": LOGIN_PAYLOAD["playwrightCode"]},
        )

        assert response.status_code == 200
        assert response.json() == {
            "count": 2,
            "elements": [
                {"name": "BUTTON_1", "selector": "#submitBtn", "category": "BUTTON", "pattern": "locator"},
                {"name": "TEXTBOX_2", "selector": "Email", "category": "TEXTBOX", "pattern": "placeholder"},
            ],
        }
        assert context_path.read_text(encoding="utf-8") == sample_context

    def test_no_elements(self, client_for, context_path):
        client = client_for(context_path)

        response = client.post("/api/v1/testcases/extract", json={"playwrightCode": ""})

        assert response.json() == {"count": 0, "elements": []}


# ---------------------------------------------------------------------------
# 3. Context document and health
# ---------------------------------------------------------------------------


class TestContextDocument:
    def test_returns_document(self, client_for, context_path, sample_context):
        client = client_for(context_path)

        response = client.get("/api/v1/context")

        assert response.status_code == 200
        assert response.text == sample_context
        assert response.headers["content-type"].startswith("text/markdown")

    def test_missing_document(self, client_for, missing_context_path):
        client = client_for(missing_context_path)

        response = client.get("/api/v1/context")

        assert response.status_code == 404
        assert response.json()["detail"] == "PROJECT_CONTEXT.md file not found"


class TestHealth:
    def test_health(self, client_for, context_path):
        response = client_for(context_path).get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready_with_document(self, client_for, context_path):
        body = client_for(context_path).get("/api/v1/health/ready").json()

        assert body["ready"] is True
        assert body["checks"]["context_document"] is True

    def test_not_ready_without_document(self, client_for, missing_context_path):
        body = client_for(missing_context_path).get("/api/v1/health/ready").json()

        assert body["ready"] is False
        assert body["checks"]["context_document"] is False

    def test_root(self, client_for, context_path):
        body = client_for(context_path).get("/").json()

        assert body["name"] == "Recorder Dashboard"
        assert body["api"] == "/api/v1"
