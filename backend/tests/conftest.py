"""Shared fixtures for recorder dashboard tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from recorder_dashboard.core.context_store import ContextDocumentStore
from recorder_dashboard.core.patcher import DocumentPatcher, TestCaseRecord
from recorder_dashboard.core.recorder import TestCaseRecorder, get_recorder
from recorder_dashboard.main import app

SAMPLE_CONTEXT = """# Project Context

## UI Test Scenarios

### Login Tests

- Valid login redirects to the dashboard

### Contact Us Tests

- Contact form submits with all fields

## UI Test Data

| Field | Value |
| --- | --- |
| email | qa@example.com |
"""

LOGIN_CODE = """import { test, expect } from '@playwright/test';

test('login', async ({ page }) => {
  await page.goto('https://example.com/login');
  await page.getByPlaceholder('Email').fill('a@b.com');
  await page.locator('#submitBtn').click();
});
"""


@pytest.fixture
def sample_context() -> str:
    return SAMPLE_CONTEXT


@pytest.fixture
def context_path(tmp_path: Path) -> Path:
    path = tmp_path / "PROJECT_CONTEXT.md"
    path.write_text(SAMPLE_CONTEXT, encoding="utf-8", newline="")
    return path


@pytest.fixture
def missing_context_path(tmp_path: Path) -> Path:
    return tmp_path / "PROJECT_CONTEXT.md"


@pytest.fixture
def patcher() -> DocumentPatcher:
    return DocumentPatcher()


@pytest.fixture
def login_record() -> TestCaseRecord:
    return TestCaseRecord(
        name="Login",
        description="Verify user can login",
        steps="Enter credentials and submit",
        browser="chromium",
        url="https://example.com/login",
        timestamp="2024-01-15T10:30:00",
        playwright_code=LOGIN_CODE,
    )


@pytest.fixture
def recorder(context_path: Path) -> TestCaseRecorder:
    return TestCaseRecorder(store=ContextDocumentStore(context_path))


@pytest.fixture
def client_for():
    """Build a TestClient whose recorder works on the given document path."""
    clients = []

    def build(path: Path) -> TestClient:
        recorder = TestCaseRecorder(store=ContextDocumentStore(path))
        app.dependency_overrides[get_recorder] = lambda: recorder
        client = TestClient(app)
        clients.append(client)
        return client

    yield build

    for client in clients:
        client.close()
    app.dependency_overrides.clear()
