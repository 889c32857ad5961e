"""
Pydantic schemas for test case recording endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field

from recorder_dashboard.core.patcher import TestCaseRecord


class SaveTestCaseRequest(BaseModel):
    """Recorded test case as posted by the dashboard."""

    name: str = Field(..., description="Test case name, used in headings")
    description: Any = Field(default="", description="Test case description, rendered as-is")
    steps: Any = Field(default="", description="Free text steps, rendered as-is")
    test_case_type: str | None = Field(
        None, alias="testCaseType", description="Test case type, defaults to UI"
    )
    browser: Any = Field(default="", description="Browser used for the recording")
    url: Any = Field(default="", description="Recorded start URL")
    timestamp: str | int | float | None = Field(
        None, description="ISO-8601 string or epoch milliseconds"
    )
    playwright_code: str | None = Field(
        default="", alias="playwrightCode", description="Recorded Playwright code"
    )

    model_config = {"populate_by_name": True, "json_schema_extra": {"example": {
        "name": "Login",
        "description": "Verify user can login with valid credentials",
        "steps": "Open login page, enter credentials, submit",
        "testCaseType": "UI",
        "browser": "chromium",
        "url": "https://example.com/login",
        "timestamp": "2024-01-15T10:30:00",
        "playwrightCode": "await page.getByPlaceholder('Email').fill('a@b.com');\n"
                          "await page.locator('#submitBtn').click();",
    }}}

    def to_record(self) -> TestCaseRecord:
        return TestCaseRecord(
            name=self.name,
            description=self.description,
            steps=self.steps,
            browser=self.browser,
            url=self.url,
            timestamp=self.timestamp,
            test_case_type=self.test_case_type,
            playwright_code=self.playwright_code,
        )


class SaveTestCaseResponse(BaseModel):
    """Envelope returned after a save attempt."""

    success: bool
    message: str
    elements_extracted: int = 0
    placement: str | None = None


class ExtractRequest(BaseModel):
    """Code to extract elements from."""

    playwright_code: str = Field(..., alias="playwrightCode")

    model_config = {"populate_by_name": True}


class ExtractedElementSchema(BaseModel):
    """One extracted element."""

    name: str = Field(..., description="Display name, e.g. BUTTON_1")
    selector: str
    category: str
    pattern: str = Field(..., description="Locator call the element was found in")


class ExtractResponse(BaseModel):
    """Elements found in a block of recorded code."""

    count: int
    elements: list[ExtractedElementSchema]
