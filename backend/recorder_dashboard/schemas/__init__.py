"""
Pydantic schemas for API request/response.
"""

from recorder_dashboard.schemas.testcase import (
    SaveTestCaseRequest,
    SaveTestCaseResponse,
    ExtractRequest,
    ExtractResponse,
    ExtractedElementSchema,
)

__all__ = [
    "SaveTestCaseRequest",
    "SaveTestCaseResponse",
    "ExtractRequest",
    "ExtractResponse",
    "ExtractedElementSchema",
]
