"""
Test case recording endpoints.

Saves are serialized with a process-wide lock: the context document is
read, patched and rewritten as a whole.
"""

import threading

import structlog
from fastapi import APIRouter, Depends

from recorder_dashboard.core.recorder import TestCaseRecorder, get_recorder
from recorder_dashboard.schemas.testcase import (
    ExtractedElementSchema,
    ExtractRequest,
    ExtractResponse,
    SaveTestCaseRequest,
    SaveTestCaseResponse,
)

logger = structlog.get_logger()

router = APIRouter()

_save_lock = threading.Lock()


@router.post("", response_model=SaveTestCaseResponse)
def save_test_case(
    request: SaveTestCaseRequest,
    recorder: TestCaseRecorder = Depends(get_recorder),
):
    """
    Extract page elements from the recorded code and add the test case
    to the project context document.

    Failures (e.g. missing document) are reported with `success: false`.
    """
    logger.info("test_case_received", test_case=request.name)

    with _save_lock:
        result = recorder.save(request.to_record())

    return SaveTestCaseResponse(
        success=result.success,
        message=result.message,
        elements_extracted=result.elements_extracted,
        placement=result.placement.value if result.placement else None,
    )


@router.post("/extract", response_model=ExtractResponse)
async def preview_elements(
    request: ExtractRequest,
    recorder: TestCaseRecorder = Depends(get_recorder),
):
    """
    Preview the elements that saving this code would record.
    """
    extraction = recorder.preview(request.playwright_code)

    return ExtractResponse(
        count=len(extraction),
        elements=[ExtractedElementSchema(**element) for element in extraction.to_dicts()],
    )
