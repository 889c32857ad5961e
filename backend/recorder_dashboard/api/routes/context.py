"""
Read-only access to the project context document.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from recorder_dashboard.core.context_store import (
    DocumentNotFoundError,
    DocumentUnreadableError,
)
from recorder_dashboard.core.recorder import TestCaseRecorder, get_recorder

router = APIRouter()


@router.get("", response_class=PlainTextResponse)
async def get_context_document(recorder: TestCaseRecorder = Depends(get_recorder)):
    """
    Return the current context document as markdown text.
    """
    try:
        content = recorder.store.load()
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DocumentUnreadableError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return PlainTextResponse(content, media_type="text/markdown; charset=utf-8")
