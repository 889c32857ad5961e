"""
Core extraction and patching components.
"""

from recorder_dashboard.core.context_store import (
    ContextDocumentError,
    ContextDocumentStore,
    DocumentNotFoundError,
    DocumentUnreadableError,
)
from recorder_dashboard.core.extractor import (
    ElementCategory,
    ElementReference,
    ExtractionResult,
    LocatorExtractor,
)
from recorder_dashboard.core.patcher import DocumentPatcher, Placement, TestCaseRecord
from recorder_dashboard.core.recorder import SaveResult, TestCaseRecorder

__all__ = [
    "ContextDocumentError",
    "ContextDocumentStore",
    "DocumentNotFoundError",
    "DocumentUnreadableError",
    "ElementCategory",
    "ElementReference",
    "ExtractionResult",
    "LocatorExtractor",
    "DocumentPatcher",
    "Placement",
    "TestCaseRecord",
    "SaveResult",
    "TestCaseRecorder",
]
