"""
Test Case Recorder - extract, patch and persist in one call

Ties the extractor, the patcher and the document store together. The recorder
assumes it has the document to itself for the duration of `save`; callers
that may save concurrently must serialize access.
"""

from dataclasses import dataclass, field

import structlog

from recorder_dashboard.config import Settings, settings
from recorder_dashboard.core.context_store import (
    ContextDocumentError,
    ContextDocumentStore,
    DocumentNotFoundError,
)
from recorder_dashboard.core.extractor import ExtractionResult, LocatorExtractor
from recorder_dashboard.core.patcher import DocumentPatcher, Placement, TestCaseRecord

logger = structlog.get_logger()


@dataclass
class SaveResult:
    """Outcome of saving a test case to the context document."""

    success: bool
    message: str
    extraction: ExtractionResult = field(default_factory=ExtractionResult)
    placement: Placement | None = None

    @property
    def elements_extracted(self) -> int:
        return len(self.extraction)


class TestCaseRecorder:
    """
    Saves recorded test cases into the project context document.
    """

    def __init__(
        self,
        store: ContextDocumentStore,
        extractor: LocatorExtractor | None = None,
        patcher: DocumentPatcher | None = None,
    ):
        self.store = store
        self.extractor = extractor or LocatorExtractor()
        self.patcher = patcher or DocumentPatcher()

    @classmethod
    def from_settings(cls, config: Settings) -> "TestCaseRecorder":
        return cls(
            store=ContextDocumentStore(config.context_document_path),
            patcher=DocumentPatcher(
                anchor_heading=config.anchor_heading,
                fallback_heading=config.fallback_heading,
                default_test_case_type=config.default_test_case_type,
                fence_language=config.elements_fence_language,
            ),
        )

    def preview(self, code: str) -> ExtractionResult:
        """Extract elements without touching the document."""
        return self.extractor.extract(code)

    def save(self, record: TestCaseRecord) -> SaveResult:
        """
        Patch `record` into the context document and write it back.

        A missing document or a failed write is reported in the result,
        never retried.
        """
        log = logger.bind(test_case=record.name)

        try:
            document = self.store.load()
        except DocumentNotFoundError as e:
            return SaveResult(success=False, message=str(e))
        except ContextDocumentError as e:
            return SaveResult(success=False, message=f"Failed to save test case: {e}")

        extraction = self.extractor.extract(record.playwright_code)
        patched = self.patcher.apply(document, record, extraction)

        try:
            self.store.save(patched.document)
        except OSError as e:
            log.error("test_case_save_failed", error=str(e))
            return SaveResult(
                success=False,
                message=f"Failed to save test case: {e}",
                extraction=extraction,
            )

        log.info(
            "test_case_saved",
            document=self.store.name,
            elements=len(extraction),
            placement=patched.placement.value,
        )

        return SaveResult(
            success=True,
            message=f"Test case saved successfully with {len(extraction)} page elements",
            extraction=extraction,
            placement=patched.placement,
        )


_recorder: TestCaseRecorder | None = None


def get_recorder() -> TestCaseRecorder:
    """Get or create the recorder singleton."""
    global _recorder
    if _recorder is None:
        _recorder = TestCaseRecorder.from_settings(settings)
    return _recorder
