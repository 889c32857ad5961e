"""
Document Patcher - splice recorded test cases into the context document

The context document is a markdown file that people edit by hand. Patching
only ever inserts text: everything outside the inserted span is kept
byte-for-byte. Headings are found by plain substring search, so anchor text
quoted in prose counts as the anchor too.

Placement (first applicable wins):
1. Anchor heading present: before the next top-level "## " heading after it,
   or at the end of the document when none follows.
2. Fallback heading present: right before the fallback heading.
3. Otherwise: appended at the end.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import structlog

from recorder_dashboard.core.extractor import ExtractionResult

logger = structlog.get_logger()

TOP_LEVEL_HEADING = "\n## "

DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")


class Placement(str, Enum):
    """Where a block ended up in the document."""

    ANCHOR_SECTION = "anchor_section"  # before the heading following the anchor
    ANCHOR_DOCUMENT_END = "anchor_document_end"  # anchor is in the last section
    BEFORE_FALLBACK = "before_fallback"
    DOCUMENT_END = "document_end"


@dataclass
class TestCaseRecord:
    """Metadata for one recorded test case."""

    name: str
    description: Any = ""
    steps: Any = ""
    browser: Any = ""
    url: Any = ""
    timestamp: str | int | float | None = None
    test_case_type: str | None = None
    playwright_code: str | None = ""


@dataclass
class InsertionPoint:
    """Offset in the document plus the separator that follows the block."""

    index: int
    suffix: str
    placement: Placement


@dataclass
class PatchResult:
    """Outcome of a patch: the new document and what was inserted where."""

    document: str
    inserted: str
    index: int
    placement: Placement


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def format_recorded_at(timestamp: str | int | float | None) -> str:
    """
    Render a timestamp in local display format, e.g. "1/15/2024, 10:30:00 AM".

    Accepts ISO-8601 strings and epoch milliseconds. Naive date-time strings
    are taken as local time, date-only strings as UTC midnight, aware ones are
    converted to local time. Values that cannot be parsed are returned
    unchanged.
    """
    if timestamp is None:
        return ""

    try:
        if isinstance(timestamp, bool):
            return str(timestamp)
        if isinstance(timestamp, (int, float)):
            moment = datetime.fromtimestamp(timestamp / 1000)
        else:
            moment = datetime.fromisoformat(timestamp.strip().replace("Z", "+00:00"))
            if DATE_ONLY.fullmatch(timestamp.strip()):
                moment = moment.replace(tzinfo=timezone.utc)
            if moment.tzinfo is not None:
                moment = moment.astimezone()
    except (ValueError, OverflowError, OSError):
        return str(timestamp)

    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )


class DocumentPatcher:
    """
    Renders test case records as markdown and inserts them into a document.
    """

    def __init__(
        self,
        anchor_heading: str = "### Contact Us Tests",
        fallback_heading: str = "## UI Test Data",
        default_test_case_type: str = "UI",
        fence_language: str = "typescript",
    ):
        self.anchor_heading = anchor_heading
        self.fallback_heading = fallback_heading
        self.default_test_case_type = default_test_case_type
        self.fence_language = fence_language

    def render_elements(self, name: str, extraction: ExtractionResult) -> str:
        """Page elements fragment; empty string when nothing was extracted."""
        if not extraction:
            return ""

        lines = [f'{element.display_name} = "{element.selector}"' for element in extraction]
        return (
            f"\n\n### {name} Page Elements\n\n"
            f"```{self.fence_language}\n" + "\n".join(lines) + "\n```"
        )

    def render_test(self, record: TestCaseRecord) -> str:
        """Test case fragment, always rendered."""
        test_case_type = record.test_case_type or self.default_test_case_type
        return (
            f"\n\n### {record.name} Test\n\n"
            f"**{record.name}**: {_text(record.description)}\n"
            f"- Type: {test_case_type}\n"
            f"- {_text(record.steps)}\n"
            f"- Browser: {_text(record.browser)}\n"
            f"- URL: {_text(record.url)}\n"
            f"- Recorded: {format_recorded_at(record.timestamp)}"
        )

    def render_block(self, record: TestCaseRecord, extraction: ExtractionResult) -> str:
        return self.render_elements(record.name, extraction) + self.render_test(record)

    def find_insertion(self, document: str) -> InsertionPoint:
        """Decide where a new block goes in `document`."""
        anchor_index = document.find(self.anchor_heading)
        if anchor_index != -1:
            next_section = document.find(TOP_LEVEL_HEADING, anchor_index + 1)
            if next_section != -1:
                return InsertionPoint(next_section, "\n", Placement.ANCHOR_SECTION)
            return InsertionPoint(len(document), "", Placement.ANCHOR_DOCUMENT_END)

        fallback_index = document.find(self.fallback_heading)
        if fallback_index != -1:
            return InsertionPoint(fallback_index, "\n\n", Placement.BEFORE_FALLBACK)

        return InsertionPoint(len(document), "", Placement.DOCUMENT_END)

    def splice(self, document: str, block: str) -> PatchResult:
        """Insert an already rendered block into `document`."""
        point = self.find_insertion(document)
        inserted = block + point.suffix
        patched = document[: point.index] + inserted + document[point.index :]

        logger.info(
            "document_patched",
            placement=point.placement.value,
            index=point.index,
            inserted_chars=len(inserted),
        )

        return PatchResult(
            document=patched,
            inserted=inserted,
            index=point.index,
            placement=point.placement,
        )

    def apply(
        self,
        document: str,
        record: TestCaseRecord,
        extraction: ExtractionResult,
    ) -> PatchResult:
        """Render `record` and splice it into `document`."""
        return self.splice(document, self.render_block(record, extraction))

    def patch(
        self,
        document: str,
        record: TestCaseRecord,
        extraction: ExtractionResult,
    ) -> str:
        """Return the full replacement document."""
        return self.apply(document, record, extraction).document
