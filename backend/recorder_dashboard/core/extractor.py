"""
Locator Extractor - scrape UI element references from recorded code

Scans Playwright code (as emitted by codegen, JavaScript/TypeScript or Python
flavour) and returns the element selectors it touches, each tagged with a
best-effort category used to name it in the project context document.

Behaviour worth knowing:
- Patterns are scanned one at a time, in LOCATOR_PATTERNS order. Every match
  of an earlier pattern is numbered before any match of a later pattern, even
  when the later match appears first in the text.
- Categories come from substring heuristics and are frequently wrong for
  text/role based locators. They are labels, not semantics.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

import structlog

logger = structlog.get_logger()


class ElementCategory(str, Enum):
    """Heuristic element categories, used as display name prefixes."""

    BUTTON = "BUTTON"
    TEXTBOX = "TEXTBOX"
    INPUT = "INPUT"
    ICON = "ICON"
    LINK = "LINK"
    ELEMENT = "ELEMENT"


class LocatorPattern(str, Enum):
    """Kinds of locator calls recognised in recorded code."""

    LOCATOR = "locator"
    ROLE = "role"
    TEXT = "text"
    LABEL = "label"
    PLACEHOLDER = "placeholder"
    CLICK = "click"
    FILL = "fill"
    TYPE = "type"


# Scan order matters: it decides which occurrence of a selector is "first".
LOCATOR_PATTERNS: list[tuple[LocatorPattern, re.Pattern]] = [
    (
        LocatorPattern.LOCATOR,
        re.compile(r"""page\.locator\(['"](?P<selector>[^'"]+)['"]\)"""),
    ),
    (
        # Captures the accessible name, not the role
        LocatorPattern.ROLE,
        re.compile(
            r"""page\.(?:getByRole|get_by_role)\(['"]\w+['"]\s*,\s*"""
            r"""(?:\{\s*name:\s*|name\s*=\s*)['"](?P<selector>[^'"]+)['"]"""
        ),
    ),
    (
        LocatorPattern.TEXT,
        re.compile(r"""page\.(?:getByText|get_by_text)\(['"](?P<selector>[^'"]+)['"]\)"""),
    ),
    (
        LocatorPattern.LABEL,
        re.compile(r"""page\.(?:getByLabel|get_by_label)\(['"](?P<selector>[^'"]+)['"]\)"""),
    ),
    (
        LocatorPattern.PLACEHOLDER,
        re.compile(
            r"""page\.(?:getByPlaceholder|get_by_placeholder)\(['"](?P<selector>[^'"]+)['"]\)"""
        ),
    ),
    (
        LocatorPattern.CLICK,
        re.compile(r"""page\.click\(['"](?P<selector>[^'"]+)['"]\)"""),
    ),
    (
        LocatorPattern.FILL,
        re.compile(r"""page\.fill\(['"](?P<selector>[^'"]+)['"]"""),
    ),
    (
        LocatorPattern.TYPE,
        re.compile(r"""page\.type\(['"](?P<selector>[^'"]+)['"]"""),
    ),
]

# `...('<selector>').click(` or `...{ name: '<selector>' }).click(`
_CHAINED_ACTION = r"""['"]{selector}['"]\s*\}}?\s*\)\s*\.{action}\("""
# `.click('<selector>'`
_DIRECT_ACTION = r"""\.{action}\(\s*['"]{selector}['"]"""


def _invokes(action: str, selector: str, source: str) -> bool:
    """Check whether `source` performs `action` on exactly `selector`."""
    escaped = re.escape(selector)
    for template in (_CHAINED_ACTION, _DIRECT_ACTION):
        if re.search(template.format(selector=escaped, action=action), source):
            return True
    return False


def _contains(*needles: str) -> Callable[[str, str], bool]:
    def predicate(selector: str, source: str) -> bool:
        return any(needle in selector for needle in needles)

    return predicate


ClassificationRule = tuple[str, Callable[[str, str], bool], ElementCategory]

# Evaluated top to bottom, first match wins.
CLASSIFICATION_RULES: list[ClassificationRule] = [
    ("clicked", lambda sel, src: _invokes("click", sel, src), ElementCategory.BUTTON),
    ("filled", lambda sel, src: _invokes("fill", sel, src), ElementCategory.TEXTBOX),
    ("input_selector", _contains("input"), ElementCategory.INPUT),
    ("button_selector", _contains("button", "btn"), ElementCategory.BUTTON),
    ("icon_selector", _contains("icon"), ElementCategory.ICON),
    ("link_selector", _contains("link", "a["), ElementCategory.LINK),
]


def classify(selector: str, source: str) -> ElementCategory:
    """Assign a category to `selector` as it is used within `source`."""
    for _, predicate, category in CLASSIFICATION_RULES:
        if predicate(selector, source):
            return category
    return ElementCategory.ELEMENT


@dataclass(frozen=True)
class ElementReference:
    """One UI element discovered in recorded code."""

    selector: str
    category: ElementCategory
    ordinal: int
    pattern: LocatorPattern

    @property
    def display_name(self) -> str:
        return f"{self.category.value}_{self.ordinal}"

    def to_dict(self) -> dict:
        return {
            "name": self.display_name,
            "selector": self.selector,
            "category": self.category.value,
            "pattern": self.pattern.value,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Elements in discovery order."""

    elements: tuple[ElementReference, ...] = ()

    def __iter__(self) -> Iterator[ElementReference]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> ElementReference:
        return self.elements[index]

    @property
    def selectors(self) -> list[str]:
        return [element.selector for element in self.elements]

    def to_dicts(self) -> list[dict]:
        return [element.to_dict() for element in self.elements]


class LocatorExtractor:
    """
    Pulls element selectors out of recorded Playwright code.

    Usage:
        result = LocatorExtractor().extract("page.locator('#submitBtn').click();")
        result[0].display_name  # "BUTTON_1"
    """

    def __init__(
        self,
        patterns: list[tuple[LocatorPattern, re.Pattern]] | None = None,
    ):
        self.patterns = patterns if patterns is not None else LOCATOR_PATTERNS

    def extract(self, source: str) -> ExtractionResult:
        """
        Extract unique element references from `source`.

        Args:
            source: Recorded automation code

        Returns:
            ExtractionResult, empty when nothing matches
        """
        # dict keeps first-seen order; keys double as the dedup set
        found: dict[str, ElementReference] = {}

        for kind, regex in self.patterns:
            for match in regex.finditer(source or ""):
                selector = match.group("selector")
                if selector in found:
                    continue

                found[selector] = ElementReference(
                    selector=selector,
                    category=classify(selector, source),
                    ordinal=len(found) + 1,
                    pattern=kind,
                )

        result = ExtractionResult(elements=tuple(found.values()))
        logger.debug("elements_extracted", count=len(result))
        return result


def extract_elements(source: str) -> ExtractionResult:
    """Extract elements using the default pattern set."""
    return LocatorExtractor().extract(source)
