"""
File-backed storage for the project context document.
"""

from pathlib import Path

import structlog

logger = structlog.get_logger()


class ContextDocumentError(Exception):
    """Base error for context document access."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class DocumentNotFoundError(ContextDocumentError):
    """Raised when the context document does not exist."""


class DocumentUnreadableError(ContextDocumentError):
    """Raised when the context document exists but cannot be read as UTF-8 text."""


class ContextDocumentStore:
    """
    Reads and writes the context document as-is.

    Newlines are never translated, so a patched document differs from the
    file on disk only by the inserted text.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> str:
        if not self.exists():
            logger.warning("context_document_missing", path=str(self.path))
            raise DocumentNotFoundError(f"{self.name} file not found", self.path)

        try:
            with self.path.open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            # removed after the existence check
            raise DocumentNotFoundError(f"{self.name} file not found", self.path)
        except (UnicodeDecodeError, OSError) as e:
            logger.warning("context_document_unreadable", path=str(self.path), error=str(e))
            raise DocumentUnreadableError(f"{self.name} could not be read: {e}", self.path) from e

    def save(self, content: str) -> None:
        with self.path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)

        logger.debug("context_document_written", path=str(self.path), chars=len(content))
