from __future__ import annotations

import logging
from pathlib import Path
from typing import cast

from jsonmend.core.common.exceptions import DocumentLoadError, JsonRepairError
from jsonmend.core.domain.repair_result import LoadedDocument
from jsonmend.core.services.repair_engine import RepairEngine
from jsonmend.core.services.validation import strict_loads

logger = logging.getLogger(__name__)

REPAIRED_ADVISORY = "JSON was automatically repaired"


class DocumentLoader:
    """
    Loads pasted or uploaded text into a parsed JSON value.

    Text is run through the repair engine first; when the engine had to change
    it the returned document carries a non-fatal advisory for display.
    """

    def __init__(self, engine: RepairEngine | None = None) -> None:
        self._engine = engine or RepairEngine()

    def load_text(self, text: str, *, source: str | None = None) -> LoadedDocument:
        """
        Repair and parse ``text``.

        Args:
            text: Raw document text.
            source: Optional label (e.g. a file name) kept on the document.

        Returns:
            The parsed document.

        Raises:
            DocumentLoadError: If the text is empty or cannot be repaired.
        """
        try:
            result = self._engine.repair(text)
        except JsonRepairError as e:
            raise DocumentLoadError(
                message=f"JSON Repair Error: {e.message}",
                details={**e.details, "source": source, "error_type": type(e).__name__},
            ) from e

        repaired_text = cast(str, result.text)
        if result.changed:
            logger.info("%s: %s", source or "<text>", REPAIRED_ADVISORY)

        return LoadedDocument(
            value=strict_loads(repaired_text),
            text=repaired_text,
            repaired=result.changed,
            advisory=REPAIRED_ADVISORY if result.changed else None,
            source=source,
        )

    def load_file(self, path: str | Path) -> LoadedDocument:
        """Read ``path`` as UTF-8 and load it like :meth:`load_text`."""
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DocumentLoadError(
                message=f"Unable to read {file_path}: {e.strerror or e}",
                details={"source": str(file_path)},
            ) from e
        return self.load_text(text, source=str(file_path))
