"""Reading the student info file and pulling labeled fields out of it.

Both helpers are pure apart from the single file read in `load_file`, so the
validators can be unit tested with in-memory strings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.models import ExtractedField, FieldLabel, StudentInfoDocument

logger = logging.getLogger(__name__)


class StudentInfoFileNotFound(FileNotFoundError):
    """The given path does not reference a readable file. Fatal."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File '{path}' not found!")
        self.path = path


def load_file(path: Path | str) -> StudentInfoDocument:
    """Read the whole document, or raise `StudentInfoFileNotFound`.

    A leading UTF-8 byte order mark is dropped so the first line can match a label.
    """

    path = Path(path)
    if not path.is_file():
        raise StudentInfoFileNotFound(path)
    try:
        content = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        raise StudentInfoFileNotFound(path) from exc
    return StudentInfoDocument(path=path, content=content)


def extract_field(content: str, label: FieldLabel) -> ExtractedField:
    """Return the value of the first line starting with `<label>:` (any case).

    Later lines with the same label are ignored. The prefix must sit at the
    very start of the line.
    """

    prefix = f"{label.value}:".lower()
    for line in content.splitlines():
        if not line.lower().startswith(prefix):
            continue
        value = line[len(prefix):].strip()
        if not value:
            break
        return ExtractedField(label=label, raw_value=value, present=True)
    return ExtractedField(label=label)
