"""JSON result writer for scraped entries."""

import json
import logging
from pathlib import Path

from domain.model.entry import Entry

logger = logging.getLogger(__name__)

JSON_INDENT = 2


def serialize_entries(entries: list[Entry]) -> str:
    """Render entries as a pretty-printed JSON array, input order kept."""
    return json.dumps([entry.to_dict() for entry in entries], indent=JSON_INDENT, ensure_ascii=False)


def write_entries(path: str | Path, entries: list[Entry]) -> str:
    """Write entries to path in a single write call.

    Returns:
        The path written, as given.

    Raises:
        OSError: On any write failure. A partially written file is left as-is.
    """
    content = serialize_entries(entries)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Result file written", extra={"path": str(path), "entry_count": len(entries)})
    return str(path)


def load_entries(path: str | Path) -> list[Entry]:
    """Read back a result file written by write_entries."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return [Entry.from_dict(item) for item in data]
