"""Word list reader, one word per line, file order preserved."""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_words(path: str | Path) -> list[str]:
    """Read words from a UTF-8 text file.

    Only LF, CRLF and lone CR end a line; other Unicode separators such as
    form feed or U+2028 stay inside the word. Blank and duplicate lines are
    passed through; a trailing newline does not add an empty word.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()

    words = LINE_BREAK.split(text)
    if words[-1] == "":
        words.pop()
    logger.info("Word list loaded", extra={"path": str(path), "word_count": len(words)})
    return words
