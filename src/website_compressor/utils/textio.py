"""Whole-file text reads and in-place writes."""

import logging
import os
from pathlib import Path

DEFAULT_CHARSET = "utf-8"

logger = logging.getLogger(__name__)


def resolve_charset(name: str | None) -> str:
    """Return `name` if it is a usable text encoding, otherwise UTF-8."""
    if not name:
        return DEFAULT_CHARSET
    try:
        # Rejects unknown names as well as bytes-to-bytes codecs such as base64.
        "".encode(name)
    except LookupError:
        logger.debug(f"Unsupported charset {name!r}, falling back to {DEFAULT_CHARSET}")
        return DEFAULT_CHARSET
    return name


def read_text(path: str | Path, charset: str) -> str:
    """Read a file line by line, terminating every line with the host separator.

    Line endings are normalized to `os.linesep` before the content reaches a
    compressor, and a non-empty result always ends with a separator.
    """
    lines = []
    with open(path, "r", encoding=charset) as f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
            lines.append(line)
            lines.append(os.linesep)
    return "".join(lines)


def write_text(path: str | Path, text: str, charset: str) -> None:
    """Overwrite `path` with `text`, encoded with `charset` and written verbatim."""
    with open(path, "w", encoding=charset, newline="") as f:
        f.write(text)
