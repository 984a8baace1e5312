"""
Plain-text import/export for pools and mix results.

Files are UTF-8, one user agent per line; a leading byte-order mark is
dropped on read. Reading returns raw lines; the registry sanitizes them.
Writing joins records with "\\n" and no trailing newline, the same layout the
mixed-user-agents.txt export always had.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from ua_mixer.domain.errors import UnsupportedFileError
from ua_mixer.sanitizer import split_lines
from ua_mixer.utils.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]
TEXT_SUFFIX = ".txt"


def _require_text_path(path: PathLike) -> Path:
    resolved = Path(path)
    if resolved.suffix.lower() != TEXT_SUFFIX:
        raise UnsupportedFileError(str(path))
    return resolved


def read_text_records(path: PathLike) -> List[str]:
    """Read the raw, unsanitized lines of a .txt pool file."""
    source = _require_text_path(path)
    with source.open("r", encoding="utf-8-sig") as f:
        lines = split_lines(f.read())
    log.debug("Read pool file", extra={"path": str(source), "lines": len(lines)})
    return lines


def write_text_records(path: PathLike, records: Sequence[str]) -> Path:
    """Write records to a .txt file, creating parent directories as needed."""
    target = _require_text_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8", newline="") as f:
        f.write("\n".join(records))
    log.info("Mixed user agents written", extra={"path": str(target), "records": len(records)})
    return target


__all__ = ["read_text_records", "write_text_records"]
