"""
User-agent sanitizer: trim, structurally validate, and deduplicate raw lines.

A record is kept only if it is longer than 20 characters and mentions one of
the browser engine markers below (case-insensitively). Everything else is
dropped without raising; callers see a shorter list, nothing more.

Usage:
    from ua_mixer.sanitizer import sanitize, sanitize_text

    sanitize(["", "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X)"])
    sanitize_text(open("iphone.txt").read())
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

MIN_RECORD_LENGTH = 20
RECORD_MARKERS = ("mozilla", "applewebkit", "chrome")

_LINE_BREAK = re.compile(r"\r?\n")
# Whitespace plus the byte-order mark, which str.strip() leaves in place.
_EDGE_PADDING = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def is_valid_user_agent(record: str) -> bool:
    """Structural check only; the string is never parsed."""
    if not isinstance(record, str) or len(record) <= MIN_RECORD_LENGTH:
        return False
    lowered = record.lower()
    return any(marker in lowered for marker in RECORD_MARKERS)


def _iter_lines(lines: Iterable[str]) -> Iterator[str]:
    for raw in lines:
        yield from _LINE_BREAK.split(raw)


def sanitize(lines: Iterable[str]) -> List[str]:
    """
    Clean one pool's raw lines.

    Elements holding line breaks are split into separate lines first. Lines
    are trimmed of whitespace and byte-order marks, blank and structurally
    invalid ones are discarded, and case-insensitive duplicates are removed
    keeping the first occurrence. Survivors keep their input order.
    """
    seen: set[str] = set()
    cleaned: List[str] = []
    for raw in _iter_lines(lines):
        record = _EDGE_PADDING.sub("", raw)
        if not record or not is_valid_user_agent(record):
            continue
        key = record.lower()
        if key in seen:
            continue
        seen.add(key)
        cleaned.append(record)
    return cleaned


def split_lines(text: str) -> List[str]:
    """Split a pasted or uploaded text block into lines, dropping empty ones."""
    return [line for line in _LINE_BREAK.split(text) if line]


def sanitize_text(text: str) -> List[str]:
    """Sanitize a line-delimited text block."""
    return sanitize(split_lines(text))


__all__ = [
    "MIN_RECORD_LENGTH",
    "RECORD_MARKERS",
    "is_valid_user_agent",
    "sanitize",
    "sanitize_text",
    "split_lines",
]
