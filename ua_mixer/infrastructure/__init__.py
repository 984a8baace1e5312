"""
Infrastructure package for the UA Mixer.

Centralizes file I/O at the edge of the core. Keep this layer focused on
reading and writing, decoupled from sanitizer/registry/scheduler logic.
"""

from ua_mixer.infrastructure.text_files import read_text_records, write_text_records

__all__ = [
    "read_text_records",
    "write_text_records",
]
