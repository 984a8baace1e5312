"""
UA Mixer - sanitize and interleave pools of browser user-agent strings.

The package combines several labeled pools of raw user agents (one per device
source) into a single list balanced against one primary pool:

- Sanitizer: trim, structurally validate, and deduplicate raw lines
- Pool registry: named pools with add/remove/update
- Interleaving scheduler: quota-based round-robin merge against the primary

A small CLI wraps the core with plain-text import/export and rich summaries.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from ua_mixer.config import Settings, get_settings
from ua_mixer.domain import (
    DuplicateNameError,
    EmptyPrimaryError,
    InvalidPoolNameError,
    MixerError,
    MixResult,
    NotFoundError,
    Pool,
    UnsupportedFileError,
)
from ua_mixer.registry import PoolRegistry
from ua_mixer.sanitizer import is_valid_user_agent, sanitize, sanitize_text
from ua_mixer.scheduler import interleave, mix
from ua_mixer.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "MixResult",
    "Pool",
    # Errors
    "DuplicateNameError",
    "EmptyPrimaryError",
    "InvalidPoolNameError",
    "MixerError",
    "NotFoundError",
    "UnsupportedFileError",
    # Core operations
    "PoolRegistry",
    "interleave",
    "is_valid_user_agent",
    "mix",
    "sanitize",
    "sanitize_text",
    # Logging
    "configure_logging",
    "get_logger",
]
