"""
Domain package for the UA Mixer.

Exports the pool model, the mix summary contract, and the error taxonomy used
across the registry, scheduler, and CLI.
"""

from ua_mixer.domain.errors import (
    DuplicateNameError,
    EmptyPrimaryError,
    InvalidPoolNameError,
    MixerError,
    NotFoundError,
    UnsupportedFileError,
)
from ua_mixer.domain.models import MixResult, Pool, name_key

__all__ = [
    "DuplicateNameError",
    "EmptyPrimaryError",
    "InvalidPoolNameError",
    "MixResult",
    "MixerError",
    "NotFoundError",
    "Pool",
    "UnsupportedFileError",
    "name_key",
]
