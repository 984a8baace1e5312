"""
Domain models for the UA Mixer.

`Pool` is the unit the registry stores and the scheduler reads. It is frozen:
the registry swaps in a new value on every update, so a `Pool` handed to a
caller is a snapshot that later mutations never touch.

`MixResult` is the summary contract returned by `ua_mixer.scheduler.mix`.
"""
from __future__ import annotations

from typing import Dict, List, Tuple, TypedDict

from pydantic import BaseModel, Field


class Pool(BaseModel):
    """
    A named, deduplicated, ordered sequence of user-agent records.
    """

    id: str = Field(..., description="Opaque identifier assigned by the registry.")
    name: str = Field(..., min_length=1, description="Display name, unique case-insensitively.")
    records: Tuple[str, ...] = Field(
        default=(), description="Sanitized records in first-occurrence order."
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def key(self) -> str:
        """Case-insensitive lookup key for the pool name."""
        return name_key(self.name)


def name_key(name: str) -> str:
    """Normalize a pool name for case-insensitive comparison."""
    return name.strip().lower()


class MixResult(TypedDict):
    """
    Summary of one interleaving run.

    `secondary_counts` is ordered the way the round-robin pointer visits the
    secondary pools.
    """

    records: List[str]
    total: int
    primary: str
    primary_count: int
    secondary_counts: Dict[str, int]
    rounds: int
    duration_seconds: float


__all__ = ["MixResult", "Pool", "name_key"]
