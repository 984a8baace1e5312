"""
Interleaving scheduler: merge every pool into one proportionally balanced list.

One pool is the primary; every other pool holding records is a secondary. The
merge runs in rounds. Each round emits a quota of primary records,

    quota = ceil(remaining_primary / (remaining_secondary_total + 1))

followed by exactly one record from the next non-exhausted secondary pool in a
fixed cycle. The cycle pointer survives across rounds. Recomputing the quota
every round spreads the primary records evenly between the secondary ones as
both sides shrink; nothing here is random.

Usage:
    from ua_mixer.scheduler import interleave, mix

    records = interleave(registry.list_pools(), "iPhone")
    summary = mix(registry)  # primary name from settings, logged and timed
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ua_mixer.config import get_settings
from ua_mixer.domain.errors import DuplicateNameError, EmptyPrimaryError, MixerError
from ua_mixer.domain.models import MixResult, Pool, name_key
from ua_mixer.registry import PoolRegistry
from ua_mixer.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class _MergeTrace:
    """What the merge loop did, for the `mix` summary."""

    records: List[str] = field(default_factory=list)
    rounds: int = 0
    secondary_counts: Dict[str, int] = field(default_factory=dict)


def _split_pools(pools: Iterable[Pool], primary_name: str) -> Tuple[Pool, List[Pool]]:
    """
    Pick the primary pool and the non-empty secondaries, in input order.

    Raises EmptyPrimaryError when the primary is absent or empty, and
    DuplicateNameError when more than one pool answers to the primary name.
    """
    key = name_key(primary_name)
    primary: Optional[Pool] = None
    secondaries: List[Pool] = []
    for pool in pools:
        if pool.key == key:
            if primary is not None:
                raise DuplicateNameError(pool.name)
            primary = pool
        elif pool.records:
            secondaries.append(pool)

    if primary is None or not primary.records:
        raise EmptyPrimaryError(primary_name)
    return primary, secondaries


def _quota(remaining_primary: int, remaining_secondary: int) -> int:
    return -(-remaining_primary // (remaining_secondary + 1))


def _merge(primary: Pool, secondaries: Sequence[Pool], start_pointer: int = 0) -> _MergeTrace:
    trace = _MergeTrace(secondary_counts={pool.name: 0 for pool in secondaries})
    if not secondaries:
        trace.records = list(primary.records)
        trace.rounds = 1
        return trace

    # Local working copies; the pools themselves are never touched.
    primary_queue: Deque[str] = deque(primary.records)
    queues: List[Deque[str]] = [deque(pool.records) for pool in secondaries]
    remaining_secondary = sum(len(queue) for queue in queues)
    pointer = start_pointer % len(queues)
    emitted = trace.records

    while primary_queue or remaining_secondary:
        trace.rounds += 1
        for _ in range(_quota(len(primary_queue), remaining_secondary)):
            if not primary_queue:
                break
            emitted.append(primary_queue.popleft())

        if not remaining_secondary:
            continue
        for _ in range(len(queues)):
            index = pointer
            pointer = (pointer + 1) % len(queues)
            if queues[index]:
                emitted.append(queues[index].popleft())
                trace.secondary_counts[secondaries[index].name] += 1
                remaining_secondary -= 1
                break

    return trace


def interleave(pools: Iterable[Pool], primary_name: str, start_pointer: int = 0) -> List[str]:
    """
    Merge `pools` into one list balanced against the `primary_name` pool.

    Parameters
    ----------
    pools : iterable[Pool]
        Pool snapshots; their order is the secondary round-robin order.
    primary_name : str
        Name of the primary pool, matched case-insensitively.
    start_pointer : int
        Index (modulo the number of non-empty secondaries) the round-robin
        cycle starts from.

    Returns
    -------
    List[str]
        Every record of the primary and non-empty secondary pools, exactly
        once. Primary records keep their relative order, as do the records of
        each secondary pool.

    Raises
    ------
    EmptyPrimaryError
        If no pool is named `primary_name` or that pool has no records.
    """
    primary, secondaries = _split_pools(pools, primary_name)
    return _merge(primary, secondaries, start_pointer).records


def mix(
    source: Union[PoolRegistry, Iterable[Pool]],
    primary_name: Optional[str] = None,
    start_pointer: int = 0,
) -> MixResult:
    """
    Run `interleave` over a registry (or pool list) and summarize the run.

    The primary name defaults to `Settings.primary_pool`. Failures are logged
    and re-raised unchanged.
    """
    if primary_name is None:
        primary_name = get_settings().primary_pool
    pools = source.list_pools() if isinstance(source, PoolRegistry) else list(source)

    log.info(
        f"[MIX START] primary={primary_name}",
        extra={"primary": primary_name, "pools": len(pools), "start_pointer": start_pointer},
    )
    start_time = time.perf_counter()
    try:
        primary, secondaries = _split_pools(pools, primary_name)
        trace = _merge(primary, secondaries, start_pointer)
    except MixerError as exc:
        log.error(
            f"[MIX FAILED] {exc}",
            extra={"primary": primary_name, "error_type": type(exc).__name__},
        )
        raise
    duration_seconds = time.perf_counter() - start_time

    result = MixResult(
        records=trace.records,
        total=len(trace.records),
        primary=primary.name,
        primary_count=len(primary.records),
        secondary_counts=trace.secondary_counts,
        rounds=trace.rounds,
        duration_seconds=round(duration_seconds, 6),
    )
    log.info(
        f"[MIX SUCCESS] Mixed {result['total']} user agents",
        extra={
            "primary": result["primary"],
            "total": result["total"],
            "secondary_pools": len(secondaries),
            "rounds": result["rounds"],
        },
    )
    return result


__all__ = ["interleave", "mix"]
