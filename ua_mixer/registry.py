"""
Pool registry: the named pools a mixing session works with.

The registry is a plain value owned by its caller. It is not thread-safe;
callers sharing one instance must serialize `add_pool`, `remove_pool`,
`set_records`, and `append_records` themselves. Pools it hands out are frozen
snapshots, so passing `list_pools()` to the scheduler is always safe.

Usage:
    from ua_mixer.registry import PoolRegistry

    registry = PoolRegistry.seeded(["iPhone", "Samsung"])
    iphone = registry.find_pool("iphone")
    registry.set_records(iphone.id, pasted_text)
"""

from __future__ import annotations

import itertools
from typing import Dict, Iterable, Iterator, List, Optional, Union

from ua_mixer.domain.errors import DuplicateNameError, InvalidPoolNameError, NotFoundError
from ua_mixer.domain.models import Pool, name_key
from ua_mixer.sanitizer import sanitize, split_lines
from ua_mixer.utils.logging import get_logger

log = get_logger(__name__)

RawRecords = Union[str, Iterable[str]]


def _as_lines(raw: RawRecords) -> List[str]:
    if isinstance(raw, str):
        return split_lines(raw)
    return list(raw)


class PoolRegistry:
    """
    Insertion-ordered mapping of pool id to `Pool`.

    Pool names are unique case-insensitively; ids are assigned from a counter
    private to the registry and never reused.
    """

    def __init__(self) -> None:
        self._pools: Dict[str, Pool] = {}
        self._ids = itertools.count(1)

    @classmethod
    def seeded(cls, names: Iterable[str]) -> "PoolRegistry":
        """Build a registry pre-populated with empty pools, in order."""
        registry = cls()
        for name in names:
            registry.add_pool(name)
        return registry

    def __len__(self) -> int:
        return len(self._pools)

    def __iter__(self) -> Iterator[Pool]:
        return iter(list(self._pools.values()))

    def __contains__(self, pool_id: object) -> bool:
        return pool_id in self._pools

    def _next_id(self) -> str:
        pool_id = str(next(self._ids))
        while pool_id in self._pools:
            pool_id = str(next(self._ids))
        return pool_id

    def add_pool(self, name: str) -> Pool:
        """
        Create an empty pool.

        Raises
        ------
        InvalidPoolNameError
            If `name` is blank.
        DuplicateNameError
            If a pool with the same case-insensitive name exists.
        """
        display_name = name.strip()
        if not display_name:
            raise InvalidPoolNameError(name)
        if self.find_pool(display_name) is not None:
            raise DuplicateNameError(display_name)

        pool = Pool(id=self._next_id(), name=display_name)
        self._pools[pool.id] = pool
        log.debug(f"[REGISTRY] Added pool {pool.name}", extra={"pool_id": pool.id})
        return pool

    def remove_pool(self, pool_id: str) -> Pool:
        """Remove and return a pool, whether or not it holds records."""
        pool = self.get_pool(pool_id)
        del self._pools[pool_id]
        log.debug(
            f"[REGISTRY] Removed pool {pool.name}",
            extra={"pool_id": pool_id, "records": len(pool.records)},
        )
        return pool

    def get_pool(self, pool_id: str) -> Pool:
        try:
            return self._pools[pool_id]
        except KeyError:
            raise NotFoundError(pool_id) from None

    def find_pool(self, name: str) -> Optional[Pool]:
        """Look a pool up by case-insensitive name; None if absent."""
        key = name_key(name)
        for pool in self._pools.values():
            if pool.key == key:
                return pool
        return None

    def set_records(self, pool_id: str, raw: RawRecords) -> Pool:
        """
        Replace a pool's records with the sanitized form of `raw`.

        `raw` is either a line-delimited text block or a sequence of lines.
        """
        pool = self.get_pool(pool_id)
        lines = _as_lines(raw)
        return self._replace(pool, sanitize(lines), received=len(lines))

    def append_records(self, pool_id: str, raw: RawRecords) -> Pool:
        """
        Add records after the existing ones and re-sanitize the whole pool.

        Existing records keep their positions; new lines that duplicate them
        (case-insensitively) are dropped.
        """
        pool = self.get_pool(pool_id)
        lines = _as_lines(raw)
        return self._replace(pool, sanitize([*pool.records, *lines]), received=len(lines))

    def _replace(self, pool: Pool, records: List[str], received: int) -> Pool:
        updated = pool.model_copy(update={"records": tuple(records)})
        self._pools[pool.id] = updated
        log.debug(
            f"[REGISTRY] Updated pool {pool.name}",
            extra={"pool_id": pool.id, "received": received, "records": len(records)},
        )
        return updated

    def list_pools(self) -> List[Pool]:
        """Current pools in insertion order."""
        return list(self._pools.values())


__all__ = ["PoolRegistry", "RawRecords"]
