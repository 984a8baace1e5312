from __future__ import annotations

import pytest

from ua_mixer.domain.errors import DuplicateNameError, InvalidPoolNameError, NotFoundError
from ua_mixer.registry import PoolRegistry

AGENT_A = "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0"
AGENT_B = "Mozilla/5.0 (Linux; Android 13; SM-A546B) AppleWebKit/537.36 Chrome/111.0"
AGENT_C = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15"
DEFAULT_POOL_COUNT = 3


def test_seeded_registry_lists_pools_in_order(empty_registry: PoolRegistry):
    names = [pool.name for pool in empty_registry.list_pools()]
    assert names == ["iPhone", "Samsung", "Motorola"]
    assert len(empty_registry) == DEFAULT_POOL_COUNT
    assert all(pool.records == () for pool in empty_registry)


def test_add_pool_assigns_unique_ids_and_trims_name():
    registry = PoolRegistry()
    first = registry.add_pool("  Pixel ")
    second = registry.add_pool("Xiaomi")
    assert first.name == "Pixel"
    assert first.id != second.id
    assert first.id in registry
    assert [pool.id for pool in registry.list_pools()] == [first.id, second.id]


def test_add_pool_rejects_case_insensitive_duplicate(empty_registry: PoolRegistry):
    before = empty_registry.list_pools()
    with pytest.raises(DuplicateNameError) as excinfo:
        empty_registry.add_pool(" IPHONE ")
    assert excinfo.value.name == "IPHONE"
    assert empty_registry.list_pools() == before


def test_add_pool_rejects_blank_name(empty_registry: PoolRegistry):
    with pytest.raises(InvalidPoolNameError):
        empty_registry.add_pool("   ")
    assert len(empty_registry) == DEFAULT_POOL_COUNT


def test_remove_pool_returns_removed_pool_even_with_records(filled_registry: PoolRegistry):
    samsung = filled_registry.find_pool("samsung")
    assert samsung is not None and samsung.records

    removed = filled_registry.remove_pool(samsung.id)

    assert removed.name == "Samsung"
    assert samsung.id not in filled_registry
    assert filled_registry.find_pool("Samsung") is None


def test_remove_unknown_pool_raises_not_found(empty_registry: PoolRegistry):
    with pytest.raises(NotFoundError) as excinfo:
        empty_registry.remove_pool("missing")
    assert excinfo.value.pool_id == "missing"
    assert str(excinfo.value) == "Unknown pool id 'missing'."
    assert len(empty_registry) == DEFAULT_POOL_COUNT


def test_not_found_is_also_a_key_error(empty_registry: PoolRegistry):
    with pytest.raises(KeyError):
        empty_registry.get_pool("missing")


def test_ids_are_not_reused_after_removal():
    registry = PoolRegistry()
    first = registry.add_pool("One")
    registry.remove_pool(first.id)
    second = registry.add_pool("One")
    assert second.id != first.id


def test_set_records_sanitizes_text_block(empty_registry: PoolRegistry):
    pool = empty_registry.find_pool("iPhone")
    assert pool is not None

    updated = empty_registry.set_records(pool.id, f"{AGENT_C}\r\n\nshort\n {AGENT_C.lower()} ")

    assert updated.records == (AGENT_C,)
    assert empty_registry.get_pool(pool.id).records == (AGENT_C,)


def test_set_records_replaces_existing_records(empty_registry: PoolRegistry):
    pool = empty_registry.add_pool("Pixel")
    empty_registry.set_records(pool.id, [AGENT_A, AGENT_B])
    updated = empty_registry.set_records(pool.id, [AGENT_C])
    assert updated.records == (AGENT_C,)


def test_set_records_unknown_pool_raises_not_found(empty_registry: PoolRegistry):
    with pytest.raises(NotFoundError):
        empty_registry.set_records("missing", [AGENT_A])


def test_append_records_keeps_existing_order_and_drops_duplicates(empty_registry: PoolRegistry):
    pool = empty_registry.add_pool("Pixel")
    empty_registry.set_records(pool.id, [AGENT_A, AGENT_B])

    updated = empty_registry.append_records(pool.id, f"{AGENT_B.upper()}\n{AGENT_C}\n")

    assert updated.records == (AGENT_A, AGENT_B, AGENT_C)


def test_pools_handed_out_are_snapshots(empty_registry: PoolRegistry):
    pool = empty_registry.find_pool("Motorola")
    assert pool is not None
    empty_registry.set_records(pool.id, [AGENT_A])
    assert pool.records == ()


def test_find_pool_is_case_insensitive_and_trimmed(empty_registry: PoolRegistry):
    assert empty_registry.find_pool("  samSUNG ").name == "Samsung"
    assert empty_registry.find_pool("Nokia") is None
