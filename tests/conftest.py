"""
Pytest configuration for the UA Mixer.

Provides fixtures for:
- Settings isolation (cached settings are rebuilt per test)
- Realistic user-agent samples per device
- Registries seeded with the default device pools
- Pool files on disk for CLI tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Generator, List

import pytest

from ua_mixer.config import Settings, get_settings
from ua_mixer.registry import PoolRegistry

IPHONE_AGENTS = [
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 16_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.6 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 15_7 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/15.7 Mobile/15E148 Safari/604.1",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_4 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Mobile/15E148 Safari/604.1",
]
SAMSUNG_AGENTS = [
    "Mozilla/5.0 (Linux; Android 14; SM-S918B) AppleWebKit/537.36 (KHTML, like Gecko) "
    "SamsungBrowser/23.0 Chrome/115.0.0.0 Mobile Safari/537.36",
    "Mozilla/5.0 (Linux; Android 13; SM-A546B) AppleWebKit/537.36 (KHTML, like Gecko) "
    "SamsungBrowser/22.0 Chrome/111.0.5563.116 Mobile Safari/537.36",
]
MOTOROLA_AGENTS = [
    "Mozilla/5.0 (Linux; Android 13; moto g(84) 5G) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Mobile Safari/537.36",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Drop cached settings and mixer env overrides around every test.
    """
    for var in ("MIXER_PRIMARY_POOL", "MIXER_DEFAULT_POOLS", "MIXER_OUTPUT_FILE", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # CLI runs attach a handler bound to a captured stream; detach it.
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(log_level="DEBUG", primary_pool="iPhone")


@pytest.fixture
def device_agents() -> Dict[str, List[str]]:
    """Realistic user agents keyed by device pool name."""
    return {
        "iPhone": list(IPHONE_AGENTS),
        "Samsung": list(SAMSUNG_AGENTS),
        "Motorola": list(MOTOROLA_AGENTS),
    }


@pytest.fixture
def empty_registry(test_settings: Settings) -> PoolRegistry:
    """Registry seeded with the default device pools, all empty."""
    return PoolRegistry.seeded(test_settings.default_pools)


@pytest.fixture
def filled_registry(
    empty_registry: PoolRegistry, device_agents: Dict[str, List[str]]
) -> PoolRegistry:
    """Default device pools loaded with the sample agents."""
    for name, agents in device_agents.items():
        pool = empty_registry.find_pool(name)
        assert pool is not None
        empty_registry.set_records(pool.id, agents)
    return empty_registry


@pytest.fixture
def write_pool_file(tmp_path: Path) -> Callable[[str, List[str]], Path]:
    """Write raw lines to `<tmp>/<name>.txt` and return the path."""

    def _write(name: str, lines: List[str]) -> Path:
        path = tmp_path / f"{name.lower()}.txt"
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
