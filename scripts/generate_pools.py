"""
Synthetic user-agent pool generator for the UA Mixer.

Writes one `<device>.txt` file per device with deterministic pseudo-random user
agents. Optional noise (blank lines, junk lines, case-flipped duplicates) gives
the sanitizer something to throw away.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import Dict, List

import typer

app = typer.Typer(help="Generate synthetic user-agent pool files (.txt, one per device).")

_TEMPLATES: Dict[str, str] = {
    "iphone": (
        "Mozilla/5.0 (iPhone; CPU iPhone OS {major}_{minor} like Mac OS X) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/{major}.{minor} "
        "Mobile/15E{build} Safari/604.1"
    ),
    "samsung": (
        "Mozilla/5.0 (Linux; Android {android}; SM-S{model}B) AppleWebKit/537.36 "
        "(KHTML, like Gecko) SamsungBrowser/{major}.{minor} Chrome/{chrome}.0.{build}.0 "
        "Mobile Safari/537.36"
    ),
    "motorola": (
        "Mozilla/5.0 (Linux; Android {android}; moto g({model})) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/{chrome}.0.{build}.0 Mobile Safari/537.36"
    ),
}
_JUNK_LINES = ["", "   ", "curl/8.4.0", "not a user agent", "Wget/1.21.4 (linux-gnu)"]


def _render(template: str, rng: random.Random) -> str:
    return template.format(
        major=rng.randint(14, 18),
        minor=rng.randint(0, 7),
        build=rng.randint(100, 9999),
        android=rng.randint(10, 14),
        model=rng.randint(100, 999),
        chrome=rng.randint(110, 130),
    )


def _generate_pool_lines(device: str, count: int, seed: int, noise: float = 0.0) -> List[str]:
    """
    Build `count` distinct user agents for `device`, plus noise lines.

    Unknown device names fall back to the Motorola (generic Android) template.
    """
    rng = random.Random(f"{seed}:{device.lower()}")
    template = _TEMPLATES.get(device.lower(), _TEMPLATES["motorola"])

    lines: List[str] = []
    seen: set[str] = set()
    attempts = 0
    while len(seen) < count and attempts < count * 50:
        attempts += 1
        agent = _render(template, rng)
        if agent.lower() in seen:
            continue
        seen.add(agent.lower())
        lines.append(agent)
        if noise and rng.random() < noise:
            lines.append(rng.choice([rng.choice(_JUNK_LINES), agent.upper(), f"  {agent}  "]))
    return lines


def _write_pool(path: Path, lines: List[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write("\n".join(lines))


@app.command()
def main(
    devices: List[str] = typer.Option(
        ["iPhone", "Samsung", "Motorola"],
        "--device",
        "-d",
        help="Device pool to generate. Repeat for several.",
    ),
    count: int = typer.Option(
        100,
        "--count",
        "-c",
        help="Valid user agents per device.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    noise: float = typer.Option(
        0.0,
        "--noise",
        min=0.0,
        max=1.0,
        help="Probability of following each agent with a junk or duplicate line.",
    ),
    output_dir: Path = typer.Option(
        Path("pools"),
        "--output-dir",
        "-o",
        help="Directory the .txt files are written to.",
    ),
) -> None:
    """
    Generate one synthetic user-agent file per device.
    """
    start = time.perf_counter()
    for device in devices:
        lines = _generate_pool_lines(device, count=count, seed=seed, noise=noise)
        path = output_dir / f"{device.lower()}.txt"
        _write_pool(path, lines)
        typer.echo(f"{device}: {len(lines):,} lines -> {path}")
    typer.echo(f"Generated {len(devices)} pools in {time.perf_counter() - start:.2f}s (seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
