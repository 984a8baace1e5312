from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import typer

from ua_mixer.config import get_settings
from ua_mixer.domain.errors import MixerError
from ua_mixer.infrastructure.text_files import read_text_records, write_text_records
from ua_mixer.registry import PoolRegistry
from ua_mixer.reporter import print_mix_summary, print_pools
from ua_mixer.sanitizer import sanitize
from ua_mixer.scheduler import mix as run_mix
from ua_mixer.utils.logging import configure_logging, get_logger

app = typer.Typer(help="UA Mixer CLI: sanitize and interleave user-agent pools.")
log = get_logger(__name__)


def _configure() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _parse_pool_option(value: str) -> Tuple[str, Path]:
    name, sep, path = value.partition("=")
    if not sep or not name.strip() or not path.strip():
        raise typer.BadParameter(f"Expected NAME=FILE, got '{value}'.", param_hint="--pool")
    return name.strip(), Path(path.strip())


def _fail(exc: MixerError) -> None:
    typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"primary={settings.primary_pool} pools={', '.join(settings.default_pools)} | "
        f"output={settings.output_file}"
    )


@app.command("sanitize")
def sanitize_file(
    source: Path = typer.Argument(..., help="Text file with one user agent per line."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write cleaned records here instead of stdout."
    ),
) -> None:
    """
    Clean one pool file: trim, drop invalid lines and duplicates.
    """
    _configure()
    try:
        lines = read_text_records(source)
        records = sanitize(lines)
        log.info(
            f"Sanitized {source.name}",
            extra={"received": len(lines), "kept": len(records), "dropped": len(lines) - len(records)},
        )
        if output is not None:
            write_text_records(output, records)
            typer.echo(f"Wrote {len(records)} user agents to {output}.")
        else:
            for record in records:
                typer.echo(record)
    except MixerError as exc:
        _fail(exc)


@app.command("mix")
def mix_pools(
    pool: List[str] = typer.Option(
        [],
        "--pool",
        "-p",
        help="Pool to load, as NAME=FILE. Repeat for several pools or files.",
    ),
    primary: Optional[str] = typer.Option(
        None, "--primary", help="Primary pool name (default from settings)."
    ),
    start: int = typer.Option(0, "--start", help="Secondary pool the round-robin starts at."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output .txt file (default from settings)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the mix result as JSON instead."),
    table: bool = typer.Option(True, "--table/--no-table", help="Show pool and summary tables."),
) -> None:
    """
    Load pool files, interleave them against the primary pool, and export the result.
    """
    _configure()
    settings = get_settings()
    primary_name = settings.primary_pool if primary is None else primary
    specs = [_parse_pool_option(value) for value in pool]

    try:
        registry = PoolRegistry.seeded(settings.default_pools)
        for name, path in specs:
            target = registry.find_pool(name) or registry.add_pool(name)
            registry.append_records(target.id, read_text_records(path))

        if table and not as_json:
            print_pools(registry.list_pools(), primary_name)

        result = run_mix(registry, primary_name=primary_name, start_pointer=start)

        if as_json:
            typer.echo(json.dumps(result, indent=2))
            return
        if table:
            print_mix_summary(result)
        target_path = write_text_records(output or Path(settings.output_file), result["records"])
        typer.echo(f"Mixed {result['total']} user agents successfully! Saved to {target_path}.")
    except MixerError as exc:
        _fail(exc)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
