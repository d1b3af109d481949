"""Command line interface for stintvid using Typer."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from pydantic import BaseModel, ValidationError

from ._typer import bad_parameter
from .config import Settings, load_settings
from .types import parse_span
from .utils.duration import DurationParseError, duration_to_length
from .utils.logging import get_logger

app = typer.Typer(help="Utilities for assembling stint videos")
logger = logging.getLogger(__name__)


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys:
        if not isinstance(current, BaseModel) or key not in type(current).model_fields:
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)


def _with_overrides(settings: Settings, overrides: List[str]) -> Settings:
    """Return ``settings`` updated by ``section.key=value`` strings.

    Values stay strings; the settings model coerces them.
    """

    data: Dict[str, Any] = settings.model_dump()
    for override in overrides:
        key, sep, raw_value = override.partition("=")
        if not sep:
            raise typer.BadParameter(
                "overrides must be of the form --set section.key=value"
            )
        if not key:
            raise typer.BadParameter("override key cannot be empty")
        keys = key.split(".")
        _ensure_path(settings, keys)
        target = data
        for part in keys[:-1]:
            target = target[part]
        target[keys[-1]] = raw_value
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid configuration override: {exc}") from exc


def _format(seconds: float, precision: int) -> str:
    return f"{seconds:.{precision}f}"


def _length(text: str, param_hint: str) -> float:
    try:
        return duration_to_length(text)
    except DurationParseError as exc:
        bad_parameter(str(exc), param_hint=param_hint)


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. output.precision=1",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if isinstance(ctx.obj, Settings):
        settings = ctx.obj
    else:
        if config is not None and not config.exists():
            raise typer.BadParameter(f"configuration file not found: {config}")
        try:
            settings = load_settings(config) if config else Settings()
        except (TypeError, ValueError) as exc:
            raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        settings = _with_overrides(settings, set_overrides)

    get_logger("stintvid", level=settings.logging.level, fmt=settings.logging.format)
    ctx.obj = settings


@app.command()
def length(
    ctx: typer.Context,
    durations: List[str] = typer.Argument(..., help="Durations as SS, MM:SS or HH:MM:SS"),
    total: bool = typer.Option(False, "--total", "-t", help="Print only the sum"),
) -> None:
    """Print the length in seconds of each duration.

    Durations may carry a fraction on the seconds field, e.g. ``1:02:11.5``.
    With ``--total`` the individual lengths are summed and a single value is
    printed.
    """

    cfg: Settings = ctx.obj
    precision = cfg.output.precision
    lengths = [_length(text, "DURATIONS") for text in durations]
    logger.debug("parsed %d durations", len(lengths))
    if total:
        summed = sum(lengths)
        if not math.isfinite(summed):
            bad_parameter("total duration out of range", param_hint="DURATIONS")
        typer.echo(_format(summed, precision))
        return
    for seconds in lengths:
        typer.echo(_format(seconds, precision))


@app.command()
def span(
    ctx: typer.Context,
    start: str = typer.Argument(..., help="Start point of the clip"),
    end: str = typer.Argument(..., help="End point of the clip"),
) -> None:
    """Print the number of seconds between ``START`` and ``END``."""

    cfg: Settings = ctx.obj
    try:
        interval = parse_span(start, end)
    except DurationParseError as exc:
        bad_parameter(str(exc), param_hint="START/END")
    except ValueError as exc:
        bad_parameter(str(exc), param_hint="END")
    typer.echo(_format(interval.duration, cfg.output.precision))


def main() -> None:  # pragma: no cover - console entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
