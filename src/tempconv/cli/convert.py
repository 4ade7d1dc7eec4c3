"""CLI command converting one temperature literal to the other scales."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..config import Settings, get_settings
from ..converter import convert, convert_to_others
from ..errors import TemperatureConversionError, TemperatureParseError
from ..models import Temperature
from ..parser import parse_temperature
from ..units import TemperatureUnit, resolve_unit
from ..utils.logging import configure_json_logger, flush_handlers, log_event

__all__ = ["convert_command", "run_conversion"]


def _unit_option(value: Optional[str]) -> Optional[TemperatureUnit]:
    if value is None:
        return None
    try:
        return resolve_unit(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_settings(config_file: Optional[Path]) -> Settings:
    try:
        return get_settings(config_file=config_file)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1)


def run_conversion(temperature: Temperature, target: Optional[TemperatureUnit] = None) -> List[Temperature]:
    """Convert to ``target`` only, or to every other unit when it is omitted.

    An explicit target that cannot be reached raises; the batch path drops
    unsupported pairs.
    """

    if target is not None:
        return [convert(temperature, target)]
    return convert_to_others(temperature)


def convert_command(
    literal: Optional[str] = typer.Argument(
        None,
        help="Temperature literal such as 36.9C, 98.6 °F or 0K. Prompted for when omitted.",
        show_default=False,
    ),
    to: Optional[str] = typer.Option(
        None,
        "--to",
        help="Convert to this unit only (name or symbol, e.g. kelvin, F, °C).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        dir_okay=False,
        help="Append structured JSONL events to this file.",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="TOML/YAML configuration to use instead of TEMPCONV_CONFIG_FILE.",
    ),
) -> None:
    """Parse a temperature and print it converted to the other scales."""

    target = _unit_option(to)
    settings = _load_settings(config_file)
    logger = configure_json_logger(log_file or settings.log_file, level=settings.log_level)

    if literal is None:
        literal = typer.prompt("Temperature", default=settings.default_input)
    text = literal.strip()

    trace_id = log_event(logger, "convert.started", input=text, target=target)
    try:
        temperature = parse_temperature(text)
    except TemperatureParseError as exc:
        log_event(
            logger,
            "convert.failed",
            trace_id=trace_id,
            level=logging.WARNING,
            input=text,
            stage="parse",
            error=str(exc),
        )
        flush_handlers(logger)
        typer.echo(f"Invalid input '{text}': {exc}", err=True)
        raise typer.Exit(code=1)

    log_event(logger, "convert.parsed", trace_id=trace_id, temperature=temperature)

    try:
        outputs = run_conversion(temperature, target)
    except TemperatureConversionError as exc:
        log_event(
            logger,
            "convert.failed",
            trace_id=trace_id,
            level=logging.ERROR,
            input=text,
            stage="convert",
            error=str(exc),
        )
        flush_handlers(logger)
        typer.echo(f"Conversion failed: {exc}", err=True)
        raise typer.Exit(code=2)

    log_event(logger, "convert.completed", trace_id=trace_id, conversions=outputs)
    flush_handlers(logger)

    if as_json:
        payload = {
            "input": temperature.as_dict(),
            "conversions": [output.as_dict() for output in outputs],
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(str(temperature))
    for output in outputs:
        typer.echo(f"= {output}")
