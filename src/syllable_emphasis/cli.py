from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TypedDict

import typer
import yaml

from .config import EmphasisConfig, load_config
from .models import ReadabilityStats
from .pipeline import format_text
from .rewriting import adjust_readability
from .scoring import readability_stats
from .server import serve as run_server

app = typer.Typer(help="Syllable emphasis CLI.", no_args_is_help=True)

OUTPUT_FORMATS = ("markdown", "html", "unicode", "json")


class StatsPayload(TypedDict):
    sentences: int
    words: int
    syllables: int
    score: float


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Adjust readability, split syllables and emphasize them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("format")
def format_command(
    text: str | None = typer.Option(None, "--text", "-t", help="Passage to format."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_format: str = typer.Option(
        "markdown",
        "--output-format",
        "-f",
        help="One of: markdown, html, unicode, json.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    seed: int | None = typer.Option(None, "--seed", help="Seed the noise generator."),
    lower_band: float | None = typer.Option(None, help="Lower reading-ease bound."),
    upper_band: float | None = typer.Option(None, help="Upper reading-ease bound."),
    base_block_size: int | None = typer.Option(
        None, help="Size of the first block and center of the random walk."
    ),
    min_block_size: int | None = typer.Option(None, help="Smallest later block."),
    max_block_size: int | None = typer.Option(None, help="Largest later block."),
    no_adjust: bool = typer.Option(
        False, "--no-adjust", help="Skip the readability adjustment stage."
    ),
) -> None:
    """Format a passage and print it in the requested encoding."""
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown output format '{output_format}'.", param_hint="--output-format"
        )
    cfg = load_config(config)
    _apply_block_overrides(cfg, base_block_size, min_block_size, max_block_size)
    _apply_overrides(cfg, seed, lower_band, upper_band, no_adjust)
    passage = _read_input(text, input_path)

    rendered = format_text(passage, cfg)
    if output_format == "json":
        typer.echo(json.dumps(asdict(rendered), ensure_ascii=False, indent=2))
    else:
        typer.echo(getattr(rendered, output_format))


@app.command()
def score(
    text: str | None = typer.Option(None, "--text", "-t", help="Passage to score."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    adjust: bool = typer.Option(
        False, "--adjust", help="Also score the readability-adjusted passage."
    ),
) -> None:
    """Print reading-ease statistics for a passage as JSON."""
    cfg = load_config(config)
    passage = _read_input(text, input_path)
    payload: dict[str, object] = {"original": _stats_dict(readability_stats(passage))}
    if adjust:
        adjusted = adjust_readability(passage, cfg.lower_band, cfg.upper_band)
        payload["adjusted"] = _stats_dict(readability_stats(adjusted))
        payload["adjusted_text"] = adjusted
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind."),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Serve the formatter as a POST-only JSON endpoint."""
    cfg = load_config(config)
    if host:
        cfg.server.host = host
    if port is not None:
        cfg.server.port = port
    typer.echo(f"Listening on http://{cfg.server.host}:{cfg.server.port}/api/format")
    run_server(cfg.server.host, cfg.server.port, cfg)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EmphasisConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_block_overrides(
    config: EmphasisConfig,
    base_block_size: int | None,
    min_block_size: int | None,
    max_block_size: int | None,
) -> None:
    """Apply CLI overrides to block-sizing config fields when provided."""
    if base_block_size is not None:
        config.base_block_size = base_block_size
    if min_block_size is not None:
        config.min_block_size = min_block_size
    if max_block_size is not None:
        config.max_block_size = max_block_size


def _apply_overrides(
    config: EmphasisConfig,
    seed: int | None,
    lower_band: float | None,
    upper_band: float | None,
    no_adjust: bool,
) -> None:
    """Apply CLI overrides to the loaded config, then re-validate it."""
    if seed is not None:
        config.seed = seed
    if lower_band is not None:
        config.lower_band = lower_band
    if upper_band is not None:
        config.upper_band = upper_band
    if no_adjust:
        config.adjust_enabled = False
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _read_input(text: str | None, input_path: Path | None) -> str:
    """Return the passage from --text or --input-path; exactly one must be given."""
    if (text is None) == (input_path is None):
        raise typer.BadParameter("Provide exactly one of --text or --input-path.")
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    return text or ""


def _stats_dict(stats: ReadabilityStats) -> StatsPayload:
    return {
        "sentences": stats.sentences,
        "words": stats.words,
        "syllables": stats.syllables,
        "score": stats.score,
    }


if __name__ == "__main__":
    main()
