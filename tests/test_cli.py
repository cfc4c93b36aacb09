import json
from pathlib import Path

from typer.testing import CliRunner

from syllable_emphasis.cli import app
from tests.utils import TEN_SYLLABLES

runner = CliRunner()


def test_cli_format_markdown():
    """format prints the markup rendering by default."""
    result = runner.invoke(app, ["format", "--text", TEN_SYLLABLES])

    assert result.exit_code == 0
    assert result.stdout.strip() == "ba be bi bo **bu** **ca** **ce** **ci** co cu"


def test_cli_format_json_from_file(tmp_path: Path):
    """format reads --input-path and emits all encodings as JSON."""
    source = tmp_path / "passage.txt"
    source.write_text(TEN_SYLLABLES, encoding="utf-8")
    result = runner.invoke(
        app,
        ["format", "--input-path", str(source), "--output-format", "json", "--seed", "2"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert set(payload) == {"html", "unicode", "markdown"}
    assert payload["html"].startswith("ba be bi bo <strong>bu</strong>")


def test_cli_format_requires_exactly_one_input(tmp_path: Path):
    assert runner.invoke(app, ["format"]).exit_code != 0
    source = tmp_path / "passage.txt"
    source.write_text("x", encoding="utf-8")
    result = runner.invoke(app, ["format", "--text", "x", "--input-path", str(source)])
    assert result.exit_code != 0


def test_cli_format_rejects_unknown_output_format():
    result = runner.invoke(app, ["format", "--text", "hi", "--output-format", "pdf"])

    assert result.exit_code != 0


def test_cli_format_rejects_inverted_band():
    result = runner.invoke(
        app, ["format", "--text", "hi", "--lower-band", "90", "--upper-band", "10"]
    )

    assert result.exit_code != 0


def test_cli_score_reports_stats():
    result = runner.invoke(app, ["score", "--text", "The cat sat.", "--adjust"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["original"]["words"] == 3
    assert payload["original"]["score"] == 119.19
    assert payload["adjusted_text"] == "The cat sat."


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])

    assert result.exit_code == 0
    assert "base_block_size: 21" in result.stdout
    assert "sigma_right: 3.74" in result.stdout


def test_cli_format_block_overrides():
    """Fixed four-syllable blocks mark positions 1-3 of every block."""
    result = runner.invoke(
        app,
        [
            "format",
            "--text",
            TEN_SYLLABLES,
            "--base-block-size",
            "4",
            "--min-block-size",
            "4",
            "--max-block-size",
            "4",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == (
        "ba **be** **bi** **bo** bu **ca** **ce** **ci** **co** **cu**"
    )


def test_cli_format_rejects_inverted_block_bounds():
    result = runner.invoke(
        app,
        ["format", "--text", "hi", "--min-block-size", "9", "--max-block-size", "5"],
    )

    assert result.exit_code != 0
