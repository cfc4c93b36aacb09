"""Minimal example showing how to run the emphasis pipeline directly."""

from __future__ import annotations

from pathlib import Path

from syllable_emphasis.config import load_config
from syllable_emphasis.pipeline import format_text


def main() -> None:
    config_path = Path(__file__).with_name("example_config.yaml")
    config = load_config(config_path if config_path.exists() else None)

    sample_text = (
        "The mechanical manual described gyroscopic stabilization in dense jargon, "
        "yet the apprentices followed it. They kept the platform steady even when "
        "the base wobbled."
    )
    rendered = format_text(sample_text, config)
    print("Markdown:\n", rendered.markdown)
    print("\nHTML:\n", rendered.html)
    print("\nUnicode:\n", rendered.unicode)


if __name__ == "__main__":
    main()
