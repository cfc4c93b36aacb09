"""
syllable_emphasis package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EmphasisConfig, config_from_dict, config_from_yaml, load_config
from .noise import BoxMullerSampler, NormalSampler, SequenceSampler, create_sampler
from .pipeline import format_text, process_text
from .rendering import to_html, to_unicode_bold

__all__ = [
    "EmphasisConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "NormalSampler",
    "BoxMullerSampler",
    "SequenceSampler",
    "create_sampler",
    "process_text",
    "format_text",
    "to_html",
    "to_unicode_bold",
]

__version__ = "0.1.0"
