from __future__ import annotations

import logging

from .blocking import brownian_block_sizes
from .config import EmphasisConfig
from .emphasis import select_emphasis
from .models import RenderedText
from .noise import NormalSampler, create_sampler
from .rendering import render
from .rewriting import adjust_readability
from .tokenization import join_tokens, tokenize_syllables

logger = logging.getLogger(__name__)


def process_text(
    text: str,
    config: EmphasisConfig | None = None,
    sampler: NormalSampler | None = None,
) -> str:
    """Run the adjust, tokenize, block and emphasize stages and return markup."""
    cfg = config or EmphasisConfig()
    if sampler is None:
        # Fresh per call so concurrent callers never share walk state.
        sampler = create_sampler(cfg.seed)

    adjusted = text
    if cfg.adjust_enabled:
        adjusted = adjust_readability(text, cfg.lower_band, cfg.upper_band)

    tokens = tokenize_syllables(adjusted)
    total = sum(1 for token in tokens if token.is_syllable)
    sizes = brownian_block_sizes(
        total,
        sampler,
        base=cfg.base_block_size,
        min_size=cfg.min_block_size,
        max_size=cfg.max_block_size,
    )
    marked = select_emphasis(
        tokens,
        sizes,
        sigma_left=cfg.sigma_left,
        sigma_right=cfg.sigma_right,
        threshold=cfg.emphasis_threshold,
    )
    logger.debug(
        "Processed %d tokens (%d syllables) in %d blocks", len(tokens), total, len(sizes)
    )
    return join_tokens(marked)


def format_text(
    text: str,
    config: EmphasisConfig | None = None,
    sampler: NormalSampler | None = None,
) -> RenderedText:
    """Process text and return its hypertext, Unicode bold and markup renderings."""
    return render(process_text(text, config, sampler))
