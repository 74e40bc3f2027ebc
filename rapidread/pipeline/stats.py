import math
from dataclasses import dataclass

from rapidread.config import clamp_rate
from rapidread.pipeline.segmenter import tokenize


@dataclass(frozen=True)
class ContentStats:
    unit_count: int
    token_count: int
    character_count: int
    block_count: int


def compute_stats(text: str, blocks: list[str], unit_count: int = 0) -> ContentStats:
    """Derive the read-only summary shown after a load.

    Characters are counted on the whitespace-normalized text, so stray
    indentation and line breaks in the source do not inflate the figure.
    """
    tokens = tokenize(text)
    return ContentStats(
        unit_count=max(0, int(unit_count or 0)),
        token_count=len(tokens),
        character_count=len(" ".join(tokens)),
        block_count=len(blocks),
    )


def reading_minutes(block_count: int, rate: int) -> int:
    """Whole minutes needed to play ``block_count`` blocks at ``rate`` per second."""
    if block_count <= 0:
        return 0
    return math.ceil(block_count / clamp_rate(rate) / 60)
