import re

from rapidread.config import clamp_block_size

WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Strip the ends and collapse every internal whitespace run to one space."""
    return WHITESPACE.sub(" ", text).strip()


def tokenize(text: str) -> list[str]:
    """Split text into maximal runs of non-whitespace characters."""
    return [token for token in WHITESPACE.split(text) if token]


def segment(text: str, block_size: int) -> list[str]:
    """Group the tokens of ``text`` into blocks of ``block_size`` words.

    Blocks are the tokens joined by a single space, in source order. The
    last block is shorter when the token count is not a multiple of
    ``block_size``. Text without any tokens yields an empty list. The
    block size is clamped into 1..10.
    """
    block_size = clamp_block_size(block_size)
    tokens = tokenize(text)
    return [
        " ".join(tokens[start:start + block_size])
        for start in range(0, len(tokens), block_size)
    ]
