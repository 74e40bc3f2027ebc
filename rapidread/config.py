from dataclasses import dataclass

MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 10
MIN_RATE = 1
MAX_RATE = 10


def _clamp(value, low: int, high: int) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        return low
    return max(low, min(high, value))


def clamp_block_size(value) -> int:
    """Coerce a words-per-block value into 1..10."""
    return _clamp(value, MIN_BLOCK_SIZE, MAX_BLOCK_SIZE)


def clamp_rate(value) -> int:
    """Coerce a blocks-per-second value into 1..10."""
    return _clamp(value, MIN_RATE, MAX_RATE)


@dataclass
class ReaderConfig:
    # Segmentation and timing
    block_size: int = 3
    rate: int = 3

    # Behavior
    autoplay: bool = False
    show_stats: bool = True

    def __post_init__(self):
        self.block_size = clamp_block_size(self.block_size)
        self.rate = clamp_rate(self.rate)
