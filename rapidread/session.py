import asyncio
import logging
import warnings
from typing import Optional

from rapidread.config import ReaderConfig, clamp_block_size, clamp_rate
from rapidread.errors import EmptyContentWarning
from rapidread.extract.base import DocumentExtractor
from rapidread.pipeline.segmenter import segment
from rapidread.pipeline.stats import ContentStats, compute_stats, reading_minutes
from rapidread.playback.controller import Listener, PlaybackController
from rapidread.playback.events import PlaybackState

logger = logging.getLogger(__name__)


class ReaderSession:
    """Owns the loaded text, its block sequence and the playback state.

    The presentation layer reads the properties and issues commands;
    every command runs synchronously between ticks.
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        config = config or ReaderConfig()
        self._block_size = clamp_block_size(config.block_size)
        self._text: Optional[str] = None
        self._unit_count = 0
        self._stats: Optional[ContentStats] = None
        self._controller = PlaybackController(rate=config.rate, loop=loop)

    # ── Content ──

    def load_text(self, text: str, unit_count: int = 0) -> None:
        """Accept a new text source, replacing whatever was loaded."""
        self._text = text
        self._unit_count = unit_count
        self._resegment()
        if not self._controller.blocks:
            logger.warning("Loaded text contains no words")
            warnings.warn(
                "The text is empty: there is nothing to read.",
                EmptyContentWarning,
                stacklevel=2,
            )

    async def load_document(self, data: bytes, extractor: DocumentExtractor) -> None:
        """Extract a document and load its text.

        ExtractionError propagates and leaves the current content as it was.
        """
        extracted = await extractor.extract(data)
        self.load_text(extracted.text, unit_count=extracted.unit_count)

    def discard(self) -> None:
        self._text = None
        self._unit_count = 0
        self._stats = None
        self._controller.load_sequence([])

    def close(self) -> None:
        self._controller.close()

    def _resegment(self) -> None:
        blocks = segment(self._text or "", self._block_size)
        self._stats = compute_stats(self._text or "", blocks, self._unit_count)
        self._controller.load_sequence(blocks)

    # ── Configuration ──

    def set_block_size(self, block_size: int) -> None:
        # A new size changes the sequence itself, so position is not kept.
        block_size = clamp_block_size(block_size)
        if block_size == self._block_size:
            return
        self._block_size = block_size
        logger.debug("Block size set to %d", block_size)
        if self._text is not None:
            self._resegment()

    def set_rate(self, rate: int) -> None:
        self._controller.set_rate(clamp_rate(rate))

    # ── Navigation ──

    def play(self) -> None:
        self._controller.play()

    def pause(self) -> None:
        self._controller.pause()

    def toggle(self) -> None:
        if self._controller.is_playing:
            self._controller.pause()
        else:
            self._controller.play()

    def step_back(self) -> None:
        self._controller.step_back()

    def reset(self) -> None:
        self._controller.reset()

    def seek_to(self, index: int) -> None:
        self._controller.seek_to(index)

    def add_listener(self, listener: Listener) -> None:
        self._controller.add_listener(listener)

    # ── Read model ──

    @property
    def controller(self) -> PlaybackController:
        return self._controller

    @property
    def has_content(self) -> bool:
        return self._text is not None

    @property
    def text(self) -> Optional[str]:
        return self._text

    @property
    def stats(self) -> Optional[ContentStats]:
        return self._stats

    @property
    def blocks(self) -> tuple[str, ...]:
        return self._controller.blocks

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def rate(self) -> int:
        return self._controller.rate

    @property
    def state(self) -> PlaybackState:
        return self._controller.state

    @property
    def current_block(self) -> Optional[str]:
        return self._controller.current_block

    @property
    def current_index(self) -> Optional[int]:
        return self._controller.current_index

    @property
    def total_blocks(self) -> int:
        return self._controller.total_blocks

    @property
    def is_playing(self) -> bool:
        return self._controller.is_playing

    @property
    def progress_fraction(self) -> float:
        return self._controller.progress_fraction

    @property
    def estimated_minutes(self) -> int:
        """Reading time for the whole text at the current rate, rounded up."""
        return reading_minutes(self.total_blocks, self.rate)
