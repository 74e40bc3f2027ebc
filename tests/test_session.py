import asyncio

import pytest

from rapidread.config import ReaderConfig
from rapidread.errors import EmptyContentWarning, ExtractionError
from rapidread.extract.base import DocumentExtractor, ExtractedText
from rapidread.playback.events import PlaybackState
from rapidread.session import ReaderSession

FOX = "the quick brown fox jumps over the lazy dog"


class FakeExtractor(DocumentExtractor):
    def __init__(self, text: str = "", unit_count: int = 1, error: str | None = None):
        self._text = text
        self._unit_count = unit_count
        self._error = error

    async def extract(self, data: bytes) -> ExtractedText:
        if self._error:
            raise ExtractionError(self._error)
        return ExtractedText(self._text, self._unit_count)


def test_fresh_session_is_idle():
    s = ReaderSession()
    assert s.state is PlaybackState.IDLE
    assert not s.has_content
    assert s.current_block is None
    assert s.total_blocks == 0
    assert s.progress_fraction == 0.0
    assert s.stats is None


def test_load_text():
    s = ReaderSession(ReaderConfig(block_size=3))
    s.load_text(FOX)
    assert s.blocks == ("the quick brown", "fox jumps over", "the lazy dog")
    assert s.state is PlaybackState.PAUSED
    assert s.current_index == 0
    assert s.current_block == "the quick brown"
    assert s.progress_fraction == pytest.approx(1 / 3)
    assert s.stats.token_count == 9
    assert s.stats.block_count == 3
    assert s.stats.unit_count == 0


def test_load_empty_text_warns():
    s = ReaderSession()
    with pytest.warns(EmptyContentWarning):
        s.load_text("   \n ")
    assert s.state is PlaybackState.IDLE
    assert s.total_blocks == 0
    assert s.stats.token_count == 0


def test_block_size_change_resegments():
    s = ReaderSession(ReaderConfig(block_size=3))
    s.load_text(FOX)
    s.seek_to(2)
    s.set_block_size(2)
    assert s.total_blocks == 5
    assert s.current_index == 0
    assert s.stats.block_count == 5


def test_same_block_size_keeps_position():
    s = ReaderSession(ReaderConfig(block_size=3))
    s.load_text(FOX)
    s.seek_to(2)
    s.set_block_size(3)
    assert s.current_index == 2


def test_block_size_without_content():
    s = ReaderSession()
    s.set_block_size(5)
    assert s.block_size == 5
    s.load_text(FOX)
    assert s.total_blocks == 2


def test_out_of_range_values_are_clamped():
    s = ReaderSession()
    s.set_block_size(0)
    assert s.block_size == 1
    s.set_block_size(100)
    assert s.block_size == 10
    s.set_rate(0)
    assert s.rate == 1
    s.set_rate(25)
    assert s.rate == 10


def test_discard():
    s = ReaderSession()
    s.load_text(FOX)
    s.discard()
    assert not s.has_content
    assert s.state is PlaybackState.IDLE
    assert s.stats is None


def test_seek_and_step_back():
    s = ReaderSession(ReaderConfig(block_size=1))
    s.load_text(FOX)
    s.seek_to(5)
    assert s.current_block == "over"
    s.step_back()
    assert s.current_block == "jumps"
    s.reset()
    assert s.current_index == 0


@pytest.mark.asyncio
async def test_block_size_change_while_playing_pauses():
    s = ReaderSession(ReaderConfig(block_size=1, rate=10))
    s.load_text(FOX)
    s.play()
    await asyncio.sleep(0.15)
    assert s.current_index == 1
    s.set_block_size(4)
    assert not s.is_playing
    assert s.current_index == 0
    assert s.total_blocks == 3
    assert not s.controller.has_pending_tick
    await asyncio.sleep(0.25)
    assert s.current_index == 0


@pytest.mark.asyncio
async def test_play_through_fox():
    s = ReaderSession(ReaderConfig(block_size=3, rate=10))
    s.load_text(FOX)
    assert s.controller.interval == pytest.approx(0.1)
    s.play()
    await asyncio.sleep(0.4)
    assert s.current_index == 2
    assert not s.is_playing
    assert s.progress_fraction == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_toggle():
    s = ReaderSession(ReaderConfig(rate=10))
    s.load_text(FOX)
    s.toggle()
    assert s.is_playing
    s.toggle()
    assert not s.is_playing


@pytest.mark.asyncio
async def test_load_document():
    s = ReaderSession(ReaderConfig(block_size=3))
    await s.load_document(b"%PDF", FakeExtractor(FOX, unit_count=4))
    assert s.total_blocks == 3
    assert s.stats.unit_count == 4


@pytest.mark.asyncio
async def test_failed_extraction_leaves_session_untouched():
    s = ReaderSession(ReaderConfig(block_size=3))
    s.load_text(FOX)
    s.seek_to(1)
    with pytest.raises(ExtractionError, match="broken"):
        await s.load_document(b"junk", FakeExtractor(error="broken"))
    assert s.text == FOX
    assert s.current_index == 1
    assert s.total_blocks == 3


@pytest.mark.asyncio
async def test_close_stops_playback():
    s = ReaderSession(ReaderConfig(rate=10))
    s.load_text(FOX)
    s.play()
    s.close()
    await asyncio.sleep(0.25)
    assert s.current_index == 0
    assert not s.is_playing


def test_estimated_minutes_follows_rate():
    s = ReaderSession(ReaderConfig(block_size=1, rate=1))
    assert s.estimated_minutes == 0
    s.load_text(" ".join(["word"] * 150))
    assert s.estimated_minutes == 3
    s.set_rate(10)
    assert s.estimated_minutes == 1
    s.set_block_size(10)
    assert s.total_blocks == 15
    assert s.estimated_minutes == 1
