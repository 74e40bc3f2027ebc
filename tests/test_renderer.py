import io

from rich.console import Console

from rapidread.pipeline.stats import ContentStats
from rapidread.playback.controller import PlaybackController
from rapidread.playback.events import PlaybackEvent
from rapidread.ui.components import progress_line
from rapidread.ui.console import theme
from rapidread.ui.renderer import VisualRenderer


def _console():
    buffer = io.StringIO()
    return Console(file=buffer, width=100, color_system=None, theme=theme), buffer


def test_progress_line_empty():
    assert progress_line(PlaybackController()).plain == "No content loaded"


def test_progress_line_counts():
    c = PlaybackController(rate=4)
    c.load_sequence(["a", "b", "c", "d"])
    c.seek_to(1)
    text = progress_line(c).plain
    assert "2/4" in text
    assert "4/s" in text
    assert "paused" in text


def test_paused_block_is_printed():
    console, buffer = _console()
    renderer = VisualRenderer(console)
    c = PlaybackController()
    c.load_sequence(["the quick brown", "fox jumps over"])
    renderer.render(PlaybackEvent.LOADED, c)
    assert "the quick brown" in buffer.getvalue()


def test_finished_shows_end_notice():
    console, buffer = _console()
    renderer = VisualRenderer(console)
    c = PlaybackController()
    c.load_sequence(["only block"])
    renderer.render(PlaybackEvent.FINISHED, c)
    assert "End of text" in buffer.getvalue()


def test_empty_load_prints_nothing():
    console, buffer = _console()
    renderer = VisualRenderer(console)
    c = PlaybackController()
    c.load_sequence([])
    renderer.render(PlaybackEvent.LOADED, c)
    assert buffer.getvalue() == ""


def test_stats_panel():
    console, buffer = _console()
    VisualRenderer(console).stats(ContentStats(3, 120, 700, 40), 3, 2)
    output = buffer.getvalue()
    assert "Pages" in output
    assert "120" in output
    assert "40 (3 words each)" in output
    assert "~2 min" in output


def test_error_panel():
    console, buffer = _console()
    VisualRenderer(console).error("Could not read PDF: bad xref")
    assert "Could not read PDF: bad xref" in buffer.getvalue()
