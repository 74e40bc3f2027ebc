from rich.console import Console

from rapidread.pipeline.stats import ContentStats
from rapidread.playback.controller import PlaybackController
from rapidread.playback.events import PlaybackEvent
from rapidread.ui.components import (
    block_panel,
    error_panel,
    help_panel,
    stats_panel,
    warning_panel,
)
from rapidread.ui.live_block import LiveBlock


class VisualRenderer:
    """Renders playback and notices to the terminal with Rich formatting."""

    def __init__(self, console: Console):
        self._console = console
        self._live = LiveBlock(console)

    def render(self, event: PlaybackEvent, controller: PlaybackController) -> None:
        if controller.is_playing:
            if not self._live.is_active:
                self._live.start(controller)
            else:
                self._live.update(controller)
            return

        if self._live.is_active:
            self._live.finish()

        if event is PlaybackEvent.LOADED and controller.total_blocks == 0:
            return
        self._console.print(block_panel(controller))
        if event is PlaybackEvent.FINISHED:
            self._console.print("End of text. Type 'r' to read again.", style="status")

    def stats(self, stats: ContentStats, block_size: int, minutes: int) -> None:
        self._console.print(stats_panel(stats, block_size, minutes))

    def help(self) -> None:
        self._console.print(help_panel())

    def message(self, text: str) -> None:
        self._console.print(text, style="banner")

    def warning(self, text: str) -> None:
        self.finalize()
        self._console.print(warning_panel(text))

    def error(self, text: str) -> None:
        self.finalize()
        self._console.print(error_panel(text))

    def finalize(self) -> None:
        if self._live.is_active:
            self._live.finish()


class NullRenderer:
    """No-op renderer for headless use."""

    def render(self, event: PlaybackEvent, controller: PlaybackController) -> None:
        pass

    def stats(self, stats: ContentStats, block_size: int, minutes: int) -> None:
        pass

    def help(self) -> None:
        pass

    def message(self, text: str) -> None:
        pass

    def warning(self, text: str) -> None:
        pass

    def error(self, text: str) -> None:
        pass

    def finalize(self) -> None:
        pass
