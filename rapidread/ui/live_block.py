from rich.console import Console
from rich.live import Live

from rapidread.playback.controller import PlaybackController
from rapidread.ui.components import block_panel


class LiveBlock:
    """Redraws the current block in place while playback runs."""

    def __init__(self, console: Console):
        self._console = console
        self._live: Live | None = None

    def start(self, controller: PlaybackController) -> None:
        self._live = Live(
            block_panel(controller),
            console=self._console,
            refresh_per_second=20,
            transient=True,
        )
        self._live.start()

    def update(self, controller: PlaybackController) -> None:
        if self._live is not None:
            self._live.update(block_panel(controller))

    def finish(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    @property
    def is_active(self) -> bool:
        return self._live is not None
