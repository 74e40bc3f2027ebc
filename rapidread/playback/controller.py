import asyncio
import logging
from typing import Callable, Optional, Sequence

from rapidread.config import clamp_rate
from rapidread.playback.events import PlaybackEvent, PlaybackState

logger = logging.getLogger(__name__)

Listener = Callable[[PlaybackEvent, "PlaybackController"], None]


class PlaybackController:
    """Steps through a block sequence on a wall-clock schedule.

    At most one tick is ever pending. The timer handle is only armed or
    cancelled by the transition methods, so a pause, reload or close
    always leaves no callback behind that could touch discarded state.
    """

    def __init__(
        self,
        rate: int = 3,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._blocks: tuple[str, ...] = ()
        self._index = 0
        self._playing = False
        self._rate = clamp_rate(rate)
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._deadline = 0.0
        self._listeners: list[Listener] = []

    # ── Read model ──

    @property
    def state(self) -> PlaybackState:
        if not self._blocks:
            return PlaybackState.IDLE
        if self._playing:
            return PlaybackState.PLAYING
        return PlaybackState.PAUSED

    @property
    def blocks(self) -> tuple[str, ...]:
        return self._blocks

    @property
    def current_index(self) -> Optional[int]:
        return self._index if self._blocks else None

    @property
    def current_block(self) -> Optional[str]:
        return self._blocks[self._index] if self._blocks else None

    @property
    def total_blocks(self) -> int:
        return len(self._blocks)

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_at_end(self) -> bool:
        return bool(self._blocks) and self._index == len(self._blocks) - 1

    @property
    def rate(self) -> int:
        return self._rate

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return 1.0 / self._rate

    @property
    def progress_fraction(self) -> float:
        if not self._blocks:
            return 0.0
        return (self._index + 1) / len(self._blocks)

    @property
    def has_pending_tick(self) -> bool:
        return self._handle is not None

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── Transitions ──

    def load_sequence(self, blocks: Sequence[str]) -> None:
        self._cancel_tick()
        self._blocks = tuple(blocks)
        self._index = 0
        self._playing = False
        logger.debug("Loaded %d blocks", len(self._blocks))
        self._notify(PlaybackEvent.LOADED)

    def play(self) -> None:
        if self.state is not PlaybackState.PAUSED:
            return
        # Replaying from the last block does not rewind; reset() first.
        if self.is_at_end:
            logger.debug("Play ignored at last block %d", self._index)
            return
        self._playing = True
        self._arm(self._now())
        logger.debug("Playing from block %d at %d/s", self._index, self._rate)
        self._notify(PlaybackEvent.STARTED)

    def pause(self) -> None:
        if not self._playing:
            return
        self._cancel_tick()
        self._playing = False
        logger.debug("Paused at block %d", self._index)
        self._notify(PlaybackEvent.PAUSED)

    def seek_to(self, index: int) -> None:
        if not self._blocks:
            return
        self._index = max(0, min(len(self._blocks) - 1, int(index)))
        self._notify(PlaybackEvent.SEEKED)

    def step_back(self) -> None:
        if not self._blocks or self._index == 0:
            return
        self.seek_to(self._index - 1)

    def reset(self) -> None:
        self._cancel_tick()
        self._playing = False
        self._index = 0
        self._notify(PlaybackEvent.RESET)

    def set_rate(self, rate: int) -> None:
        rate = clamp_rate(rate)
        if rate == self._rate:
            return
        self._rate = rate
        if self._playing:
            # Restart the cadence; elapsed time of the old interval is dropped.
            self._cancel_tick()
            self._arm(self._now())
        logger.debug("Rate set to %d blocks/s", rate)
        self._notify(PlaybackEvent.RATE_CHANGED)

    def close(self) -> None:
        """Cancel any pending tick and stop playing, without notifying."""
        self._cancel_tick()
        self._playing = False

    # ── Timer ──

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        # Injected loop if any, else whichever loop is running now.
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def _now(self) -> float:
        return self._get_loop().time()

    def _arm(self, start: float) -> None:
        self._cancel_tick()
        now = self._now()
        self._deadline = start + self.interval
        if self._deadline < now:
            # Fell behind; resume the cadence from now rather than bursting.
            self._deadline = now + self.interval
        self._handle = self._get_loop().call_at(self._deadline, self._tick)

    def _cancel_tick(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self) -> None:
        self._handle = None
        if not self._playing or not self._blocks:
            return
        if self.is_at_end:
            self._playing = False
            logger.debug("Reached last block %d, stopping", self._index)
            self._notify(PlaybackEvent.FINISHED)
            return
        self._index += 1
        self._arm(self._deadline)
        self._notify(PlaybackEvent.ADVANCED)

    def _notify(self, event: PlaybackEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception:
                logger.exception("Playback listener failed on %s", event.value)
