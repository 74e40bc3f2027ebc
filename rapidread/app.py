import asyncio
import logging
import warnings
from pathlib import Path
from typing import Optional

from rapidread.config import ReaderConfig
from rapidread.errors import EmptyContentWarning, ExtractionError
from rapidread.extract.registry import extractor_for
from rapidread.input.base import InputSource
from rapidread.input.commands import Command, CommandKind
from rapidread.session import ReaderSession
from rapidread.ui.renderer import NullRenderer

logger = logging.getLogger(__name__)


class ReaderApp:
    """Main application: command -> session -> render."""

    def __init__(
        self,
        session: ReaderSession,
        input_source: InputSource,
        renderer=None,
        config: Optional[ReaderConfig] = None,
    ):
        self._session = session
        self._input = input_source
        self._renderer = renderer or NullRenderer()
        self._config = config or ReaderConfig()
        self._running = True
        self._session.add_listener(self._renderer.render)

    @property
    def session(self) -> ReaderSession:
        return self._session

    async def run(self) -> None:
        self._renderer.message(self._input.ready_message)
        try:
            while self._running:
                command = await self._input.get_command()
                if command is None:
                    break
                await self.dispatch(command)
        finally:
            self._renderer.finalize()
            self._session.close()

    async def dispatch(self, command: Command) -> None:
        session = self._session
        kind = command.kind

        if kind is CommandKind.TOGGLE:
            if session.total_blocks == 0:
                self._renderer.warning("Nothing to read. Open a file or paste some text.")
            elif not session.is_playing and session.controller.is_at_end:
                self._renderer.message("At the last block. Type 'r' to start over.")
            else:
                session.toggle()
        elif kind is CommandKind.STEP_BACK:
            session.step_back()
        elif kind is CommandKind.RESET:
            session.reset()
        elif kind is CommandKind.SEEK:
            session.seek_to(command.value)
        elif kind is CommandKind.RATE:
            session.set_rate(command.value)
        elif kind is CommandKind.BLOCK_SIZE:
            session.set_block_size(command.value)
        elif kind is CommandKind.OPEN:
            await self.open_path(command.argument)
        elif kind is CommandKind.TEXT:
            self.load_text(command.argument)
        elif kind is CommandKind.STATS:
            self._show_stats(force=True)
        elif kind is CommandKind.DISCARD:
            session.discard()
            self._renderer.message("Content discarded.")
        elif kind is CommandKind.HELP:
            self._renderer.help()
        elif kind is CommandKind.QUIT:
            self._running = False
        else:
            self._renderer.warning(
                f"Unknown command: {command.argument}. Type 'help' for commands."
            )

    async def open_path(self, path: str) -> bool:
        """Extract and load a document. Returns False if nothing was loaded."""
        try:
            extractor = extractor_for(path)
            loop = asyncio.get_running_loop()
            data = await loop.run_in_executor(None, Path(path).expanduser().read_bytes)
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", EmptyContentWarning)
                await self._session.load_document(data, extractor)
        except OSError as exc:
            logger.error("Could not open %s: %s", path, exc)
            self._renderer.error(f"Could not open {path}: {exc.strerror or exc}")
            return False
        except ExtractionError as exc:
            logger.error("Extraction failed for %s: %s", path, exc)
            self._renderer.error(str(exc))
            return False
        return self._after_load(caught)

    def load_text(self, text: str) -> bool:
        """Load pasted text. Returns False if it held nothing to read."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", EmptyContentWarning)
            self._session.load_text(text)
        return self._after_load(caught)

    def _after_load(self, caught: list[warnings.WarningMessage]) -> bool:
        empty = []
        for w in caught:
            if issubclass(w.category, EmptyContentWarning):
                empty.append(w)
            else:
                warnings.showwarning(w.message, w.category, w.filename, w.lineno)
        if empty:
            self._renderer.warning(str(empty[0].message))
            return False
        self._show_stats()
        if self._config.autoplay:
            self._session.play()
        return True

    def _show_stats(self, force: bool = False) -> None:
        stats = self._session.stats
        if stats is None:
            if force:
                self._renderer.warning("No content loaded.")
            return
        if force or self._config.show_stats:
            self._renderer.stats(
                stats, self._session.block_size, self._session.estimated_minutes
            )
