import asyncio
from typing import Optional

from rich.console import Console

from rapidread.input.base import InputSource
from rapidread.input.commands import Command, CommandKind, parse_command


class RichInput(InputSource):
    """Rich-styled terminal command prompt."""

    def __init__(self, console: Console):
        self._console = console

    @property
    def ready_message(self) -> str:
        return "RapidRead is ready. Type 'help' for commands."

    async def get_command(self) -> Optional[Command]:
        loop = asyncio.get_running_loop()
        try:
            line = await loop.run_in_executor(
                None, lambda: self._console.input("[prompt]>[/] ")
            )
        except (EOFError, KeyboardInterrupt):
            return None
        command = parse_command(line)
        if command.kind is CommandKind.QUIT:
            return None
        return command
