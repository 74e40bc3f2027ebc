from abc import ABC, abstractmethod
from typing import Optional

from rapidread.input.commands import Command


class InputSource(ABC):
    """Abstract source of reader commands."""

    @property
    def ready_message(self) -> str:
        """Message shown when the reader is ready for input."""
        return "RapidRead is starting."

    @abstractmethod
    async def get_command(self) -> Optional[Command]:
        """Get the next command. Returns None to quit."""
        ...
