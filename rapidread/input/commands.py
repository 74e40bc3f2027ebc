from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandKind(Enum):
    TOGGLE = "toggle"
    STEP_BACK = "step_back"
    RESET = "reset"
    SEEK = "seek"
    RATE = "rate"
    BLOCK_SIZE = "block_size"
    OPEN = "open"
    TEXT = "text"
    STATS = "stats"
    DISCARD = "discard"
    HELP = "help"
    QUIT = "quit"
    UNKNOWN = "unknown"


@dataclass
class Command:
    kind: CommandKind
    value: Optional[int] = None
    argument: str = ""


ALIASES = {
    "p": CommandKind.TOGGLE,
    "play": CommandKind.TOGGLE,
    "pause": CommandKind.TOGGLE,
    "b": CommandKind.STEP_BACK,
    "back": CommandKind.STEP_BACK,
    "left": CommandKind.STEP_BACK,
    "r": CommandKind.RESET,
    "reset": CommandKind.RESET,
    "seek": CommandKind.SEEK,
    "goto": CommandKind.SEEK,
    "rate": CommandKind.RATE,
    "speed": CommandKind.RATE,
    "size": CommandKind.BLOCK_SIZE,
    "words": CommandKind.BLOCK_SIZE,
    "open": CommandKind.OPEN,
    "load": CommandKind.OPEN,
    "text": CommandKind.TEXT,
    "paste": CommandKind.TEXT,
    "stats": CommandKind.STATS,
    "clear": CommandKind.DISCARD,
    "close": CommandKind.DISCARD,
    "help": CommandKind.HELP,
    "?": CommandKind.HELP,
    "q": CommandKind.QUIT,
    "quit": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
}

NUMERIC = {CommandKind.SEEK, CommandKind.RATE, CommandKind.BLOCK_SIZE}
FREEFORM = {CommandKind.OPEN, CommandKind.TEXT}

HELP_TEXT = [
    ("Enter / p", "play or pause"),
    ("b / back", "previous block"),
    ("r / reset", "back to the first block"),
    ("seek N", "jump to block N"),
    ("rate N", "blocks per second (1-10)"),
    ("size N", "words per block (1-10)"),
    ("open PATH", "load a PDF or text file"),
    ("text WORDS...", "load pasted text"),
    ("stats", "show content statistics"),
    ("clear", "discard the loaded content"),
    ("q / quit", "exit"),
]


def parse_command(line: str) -> Command:
    """Parse one input line. A blank line toggles play and pause."""
    line = line.strip()
    if not line:
        return Command(CommandKind.TOGGLE)
    head, _, rest = line.partition(" ")
    rest = rest.strip()
    kind = ALIASES.get(head.lower())

    if kind is None:
        return Command(CommandKind.UNKNOWN, argument=line)

    if kind in NUMERIC:
        try:
            value = int(rest)
        except ValueError:
            return Command(CommandKind.UNKNOWN, argument=line)
        if kind is CommandKind.SEEK:
            # Users count blocks from 1.
            value -= 1
        return Command(kind, value=value)

    if kind in FREEFORM:
        if not rest:
            return Command(CommandKind.UNKNOWN, argument=line)
        return Command(kind, argument=rest)

    return Command(kind)
