from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rapidread.input.commands import HELP_TEXT
from rapidread.pipeline.stats import ContentStats
from rapidread.playback.controller import PlaybackController

BAR_WIDTH = 30
PLACEHOLDER = "Press p to start"


def progress_line(controller: PlaybackController) -> Text:
    """Render 'block i/n' with a text progress bar and the current rate."""
    total = controller.total_blocks
    if total == 0:
        return Text("No content loaded", style="status")
    filled = round(controller.progress_fraction * BAR_WIDTH)
    bar = "█" * filled + "░" * (BAR_WIDTH - filled)
    state = "playing" if controller.is_playing else "paused"
    return Text(
        f"{bar} {controller.current_index + 1}/{total} · "
        f"{controller.rate}/s · {state}",
        style="status",
    )


def block_panel(controller: PlaybackController) -> Panel:
    """The current block, centered, with progress underneath."""
    block = controller.current_block
    body = Text(block, style="block") if block else Text(PLACEHOLDER, style="status")
    return Panel(
        Align.center(body),
        subtitle=progress_line(controller),
        border_style="blue",
        padding=(1, 4),
    )


def stats_panel(stats: ContentStats, block_size: int, minutes: int) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="stat")
    table.add_column(justify="right")
    if stats.unit_count:
        table.add_row("Pages", str(stats.unit_count))
    table.add_row("Words", str(stats.token_count))
    table.add_row("Characters", str(stats.character_count))
    table.add_row("Blocks", f"{stats.block_count} ({block_size} words each)")
    table.add_row("Reading time", f"~{minutes} min")
    return Panel(table, title="Content", border_style="cyan", expand=False)


def help_panel() -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="prompt")
    table.add_column()
    for keys, description in HELP_TEXT:
        table.add_row(keys, description)
    return Panel(table, title="Commands", border_style="dim", expand=False)


def warning_panel(text: str) -> Panel:
    """Render a non-fatal notice as a yellow-bordered panel."""
    return Panel(
        Text(text, style="warning"),
        title="Warning",
        border_style="yellow",
        expand=False,
    )


def error_panel(text: str) -> Panel:
    """Render an error message as a red-bordered panel."""
    return Panel(
        Text(text, style="error"),
        title="Error",
        border_style="red",
        expand=False,
    )
