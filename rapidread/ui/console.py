from rich.console import Console
from rich.theme import Theme

theme = Theme({
    "block": "bold",
    "status": "dim",
    "warning": "yellow bold",
    "error": "red bold",
    "stat": "cyan",
    "prompt": "bold blue",
    "banner": "dim",
})

console = Console(theme=theme)
