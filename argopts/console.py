# ArgOpts Command-Line Option Parser — MIT Licensed
"""Global console instance for ArgOpts output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "argopts.usage": "bold",
        "argopts.flag": "bold cyan",
        "argopts.help": "default",
        "argopts.value": "green",
        "argopts.unknown": "dim yellow",
        "argopts.error": "bold red",
    }
)

console = Console(theme=theme)
