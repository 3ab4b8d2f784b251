"""Rich console singletons, level theme and host color palette."""

from __future__ import annotations

from enum import Enum

from rich.console import Console
from rich.theme import Theme

PERIODLOG_THEME = Theme({
    "level.host": "default",
    "level.debug": "dim cyan",
    "level.verbose": "dim",
    "level.information": "default",
    "level.warning": "bold yellow",
    "level.error": "bold red",
    "status.success": "bold green",
    "status.failed": "bold red",
    "header": "bold #e94560",
    "path": "cyan",
})


class ConsoleColor(str, Enum):
    """Fixed palette accepted by host output."""

    BLACK = "Black"
    DARK_BLUE = "DarkBlue"
    DARK_GREEN = "DarkGreen"
    DARK_CYAN = "DarkCyan"
    DARK_RED = "DarkRed"
    DARK_MAGENTA = "DarkMagenta"
    DARK_YELLOW = "DarkYellow"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    BLUE = "Blue"
    GREEN = "Green"
    CYAN = "Cyan"
    RED = "Red"
    MAGENTA = "Magenta"
    YELLOW = "Yellow"
    WHITE = "White"

    @property
    def rich_color(self) -> str:
        return _RICH_COLORS[self]

    @classmethod
    def parse(cls, value: str) -> ConsoleColor:
        """Parse a color name, ignoring case, dashes and underscores."""
        key = value.replace("_", "").replace("-", "").lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"Unknown color: {value}")


_RICH_COLORS = {
    ConsoleColor.BLACK: "black",
    ConsoleColor.DARK_BLUE: "blue",
    ConsoleColor.DARK_GREEN: "green",
    ConsoleColor.DARK_CYAN: "cyan",
    ConsoleColor.DARK_RED: "red",
    ConsoleColor.DARK_MAGENTA: "magenta",
    ConsoleColor.DARK_YELLOW: "yellow",
    ConsoleColor.GRAY: "white",
    ConsoleColor.DARK_GRAY: "bright_black",
    ConsoleColor.BLUE: "bright_blue",
    ConsoleColor.GREEN: "bright_green",
    ConsoleColor.CYAN: "bright_cyan",
    ConsoleColor.RED: "bright_red",
    ConsoleColor.MAGENTA: "bright_magenta",
    ConsoleColor.YELLOW: "bright_yellow",
    ConsoleColor.WHITE: "bright_white",
}

console = Console(theme=PERIODLOG_THEME)
error_console = Console(stderr=True, theme=PERIODLOG_THEME)
