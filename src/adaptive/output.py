"""Centralized output handling with quiet mode support and color templates."""

import re

from rich.console import Console as RichConsole
from rich.style import Style
from rich.text import Text


class QuietConsole:
    """A console wrapper that respects quiet mode.

    In quiet mode, only errors are printed. Normal output is suppressed.
    """

    def __init__(self, stderr: bool = False):
        self._console = RichConsole(stderr=stderr, highlight=False)
        self._quiet = False

    @property
    def quiet(self) -> bool:
        return self._quiet

    @quiet.setter
    def quiet(self, value: bool):
        self._quiet = value

    @property
    def rich(self) -> RichConsole:
        """The wrapped rich console."""
        return self._console

    def print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self._quiet:
            self._console.print(*args, **kwargs)

    def error(self, *args, **kwargs):
        """Print error messages (always shown, even in quiet mode)."""
        self._console.print(*args, **kwargs)

    def input(self, *args, **kwargs):
        """Get user input (always available)."""
        return self._console.input(*args, **kwargs)

    @property
    def is_terminal(self) -> bool:
        """Check if output is a terminal."""
        return self._console.is_terminal


# Global console instances
console = QuietConsole()
err_console = QuietConsole(stderr=True)


def set_quiet(quiet: bool):
    """Set global quiet mode."""
    console.quiet = quiet
    err_console.quiet = quiet


def is_quiet() -> bool:
    """Check if quiet mode is enabled."""
    return console.quiet


_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

# Template tag -> rich style applied on top of the styles already active
STYLE_TAGS: dict[str, str] = {
    "BOLD": "bold",
    "NORMAL": "not bold not dim",
    "DIM": "dim",
    "ITALIC": "italic",
    "NO_ITALIC": "not italic",
    "STRIKE": "strike",
    "NO_STRIKE": "not strike",
    "REVERSE": "reverse",
    "NO_REVERSE": "not reverse",
    "UNDERLINE": "underline",
    "NO_UNDERLINE": "not underline",
    "BLINK": "blink",
    "NO_BLINK": "not blink",
    "DEF_FG": "default",
    "DEF_BG": "on default",
    "DEF_COLOR": "default on default",
}
for _color in _COLORS:
    STYLE_TAGS[_color.upper()] = _color
    STYLE_TAGS[f"BRIGHT_{_color.upper()}"] = f"bright_{_color}"
    STYLE_TAGS[f"BG_{_color.upper()}"] = f"on {_color}"
    STYLE_TAGS[f"BG_BRIGHT_{_color.upper()}"] = f"on bright_{_color}"

_TAG_PATTERN = re.compile(r"\{\{([^{}]*)\}\}")
_TAG_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def colorize(template: str) -> Text:
    """Convert ``{{TAG}}`` formatting instructions into a styled rich Text.

    ``{{RESET}}`` drops every active style. Tags that are not valid names or
    that name no known style are kept in the output verbatim.
    """
    text = Text()
    style = Style()
    position = 0

    for match in _TAG_PATTERN.finditer(template):
        text.append(template[position:match.start()], style=style)
        tag = match.group(1)

        if tag == "RESET":
            style = Style()
        elif _TAG_NAME.fullmatch(tag) and tag in STYLE_TAGS:
            style = style + Style.parse(STYLE_TAGS[tag])
        else:
            text.append(match.group(0), style=style)

        position = match.end()

    text.append(template[position:], style=style)
    return text


def logc(template: str):
    """Print a color template to stderr."""
    err_console.print(colorize(template))
