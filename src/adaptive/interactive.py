"""Interactive prompts."""

import re
from typing import Optional

from rich.text import Text

from .debug import debug
from .output import QuietConsole, console as default_console
from .text import lc

_YES = re.compile(r"y(es)?")
_NO = re.compile(r"n(o)?")


def confirm(question: str, default: str = "y", console: Optional[QuietConsole] = None) -> bool:
    """Ask a yes/no question and return True when the answer is yes.

    With a "y" default anything but "n"/"no" is a yes; with any other default
    only "y"/"yes" is. Answers are case-insensitive and end of input takes
    the default.
    """
    console = console or default_console
    default_yes = lc(default) == "y"
    hint = "(Y/n)" if default_yes else "(y/N)"

    try:
        response = console.input(Text(f"{question} {hint} "))
    except EOFError:
        response = ""

    answer = lc(response.strip())
    if default_yes:
        accepted = _NO.fullmatch(answer) is None
    else:
        accepted = _YES.fullmatch(answer) is not None

    debug("confirm", f"{question!r} answered {answer!r}, returning {accepted}")
    return accepted
