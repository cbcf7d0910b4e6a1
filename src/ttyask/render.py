"""Line rendering: ANSI escape sequences and in-place redraw."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ttyask.model.question import Question
    from ttyask.terminal.base import Terminal

CURSOR_UP = "\x1b[1A"
ERASE_LINE = "\x1b[2K"
CARRIAGE_RETURN = "\r"

BLUE = "\033[34m"
BOLD = "\033[1m"
RESET = "\033[0m"

_SGR_RE = re.compile(r"\033\[[0-9;]*m")


def erase_lines(count: int) -> str:
    """Escape sequence that clears the last *count* lines.

    The cursor ends at column 0 of the first cleared line.
    """
    if count <= 0:
        return ""
    return ERASE_LINE + (CURSOR_UP + ERASE_LINE) * (count - 1) + CARRIAGE_RETURN


def highlight(text: str) -> str:
    return f"{BLUE}{text}{RESET}"


def strip_color(text: str) -> str:
    return _SGR_RE.sub("", text)


class LineRenderer:
    """Writes prompt text to a terminal and erases what it wrote.

    With *color* off, SGR colour codes are dropped from everything written;
    cursor movement and line erasing are kept.
    """

    def __init__(self, terminal: Terminal, color: bool = True) -> None:
        self.terminal = terminal
        self.color = color

    def write(self, text: str) -> None:
        if not self.color:
            text = strip_color(text)
        self.terminal.write(text)

    def erase(self, count: int) -> None:
        self.terminal.write(erase_lines(count))

    def print_prompt(self, question: Question, suffix: str = "") -> None:
        self.write(f"{BOLD}{BLUE}?{RESET} {BOLD}{question.prompt}{RESET} {suffix}")
        self.terminal.flush()

    def print_title(self, title: str) -> None:
        self.write(f"{BLUE}>{RESET} {title}\n")

    def read_line(self) -> str:
        """Read one line of input, shown in the input colour."""
        self.write(BLUE)
        self.terminal.flush()
        try:
            return self.terminal.read_line()
        finally:
            self.write(RESET)
