"""Terminal backends: the real console and a scripted stand-in."""

from ttyask.terminal.base import Terminal
from ttyask.terminal.console import ConsoleTerminal
from ttyask.terminal.scripted import ScriptedTerminal

__all__ = [
    "Terminal",
    "ConsoleTerminal",
    "ScriptedTerminal",
]
