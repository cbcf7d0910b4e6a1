"""Terminal protocol definition."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from ttyask.keys import Keystroke


class Terminal(Protocol):
    """What the prompt loops need from a terminal.

    ``read_key`` is only valid inside ``raw_mode()``; ``read_line`` only
    outside it.
    """

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def read_line(self) -> str: ...

    def read_key(self) -> Keystroke: ...

    def raw_mode(self) -> AbstractContextManager[None]: ...
