"""ScriptedTerminal: replays prepared input and captures output in memory."""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from typing import Iterable, Iterator

from ttyask.errors import InputClosed
from ttyask.keys import POSIX_KEYMAP, KeyMap, KeyReader, Keystroke


class ScriptedTerminal:
    """Terminal that reads from prepared lines and raw keystrokes.

    *lines* feed ``read_line``; *keys* is a string of raw characters (using
    the sequences of *keymap*) that feed ``read_key``. Running out of either
    raises ``InputClosed``, as a closed stdin would.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        keys: str = "",
        keymap: KeyMap = POSIX_KEYMAP,
    ) -> None:
        self._lines: deque[str] = deque(lines)
        self._chars: deque[str] = deque(keys)
        self._keys = KeyReader(self._read_char, keymap)
        self._chunks: list[str] = []
        self.raw = False
        self.raw_entries = 0

    @property
    def output(self) -> str:
        """Everything written so far."""
        return "".join(self._chunks)

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def flush(self) -> None:
        pass

    def feed_lines(self, *lines: str) -> None:
        self._lines.extend(lines)

    def feed_keys(self, keys: str) -> None:
        self._chars.extend(keys)

    def read_line(self) -> str:
        if self.raw:
            raise RuntimeError("read_line() called while in raw mode")
        if not self._lines:
            raise InputClosed()
        return self._lines.popleft()

    def read_key(self) -> Keystroke:
        if not self.raw:
            raise RuntimeError("read_key() called outside raw mode")
        return self._keys.read()

    def _read_char(self) -> str:
        if not self._chars:
            raise InputClosed()
        return self._chars.popleft()

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        if self.raw:
            yield
            return
        self.raw = True
        self.raw_entries += 1
        try:
            yield
        finally:
            self.raw = False
