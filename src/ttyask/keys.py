"""Keystroke decoding: raw terminal sequences to logical keys.

Arrow keys and Backspace arrive as different raw sequences depending on the
terminal driver family. Each family is described by a ``KeyMap`` table;
the prompt loops only ever see the logical ``Key`` values.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from ttyask.errors import ConfigurationError, PromptCancelled

logger = logging.getLogger(__name__)

# Interrupt (Ctrl-C) and end-of-transmission (Ctrl-D)
CANCEL_CHARS = frozenset({"\x03", "\x04"})

ESC = "\x1b"
# CSI and SS3 introducers; both run until a final byte in 0x40-0x7E
ESC_INTRODUCERS = frozenset({"[", "O"})


class Key(Enum):
    """Logical keys recognised by the prompt loops."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    BACKSPACE = "backspace"
    CHARACTER = "character"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Keystroke:
    """One decoded keystroke and the raw characters it came from."""

    key: Key
    text: str = ""

    @property
    def is_printable(self) -> bool:
        return self.key is Key.CHARACTER and self.text.isprintable()


KeyMap = Mapping[str, Key]

POSIX_KEYMAP: KeyMap = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    # application cursor mode
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}

WINDOWS_KEYMAP: KeyMap = {
    "\xe0H": Key.UP,
    "\xe0P": Key.DOWN,
    "\xe0K": Key.LEFT,
    "\xe0M": Key.RIGHT,
    "\x00H": Key.UP,
    "\x00P": Key.DOWN,
    "\x00K": Key.LEFT,
    "\x00M": Key.RIGHT,
    "\r": Key.ENTER,
    "\x08": Key.BACKSPACE,
}

KEYMAPS: dict[str, KeyMap] = {
    "posix": POSIX_KEYMAP,
    "windows": WINDOWS_KEYMAP,
}


def resolve_keymap(name: str = "auto") -> KeyMap:
    """Return the key table registered under *name*.

    ``"auto"`` picks the Windows console table on win32 and the POSIX table
    everywhere else.
    """
    if name == "auto":
        name = "windows" if sys.platform == "win32" else "posix"
    try:
        return KEYMAPS[name]
    except KeyError:
        known = ", ".join(sorted(KEYMAPS))
        raise ConfigurationError(
            f"Unknown keymap {name!r} (expected auto, {known})"
        ) from None


def _is_proper_prefix(buffer: str, keymap: KeyMap) -> bool:
    return any(seq != buffer and seq.startswith(buffer) for seq in keymap)


def _is_final_byte(char: str) -> bool:
    return "\x40" <= char <= "\x7e"


class KeyReader:
    """Decodes raw characters from *read_char* into logical keystrokes.

    Characters are accumulated while they form the start of a longer mapped
    sequence. ANSI escape sequences (``ESC [`` and ``ESC O``) are always
    read through to their final byte, so unmapped ones such as Delete or
    Ctrl+Right come back as a single ``Key.UNKNOWN``. An ESC followed by a
    character that starts no sequence is reported on its own and the
    character is decoded again. A cancellation character anywhere raises
    ``PromptCancelled``.
    """

    def __init__(self, read_char: Callable[[], str], keymap: KeyMap) -> None:
        self._read_char = read_char
        self._keymap = keymap
        self._pending: deque[str] = deque()

    def _next_char(self) -> str:
        if self._pending:
            return self._pending.popleft()
        char = self._read_char()
        if char in CANCEL_CHARS:
            logger.debug("Cancellation key %r received", char)
            raise PromptCancelled(char)
        return char

    def _lookup(self, buffer: str) -> Keystroke:
        if buffer in self._keymap:
            return Keystroke(self._keymap[buffer], buffer)
        if len(buffer) == 1:
            return Keystroke(Key.CHARACTER, buffer)
        return Keystroke(Key.UNKNOWN, buffer)

    def _read_escape(self) -> Keystroke:
        char = self._next_char()
        buffer = ESC + char
        if char in ESC_INTRODUCERS:
            while True:
                char = self._next_char()
                buffer += char
                if _is_final_byte(char):
                    return self._lookup(buffer)
        if buffer in self._keymap:
            return self._lookup(buffer)
        self._pending.appendleft(char)
        return Keystroke(Key.UNKNOWN, ESC)

    def read(self) -> Keystroke:
        buffer = self._next_char()
        if buffer == ESC and _is_proper_prefix(ESC, self._keymap):
            return self._read_escape()
        while _is_proper_prefix(buffer, self._keymap):
            buffer += self._next_char()
        return self._lookup(buffer)
