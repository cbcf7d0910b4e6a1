"""ConsoleTerminal: the process's real stdin/stdout."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import IO, Iterator

from ttyask.errors import InputClosed, PromptCancelled
from ttyask.keys import KeyMap, KeyReader, Keystroke, resolve_keymap

if sys.platform == "win32":
    import msvcrt
else:
    import termios
    import tty

logger = logging.getLogger(__name__)


class ConsoleTerminal:
    """Terminal backed by the process's standard streams.

    On POSIX, raw mode is entered with termios/tty and the previous
    attributes are put back when the ``raw_mode()`` block exits for any
    reason. On Windows, ``msvcrt.getwch`` already returns single unechoed
    keystrokes, so raw mode needs no state change.
    """

    def __init__(
        self,
        keymap: KeyMap | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        keymap = keymap if keymap is not None else resolve_keymap()
        self._keys = KeyReader(self._read_char, keymap)
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._raw = False

    # --- output ---------------------------------------------------------------

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def flush(self) -> None:
        self._stdout.flush()

    # --- input ----------------------------------------------------------------

    def read_line(self) -> str:
        """Read one line from stdin without its line terminator.

        Ctrl-C while the line is typed cancels like it does in raw mode.
        """
        self.flush()
        try:
            line = self._stdin.readline()
        except KeyboardInterrupt:
            raise PromptCancelled("\x03") from None
        if not line:
            raise InputClosed()
        return line.rstrip("\r\n")

    def read_key(self) -> Keystroke:
        if not self._raw:
            with self.raw_mode():
                return self._keys.read()
        return self._keys.read()

    def _read_char(self) -> str:
        if sys.platform == "win32":
            return msvcrt.getwch()
        char = self._stdin.read(1)
        if not char:
            raise InputClosed()
        return char

    # --- raw mode ---------------------------------------------------------------

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Deliver keystrokes immediately and without echo for the block."""
        if self._raw or sys.platform == "win32":
            yield
            return

        self.flush()
        fd = self._stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd, termios.TCSADRAIN)
            # keep output post-processing so "\n" still returns the carriage
            mode = termios.tcgetattr(fd)
            mode[1] |= termios.OPOST | termios.ONLCR
            termios.tcsetattr(fd, termios.TCSADRAIN, mode)
            self._raw = True
            logger.debug("Terminal switched to raw mode")
            yield
        finally:
            self._raw = False
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            logger.debug("Terminal attributes restored")
