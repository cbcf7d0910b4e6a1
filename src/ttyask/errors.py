"""Error hierarchy for ttyask."""

from __future__ import annotations


class TtyAskError(Exception):
    """Base error for all ttyask errors."""


class ConfigurationError(TtyAskError, ValueError):
    """A question or questionnaire was configured incorrectly by the caller."""


class UnknownQuestionError(ConfigurationError, KeyError):
    """No question is registered under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No question with key {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


# ---------------------------------------------------------------------------
# Process-terminating signals
# ---------------------------------------------------------------------------


class PromptCancelled(SystemExit):
    """The user pressed an interrupt or end-of-transmission key.

    Left uncaught it ends the process quietly with status 130, like the
    shell does for Ctrl-C. Host applications may catch it to clean up.
    """

    def __init__(self, char: str = "\x03") -> None:
        super().__init__(130)
        self.char = char


class InputClosed(SystemExit):
    """Standard input reached end-of-stream while a line was being read.

    Treated as a successful end of the program (status 0).
    """

    def __init__(self) -> None:
        super().__init__(0)
