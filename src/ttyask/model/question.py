"""Question model: question kinds and the per-question answer state."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Sequence, Union

from ttyask.errors import ConfigurationError

if TYPE_CHECKING:
    from ttyask.config import PromptConfig
    from ttyask.terminal.base import Terminal


class QuestionType(Enum):
    """Kind of answer a question collects."""

    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    CONFIRM = "confirm"
    YES_NO = "yes_no"
    OPTIONS = "options"
    REGEX = "regex"
    PASSWORD = "password"


# ---------------------------------------------------------------------------
# Kinds: one variant per QuestionType, each holding only its own payload
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    type: ClassVar[QuestionType] = QuestionType.TEXT


@dataclass(frozen=True)
class Integer:
    type: ClassVar[QuestionType] = QuestionType.INTEGER


@dataclass(frozen=True)
class Decimal:
    type: ClassVar[QuestionType] = QuestionType.DECIMAL


@dataclass(frozen=True)
class Confirm:
    type: ClassVar[QuestionType] = QuestionType.CONFIRM


@dataclass(frozen=True)
class YesNo:
    type: ClassVar[QuestionType] = QuestionType.YES_NO


@dataclass(frozen=True)
class Password:
    type: ClassVar[QuestionType] = QuestionType.PASSWORD


@dataclass(frozen=True)
class Options:
    """A closed list of labels; the answer is the chosen label."""

    type: ClassVar[QuestionType] = QuestionType.OPTIONS

    choices: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "choices", tuple(self.choices))
        if not self.choices:
            raise ConfigurationError("Options question must have one or more choices")


@dataclass(frozen=True)
class Regex:
    """Free text that must fully match *pattern*."""

    type: ClassVar[QuestionType] = QuestionType.REGEX

    pattern: str
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern)
        except re.error as exc:
            raise ConfigurationError(f"Invalid pattern {self.pattern!r}: {exc}") from exc
        object.__setattr__(self, "compiled", compiled)


Kind = Union[Text, Integer, Decimal, Confirm, YesNo, Options, Regex, Password]

_SIMPLE_KINDS: dict[QuestionType, type] = {
    QuestionType.TEXT: Text,
    QuestionType.INTEGER: Integer,
    QuestionType.DECIMAL: Decimal,
    QuestionType.CONFIRM: Confirm,
    QuestionType.YES_NO: YesNo,
    QuestionType.PASSWORD: Password,
}

_KIND_CLASSES = (Text, Integer, Decimal, Confirm, YesNo, Options, Regex, Password)


def make_kind(value: Kind | QuestionType | Sequence[str] | str | None = None) -> Kind:
    """Build a kind from any of the accepted construction shapes.

    - ``None``                -> Text
    - a ``QuestionType``      -> that kind (only for kinds with no payload)
    - a ``str``               -> Regex with that pattern
    - a sequence of ``str``   -> Options with those choices
    - a kind instance         -> returned unchanged
    """
    if value is None:
        return Text()
    if isinstance(value, _KIND_CLASSES):
        return value
    if isinstance(value, QuestionType):
        try:
            return _SIMPLE_KINDS[value]()
        except KeyError:
            raise ConfigurationError(
                f"{value.value} questions need a payload; pass choices or a pattern"
            ) from None
    if isinstance(value, str):
        return Regex(value)
    return Options(tuple(value))


# ---------------------------------------------------------------------------
# Question
# ---------------------------------------------------------------------------


class Question:
    """One configured prompt and the answer it produced.

    The key, prompt and kind are fixed at construction; only ``answer`` and
    ``asked`` change, once per run of the interaction loop.
    """

    def __init__(
        self,
        key: str,
        prompt: str,
        kind: Kind | QuestionType | Sequence[str] | str | None = None,
    ) -> None:
        self._key = key
        self._prompt = prompt
        self._kind = make_kind(kind)
        self.answer: str | None = None
        self.asked = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def type(self) -> QuestionType:
        return self._kind.type

    def ask(
        self,
        terminal: Terminal,
        reask: bool = False,
        config: PromptConfig | None = None,
    ) -> str:
        """Run the interaction loop and return the answer.

        An already answered question returns its stored answer without
        prompting unless *reask* is true.
        """
        if self.asked and not reask:
            return self.answer or ""

        from ttyask.prompts import run_prompt

        self.answer = run_prompt(self, terminal, config)
        self.asked = True
        return self.answer

    def reset(self) -> None:
        """Forget the stored answer so the next ``ask`` prompts again."""
        self.answer = None
        self.asked = False

    def __repr__(self) -> str:
        return f"Question(key={self._key!r}, prompt={self._prompt!r}, kind={self._kind!r})"
