"""Inquirer: an ordered, key-indexed questionnaire."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from ttyask.config import PromptConfig
from ttyask.errors import UnknownQuestionError
from ttyask.model.question import Kind, Question, QuestionType
from ttyask.render import LineRenderer
from ttyask.terminal.base import Terminal

logger = logging.getLogger(__name__)


class Inquirer:
    """Asks its questions one after another, in the order they were added.

    Keys are expected to be unique. If a key is added twice, lookups only
    ever see the first question registered under it.
    """

    def __init__(
        self,
        title: str = "",
        terminal: Terminal | None = None,
        config: PromptConfig | None = None,
    ) -> None:
        self.title = title
        self.config = config or PromptConfig()
        if terminal is None:
            from ttyask.terminal.console import ConsoleTerminal

            terminal = ConsoleTerminal(keymap=self.config.key_table())
        self.terminal = terminal
        self._questions: list[tuple[str, Question]] = []

    # --- building -------------------------------------------------------------

    def add_question(self, question: Question) -> None:
        self._questions.append((question.key, question))

    def add(
        self,
        key: str,
        prompt: str,
        kind: Kind | QuestionType | Sequence[str] | str | None = None,
    ) -> Question:
        """Build a question from the arguments, append it and return it."""
        question = Question(key, prompt, kind)
        self.add_question(question)
        return question

    @property
    def questions(self) -> list[Question]:
        return [q for _, q in self._questions]

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    # --- asking ---------------------------------------------------------------

    def ask(self, reask: bool = False) -> None:
        """Print the title, then ask every question in insertion order.

        Questions that already have an answer are skipped unless *reask*.
        """
        renderer = LineRenderer(self.terminal, color=self.config.color)
        if self.title:
            renderer.print_title(self.title)
        logger.debug("Asking %d questions (reask=%s)", len(self._questions), reask)
        for _, question in self._questions:
            question.ask(self.terminal, reask=reask, config=self.config)
        self.terminal.flush()

    # --- lookup ---------------------------------------------------------------

    def _find(self, key: str) -> Question | None:
        for question_key, question in self._questions:
            if question_key == key:
                return question
        return None

    def answer(self, key: str) -> str:
        """Return the answer stored under *key*, or "" if there is none."""
        question = self._find(key)
        if question is None or question.answer is None:
            return ""
        return question.answer

    def answers(self) -> dict[str, str]:
        """All answers by key, in asking order."""
        result: dict[str, str] = {}
        for key, question in self._questions:
            result.setdefault(key, question.answer or "")
        return result

    def get_question(self, key: str) -> Question:
        """Return the question registered under *key*.

        Raises UnknownQuestionError if there is none.
        """
        question = self._find(key)
        if question is None:
            raise UnknownQuestionError(key)
        return question

    # --- reporting ------------------------------------------------------------

    def print_questions(self) -> None:
        for key, question in self._questions:
            self.terminal.write(f"{key}: {question.prompt} ({question.type.value})\n")
        self.terminal.flush()

    def print_answers(self) -> None:
        for key, question in self._questions:
            self.terminal.write(f"{key}: {question.answer or ''}\n")
        self.terminal.flush()
