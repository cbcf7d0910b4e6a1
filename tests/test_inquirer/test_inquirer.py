"""Tests for Inquirer orchestration and lookup."""

from __future__ import annotations

import pytest

from ttyask.config import PromptConfig
from ttyask.errors import ConfigurationError, InputClosed, UnknownQuestionError
from ttyask.inquirer import Inquirer
from ttyask.model.question import Question, QuestionType
from ttyask.terminal.scripted import ScriptedTerminal

DOWN = "\x1b[B"
UP = "\x1b[A"
RIGHT = "\x1b[C"
ENTER = "\r"


def _inquirer(title: str = "", lines=(), keys: str = "") -> tuple[Inquirer, ScriptedTerminal]:
    term = ScriptedTerminal(lines=lines, keys=keys)
    return Inquirer(title, terminal=term, config=PromptConfig(color=False)), term


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------


class TestBuilding:
    def test_add_question_keeps_order(self) -> None:
        inquirer, _ = _inquirer()
        inquirer.add_question(Question("b", "B?"))
        inquirer.add_question(Question("a", "A?"))
        assert [q.key for q in inquirer] == ["b", "a"]
        assert len(inquirer) == 2

    def test_add_builds_question(self) -> None:
        inquirer, _ = _inquirer()
        q = inquirer.add("cake", "Which?", ["A", "B"])
        assert q.type is QuestionType.OPTIONS
        assert inquirer.questions == [q]

    def test_add_with_empty_choices_fails_before_prompting(self) -> None:
        inquirer, term = _inquirer()
        with pytest.raises(ConfigurationError):
            inquirer.add("cake", "Which?", [])
        assert len(inquirer) == 0
        assert term.output == ""


# ---------------------------------------------------------------------------
# Asking
# ---------------------------------------------------------------------------


class TestAsk:
    def test_text_end_to_end(self) -> None:
        inquirer, _ = _inquirer(lines=["Ada"])
        inquirer.add("name", "Your name?")
        inquirer.ask()
        assert inquirer.answer("name") == "Ada"

    def test_options_end_to_end(self) -> None:
        inquirer, _ = _inquirer(keys=DOWN + DOWN + ENTER)
        inquirer.add("cake", "Which?", ["A", "B", "C"])
        inquirer.ask()
        assert inquirer.answer("cake") == "C"

    def test_options_wrap_below_start(self) -> None:
        inquirer, _ = _inquirer(keys=UP + ENTER)
        inquirer.add("cake", "Which?", ["A", "B", "C"])
        inquirer.ask()
        assert inquirer.answer("cake") == "C"

    def test_title_printed_once_before_questions(self) -> None:
        inquirer, term = _inquirer("Cake order", lines=["Ada", "3"])
        inquirer.add("name", "Your name?")
        inquirer.add("n", "How many?", QuestionType.INTEGER)
        inquirer.ask()
        assert term.output.startswith("> Cake order\n? Your name? ")
        assert term.output.count("Cake order") == 1

    def test_empty_title_not_printed(self) -> None:
        inquirer, term = _inquirer(lines=["Ada"])
        inquirer.add("name", "Your name?")
        inquirer.ask()
        assert term.output == "? Your name? "

    def test_mixed_questions_in_order(self) -> None:
        inquirer, _ = _inquirer(
            lines=["cake", "x", "4", "n", "123456789"],
            keys=RIGHT + ENTER + DOWN + ENTER + "pw" + ENTER,
        )
        inquirer.add("query", "What do you want to do?")
        inquirer.add("birthday", "Is this for a birthday?", QuestionType.YES_NO)
        inquirer.add("candles", "How many candles?", QuestionType.INTEGER)
        inquirer.add("type", "Which cake?", ["Chocolate", "Cheesecake"])
        inquirer.add("delivery", "Delivery?", QuestionType.CONFIRM)
        inquirer.add("number", "Contact", r"\d{9}")
        inquirer.add("password", "Password", QuestionType.PASSWORD)
        inquirer.ask()
        assert inquirer.answers() == {
            "query": "cake",
            "birthday": "no",
            "candles": "4",
            "type": "Cheesecake",
            "delivery": "n",
            "number": "123456789",
            "password": "pw",
        }

    def test_answered_questions_skipped(self) -> None:
        inquirer, term = _inquirer(lines=["Ada"])
        inquirer.add("name", "Your name?")
        inquirer.ask()
        inquirer.ask()
        assert inquirer.answer("name") == "Ada"
        assert term.output.count("Your name?") == 1

    def test_reask(self) -> None:
        inquirer, term = _inquirer(lines=["Ada", "Bob"])
        inquirer.add("name", "Your name?")
        inquirer.ask()
        inquirer.ask(reask=True)
        assert inquirer.answer("name") == "Bob"

    def test_closed_input_propagates(self) -> None:
        inquirer, _ = _inquirer(lines=["Ada"])
        inquirer.add("name", "Your name?")
        inquirer.add("age", "Age?", QuestionType.INTEGER)
        with pytest.raises(InputClosed):
            inquirer.ask()
        assert inquirer.answer("name") == "Ada"
        assert inquirer.get_question("age").asked is False


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_unknown_answer_is_empty(self) -> None:
        inquirer, _ = _inquirer()
        assert inquirer.answer("unknownKey") == ""

    def test_unasked_answer_is_empty(self) -> None:
        inquirer, _ = _inquirer()
        inquirer.add("name", "Your name?")
        assert inquirer.answer("name") == ""

    def test_get_question(self) -> None:
        inquirer, _ = _inquirer()
        q = inquirer.add("name", "Your name?")
        assert inquirer.get_question("name") is q

    def test_get_question_unknown_key(self) -> None:
        inquirer, _ = _inquirer()
        with pytest.raises(UnknownQuestionError, match="missing"):
            inquirer.get_question("missing")

    def test_unknown_question_is_key_error(self) -> None:
        inquirer, _ = _inquirer()
        with pytest.raises(KeyError):
            inquirer.get_question("missing")

    def test_duplicate_keys_first_wins(self) -> None:
        inquirer, _ = _inquirer(lines=["first", "second"])
        first = inquirer.add("dup", "One?")
        inquirer.add("dup", "Two?")
        inquirer.ask()
        assert inquirer.get_question("dup") is first
        assert inquirer.answer("dup") == "first"
        assert inquirer.answers() == {"dup": "first"}


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


class TestReporting:
    def test_print_questions(self) -> None:
        inquirer, term = _inquirer()
        inquirer.add("name", "Your name?")
        inquirer.add("n", "How many?", QuestionType.INTEGER)
        inquirer.print_questions()
        assert term.output == "name: Your name? (text)\nn: How many? (integer)\n"

    def test_print_answers(self) -> None:
        inquirer, term = _inquirer(lines=["Ada"])
        inquirer.add("name", "Your name?")
        inquirer.add("n", "How many?", QuestionType.INTEGER)
        inquirer.get_question("name").ask(term)
        inquirer.print_answers()
        assert term.output.endswith("name: Ada\nn: \n")
