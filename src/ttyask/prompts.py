"""Interaction loops, one per question kind.

Line-based kinds (text, integer, decimal, confirm, regex) read whole lines
and redraw the prompt in place until the input is accepted. Keystroke-based
kinds (yes/no, options, password) hold the terminal in raw mode for the
length of their loop.
"""

from __future__ import annotations

import logging
from typing import Callable

from ttyask.config import PromptConfig
from ttyask.keys import Key
from ttyask.model.question import Options, Question, QuestionType, Regex
from ttyask.render import LineRenderer, highlight
from ttyask.terminal.base import Terminal
from ttyask.validators import full_match, is_confirm, is_decimal, is_integer, wrap_index

logger = logging.getLogger(__name__)

CONFIRM_HINT = "(y/N) "
YES_SELECTED = f"{highlight('yes')} no\n"
NO_SELECTED = f"yes {highlight('no')}\n"

# prompt line + the line the cursor sits on after the input's newline
LINE_PROMPT_HEIGHT = 2

PromptLoop = Callable[[Question, LineRenderer], str]


def _retry_until(
    question: Question,
    renderer: LineRenderer,
    accept: Callable[[str], bool],
    suffix: str = "",
) -> str:
    renderer.print_prompt(question, suffix)
    answer = renderer.read_line()
    while not accept(answer):
        logger.debug("Rejected input for %r", question.key)
        renderer.erase(LINE_PROMPT_HEIGHT)
        renderer.print_prompt(question, suffix)
        answer = renderer.read_line()
    return answer


# ---------------------------------------------------------------------------
# Line-based loops
# ---------------------------------------------------------------------------


def ask_text(question: Question, renderer: LineRenderer) -> str:
    renderer.print_prompt(question)
    return renderer.read_line()


def ask_integer(question: Question, renderer: LineRenderer) -> str:
    return _retry_until(question, renderer, is_integer)


def ask_decimal(question: Question, renderer: LineRenderer) -> str:
    return _retry_until(question, renderer, is_decimal)


def ask_confirm(question: Question, renderer: LineRenderer) -> str:
    return _retry_until(question, renderer, is_confirm, CONFIRM_HINT)


def ask_regex(question: Question, renderer: LineRenderer) -> str:
    kind = question.kind
    assert isinstance(kind, Regex)
    return _retry_until(question, renderer, lambda s: full_match(kind.compiled, s))


# ---------------------------------------------------------------------------
# Keystroke loops
# ---------------------------------------------------------------------------


def ask_password(question: Question, renderer: LineRenderer) -> str:
    """Collect characters without echo until Enter."""
    terminal = renderer.terminal
    renderer.print_prompt(question)
    buffer: list[str] = []
    with terminal.raw_mode():
        while True:
            stroke = terminal.read_key()
            if stroke.key is Key.ENTER:
                break
            if stroke.key is Key.BACKSPACE:
                if buffer:
                    buffer.pop()
            elif stroke.is_printable:
                buffer.append(stroke.text)
    renderer.write("\n")
    return "".join(buffer)


def ask_yes_no(question: Question, renderer: LineRenderer) -> str:
    """Toggle between "yes" and "no" with Left/Right, commit with Enter."""
    terminal = renderer.terminal
    renderer.print_prompt(question, YES_SELECTED)
    position = True
    with terminal.raw_mode():
        while True:
            stroke = terminal.read_key()
            if stroke.key is Key.LEFT:
                position = True
                renderer.erase(2)
                renderer.print_prompt(question, YES_SELECTED)
            elif stroke.key is Key.RIGHT:
                position = False
                renderer.erase(2)
                renderer.print_prompt(question, NO_SELECTED)
            elif stroke.key is Key.ENTER:
                return "yes" if position else "no"


def _print_choices(renderer: LineRenderer, choices: tuple[str, ...], selected: int) -> None:
    lines = ["\n"]
    for i, label in enumerate(choices):
        if i == selected:
            lines.append(f"{highlight('> ' + label)}\n")
        else:
            lines.append(f"  {label}\n")
    renderer.write("".join(lines))
    renderer.terminal.flush()


def ask_options(question: Question, renderer: LineRenderer) -> str:
    """Move a marker through the choices with Up/Down, commit with Enter."""
    kind = question.kind
    assert isinstance(kind, Options)
    terminal = renderer.terminal
    choices = kind.choices
    last = len(choices) - 1
    height = len(choices) + 2
    selected = 0

    renderer.print_prompt(question)
    _print_choices(renderer, choices, selected)
    with terminal.raw_mode():
        while True:
            stroke = terminal.read_key()
            if stroke.key is Key.DOWN:
                selected = wrap_index(selected + 1, 0, last)
            elif stroke.key is Key.UP:
                selected = wrap_index(selected - 1, 0, last)
            elif stroke.key is Key.ENTER:
                break
            else:
                continue
            renderer.erase(height)
            renderer.print_prompt(question)
            _print_choices(renderer, choices, selected)

    renderer.erase(height)
    renderer.print_prompt(question, f"{highlight(choices[selected])}\n")
    return choices[selected]


PROMPT_LOOPS: dict[QuestionType, PromptLoop] = {
    QuestionType.TEXT: ask_text,
    QuestionType.INTEGER: ask_integer,
    QuestionType.DECIMAL: ask_decimal,
    QuestionType.CONFIRM: ask_confirm,
    QuestionType.REGEX: ask_regex,
    QuestionType.PASSWORD: ask_password,
    QuestionType.YES_NO: ask_yes_no,
    QuestionType.OPTIONS: ask_options,
}


def run_prompt(
    question: Question,
    terminal: Terminal,
    config: PromptConfig | None = None,
) -> str:
    """Run the loop for *question*'s kind on *terminal* and return the answer."""
    config = config or PromptConfig()
    renderer = LineRenderer(terminal, color=config.color)
    logger.debug("Asking %r (%s)", question.key, question.type.value)
    answer = PROMPT_LOOPS[question.type](question, renderer)
    terminal.flush()
    logger.debug("Stored answer for %r (%d chars)", question.key, len(answer))
    return answer
