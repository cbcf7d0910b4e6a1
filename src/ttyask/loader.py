"""Build an Inquirer from a JSON questionnaire document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ttyask.config import PromptConfig
from ttyask.errors import ConfigurationError
from ttyask.inquirer import Inquirer
from ttyask.model.question import Question, QuestionType
from ttyask.terminal.base import Terminal


def question_from_dict(data: dict[str, Any], index: int = 0) -> Question:
    """Build one Question from a mapping with key/prompt/type/choices/pattern."""
    where = f"question #{index + 1}"
    if not isinstance(data, dict):
        raise ConfigurationError(f"{where}: expected an object")
    try:
        key = data["key"]
        prompt = data["prompt"]
    except KeyError as exc:
        raise ConfigurationError(f"{where}: missing field {exc.args[0]!r}") from None

    raw_type = data.get("type")
    if raw_type is None:
        if "choices" in data:
            raw_type = QuestionType.OPTIONS.value
        elif "pattern" in data:
            raw_type = QuestionType.REGEX.value
        else:
            raw_type = QuestionType.TEXT.value
    try:
        qtype = QuestionType(raw_type)
    except ValueError:
        raise ConfigurationError(f"{where} ({key}): unknown type {raw_type!r}") from None

    try:
        if qtype is QuestionType.OPTIONS:
            choices = data.get("choices")
            if not isinstance(choices, list):
                raise ConfigurationError("options questions need a 'choices' list")
            return Question(key, prompt, [str(c) for c in choices])
        if qtype is QuestionType.REGEX:
            pattern = data.get("pattern")
            if not isinstance(pattern, str):
                raise ConfigurationError("regex questions need a 'pattern' string")
            return Question(key, prompt, pattern)
        return Question(key, prompt, qtype)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{where} ({key}): {exc}") from exc


def inquirer_from_dict(
    data: dict[str, Any],
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> Inquirer:
    """Build an Inquirer from a ``{"title": ..., "questions": [...]}`` mapping."""
    if not isinstance(data, dict):
        raise ConfigurationError("questionnaire must be a JSON object")
    questions = data.get("questions")
    if not isinstance(questions, list):
        raise ConfigurationError("questionnaire needs a 'questions' list")

    inquirer = Inquirer(str(data.get("title", "")), terminal=terminal, config=config)
    for i, entry in enumerate(questions):
        inquirer.add_question(question_from_dict(entry, i))
    return inquirer


def load_inquirer(
    path: Path,
    terminal: Terminal | None = None,
    config: PromptConfig | None = None,
) -> Inquirer:
    """Read a questionnaire file at *path*."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: invalid JSON ({exc})") from exc
    return inquirer_from_dict(data, terminal=terminal, config=config)
