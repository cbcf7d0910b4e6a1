"""ttyask model layer -- public type re-exports."""

from ttyask.model.question import (
    Confirm,
    Decimal,
    Integer,
    Kind,
    Options,
    Password,
    Question,
    QuestionType,
    Regex,
    Text,
    YesNo,
)

__all__ = [
    "QuestionType",
    "Kind",
    "Text",
    "Integer",
    "Decimal",
    "Confirm",
    "YesNo",
    "Options",
    "Regex",
    "Password",
    "Question",
]
