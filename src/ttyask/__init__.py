"""ttyask: interactive terminal question-and-answer prompts."""

from ttyask.config import PromptConfig
from ttyask.errors import (
    ConfigurationError,
    InputClosed,
    PromptCancelled,
    TtyAskError,
    UnknownQuestionError,
)
from ttyask.inquirer import Inquirer
from ttyask.model.question import (
    Confirm,
    Decimal,
    Integer,
    Options,
    Password,
    Question,
    QuestionType,
    Regex,
    Text,
    YesNo,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "PromptConfig",
    # errors
    "TtyAskError",
    "ConfigurationError",
    "UnknownQuestionError",
    "PromptCancelled",
    "InputClosed",
    # model
    "QuestionType",
    "Text",
    "Integer",
    "Decimal",
    "Confirm",
    "YesNo",
    "Options",
    "Regex",
    "Password",
    "Question",
    # orchestration
    "Inquirer",
]
