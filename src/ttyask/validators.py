"""Answer validators for the constrained question types."""

from __future__ import annotations

import re

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

CONFIRM_ANSWERS = frozenset({"y", "Y", "n", "N"})


def _has_numeric_lead(s: str) -> bool:
    return bool(s) and (s[0] in "+-" or "0" <= s[0] <= "9")


def is_integer(s: str) -> bool:
    """True if *s* is a whole base-10 integer with an optional sign."""
    return _has_numeric_lead(s) and _INTEGER_RE.fullmatch(s) is not None


def is_decimal(s: str) -> bool:
    """True if *s* is a floating-point literal with nothing trailing.

    The first character must be a digit or a sign, so ``".5"`` is rejected
    while ``"-.5"``, ``"5"`` and ``"1e3"`` are accepted. Unlike C's
    ``strtod``, ``inf``, ``nan`` and hex floats such as ``0x1p3`` are not
    decimals here.
    """
    return _has_numeric_lead(s) and _DECIMAL_RE.fullmatch(s) is not None


def is_confirm(s: str) -> bool:
    return s in CONFIRM_ANSWERS


def full_match(pattern: re.Pattern[str] | str, s: str) -> bool:
    """True if *pattern* matches the whole of *s*."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return pattern.fullmatch(s) is not None


def wrap_index(k: int, lower: int, upper: int) -> int:
    """Wrap *k* cyclically into the inclusive range [lower, upper].

    ``upper + 1`` wraps to ``lower`` and ``lower - 1`` wraps to ``upper``.
    """
    if upper < lower:
        raise ValueError(f"Empty range [{lower}, {upper}]")
    span = upper - lower + 1
    if k < lower:
        k += span * ((lower - k) // span + 1)
    return lower + (k - lower) % span
