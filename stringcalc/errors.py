"""Exception types raised by the string calculator.

Everything derives from CalculatorError, which is itself a ValueError, so
callers that only care about "bad input" can catch ValueError.
"""

from __future__ import annotations

from typing import Optional


class CalculatorError(ValueError):
    """Base class for all string calculator failures."""


class NegativeNumberError(CalculatorError):
    """Raised when the input contains one or more negative numbers.

    Every negative value is reported, in the order it appeared. labels, when
    given, is the text shown for each value in the message.
    """

    def __init__(self, negatives: list[int], labels: Optional[list[str]] = None) -> None:
        self.negatives = list(negatives)
        listed = ", ".join(labels if labels is not None else (str(n) for n in self.negatives))
        super().__init__(f"negative numbers not allowed: {listed}")


class InvalidTokenError(CalculatorError):
    """Raised when a token between delimiters is not a base-10 integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid number: {token!r}")


class MalformedHeaderError(CalculatorError):
    """Raised when a ``//`` delimiter header cannot be parsed."""

    def __init__(self, header: str, reason: str) -> None:
        self.header = header
        self.reason = reason
        super().__init__(f"malformed delimiter header {header!r}: {reason}")
