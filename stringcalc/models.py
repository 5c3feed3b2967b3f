"""Data models for the string calculator.

ParsedInput and Breakdown — the transient structures that flow through
delimiters → calculator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ParsedInput:
    """An input string split into its active delimiters and numeric body."""

    delimiters: tuple[str, ...]
    body: str
    header: Optional[str] = None

    @property
    def has_header(self) -> bool:
        return self.header is not None


@dataclass
class Breakdown:
    """Every intermediate value of a single add() call."""

    input: str
    delimiters: tuple[str, ...] = ()
    tokens: list[str] = field(default_factory=list)
    numbers: list[int] = field(default_factory=list)
    included: list[int] = field(default_factory=list)
    ignored: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.included)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "input": self.input,
            "delimiters": list(self.delimiters),
            "tokens": self.tokens,
            "numbers": self.numbers,
            "included": self.included,
            "ignored": self.ignored,
            "total": self.total,
        }
