"""Reference examples for the string calculator.

The canonical kata inputs with their expected outcome, used by the
``examples`` CLI command as a self-check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from stringcalc.calculator import add
from stringcalc.errors import CalculatorError, NegativeNumberError

Expected = Union[int, type]


@dataclass(frozen=True)
class Example:
    """One input and what add() should make of it (a sum or an error type)."""

    input: str
    expected: Expected
    note: str = ""


@dataclass
class ExampleResult:
    """Outcome of running one Example."""

    example: Example
    actual: Optional[int] = None
    error: Optional[CalculatorError] = None

    @property
    def verdict(self) -> str:
        expected = self.example.expected
        if isinstance(expected, int):
            return "pass" if self.error is None and self.actual == expected else "fail"
        return "pass" if isinstance(self.error, expected) else "fail"

    @property
    def actual_display(self) -> str:
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        return str(self.actual)


REFERENCE_EXAMPLES: list[Example] = [
    Example("", 0, "empty input"),
    Example("1", 1, "single number"),
    Example("1,5", 6, "two numbers"),
    Example("1\n2,3", 6, "newline as delimiter"),
    Example("//;\n1;2", 3, "custom delimiter"),
    Example("//|\n1|2|3", 6, "pattern metacharacter as delimiter"),
    Example("//[***]\n1***2***3", 6, "bracketed long delimiter"),
    Example("//[*][%]\n1*2%3", 6, "several delimiters"),
    Example("//[**][%%]\n1**2%%3", 6, "several long delimiters"),
    Example("2,1001", 2, "values above 1000 ignored"),
    Example("//;\n1;1001;3", 4, "values above 1000 ignored with header"),
    Example("//;\n1;-2;3", NegativeNumberError, "negative rejected"),
    Example("//[**][%%]\n1**-2%%3", NegativeNumberError, "negative rejected"),
]


def run_example(example: Example) -> ExampleResult:
    """Run add() on one example, capturing calculator errors."""
    try:
        return ExampleResult(example=example, actual=add(example.input))
    except CalculatorError as e:
        return ExampleResult(example=example, error=e)


def run_examples(examples: Optional[list[Example]] = None) -> list[ExampleResult]:
    """Run every example (the reference set by default)."""
    if examples is None:
        examples = REFERENCE_EXAMPLES
    return [run_example(e) for e in examples]
