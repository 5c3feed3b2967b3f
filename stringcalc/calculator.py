"""String calculator — sum the integers embedded in a delimited string.

Pipeline per call:
1. Resolve delimiters from the optional ``//`` header (default ``,``)
2. Strip the header, leaving the numeric body
3. Split the body on the literal delimiters, dropping empty tokens
4. Convert tokens to integers, failing on non-numbers and negatives
5. Sum every value that does not exceed the configured maximum (1000)
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from stringcalc.config import DEFAULT_MAX_VALUE, CalculatorConfig
from stringcalc.delimiters import parse_header
from stringcalc.errors import InvalidTokenError, NegativeNumberError
from stringcalc.models import Breakdown

logger = logging.getLogger(__name__)

# ASCII digits with an optional leading minus; surrounding whitespace is allowed
_INTEGER_RE = re.compile(r'\s*(-?)([0-9]+)\s*')


def tokenize(body: str, delimiters: Iterable[str]) -> list[str]:
    """Split body on any of the delimiters, matched as literal text.

    Where several delimiters match at the same position the longest wins,
    so ``**`` is not read as two ``*`` separators. Empty tokens between
    adjacent delimiters are discarded.

    Raises:
        ValueError: If no non-empty delimiter is given.
    """
    ordered = sorted({d for d in delimiters if d}, key=len, reverse=True)
    if not ordered:
        raise ValueError("at least one non-empty delimiter is required")

    tokens: list[str] = []
    start = i = 0
    while i < len(body):
        for d in ordered:
            if body.startswith(d, i):
                if i > start:
                    tokens.append(body[start:i])
                i += len(d)
                start = i
                break
        else:
            i += 1
    if start < len(body):
        tokens.append(body[start:])
    return tokens


def _split_token(token: str) -> tuple[str, str]:
    """Return (sign, digits) with leading zeros stripped from digits."""
    match = _INTEGER_RE.fullmatch(token)
    if not match:
        raise InvalidTokenError(token)
    return match.group(1), match.group(2).lstrip("0") or "0"


def parse_numbers(tokens: Iterable[str], max_value: int = DEFAULT_MAX_VALUE) -> list[int]:
    """Convert tokens to integers.

    Tokens with more digits than max_value are never converted; they become
    max_value + 1 with their sign kept, which is all the sum and the
    negative check need.

    Raises:
        InvalidTokenError: On the first token that is not a base-10 integer.
    """
    limit_digits = len(str(max_value))
    numbers = []
    for token in tokens:
        sign, digits = _split_token(token)
        value = max_value + 1 if len(digits) > limit_digits else int(digits)
        numbers.append(-value if sign else value)
    return numbers


def breakdown(numbers: str, config: Optional[CalculatorConfig] = None) -> Breakdown:
    """Run the full pipeline and keep every intermediate value.

    Raises the same errors as add().
    """
    config = config or CalculatorConfig()
    result = Breakdown(input=numbers)
    if numbers == "":
        return result

    parsed = parse_header(numbers, config)
    result.delimiters = parsed.delimiters
    result.tokens = tokenize(parsed.body, parsed.delimiters)
    result.numbers = parse_numbers(result.tokens, config.max_value)

    negatives = [(n, t) for n, t in zip(result.numbers, result.tokens) if n < 0]
    if negatives:
        labels = ["".join(_split_token(t)) for _, t in negatives]
        raise NegativeNumberError([n for n, _ in negatives], labels)

    result.included = [n for n in result.numbers if n <= config.max_value]
    result.ignored = [n for n in result.numbers if n > config.max_value]
    if result.ignored:
        logger.debug("Ignoring values above %d: %r", config.max_value, result.ignored)
    return result


def add(numbers: str, config: Optional[CalculatorConfig] = None) -> int:
    """Add the numbers contained in a delimited string.

    Args:
        numbers: Input such as ``"1,2"``, ``"1\\n2,3"`` or ``"//[*][%]\\n1*2%3"``.
        config: Limits to apply. Defaults to the classic kata rules.

    Returns:
        The sum of all values, leaving out those above ``config.max_value``.
        An empty string sums to 0.

    Raises:
        NegativeNumberError: If any value is negative (all are reported).
        InvalidTokenError: If a token is not an integer.
        MalformedHeaderError: If the ``//`` header cannot be parsed.
    """
    return breakdown(numbers, config).total
