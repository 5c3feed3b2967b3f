"""Parse the optional ``//`` delimiter header of calculator input.

Header format (first line of the input):
    //;\\n1;2           single literal delimiter
    //[***]\\n1***2     one bracketed delimiter, any length
    //[*][%]\\n1*2%3    several bracketed delimiters

Newline is always an active delimiter, header or not.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from stringcalc.config import CalculatorConfig
from stringcalc.errors import MalformedHeaderError
from stringcalc.models import ParsedInput

logger = logging.getLogger(__name__)

HEADER_PREFIX = "//"
NEWLINE = "\n"

# A run of one or more non-empty bracket groups: [a][bb][ccc]
_BRACKET_SPEC_RE = re.compile(r'(?:\[[^\]]+\])+')
_BRACKET_GROUP_RE = re.compile(r'\[([^\]]+)\]')


def _with_newline(delimiters: list[str]) -> tuple[str, ...]:
    """Append the implicit newline delimiter, dropping duplicates."""
    result: list[str] = []
    for d in delimiters + [NEWLINE]:
        if d not in result:
            result.append(d)
    return tuple(result)


def parse_delimiter_spec(spec: str) -> list[str]:
    """Turn the text between ``//`` and the newline into delimiters.

    Raises:
        MalformedHeaderError: On an empty spec or broken bracket groups.
    """
    if not spec:
        raise MalformedHeaderError(spec, "no delimiter declared")
    if not spec.startswith("["):
        return [spec]
    if not _BRACKET_SPEC_RE.fullmatch(spec):
        raise MalformedHeaderError(spec, "expected one or more non-empty [..] bracket groups")
    return _BRACKET_GROUP_RE.findall(spec)


def parse_header(numbers: str, config: Optional[CalculatorConfig] = None) -> ParsedInput:
    """Split raw input into active delimiters and the numeric body.

    Args:
        numbers: Raw calculator input, possibly starting with a header line.
        config: Supplies the default delimiter when there is no header.

    Returns:
        ParsedInput with the header line already stripped from the body.
    """
    config = config or CalculatorConfig()

    if not numbers.startswith(HEADER_PREFIX):
        return ParsedInput(
            delimiters=_with_newline([config.default_delimiter]),
            body=numbers,
        )

    end = numbers.find(NEWLINE, len(HEADER_PREFIX))
    if end == -1:
        raise MalformedHeaderError(numbers, "header is not terminated by a newline")

    spec = numbers[len(HEADER_PREFIX):end]
    delimiters = parse_delimiter_spec(spec)
    logger.debug("Custom delimiters from header %r: %r", spec, delimiters)

    return ParsedInput(
        delimiters=_with_newline(delimiters),
        body=numbers[end + 1:],
        header=spec,
    )
