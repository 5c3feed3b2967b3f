"""Calculator configuration.

Defaults reproduce the classic kata: ``,`` as the default delimiter and
numbers above 1000 left out of the sum. The CLI can override both from the
environment; library callers pass a CalculatorConfig explicitly or get the
defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_VALUE = 1000
DEFAULT_DELIMITER = ","

# Env vars read by CalculatorConfig.from_env()
MAX_VALUE_VAR = "STRCALC_MAX_VALUE"
DEFAULT_DELIMITER_VAR = "STRCALC_DEFAULT_DELIMITER"


@dataclass(frozen=True)
class CalculatorConfig:
    """Tunable limits for add().

    Attributes:
        max_value: Largest number still added to the total (inclusive).
        default_delimiter: Delimiter used when the input has no ``//`` header.
    """

    max_value: int = DEFAULT_MAX_VALUE
    default_delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if self.max_value < 0:
            raise ValueError(f"max_value must be >= 0, got {self.max_value}")
        if not self.default_delimiter:
            raise ValueError("default_delimiter must not be empty")
        if "\n" in self.default_delimiter:
            raise ValueError("default_delimiter must not contain a newline")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> CalculatorConfig:
        """Build a config from STRCALC_* environment variables.

        Args:
            env: Mapping to read from. Defaults to os.environ.

        Raises:
            ValueError: If a variable is set to an unusable value.
        """
        env = os.environ if env is None else env

        raw_max = env.get(MAX_VALUE_VAR, "").strip()
        if raw_max:
            try:
                max_value = int(raw_max)
            except ValueError:
                raise ValueError(f"{MAX_VALUE_VAR} must be an integer, got {raw_max!r}") from None
        else:
            max_value = DEFAULT_MAX_VALUE

        delimiter = env.get(DEFAULT_DELIMITER_VAR) or DEFAULT_DELIMITER
        return cls(max_value=max_value, default_delimiter=delimiter)
