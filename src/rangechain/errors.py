"""Exception taxonomy for almanac parsing and chain solving."""
from __future__ import annotations


class RangeChainError(Exception):
    """Base class for every error raised by rangechain."""


class AlmanacParseError(RangeChainError):
    """Raised when almanac text does not follow the expected layout."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        self.line_no = line_no
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{where}{message}")


class MalformedRuleError(AlmanacParseError):
    """A rule line without exactly three non-negative integers."""


class EmptyResultError(RangeChainError):
    """No value or interval survived the chain, so no minimum exists."""


class UnknownStageError(RangeChainError):
    """A stop label that no stage in the chain carries."""


class ConfigError(RangeChainError):
    """Invalid solver configuration file or override."""
