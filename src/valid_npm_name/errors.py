"""Violation taxonomy and exception types."""

from __future__ import annotations

from enum import Enum

from .constants import MAX_PACKAGE_NAME_LENGTH


class Violation(Enum):
    """The single rule a candidate name failed.

    Member values are stable identifiers suitable for programmatic matching
    and machine-readable output; ``description`` is for display only.
    """

    IN_BLACK_LIST = "in_black_list"
    LESS_THAN_ZERO = "less_than_zero"
    LONGER_THAN_MAX = "longer_than_max"
    CONTAINS_CAPITAL_LETTER = "contains_capital_letter"
    NOT_URL_SAFE = "not_url_safe"
    INVALID_CHARACTER = "invalid_character"
    STARTS_WITH_A_PERIOD = "starts_with_a_period"
    STARTS_WITH_AN_UNDERSCORE = "starts_with_an_underscore"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS: dict[Violation, str] = {
    Violation.IN_BLACK_LIST: "name is a reserved or core module name",
    Violation.LESS_THAN_ZERO: "name length must be greater than zero",
    Violation.LONGER_THAN_MAX: (
        f"name can no longer contain more than {MAX_PACKAGE_NAME_LENGTH} characters"
    ),
    Violation.CONTAINS_CAPITAL_LETTER: "name can no longer contain capital letters",
    Violation.NOT_URL_SAFE: "name can only contain URL-friendly characters",
    Violation.INVALID_CHARACTER: (
        "name cannot contain whitespace or special characters (\"~'!()*\")"
    ),
    Violation.STARTS_WITH_A_PERIOD: "name cannot start with a period",
    Violation.STARTS_WITH_AN_UNDERSCORE: "name cannot start with an underscore",
}


class InvalidNameError(ValueError):
    """Raised when a ``ValidName`` is constructed from an invalid string."""

    def __init__(self, name: str, violation: Violation) -> None:
        super().__init__(f"Invalid package name {name!r}: {violation.description}")
        self.name = name
        self.violation = violation


class ConfigError(RuntimeError):
    """Raised when command-line configuration cannot be resolved."""
