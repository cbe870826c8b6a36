"""Validated npm package name model."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidNameError, Violation
from ..rules import validate


@dataclass(frozen=True)
class ValidName:
    """A package name that passed every naming rule.

    The wrapper holds a reference to the caller's string, never a copy, so
    ``str(name)`` is exactly the original input.
    """

    value: str

    def __post_init__(self) -> None:
        violation = validate(self.value)
        if violation is not None:
            raise InvalidNameError(self.value, violation)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def as_str(self) -> str:
        return self.value

    @property
    def is_scoped(self) -> bool:
        return self.value.startswith("@")

    def to_dict(self) -> dict[str, str]:
        return {"name": self.value}

    @classmethod
    def parse(cls, name: str) -> ValidName | Violation:
        """Return a ``ValidName`` for ``name``, or the first rule it violates."""
        violation = validate(name)
        if violation is not None:
            return violation
        return cls(name)

    @classmethod
    def from_str(cls, name: str) -> ValidName:
        """Return a ``ValidName`` for ``name``; raise ``InvalidNameError`` otherwise."""
        return cls(name)
