"""Report building and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .errors import Violation
from .models import ValidName


def build_report(name: str, outcome: ValidName | Violation) -> dict[str, Any]:
    """Describe one validation outcome as a JSON-serializable dict.

    ``violation`` carries the stable identifier and ``message`` the
    human-readable description; both are None for a valid name.
    """
    if isinstance(outcome, Violation):
        violation: str | None = outcome.value
        message: str | None = outcome.description
    else:
        violation = None
        message = None

    return {
        "version": "1",  # schema requires a string
        "name": name,
        "valid": violation is None,
        "violation": violation,
        "message": message,
    }
