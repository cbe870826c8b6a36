"""Core validation entrypoints.

This module has no I/O or configuration so it can be used directly by build
tooling, services, and the command-line wrapper.
"""

from __future__ import annotations

from .errors import Violation
from .models import ValidName
from .rules import validate


def parse(name: str) -> ValidName | Violation:
    """Validate one candidate package name.

    Params:
        name: any string, including empty or non-ASCII input

    Returns: a ``ValidName`` wrapping ``name`` unchanged on success, otherwise
    the ``Violation`` for the first rule that failed. Never raises for string
    input.
    """
    return ValidName.parse(name)


def is_valid(name: str) -> bool:
    return validate(name) is None
