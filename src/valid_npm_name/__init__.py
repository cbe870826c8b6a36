"""valid-npm-name core package.

This package checks candidate strings against the npm registry's package
naming rules. It is callable from build tooling, services, and the bundled
``valid-npm-name`` command.
"""

from .constants import BLACK_LIST, MAX_PACKAGE_NAME_LENGTH
from .core import is_valid, parse
from .errors import InvalidNameError, Violation
from .models import ValidName
from .rules import validate

__all__ = [
    "BLACK_LIST",
    "MAX_PACKAGE_NAME_LENGTH",
    "InvalidNameError",
    "ValidName",
    "Violation",
    "is_valid",
    "parse",
    "validate",
]
