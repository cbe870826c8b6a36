"""Ordered npm package naming rules.

Checks run in a fixed order and stop at the first failure:

- empty name
- longer than ``MAX_PACKAGE_NAME_LENGTH`` characters
- leading period, then leading underscore
- per-character scan: capital letter, then whitespace/special character,
  then URL safety (``/`` outside a scoped name, ``:`` anywhere)
- reserved name lookup

See https://github.com/npm/validate-npm-package-name for the registry rules.
"""

from __future__ import annotations

from .constants import BLACK_LIST, MAX_PACKAGE_NAME_LENGTH
from .errors import Violation

_SPECIAL_CHARACTERS = frozenset("~)('!*")

# Unicode White_Space. str.isspace() also accepts U+001C..U+001F.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _is_url_safe(c: str, starts_with_at: bool) -> Violation | None:
    if c == "/" and not starts_with_at:
        return Violation.NOT_URL_SAFE
    if c == ":":
        return Violation.NOT_URL_SAFE
    return None


def _check_char(c: str, starts_with_at: bool) -> Violation | None:
    if c.isupper():
        return Violation.CONTAINS_CAPITAL_LETTER

    if c in _WHITESPACE or c in _SPECIAL_CHARACTERS:
        return Violation.INVALID_CHARACTER

    return _is_url_safe(c, starts_with_at)


def validate(name: str) -> Violation | None:
    """Return the first rule ``name`` violates, or None when it is valid.

    Length is counted in code points. Scoped names (leading ``@``) may contain
    any number of ``/`` separators.

    Raises:
        TypeError: If ``name`` is not a ``str``.
    """
    if not isinstance(name, str):
        raise TypeError(f"Package name must be a str, not {type(name).__name__}")

    if not name:
        return Violation.LESS_THAN_ZERO

    if len(name) > MAX_PACKAGE_NAME_LENGTH:
        return Violation.LONGER_THAN_MAX

    if name.startswith("."):
        return Violation.STARTS_WITH_A_PERIOD

    if name.startswith("_"):
        return Violation.STARTS_WITH_AN_UNDERSCORE

    starts_with_at = name.startswith("@")

    for c in name:
        violation = _check_char(c, starts_with_at)
        if violation is not None:
            return violation

    if name in BLACK_LIST:
        return Violation.IN_BLACK_LIST

    return None
