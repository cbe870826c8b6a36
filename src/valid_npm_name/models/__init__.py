"""Data models for validated package names."""

from __future__ import annotations

from .valid_name import ValidName

__all__ = [
    "ValidName",
]
