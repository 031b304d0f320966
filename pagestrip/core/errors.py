"""Exceptions raised by pagestrip."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when pagination options are invalid or used out of order."""
