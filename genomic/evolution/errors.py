"""Exceptions raised by the genetic operators."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid mutation rate, strategy bounds or chromosome value."""


class ContractViolation(RuntimeError):
    """A genome visited a different number of fields than it declared."""
