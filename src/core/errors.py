# src/core/errors.py — v1
"""Error taxonomy shared across modules.

ConfigurationError lives in config.settings next to the settings it guards;
it derives from CliquePercError like the other errors here.
"""

from __future__ import annotations


class CliquePercError(Exception):
    """Base class for all cliqueperc errors."""


class MalformedInputError(CliquePercError, ValueError):
    """Graph definition cannot be parsed or violates a structural rule.

    Attributes:
        line_number: 1-based line of the offending definition, if known.
        label: Offending node label, if known.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        label: str | None = None,
    ) -> None:
        self.line_number = line_number
        self.label = label
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InternalInvariantViolation(CliquePercError, RuntimeError):
    """A core invariant failed. Indicates a bug, not bad input."""
