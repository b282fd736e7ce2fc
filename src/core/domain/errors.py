"""Domain errors.

Only invalid input is an error here. Skipping the recursive builder above the
safety threshold is reported in the result itself, never raised.
"""

from __future__ import annotations


class InvalidSizeError(ValueError):
    """A row count / size that is negative or not an integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Size must be a non-negative integer, got {value!r}")
