"""
Conversion errors.

Every failure of a conversion is terminal: the first violation is raised
and no partial form is produced. Errors that can be pinned to a row carry
its line number.
"""

from typing import Optional


class ConversionError(Exception):
    """Raised when a survey cannot be converted."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message}"
        return self.message


class StructureError(ConversionError):
    """Unbalanced or illegally nested groups/repeats."""
    pass


class FanOutError(StructureError):
    """A node has more children than the id scheme can address."""
    pass


class RowTypeError(ConversionError):
    """Unsupported or unrecognized row type."""
    pass


class ChoiceReferenceError(ConversionError):
    """A choice field points at a list with no choices."""
    pass


class RepeatCountError(ConversionError):
    """A repeat_count that is not a valid repetition limit."""
    pass


__all__ = [
    "ConversionError",
    "StructureError",
    "FanOutError",
    "RowTypeError",
    "ChoiceReferenceError",
    "RepeatCountError",
]
