from __future__ import annotations

# Shared error types for message resolution.


class StructuredGettextError(Exception):
    """Base exception for known resolution errors."""


class FormatError(StructuredGettextError):
    """Raised when a template cannot be substituted with its arguments."""

    def __init__(self, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


class MissingJoinSeparator(StructuredGettextError):
    """Raised when an array message has no separator item."""

    def __init__(self) -> None:
        super().__init__("missing join separator")


class ValueShapeError(StructuredGettextError, ValueError):
    """Raised when parsed data does not match any message shape."""


class CatalogError(StructuredGettextError):
    """Raised when a translation catalog cannot be parsed."""


class PayloadFormatError(StructuredGettextError, ValueError):
    """Raised when a payload format is not supported."""


class DatetimeRangeError(StructuredGettextError, ValueError):
    """Raised when an epoch cannot be represented as a calendar date."""

    def __init__(self, epoch: float) -> None:
        super().__init__(f"epoch {epoch} is out of the supported date range")
        self.epoch = epoch
