"""Custom exceptions for the price tracker.

Data-source and parsing exceptions live here to avoid circular imports
between the sheets client, the parser and the refresh service.
"""


class TrackerError(Exception):
    """Base exception for all tracker errors."""


class SheetFetchError(TrackerError):
    """Raised when the sheet values request fails or returns an unreadable body."""


class EmptySheetError(TrackerError):
    """Raised when the requested row window holds no usable rows."""


class SheetFormatError(TrackerError):
    """Raised when a row cannot be read with the ``[date, price, dominance]`` layout."""
