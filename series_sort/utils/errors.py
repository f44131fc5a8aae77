# series_sort/utils/errors.py
from typing import Any, Optional


class SortError(Exception):
    """
    Base class for every error raised by series_sort.
    """


class NotAnEntityCollectionError(SortError, TypeError):
    """
    Input is not a sequence of Entity.
    Raised before any transform is invoked.
    """

    def __init__(self, message: str = "not an Entity collection"):
        super().__init__(message)


class InconsistentOrInvalidKeyTypeError(SortError, TypeError):
    """
    Transform returned None, a value outside {integer, float, text},
    or a kind different from the one fixed by the first entity.
    """

    MESSAGE = (
        "macro must return a non-null integer, float, or text value, "
        "consistently typed across all entities"
    )

    def __init__(
        self,
        index: Optional[int] = None,
        value: Any = None,
        expected: Any = None,
    ):
        self.index = index
        self.value = value
        self.expected = expected
        super().__init__(self.MESSAGE)


class NotATransformError(SortError, TypeError):
    """Transform operand cannot be run by the configured runner."""


class EmptySeriesError(SortError, ValueError):
    """most_recent_* accessed on a series with no samples."""
