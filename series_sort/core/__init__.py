from .values import ValueKind, KEY_KINDS, classify, render_text
from .entity import Entity, Metadata, compare_metadata
from .series import TimeSeries, series_from_frame

__all__ = [
    "ValueKind", "KEY_KINDS", "classify", "render_text",
    "Entity", "Metadata", "compare_metadata",
    "TimeSeries", "series_from_frame",
]
