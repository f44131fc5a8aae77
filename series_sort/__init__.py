#!filepath: series_sort/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import (
    SortError,
    NotAnEntityCollectionError,
    InconsistentOrInvalidKeyTypeError,
    NotATransformError,
    EmptySeriesError,
)
from .config import AppConfig, LogConfig, SortConfig
from .core import Entity, Metadata, TimeSeries, ValueKind, compare_metadata, series_from_frame
from .engines import CallableRunner, TransformRunner
from .sort import order, order_by_key, order_by_last, last_value_compare

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "SortError", "NotAnEntityCollectionError", "InconsistentOrInvalidKeyTypeError",
    "NotATransformError", "EmptySeriesError",
    "AppConfig", "LogConfig", "SortConfig",
    "Entity", "Metadata", "TimeSeries", "ValueKind", "compare_metadata", "series_from_frame",
    "TransformRunner", "CallableRunner",
    "order", "order_by_key", "order_by_last", "last_value_compare",
]
