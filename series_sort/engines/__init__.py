from .transform_runner import TransformRunner, CallableRunner
from .keyed_sort_engine import KeyedSortEngine
from .last_value_engine import LastValueSortEngine, last_value_compare, compare_values

__all__ = [
    "TransformRunner", "CallableRunner",
    "KeyedSortEngine",
    "LastValueSortEngine", "last_value_compare", "compare_values",
]
