#!filepath: series_sort/sort.py
"""
Public entry points.

    order_by_key(entities, transform)   # key = transform(entity)
    order_by_last(entities)             # last_value_compare
    order(entities, transform=None)     # dispatch
"""
from __future__ import annotations

from typing import Any, List, Optional

from series_sort.config.sort_config import SortConfig
from series_sort.core.entity import Entity
from series_sort.engines.keyed_sort_engine import KeyedSortEngine
from series_sort.engines.last_value_engine import LastValueSortEngine, last_value_compare
from series_sort.engines.transform_runner import TransformRunner
from series_sort.observability.instrumentation import build_instrumentation
from series_sort.utils.logger import logs


@logs.catch("keyed sort aborted")
def order_by_key(
        entities,
        transform: Any,
        runner: Optional[TransformRunner] = None,
        config: Optional[SortConfig] = None,
        instrumentation: Optional[Any] = None,
) -> List[Entity]:
    cfg = config or SortConfig()
    engine = KeyedSortEngine(
        runner=runner,
        instrumentation=instrumentation or build_instrumentation(cfg.instrumentation),
        log_keys=cfg.log_keys,
    )
    return engine.execute(entities, transform)


@logs.catch("last value sort aborted")
def order_by_last(
        entities,
        config: Optional[SortConfig] = None,
        instrumentation: Optional[Any] = None,
) -> List[Entity]:
    cfg = config or SortConfig()
    engine = LastValueSortEngine(
        instrumentation=instrumentation or build_instrumentation(cfg.instrumentation),
    )
    return engine.execute(entities)


def order(
        entities,
        transform: Any = None,
        runner: Optional[TransformRunner] = None,
        config: Optional[SortConfig] = None,
        instrumentation: Optional[Any] = None,
) -> List[Entity]:
    """
    transform 给定 → order_by_key；否则 → order_by_last
    """
    if transform is None:
        return order_by_last(entities, config=config, instrumentation=instrumentation)
    return order_by_key(
        entities, transform, runner=runner, config=config, instrumentation=instrumentation
    )


__all__ = ["order", "order_by_key", "order_by_last", "last_value_compare"]
