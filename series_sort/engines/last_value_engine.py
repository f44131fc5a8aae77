#!filepath: series_sort/engines/last_value_engine.py
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List

from series_sort.core.entity import Entity, compare_metadata
from series_sort.core.values import (
    ValueKind,
    classify,
    compare_booleans,
    compare_floats,
    compare_integers,
    compare_numbers,
    compare_text,
    render_text,
)
from series_sort.engines.base import BaseSortEngine
from series_sort.utils.logger import logs

_NUMERIC = (ValueKind.INTEGER, ValueKind.FLOAT)


def compare_values(v1: Any, v2: Any) -> int:
    """
    Three-way comparison of two most-recent values.

    - same kind            : native order (False < True for booleans)
    - INTEGER vs FLOAT     : both as float
    - anything else        : text rendering
    """
    k1 = classify(v1)
    k2 = classify(v2)

    if k1 is k2 and k1 is not None:
        if k1 is ValueKind.INTEGER:
            return compare_integers(v1, v2)
        if k1 is ValueKind.FLOAT:
            return compare_floats(v1, v2)
        if k1 is ValueKind.TEXT:
            return compare_text(v1, v2)
        return compare_booleans(v1, v2)

    if k1 in _NUMERIC and k2 in _NUMERIC:
        return compare_numbers(v1, v2)

    return compare_text(render_text(v1), render_text(v2))


def last_value_compare(a: Entity, b: Entity) -> int:
    """
    Total order over entities, first decisive rule wins:

      1. empty series after non-empty ones (both empty → rule 4)
      2. most-recent value, ascending
      3. most-recent tick, DESCENDING (later tick first)
      4. identity metadata
    """
    if a.size() == 0:
        if b.size() == 0:
            return compare_metadata(a.identity(), b.identity())
        return 1
    if b.size() == 0:
        return -1

    res = compare_values(a.most_recent_value(), b.most_recent_value())
    if res != 0:
        return res

    t1 = a.most_recent_timestamp()
    t2 = b.most_recent_timestamp()
    if t1 > t2:
        return -1
    if t1 < t2:
        return 1

    return compare_metadata(a.identity(), b.identity())


class LastValueSortEngine(BaseSortEngine):
    """
    No-transform ordering: sort by last_value_compare.
    """

    def execute(self, entities) -> List[Entity]:
        self.check_collection(entities)

        with self.inst.timer("last_value_sort.order"):
            ordered = sorted(entities, key=cmp_to_key(last_value_compare))

        self.inst.record("last_value_sort.entities", len(entities))
        logs.debug(f"[LastValueSort] ordered {len(entities)} entities")

        return self.emit(entities, ordered)
