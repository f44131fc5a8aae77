#!filepath: series_sort/engines/keyed_sort_engine.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from series_sort.core.entity import Entity
from series_sort.core.values import KEY_KINDS, ValueKind, classify, key_sort_function
from series_sort.engines.base import BaseSortEngine
from series_sort.engines.transform_runner import CallableRunner, TransformRunner
from series_sort.utils.errors import InconsistentOrInvalidKeyTypeError
from series_sort.utils.logger import logs


class KeyedSortEngine(BaseSortEngine):
    """
    KeyedSortEngine（冻结版）

    两个阶段，严格分开：

      1. extract : 按输入顺序，每个 entity 调用一次 transform，
                   记录 key，并校验类型（INTEGER / FLOAT / TEXT 且全体一致）
      2. order   : 只查 key table 排序，不再调用 transform

    约定：
      - key table 只属于一次 execute 调用，用完即丢
      - 按 entity 对象身份（id）记录，而不是内容
      - 排序稳定：key 相同保持输入顺序
      - 任一 entity 校验失败 → 整体失败，不重排；
        已经执行过的 transform 副作用不回滚
    """

    def __init__(
            self,
            runner: Optional[TransformRunner] = None,
            instrumentation: Optional[Any] = None,
            log_keys: bool = False,
    ):
        super().__init__(instrumentation)
        self.runner = runner or CallableRunner()
        self.log_keys = log_keys

    # --------------------------------------------------
    def execute(self, entities, transform) -> List[Entity]:
        self.runner.validate(transform)
        self.check_collection(entities)

        if len(entities) == 0:
            return self.emit(entities, [])

        with self.inst.timer("keyed_sort.extract"):
            keys, kind = self.extract(entities, transform)

        with self.inst.timer("keyed_sort.order"):
            sort_key = key_sort_function(kind)
            ordered = sorted(entities, key=lambda e: sort_key(keys[id(e)]))

        self.inst.record("keyed_sort.entities", len(entities))
        self.inst.record("keyed_sort.key_kind", kind.value)
        logs.debug(f"[KeyedSort] ordered {len(entities)} entities by {kind.value} key")

        return self.emit(entities, ordered)

    # --------------------------------------------------
    def extract(self, entities, transform):
        """
        Run the transform once per entity, in input order.

        Returns
        -------
        (Dict[int, Any], ValueKind)
            id(entity) → key, and the established kind
        """
        keys: Dict[int, Any] = {}
        kind: Optional[ValueKind] = None

        for i, entity in enumerate(entities):
            value = self.runner.run(transform, entity)
            self.inst.incr("keyed_sort.transform_calls")
            value_kind = classify(value)

            if value_kind not in KEY_KINDS or (kind is not None and value_kind is not kind):
                raise InconsistentOrInvalidKeyTypeError(index=i, value=value, expected=kind)

            kind = value_kind
            keys[id(entity)] = value

            if self.log_keys:
                logs.debug(f"[KeyedSort] #{i} {entity.identity()} → {value!r}")

        return keys, kind
