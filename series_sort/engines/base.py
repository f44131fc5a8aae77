#!filepath: series_sort/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, List, Optional

from series_sort.core.entity import Entity
from series_sort.observability.instrumentation import NoOpInstrumentation
from series_sort.utils.errors import NotAnEntityCollectionError


class BaseSortEngine(ABC):
    """
    Sort Engine 抽象基类：

    - 不做任何 I/O
    - 输入 Entity 序列 → 输出同一批 Entity 的重排
    - list 输入原地排序并返回同一个 list；其它序列返回新 list
    - 出错时不做任何重排
    """

    def __init__(self, instrumentation: Optional[Any] = None):
        self.inst = instrumentation or NoOpInstrumentation()

    @abstractmethod
    def execute(self, entities, *args, **kwargs) -> List[Entity]:
        raise NotImplementedError

    # --------------------------------------------------
    @staticmethod
    def check_collection(entities) -> None:
        if isinstance(entities, (str, bytes)) or not isinstance(entities, Sequence):
            raise NotAnEntityCollectionError()
        for e in entities:
            if not isinstance(e, Entity):
                raise NotAnEntityCollectionError()

    @staticmethod
    def emit(entities, ordered: List[Entity]) -> List[Entity]:
        if isinstance(entities, list):
            entities[:] = ordered
            return entities
        return ordered
