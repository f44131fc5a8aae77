#!filepath: series_sort/engines/transform_runner.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from series_sort.core.entity import Entity
from series_sort.utils.errors import NotATransformError


class TransformRunner(ABC):
    """
    Runs a key transform against ONE entity and returns ONE value.

    - 同步、阻塞
    - 可能有副作用；可能抛异常（异常原样向上抛）
    """

    def validate(self, transform: Any) -> None:
        """Reject a transform this runner cannot run. Default: accept all."""

    @abstractmethod
    def run(self, transform: Any, entity: Entity) -> Any:
        raise NotImplementedError


class CallableRunner(TransformRunner):
    """transform 是普通 callable：transform(entity) → value"""

    def validate(self, transform: Any) -> None:
        if not callable(transform):
            raise NotATransformError(
                f"transform must be callable, got {type(transform).__name__}"
            )

    def run(self, transform: Callable[[Entity], Any], entity: Entity) -> Any:
        return transform(entity)
