#!filepath: series_sort/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Any, Dict

from series_sort.observability.timer import Timer
from series_sort.observability.metrics import MetricRecorder
from series_sort.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Instrumentation（Leaf-only accounting）。

    - timer(name) 记录叶子 phase 的耗时到 timeline
    - record=False 的 timer 只界定 scope，不写 timeline
    - 本身不在热路径打日志
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    # ---------------------------------------------------------
    # Context Manager Timer（唯一入口）
    # ---------------------------------------------------------
    def timer(self, name: str, *, record: bool = True):
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def record(self, name: str, value: Any):
        self.metrics.record(name, value)

    def incr(self, name: str, step: int = 1):
        self.metrics.incr(name, step)

    # ---------------------------------------------------------
    # Timeline 输出（冷路径）
    # ---------------------------------------------------------
    def generate_timeline_report(self, title: str):
        TimelineReporter(self.timeline, title).print()


# -------------------------------------------------------------
# No-op Instrumentation（禁用 observability）
# -------------------------------------------------------------
class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def record(self, name: str, value: Any):
        pass

    def incr(self, name: str, step: int = 1):
        pass

    def generate_timeline_report(self, title: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass


def build_instrumentation(enabled: bool):
    return Instrumentation(enabled=True) if enabled else NoOpInstrumentation()
