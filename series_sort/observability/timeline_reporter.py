#!filepath: series_sort/observability/timeline_reporter.py
from typing import Dict

from series_sort.utils.logger import logs


class TimelineReporter:
    """
    Sort Timeline 报告：
    - phase → 耗时秒数
    """

    def __init__(self, timeline: Dict[str, float], title: str):
        self.timeline = timeline
        self.title = title

    def print(self):
        logs.info(f"[Timeline] ===== Sort timeline for {self.title} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")
            total += sec

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")
        logs.info("[Timeline] ===========================================")
