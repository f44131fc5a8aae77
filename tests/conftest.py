# tests/conftest.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest
from loguru import logger

from series_sort.core.entity import Metadata
from series_sort.core.series import TimeSeries


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


def make_series(
        name: str,
        samples: List[Tuple[int, Any]] = (),
        labels: Optional[Dict[str, str]] = None,
) -> TimeSeries:
    """samples: [(tick, value), ...]"""
    ticks = [t for t, _ in samples]
    values = [v for _, v in samples]
    return TimeSeries(Metadata(name, labels or {}), ticks=ticks, values=values)


@pytest.fixture
def series():
    return make_series
