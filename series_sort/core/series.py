#!filepath: series_sort/core/series.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from series_sort.core.entity import Entity, Metadata
from series_sort.utils.errors import EmptySeriesError


def _normalize_values(values) -> pa.Array:
    arr = values if isinstance(values, pa.Array) else pa.array(values)

    if pa.types.is_null(arr.type):
        # 空 list → 默认 float64
        return arr.cast(pa.float64())
    if pa.types.is_boolean(arr.type):
        return arr
    if pa.types.is_integer(arr.type):
        return arr.cast(pa.int64())
    if pa.types.is_floating(arr.type):
        return arr.cast(pa.float64())
    if pa.types.is_string(arr.type) or pa.types.is_large_string(arr.type):
        return arr.cast(pa.string())

    raise TypeError(f"unsupported sample value type: {arr.type}")


class TimeSeries(Entity):
    """
    TimeSeries（Arrow 存储）

    - ticks  : int64 Arrow array
    - values : int64 | float64 | string | bool Arrow array（同一条 series 内同类型）
    - 样本不要求按 tick 排序
    - most recent = 最大 tick；tick 重复时取最后写入的那条
    """

    def __init__(
            self,
            metadata: Metadata,
            ticks: Iterable[int] | pa.Array = (),
            values: Iterable[Any] | pa.Array = (),
    ):
        if not isinstance(ticks, pa.Array):
            ticks = pa.array(list(ticks) if not isinstance(ticks, np.ndarray) else ticks, type=pa.int64())
        else:
            ticks = ticks.cast(pa.int64())

        if not isinstance(values, (pa.Array, np.ndarray)):
            values = list(values)
        values = _normalize_values(values)

        if len(ticks) != len(values):
            raise ValueError(
                f"ticks / values length mismatch: {len(ticks)} != {len(values)}"
            )
        if ticks.null_count or values.null_count:
            raise ValueError("TimeSeries does not accept null ticks or values")

        self._metadata = metadata
        self._ticks = ticks
        self._values = values
        self._last_index: Optional[int] = None

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------
    @classmethod
    def empty(cls, name: str, labels: Optional[Mapping[str, str]] = None) -> "TimeSeries":
        return cls(Metadata(name, labels or {}))

    # ------------------------------------------------------------------
    # Entity contract
    # ------------------------------------------------------------------
    def size(self) -> int:
        return len(self._ticks)

    def identity(self) -> Metadata:
        return self._metadata

    def most_recent_timestamp(self) -> int:
        return self._ticks[self._most_recent_index()].as_py()

    def most_recent_value(self) -> Any:
        return self._values[self._most_recent_index()].as_py()

    # ------------------------------------------------------------------
    @property
    def ticks(self) -> pa.Array:
        return self._ticks

    @property
    def values(self) -> pa.Array:
        return self._values

    @property
    def value_type(self) -> pa.DataType:
        return self._values.type

    def _most_recent_index(self) -> int:
        if self.size() == 0:
            raise EmptySeriesError(f"series {self._metadata} has no samples")

        if self._last_index is None:
            max_tick = pc.max(self._ticks)
            hits = pc.equal(self._ticks, max_tick).to_numpy(zero_copy_only=False)
            # 最后一个命中的位置
            self._last_index = int(len(hits) - 1 - np.argmax(hits[::-1]))
        return self._last_index

    def __repr__(self) -> str:
        return f"TimeSeries({self._metadata}, size={self.size()})"


# ----------------------------------------------------------------------
# pandas builder
# ----------------------------------------------------------------------
def _ticks_from_column(col: pd.Series) -> np.ndarray:
    if pd.api.types.is_datetime64_any_dtype(col):
        if getattr(col.dt, "tz", None) is not None:
            col = col.dt.tz_convert("UTC").dt.tz_localize(None)
        # datetime → epoch microseconds
        return col.astype("datetime64[us]").astype("int64").to_numpy()
    return col.astype("int64").to_numpy()


def _values_from_column(col: pd.Series) -> pa.Array:
    # numpy float 列：NaN 是值，不是 null
    if isinstance(col.dtype, np.dtype) and np.issubdtype(col.dtype, np.floating):
        return pa.array(col.to_numpy(), from_pandas=False)
    return pa.Array.from_pandas(col)


def series_from_frame(
        df: pd.DataFrame,
        id_col: str,
        ts_col: str,
        value_col: str,
        name: Optional[str] = None,
) -> List[TimeSeries]:
    """
    Long-format DataFrame → 一个 id 一条 TimeSeries

    Parameters
    ----------
    df : pd.DataFrame
        至少包含 id_col / ts_col / value_col
    name : str, optional
        series class name，默认用 value_col

    Returns
    -------
    List[TimeSeries]
        按 id 首次出现的顺序
    """
    missing = [c for c in (id_col, ts_col, value_col) if c not in df.columns]
    if missing:
        raise ValueError(f"series_from_frame missing columns: {missing}")

    class_name = name or value_col
    out: List[TimeSeries] = []

    for key, group in df.groupby(id_col, sort=False):
        labels: Dict[str, str] = {id_col: str(key)}
        out.append(
            TimeSeries(
                Metadata(class_name, labels),
                ticks=_ticks_from_column(group[ts_col]),
                values=_values_from_column(group[value_col]),
            )
        )
    return out
