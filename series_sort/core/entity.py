#!filepath: series_sort/core/entity.py
"""
Entity contract (FINAL / FROZEN)

Defines WHAT the ordering code may observe from a time series.

Contract:
- size(): number of samples
- most_recent_value(): value of the sample with the largest tick
- most_recent_timestamp(): largest tick
- identity(): Metadata

Invariants:
- most_recent_* are only defined when size() > 0
- Ordering code never mutates an Entity
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class Metadata:
    """
    Identity of a series: class name + labels.
    """

    name: str
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def __hash__(self):
        return hash((self.name, tuple(sorted(self.labels.items()))))

    def __eq__(self, other):
        if not isinstance(other, Metadata):
            return NotImplemented
        return self.name == other.name and dict(self.labels) == dict(other.labels)

    def sorted_labels(self):
        return sorted(self.labels.items())

    def render(self) -> str:
        inner = ",".join(f"{k}={v}" for k, v in self.sorted_labels())
        return f"{self.name}{{{inner}}}"

    def __str__(self) -> str:
        return self.render()


def compare_metadata(a: Metadata, b: Metadata) -> int:
    """
    Text order over metadata: name, then labels in key order
    (key then value), then fewer labels first.
    """
    if a.name != b.name:
        return -1 if a.name < b.name else 1

    la = a.sorted_labels()
    lb = b.sorted_labels()
    for (ka, va), (kb, vb) in zip(la, lb):
        if ka != kb:
            return -1 if ka < kb else 1
        if va != vb:
            return -1 if va < vb else 1

    if len(la) != len(lb):
        return -1 if len(la) < len(lb) else 1
    return 0


class Entity(ABC):
    """
    Ordered time series as seen by the sort engines.
    """

    @abstractmethod
    def size(self) -> int:
        """Sample count"""

    @abstractmethod
    def most_recent_value(self) -> Any:
        """Value at the largest tick. Raises EmptySeriesError if size() == 0"""

    @abstractmethod
    def most_recent_timestamp(self) -> int:
        """Largest tick. Raises EmptySeriesError if size() == 0"""

    @abstractmethod
    def identity(self) -> Metadata:
        """Identity metadata, used as the final tie-break"""

    def is_empty(self) -> bool:
        return self.size() == 0
