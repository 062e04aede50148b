"""Schema diff entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RetainedPair(Generic[T]):
    """Entity present in both snapshots under the same identity."""

    previous: T
    current: T


@dataclass(frozen=True)
class SchemaDiff(Generic[T]):
    """Partition of two keyed snapshots into added, deleted and remaining entities."""

    added: tuple[T, ...]
    deleted: tuple[T, ...]
    remaining: tuple[RetainedPair[T], ...]
