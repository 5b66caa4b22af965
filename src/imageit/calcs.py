"""Statistical reducers that collapse a value sequence to one number."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import StrEnum
from typing import Any

from imageit._normalize import safe_float


class ReducerId(StrEnum):
    LAST = "last"
    LAST_NOT_NULL = "lastNotNull"
    FIRST = "first"
    FIRST_NOT_NULL = "firstNotNull"
    MIN = "min"
    MAX = "max"
    MEAN = "mean"
    SUM = "sum"
    COUNT = "count"


def _numbers(values: Sequence[Any]) -> list[float]:
    return [number for number in (safe_float(value) for value in values) if number is not None]


def _last(values: Sequence[Any]) -> float | None:
    if not values:
        return None
    return safe_float(values[-1])


def _first(values: Sequence[Any]) -> float | None:
    if not values:
        return None
    return safe_float(values[0])


def _last_not_null(values: Sequence[Any]) -> float | None:
    numbers = _numbers(values)
    return numbers[-1] if numbers else None


def _first_not_null(values: Sequence[Any]) -> float | None:
    numbers = _numbers(values)
    return numbers[0] if numbers else None


def _min(values: Sequence[Any]) -> float | None:
    numbers = _numbers(values)
    return min(numbers) if numbers else None


def _max(values: Sequence[Any]) -> float | None:
    numbers = _numbers(values)
    return max(numbers) if numbers else None


def _mean(values: Sequence[Any]) -> float | None:
    numbers = _numbers(values)
    if not numbers:
        return None
    return math.fsum(numbers) / len(numbers)


def _sum(values: Sequence[Any]) -> float | None:
    numbers = _numbers(values)
    return math.fsum(numbers) if numbers else None


def _count(values: Sequence[Any]) -> float | None:
    return float(len(values))


_REDUCERS: dict[ReducerId, Callable[[Sequence[Any]], float | None]] = {
    ReducerId.LAST: _last,
    ReducerId.LAST_NOT_NULL: _last_not_null,
    ReducerId.FIRST: _first,
    ReducerId.FIRST_NOT_NULL: _first_not_null,
    ReducerId.MIN: _min,
    ReducerId.MAX: _max,
    ReducerId.MEAN: _mean,
    ReducerId.SUM: _sum,
    ReducerId.COUNT: _count,
}


def reduce_values(values: Sequence[Any], reducer: ReducerId | str = ReducerId.LAST) -> float | None:
    """Reduce *values* (arrival order) with *reducer*.

    ``last`` and ``first`` look at the raw end of the sequence, so a null
    there yields ``None``; the ``*NotNull`` variants skip nulls. Empty
    input yields ``None`` for every reducer except ``count``.
    """
    return _REDUCERS[ReducerId(reducer)](values)
