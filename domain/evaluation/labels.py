"""
Label identity and ordering helpers.

Labels are compared by exact value: booleans never match numbers and
strings never match numbers, even where Python's ``==`` would say so
(``True == 1``). Integers and floats of equal value are the same label.
All functions in this module are pure.
"""

import functools
import math
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any

import numpy as np

Comparator = Callable[[Any, Any], int]

# NaN != NaN, so every float NaN shares this identity
_NAN_KEY = (None, "nan")


def as_label(value: Any) -> Any:
    """
    Unwrap numpy scalars (e.g. ``np.int64``, ``np.str_``) into Python scalars.

    Examples:
        >>> as_label(np.int64(3))
        3
        >>> as_label("cat")
        'cat'
    """
    if isinstance(value, np.generic):
        return value.item()
    return value


def label_key(value: Any) -> Hashable:
    """Hashable identity of a label; keeps booleans apart from numbers, all NaNs alike."""
    value = as_label(value)
    if isinstance(value, float) and math.isnan(value):
        return _NAN_KEY
    return (isinstance(value, bool), value)


def same_label(a: Any, b: Any) -> bool:
    return label_key(a) == label_key(b)


def distinct_labels(*sources: Iterable[Any]) -> list[Any]:
    """
    Distinct labels across ``sources`` in first-seen order.

    Args:
        sources: Label iterables, scanned in the given order

    Returns:
        List of unique labels (numpy scalars unwrapped)
    """
    seen: dict[Hashable, Any] = {}
    for source in sources:
        for value in source:
            value = as_label(value)
            seen.setdefault(label_key(value), value)
    return list(seen.values())


def order_labels(
    labels: Sequence[Any],
    sort: Comparator | None = None,
    key: Callable[[Any], Any] | None = None,
) -> list[Any]:
    """
    Return ``labels`` ordered by a three-way comparator or a key function.

    With neither given, the input order is kept.

    Raises:
        ValueError: If both ``sort`` and ``key`` are given
    """
    if sort is not None and key is not None:
        raise ValueError("Pass either 'sort' or 'key', not both")
    if sort is not None:
        return sorted(labels, key=functools.cmp_to_key(sort))
    if key is not None:
        return sorted(labels, key=key)
    return list(labels)


def find_label(labels: Sequence[Any], label: Any) -> int:
    """Position of ``label`` in ``labels``, or -1 when absent."""
    wanted = label_key(label)
    for idx, existing in enumerate(labels):
        if label_key(existing) == wanted:
            return idx
    return -1
