"""Small collection helpers used for lookups and diagnostics."""

from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Sized, TypeVar

_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")


def keys_by_value(mapping: Mapping[_K, _V], value: _V) -> set[_K]:
    """Return every key in `mapping` whose value equals `value`.

    Returns an empty set when no key matches.
    """

    return {key for key, candidate in mapping.items() if candidate == value}


def key_by_value(mapping: Mapping[_K, _V], value: _V) -> _K | None:
    """Return the first key, in iteration order, mapped to `value`, or `None`."""

    return next((key for key, candidate in mapping.items() if candidate == value), None)


def array_range(items: Sized) -> str:
    """Return the valid index range of `items` as ``"[0, <len>]"``."""

    return f"[0, {len(items)}]"


def out_of_bounds_message(items: Sized, index: int) -> str:
    """Return a detail message for an `IndexError` raised on `items`."""

    if items is None:
        raise ValueError("Invalid None collection.")
    return f"Index = {index}, Capacity = {len(items)}"


def require_no_none(items: Iterable[object] | None) -> None:
    """Raise `ValueError` if `items` is `None` or contains a `None` element."""

    if items is None:
        raise ValueError("Invalid None collection.")
    if any(item is None for item in items):
        raise ValueError("Invalid None element in collection.")
