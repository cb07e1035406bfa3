"""Injectable randomness for generation helpers.

Responsibilities:
- Wrap a `random.Random` generator behind a lock so threads may share it.
- Track the active source in a context variable instead of an implicit
  module singleton, so tests and CLI runs can install a seeded source.

Key public API:
- `RandomSource`: lock-protected generator with `randint` and `choice`.
- `current_random_source`: return the source active in the current context.
- `use_random_source`: context manager installing a source for a block.
- `resolve_random_source`: prefer an explicit source over the context.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
import random
import threading
from typing import Iterator, Sequence, TypeVar

_T = TypeVar("_T")


class RandomSource:
    """Thread-safe wrapper around one `random.Random` instance."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize with a caller-provided generator or a fresh entropy-seeded one."""

        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls, seed: int) -> RandomSource:
        """Return a deterministic source for reproducible runs and tests."""

        return cls(random.Random(seed))

    def randint(self, lower: int, upper: int) -> int:
        """Return an integer in `[lower, upper]`, both bounds inclusive."""

        with self._lock:
            return self._rng.randint(lower, upper)

    def choice(self, items: Sequence[_T]) -> _T:
        """Return one element of a non-empty sequence chosen uniformly."""

        with self._lock:
            return self._rng.choice(items)


_DEFAULT_SOURCE = RandomSource()
_CURRENT_SOURCE: ContextVar[RandomSource] = ContextVar(
    "wordcraft_random_source", default=_DEFAULT_SOURCE
)


def current_random_source() -> RandomSource:
    """Return the random source installed for the current context."""

    return _CURRENT_SOURCE.get()


def resolve_random_source(source: RandomSource | None) -> RandomSource:
    """Return `source` when given, otherwise the context's current source."""

    if source is not None:
        return source
    return current_random_source()


@contextmanager
def use_random_source(source: RandomSource) -> Iterator[RandomSource]:
    """Install `source` as the current random source for the enclosed block."""

    token = _CURRENT_SOURCE.set(source)
    try:
        yield source
    finally:
        _CURRENT_SOURCE.reset(token)
