"""Bounded random text generation.

Responsibilities:
- Draw characters and strings from the 16-bit code-unit range `[0, 0xFFFF]`.
- Enforce argument bounds before any entropy is consumed.
- Route every draw through a `RandomSource` so callers can substitute a
  seeded source (explicitly via `source=` or with `use_random_source`).
"""

from __future__ import annotations

from typing import Sequence

from ..errors import InvalidArgumentError
from ..random_source import RandomSource, resolve_random_source

MIN_CODE_UNIT = 0x0000
MAX_CODE_UNIT = 0xFFFF
CODE_UNIT_DOMAIN_SIZE = MAX_CODE_UNIT - MIN_CODE_UNIT + 1

DEFAULT_MESSAGE_COUNT = 10
DEFAULT_MESSAGE_MAX_LENGTH = 10


def _code_point(bound: int | str, name: str) -> int:
    """Convert an integer or one-character bound into a validated code unit."""

    if isinstance(bound, str):
        if len(bound) != 1:
            raise InvalidArgumentError(f"{name} must be a single character, got {bound!r}.")
        value = ord(bound)
    else:
        value = int(bound)
    if not MIN_CODE_UNIT <= value <= MAX_CODE_UNIT:
        raise InvalidArgumentError(
            f"{name} must be within [{MIN_CODE_UNIT}, {MAX_CODE_UNIT}], got {value}."
        )
    return value


def _require_positive_length(length: int) -> None:
    if length <= 0:
        raise InvalidArgumentError(f"length must be positive, got {length}.")


def random_char(
    lower: int | str = MIN_CODE_UNIT,
    upper: int | str = MAX_CODE_UNIT,
    *,
    source: RandomSource | None = None,
) -> str:
    """Return one character drawn uniformly from `[lower, upper]` inclusive.

    Bounds may be code units or one-character strings, so
    ``random_char("A", "Z")`` yields an uppercase ASCII letter.

    Raises:
        InvalidArgumentError: If `lower > upper` or a bound is outside the
            16-bit code-unit range.
    """

    low = _code_point(lower, "lower")
    high = _code_point(upper, "upper")
    if low > high:
        raise InvalidArgumentError(f"lower bound {low} exceeds upper bound {high}.")
    return chr(resolve_random_source(source).randint(low, high))


def random_string(
    length: int,
    lower: int | str = MIN_CODE_UNIT,
    upper: int | str = MAX_CODE_UNIT,
    *,
    source: RandomSource | None = None,
) -> str:
    """Return `length` independently drawn characters from `[lower, upper]`.

    Raises:
        InvalidArgumentError: If `length <= 0` or the bounds are invalid.
    """

    _require_positive_length(length)
    rng = resolve_random_source(source)
    return "".join(random_char(lower, upper, source=rng) for _ in range(length))


def random_alpha_string(length: int, *, source: RandomSource | None = None) -> str:
    """Return `length` random lowercase ASCII letters."""

    return random_string(length, "a", "z", source=source)


def random_string_array(
    count: int,
    max_length: int,
    *,
    fixed_length: bool = False,
    source: RandomSource | None = None,
) -> list[str]:
    """Return `count` random strings over the full code-unit range.

    Each string length is resampled from `[1, max_length]`, unless
    `fixed_length` is set, in which case every string is exactly
    `max_length` characters long.

    Raises:
        InvalidArgumentError: If `count < 0` or `max_length <= 0`.
    """

    if count < 0:
        raise InvalidArgumentError(f"count must be non-negative, got {count}.")
    if max_length <= 0:
        raise InvalidArgumentError(f"max_length must be positive, got {max_length}.")

    rng = resolve_random_source(source)
    strings: list[str] = []
    for _ in range(count):
        length = max_length if fixed_length else rng.randint(1, max_length)
        strings.append(random_string(length, source=rng))
    return strings


def random_unique_string(length: int, *, source: RandomSource | None = None) -> str:
    """Return `length` distinct characters in the order they were drawn.

    Characters are drawn from the full code-unit range and rejected when
    already used. The expected number of draws follows the coupon-collector
    bound: roughly `N * ln(N / (N - length))` for domain size `N`, which
    approaches `N * ln(N)` (about 727k draws) when `length` equals the
    domain size. Slow near the top of the range, but always terminates with
    probability 1.

    Raises:
        InvalidArgumentError: If `length` is not within `[1, 65536]`.
    """

    if length <= 0:
        raise InvalidArgumentError(f"length must be positive, got {length}.")
    if length > CODE_UNIT_DOMAIN_SIZE:
        raise InvalidArgumentError(
            f"length {length} exceeds the {CODE_UNIT_DOMAIN_SIZE} distinct code units available."
        )

    rng = resolve_random_source(source)
    seen: set[int] = set()
    drawn: list[str] = []
    while len(drawn) < length:
        code = rng.randint(MIN_CODE_UNIT, MAX_CODE_UNIT)
        if code in seen:
            continue
        seen.add(code)
        drawn.append(chr(code))
    return "".join(drawn)


def random_message(
    messages: Sequence[str] | None = None,
    *,
    source: RandomSource | None = None,
) -> str:
    """Return one message chosen uniformly from `messages`.

    When `messages` is omitted, a fresh list of `DEFAULT_MESSAGE_COUNT`
    random strings of up to `DEFAULT_MESSAGE_MAX_LENGTH` characters is
    generated and drawn from.

    Raises:
        InvalidArgumentError: If `messages` is empty.
    """

    rng = resolve_random_source(source)
    if messages is None:
        messages = random_string_array(
            DEFAULT_MESSAGE_COUNT, DEFAULT_MESSAGE_MAX_LENGTH, source=rng
        )
    if not messages:
        raise InvalidArgumentError("messages must contain at least one entry.")
    return rng.choice(messages)
