"""Code-point range arithmetic used when building character classes."""

from __future__ import annotations

from collections.abc import Iterable

MAX_CODE_POINT = 0x10FFFF

Range = tuple[int, int]

DIGIT_RANGES: tuple[Range, ...] = ((0x30, 0x39),)
WORD_RANGES: tuple[Range, ...] = ((0x30, 0x39), (0x41, 0x5A), (0x5F, 0x5F), (0x61, 0x7A))
SPACE_RANGES: tuple[Range, ...] = ((0x09, 0x0D), (0x20, 0x20))

_UPPER = (ord("A"), ord("Z"))
_LOWER = (ord("a"), ord("z"))
_CASE_SHIFT = ord("a") - ord("A")


def normalize(ranges: Iterable[Range]) -> tuple[Range, ...]:
    """Sort ranges and merge overlapping or adjacent ones."""
    merged: list[list[int]] = []
    for lo, hi in sorted(ranges):
        if lo > hi:
            raise ValueError(f"Bad range {lo:#x}-{hi:#x}")
        if merged and lo <= merged[-1][1] + 1:
            merged[-1][1] = max(merged[-1][1], hi)
        else:
            merged.append([lo, hi])
    return tuple((lo, hi) for lo, hi in merged)


def complement(ranges: Iterable[Range]) -> tuple[Range, ...]:
    """Return every code point in ``[0, MAX_CODE_POINT]`` not covered by ``ranges``."""
    result: list[Range] = []
    next_lo = 0
    for lo, hi in normalize(ranges):
        if lo > next_lo:
            result.append((next_lo, lo - 1))
        next_lo = hi + 1
    if next_lo <= MAX_CODE_POINT:
        result.append((next_lo, MAX_CODE_POINT))
    return tuple(result)


def fold_case(ranges: Iterable[Range]) -> tuple[Range, ...]:
    """Add the swapped-case counterpart of every ASCII letter in ``ranges``."""
    ranges = tuple(ranges)
    extra: list[Range] = []
    for lo, hi in ranges:
        for (case_lo, case_hi), shift in ((_UPPER, _CASE_SHIFT), (_LOWER, -_CASE_SHIFT)):
            overlap_lo = max(lo, case_lo)
            overlap_hi = min(hi, case_hi)
            if overlap_lo <= overlap_hi:
                extra.append((overlap_lo + shift, overlap_hi + shift))
    return normalize(ranges + tuple(extra))


def size(ranges: Iterable[Range]) -> int:
    return sum(hi - lo + 1 for lo, hi in ranges)


def contains(ranges: Iterable[Range], code_point: int) -> bool:
    return any(lo <= code_point <= hi for lo, hi in ranges)


def is_unbounded(ranges: Iterable[Range]) -> bool:
    """True when any range reaches the maximum code point (typical of negated classes)."""
    return any(hi == MAX_CODE_POINT for _, hi in ranges)
