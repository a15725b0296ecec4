"""Recursive string synthesis over a regular-expression syntax tree.

``generate`` walks the tree once, choosing a branch for every alternation, a
count for every repetition and a code point for every class, and concatenates
what each node produces. The only inputs are the tree, a ``GenerationState``
and a random source, so two sources seeded alike give identical strings.
"""

from __future__ import annotations

from loguru import logger

from re_gen.generator.state import PRINTABLE_CHARS, PRINTABLE_CHARS_NO_NEWLINE, GenerationState, RandomSource
from re_gen.syntax import ranges as rng_ranges
from re_gen.syntax.nodes import (
    Alternate,
    AnyChar,
    AnyCharNoNewline,
    BeginLine,
    BeginText,
    Capture,
    CharacterClass,
    Concat,
    EmptySequence,
    EndLine,
    EndText,
    Literal,
    Node,
    NoMatch,
    NoWordBoundary,
    Plus,
    Quest,
    Repeat,
    Star,
    WordBoundary,
)
from re_gen.syntax.parser import parse


class UngenerableClassError(RuntimeError):
    """A character class has no member inside the printable alphabet."""

    def __init__(self, ranges: tuple[tuple[int, int], ...]) -> None:
        self.ranges = ranges
        super().__init__(f"No printable character falls inside class {ranges!r}")


def generate(node: Node, limit: int, rng: RandomSource, *, strict: bool = False) -> str:
    """Generate one string accepted by the tree rooted at ``node``.

    :param node: Root of a parsed pattern.
    :param limit: Maximum repetitions for ``*``, ``+`` and bounded repeats.
    :param rng: Source of uniform integers, usually a seeded ``random.Random``.
    :param strict: Raise ``UngenerableClassError`` instead of emitting nothing
        for a class with no printable member.
    :return: The generated string.
    """
    return _generate(node, GenerationState(limit=limit, strict=strict), rng)


def generate_from_pattern(pattern: str, limit: int, rng: RandomSource, *, strict: bool = False) -> str:
    """Parse ``pattern`` and generate one matching string.

    A ``ParseError`` propagates unchanged and no random values are drawn.
    """
    state = GenerationState(limit=limit, strict=strict)
    tree = parse(pattern)
    return _generate(tree, state, rng)


def repeat_count(rng: RandomSource, low: int, high: int) -> int:
    """Draw a repetition count uniformly from ``[low, high]``."""
    return low + rng.randrange(high - low + 1)


def _generate(node: Node, state: GenerationState, rng: RandomSource) -> str:
    match node:
        case NoMatch() | EmptySequence():
            return ""
        case BeginLine() | EndLine() | BeginText() | EndText() | WordBoundary() | NoWordBoundary():
            return ""
        case Literal(text=text):
            return text
        case Capture(child=child):
            return _generate(child, state, rng)
        case Concat(children=children):
            return "".join(_generate(child, state, rng) for child in children)
        case Alternate(children=children) if children:
            return _generate(children[rng.randrange(len(children))], state, rng)
        case Alternate():
            return ""
        case Star(children=children):
            return _repeat(children, repeat_count(rng, 0, state.limit), state, rng)
        case Plus(children=children):
            return _repeat(children, repeat_count(rng, 1, state.limit), state, rng)
        case Quest(children=children):
            return _repeat(children, repeat_count(rng, 0, 1), state, rng)
        case Repeat(children=children, min=low, max=high):
            capped = state.limit if high is None else min(high, state.limit)
            # The declared minimum is kept even above the limit; only the
            # random tail is capped.
            count = repeat_count(rng, low, capped) if capped > low else low
            return _repeat(children, count, state, rng)
        case AnyChar():
            return PRINTABLE_CHARS[rng.randrange(len(PRINTABLE_CHARS))]
        case AnyCharNoNewline():
            return PRINTABLE_CHARS_NO_NEWLINE[rng.randrange(len(PRINTABLE_CHARS_NO_NEWLINE))]
        case CharacterClass(ranges=ranges):
            return _generate_class(ranges, state, rng)
        case _:
            logger.warning("Skipping unknown node type {}", type(node).__name__)
            return ""


def _repeat(children: tuple[Node, ...], count: int, state: GenerationState, rng: RandomSource) -> str:
    parts = []
    for _ in range(count):
        for child in children:
            parts.append(_generate(child, state, rng))
    return "".join(parts)


def _generate_class(ranges: tuple[tuple[int, int], ...], state: GenerationState, rng: RandomSource) -> str:
    if not ranges:
        return ""
    if rng_ranges.is_unbounded(ranges):
        candidates = [c for c in PRINTABLE_CHARS if rng_ranges.contains(ranges, ord(c))]
        if not candidates:
            if state.strict:
                raise UngenerableClassError(ranges)
            logger.debug("Class {} has no printable member, emitting nothing", ranges)
            return ""
        return candidates[rng.randrange(len(candidates))]

    index = rng.randrange(rng_ranges.size(ranges))
    offset = 0
    for lo, hi in ranges:
        width = hi - lo + 1
        if index < offset + width:
            return chr(lo + index - offset)
        offset += width
    return ""
