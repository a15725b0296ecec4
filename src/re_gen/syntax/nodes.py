"""Syntax tree for parsed regular expressions.

Every node is a frozen dataclass, so trees are immutable, hashable and safe to
share between generator instances and threads. ``Node`` is the union of all
node classes; the generator matches on it exhaustively.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Matches nothing."""


@dataclass(frozen=True, slots=True)
class EmptySequence:
    """Matches the empty string."""


@dataclass(frozen=True, slots=True)
class Literal:
    text: str


@dataclass(frozen=True, slots=True)
class CharacterClass:
    """One code point from the union of inclusive ``(low, high)`` ranges."""

    ranges: tuple[tuple[int, int], ...]


@dataclass(frozen=True, slots=True)
class AnyChar:
    pass


@dataclass(frozen=True, slots=True)
class AnyCharNoNewline:
    pass


@dataclass(frozen=True, slots=True)
class BeginLine:
    pass


@dataclass(frozen=True, slots=True)
class EndLine:
    pass


@dataclass(frozen=True, slots=True)
class BeginText:
    pass


@dataclass(frozen=True, slots=True)
class EndText:
    pass


@dataclass(frozen=True, slots=True)
class WordBoundary:
    pass


@dataclass(frozen=True, slots=True)
class NoWordBoundary:
    pass


@dataclass(frozen=True, slots=True)
class Capture:
    child: Node
    index: Optional[int] = None
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Star:
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Plus:
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Quest:
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Repeat:
    """Repeat ``children`` between ``min`` and ``max`` times (``max=None`` is unbounded)."""

    children: tuple[Node, ...]
    min: int
    max: Optional[int]


@dataclass(frozen=True, slots=True)
class Concat:
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Alternate:
    children: tuple[Node, ...]


Node = Union[
    NoMatch,
    EmptySequence,
    Literal,
    CharacterClass,
    AnyChar,
    AnyCharNoNewline,
    BeginLine,
    EndLine,
    BeginText,
    EndText,
    WordBoundary,
    NoWordBoundary,
    Capture,
    Star,
    Plus,
    Quest,
    Repeat,
    Concat,
    Alternate,
]


def children_of(node: Node) -> tuple[Node, ...]:
    """Return the direct sub-nodes of ``node`` in order."""
    if isinstance(node, Capture):
        return (node.child,)
    if isinstance(node, (Star, Plus, Quest, Repeat, Concat, Alternate)):
        return node.children
    return ()


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants depth-first, pre-order.

    Iterative so that deeply nested trees do not hit the recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children_of(current)))


def describe(node: Node, indent: int = 0) -> str:
    """Render ``node`` as an indented, one-node-per-line dump."""
    pad = "  " * indent
    kind = type(node).__name__
    attrs = []
    for f in fields(node):
        value = getattr(node, f.name)
        if f.name in ("child", "children") or value is None:
            continue
        if f.name == "ranges":
            attrs.append("[" + " ".join(_format_range(lo, hi) for lo, hi in value) + "]")
        else:
            attrs.append(f"{f.name}={value!r}")
    line = f"{pad}{kind}" + (f" {' '.join(attrs)}" if attrs else "")
    lines = [line]
    for child in children_of(node):
        lines.append(describe(child, indent + 1))
    return "\n".join(lines)


def _format_range(lo: int, hi: int) -> str:
    if lo == hi:
        return f"U+{lo:04X}"
    return f"U+{lo:04X}-U+{hi:04X}"
