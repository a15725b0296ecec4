"""Convert regular-expression source text into a ``re_gen`` syntax tree.

Tokenising and grammar checking are left to CPython's own regular-expression
parser (``re._parser``, the parser ``rstr``'s Xeger walks as well). This module
only translates its ``(opcode, argument)`` lists into the immutable node types
from :mod:`re_gen.syntax.nodes`, resolving flags, categories and negation along
the way so that the generator never has to know about them.
"""

from __future__ import annotations

import re
from re import _constants as sre_constants  # type: ignore[attr-defined]
from re import _parser as sre_parse  # type: ignore[attr-defined]
from typing import Any, Optional

from loguru import logger

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

MAXREPEAT = sre_constants.MAXREPEAT

_CATEGORIES: dict[Any, tuple[tuple[int, int], ...]] = {
    sre_constants.CATEGORY_DIGIT: rng_ranges.DIGIT_RANGES,
    sre_constants.CATEGORY_NOT_DIGIT: rng_ranges.complement(rng_ranges.DIGIT_RANGES),
    sre_constants.CATEGORY_WORD: rng_ranges.WORD_RANGES,
    sre_constants.CATEGORY_NOT_WORD: rng_ranges.complement(rng_ranges.WORD_RANGES),
    sre_constants.CATEGORY_SPACE: rng_ranges.SPACE_RANGES,
    sre_constants.CATEGORY_NOT_SPACE: rng_ranges.complement(rng_ranges.SPACE_RANGES),
}

_UNSUPPORTED = {
    sre_constants.GROUPREF: "back-reference",
    sre_constants.GROUPREF_EXISTS: "conditional group",
    sre_constants.ASSERT: "look-around assertion",
    sre_constants.ASSERT_NOT: "negative look-around assertion",
    sre_constants.ATOMIC_GROUP: "atomic group",
}


class ParseError(ValueError):
    """Raised when pattern text is not a valid regular expression."""

    def __init__(self, message: str, pattern: str, position: Optional[int] = None) -> None:
        self.message = message
        self.pattern = pattern
        self.position = position
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(f"{message} in pattern {pattern!r}")


class UnsupportedSyntaxError(ParseError):
    """The pattern is valid but uses a construct that is not a regular language."""


def parse(pattern: str) -> Node:
    """Parse ``pattern`` into a syntax tree.

    :param pattern: Regular expression in Python ``re`` syntax.
    :return: The root node of the tree.
    :raises ParseError: If the pattern is syntactically invalid.
    :raises UnsupportedSyntaxError: If it uses back-references, look-around,
        conditionals or atomic groups.
    """
    try:
        parsed = sre_parse.parse(pattern)
    except re.error as e:
        raise ParseError(e.msg, pattern, e.pos) from e
    except OverflowError as e:
        raise ParseError(str(e), pattern) from e

    group_names = {index: name for name, index in parsed.state.groupdict.items()}
    converter = _Converter(pattern, group_names)
    tree = converter.convert_sequence(list(parsed), parsed.state.flags)
    logger.debug("Parsed pattern {!r} into {}", pattern, type(tree).__name__)
    return tree


class _Converter:
    def __init__(self, pattern: str, group_names: dict[int, str]) -> None:
        self.pattern = pattern
        self.group_names = group_names

    def convert_sequence(self, items: list[tuple[Any, Any]], flags: int) -> Node:
        nodes: list[Node] = []
        for op, av in items:
            node = self.convert(op, av, flags)
            # Flag-scoped groups like (?i:...) convert to a bare Concat.
            pieces = node.children if isinstance(node, Concat) else (node,)
            for piece in pieces:
                if isinstance(piece, EmptySequence):
                    continue
                if isinstance(piece, Literal) and nodes and isinstance(nodes[-1], Literal):
                    nodes[-1] = Literal(nodes[-1].text + piece.text)
                else:
                    nodes.append(piece)
        if not nodes:
            return EmptySequence()
        if len(nodes) == 1:
            return nodes[0]
        return Concat(tuple(nodes))

    def convert(self, op: Any, av: Any, flags: int) -> Node:
        ignore_case = bool(flags & sre_constants.SRE_FLAG_IGNORECASE)

        if op is sre_constants.LITERAL:
            if ignore_case and chr(av).isascii() and chr(av).isalpha():
                return CharacterClass(rng_ranges.fold_case([(av, av)]))
            return Literal(chr(av))
        if op is sre_constants.NOT_LITERAL:
            excluded = [(av, av)]
            if ignore_case:
                excluded = list(rng_ranges.fold_case(excluded))
            return self._char_class(rng_ranges.complement(excluded))
        if op is sre_constants.IN:
            return self._convert_set(av, ignore_case)
        if op is sre_constants.ANY:
            if flags & sre_constants.SRE_FLAG_DOTALL:
                return AnyChar()
            return AnyCharNoNewline()
        if op is sre_constants.AT:
            return self._convert_at(av, flags)
        if op is sre_constants.BRANCH:
            _, branches = av
            return Alternate(tuple(self.convert_sequence(list(b), flags) for b in branches))
        if op is sre_constants.SUBPATTERN:
            group, add_flags, del_flags, sub = av
            inner = self.convert_sequence(list(sub), (flags | add_flags) & ~del_flags)
            if group is None:
                return inner
            return Capture(inner, group, self.group_names.get(group))
        if op in (sre_constants.MAX_REPEAT, sre_constants.MIN_REPEAT, sre_constants.POSSESSIVE_REPEAT):
            low, high, sub = av
            return self._convert_repeat(low, high, list(sub), flags)
        if op in _UNSUPPORTED:
            raise UnsupportedSyntaxError(f"{_UNSUPPORTED[op]} is not supported", self.pattern)

        raise UnsupportedSyntaxError(f"unexpected opcode {op}", self.pattern)

    def _convert_repeat(self, low: int, high: int, sub: list[tuple[Any, Any]], flags: int) -> Node:
        body = self.convert_sequence(sub, flags)
        children = body.children if isinstance(body, Concat) else (body,)
        if high == MAXREPEAT:
            if low == 0:
                return Star(children)
            if low == 1:
                return Plus(children)
            return Repeat(children, low, None)
        if (low, high) == (0, 1):
            return Quest(children)
        return Repeat(children, low, high)

    def _convert_set(self, items: list[tuple[Any, Any]], ignore_case: bool) -> Node:
        negate = False
        collected: list[tuple[int, int]] = []
        for op, av in items:
            if op is sre_constants.NEGATE:
                negate = True
            elif op is sre_constants.LITERAL:
                collected.append((av, av))
            elif op is sre_constants.RANGE:
                collected.append(av)
            elif op is sre_constants.CATEGORY:
                if av not in _CATEGORIES:
                    raise UnsupportedSyntaxError(f"character category {av} is not supported", self.pattern)
                collected.extend(_CATEGORIES[av])
            else:
                raise UnsupportedSyntaxError(f"unexpected set member {op}", self.pattern)

        if ignore_case:
            class_ranges = rng_ranges.fold_case(collected)
        else:
            class_ranges = rng_ranges.normalize(collected)
        if negate:
            class_ranges = rng_ranges.complement(class_ranges)
        return self._char_class(class_ranges)

    @staticmethod
    def _char_class(class_ranges: tuple[tuple[int, int], ...]) -> Node:
        if not class_ranges:
            return NoMatch()
        return CharacterClass(class_ranges)

    def _convert_at(self, code: Any, flags: int) -> Node:
        multiline = bool(flags & sre_constants.SRE_FLAG_MULTILINE)
        if code is sre_constants.AT_BEGINNING:
            return BeginLine() if multiline else BeginText()
        if code is sre_constants.AT_END:
            return EndLine() if multiline else EndText()
        if code is sre_constants.AT_BEGINNING_STRING:
            return BeginText()
        if code is sre_constants.AT_END_STRING:
            return EndText()
        if code is sre_constants.AT_BOUNDARY:
            return WordBoundary()
        if code is sre_constants.AT_NON_BOUNDARY:
            return NoWordBoundary()
        raise UnsupportedSyntaxError(f"unexpected assertion {code}", self.pattern)
