"""Generate strings that match regular expressions."""

from re_gen.generator.core import UngenerableClassError, generate, generate_from_pattern, repeat_count
from re_gen.generator.state import PRINTABLE_CHARS, PRINTABLE_CHARS_NO_NEWLINE, GenerationState, RandomSource
from re_gen.input_generator.string_generator.tree_string_generator import (
    TreeStringGenerator,
    TreeStringGeneratorConfig,
)
from re_gen.syntax.parser import ParseError, UnsupportedSyntaxError, parse

__all__ = [
    # Generation
    "generate",
    "generate_from_pattern",
    "repeat_count",
    "GenerationState",
    "RandomSource",
    "PRINTABLE_CHARS",
    "PRINTABLE_CHARS_NO_NEWLINE",
    "UngenerableClassError",
    # Parsing
    "parse",
    "ParseError",
    "UnsupportedSyntaxError",
    # Generator objects
    "TreeStringGenerator",
    "TreeStringGeneratorConfig",
]
