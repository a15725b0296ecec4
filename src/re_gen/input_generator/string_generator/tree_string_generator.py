from __future__ import annotations

from collections.abc import Generator
from random import Random

from loguru import logger

from re_gen.generator.core import UngenerableClassError, generate
from re_gen.generator.state import GenerationState
from re_gen.input_generator.string_generator.base_string_generator import (
    BaseStringGenerator,
    BaseStringGeneratorConfig,
)
from re_gen.syntax.nodes import Node
from re_gen.syntax.parser import ParseError, parse


class TreeStringGenerator(BaseStringGenerator):
    """Generates strings matching a regex pattern by walking its syntax tree."""

    def __init__(self, config: TreeStringGeneratorConfig) -> None:
        """
        Initialize the tree string generator with a configuration.

        :param config: An instance of TreeStringGeneratorConfig.
        """
        super().__init__(config)
        self._config: TreeStringGeneratorConfig = config
        self._random = Random(self._config.seed)
        self._trees: dict[str, Node] = {}

    def tree_for(self, regex_pattern: str) -> Node:
        """
        Return the parsed tree for a pattern, parsing it on first use.

        :param regex_pattern: The regex pattern to parse.
        :raises ParseError: If the pattern cannot be parsed.
        """
        tree = self._trees.get(regex_pattern)
        if tree is None:
            try:
                tree = parse(regex_pattern)
            except ParseError as e:
                logger.error("Failed to parse regex {}: {}", regex_pattern, e)
                raise
            self._trees[regex_pattern] = tree
        return tree

    def generate(self, regex_pattern: str, count: int) -> Generator[str, None, None]:
        """
        Generate strings matching the given regex pattern.

        Strings that hit a class with no printable member in strict mode are
        logged and skipped, so fewer than ``count`` strings may be yielded.

        :param regex_pattern: The regex pattern to generate strings from.
        :param count: The number of strings to generate.
        :yield: Generated strings matching the regex pattern.
        """
        tree = self.tree_for(regex_pattern)
        logger.debug("Generating {} strings for regex pattern: {}", count, regex_pattern)
        for _ in range(count):
            try:
                yield generate(tree, self._config.limit, self._random, strict=self._config.strict)
            except UngenerableClassError as e:
                logger.warning(f"Skipping string for regex {regex_pattern}: {e}")


class TreeStringGeneratorConfig(BaseStringGeneratorConfig):
    """Configuration for the TreeStringGenerator."""

    def __init__(
        self,
        *,
        seed: int | None = None,
        limit: int = 10,
        strict: bool = False,
    ) -> None:
        """
        Initialize the configuration with given parameters for the tree-walking string generator.

        :param seed: Optional seed for reproducibility via random.Random(seed).
        :param limit: Upper bound on repetitions produced by *, + and {m,n} (default: 10).
        :param strict: Skip strings whose classes have no printable member instead of
            emitting nothing for them.
        :raises ValueError: If limit is not a positive integer.
        """
        # Raises ValueError for a bad limit.
        GenerationState(limit=limit, strict=strict)
        self.seed = seed
        self.limit = limit
        self.strict = strict
