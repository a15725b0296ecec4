#!/usr/bin/env python3
"""Command-line entry point for generating strings that match regexes.

Usage:
    python -m re_gen.run_generator PATTERN [PATTERN ...] [options]

    or via the installed console script:

    re-gen PATTERN [PATTERN ...] [options]

Example:
    # Five strings for one pattern, reproducible
    re-gen '^[a-z]{5,10}@[a-z]+\\.(com|net|org)$' --count 5 --seed 42

    # Patterns from a JSONL file, checked against Python's re and saved
    re-gen --seed-file data/patterns.jsonl --verify --output out.jsonl
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

from re_gen.input_generator.string_generator.tree_string_generator import (
    TreeStringGenerator,
    TreeStringGeneratorConfig,
)
from re_gen.sut.python_re import PythonRe
from re_gen.syntax.nodes import describe
from re_gen.syntax.parser import ParseError


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate strings accepted by regular expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Seed files are JSONL with one {"pattern": "..."} object per line.

Example:
  re-gen '(ab|bc)def' --count 3 --limit 1
        """
    )

    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help="Regular expressions to generate strings for"
    )
    parser.add_argument(
        "--seed-file",
        type=str,
        default=None,
        help="Path to JSONL file with regex patterns to generate strings for"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum repetitions for *, + and {m,n} (default: 10)"
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="Number of strings to generate per pattern (default: 1)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output (default: unseeded)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Skip strings containing a negated class with no printable member"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check every generated string against the pattern with Python's re"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write JSONL records to this file instead of plain lines to stdout"
    )
    parser.add_argument(
        "--dump-tree",
        action="store_true",
        help="Log the parsed syntax tree of each pattern"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write detailed debug logs to this file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logs except warnings and errors"
    )

    args = parser.parse_args(argv)
    if not args.patterns and not args.seed_file:
        parser.error("at least one PATTERN or --seed-file is required")
    if args.limit < 1:
        parser.error("--limit must be a positive integer")
    if args.count < 0:
        parser.error("--count must not be negative")
    return args


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for the generator.

    Args:
        verbose: Whether to enable verbose debug logging
        quiet: Whether to suppress everything below warnings
        log_file: Optional path for a detailed log file
    """
    # Remove default logger
    logger.remove()

    if quiet:
        level = "WARNING"
    else:
        level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level,
        colorize=True
    )

    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
            level="DEBUG",
            rotation="100 MB",
            retention="7 days"
        )


def load_patterns(file_path: str) -> list[str]:
    """Load regex patterns from a JSONL file.

    Expected format: {"pattern": "regex_pattern_here"}

    Args:
        file_path: Path to JSONL file

    Returns:
        List of regex pattern strings

    Raises:
        OSError: If the file cannot be read
    """
    patterns = []
    logger.info(f"Loading patterns from {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning(f"Line {line_num}: Invalid JSON: {e}")
                continue

            if isinstance(data, dict) and isinstance(data.get("pattern"), str):
                patterns.append(data["pattern"])
            else:
                logger.warning(f"Line {line_num}: No 'pattern' field in JSON")

    logger.info(f"Loaded {len(patterns)} patterns from {file_path}")
    return patterns


def run(args: argparse.Namespace, patterns: list[str], out: TextIO, jsonl: bool) -> int:
    """Generate, optionally verify, and write strings for every pattern.

    Returns:
        Exit code (0 when every pattern parsed and every check passed)
    """
    generator = TreeStringGenerator(
        TreeStringGeneratorConfig(seed=args.seed, limit=args.limit, strict=args.strict)
    )
    sut = PythonRe() if args.verify else None
    stats = {"patterns": 0, "strings": 0, "parse_errors": 0, "verify_failures": 0}

    for pattern in patterns:
        try:
            tree = generator.tree_for(pattern)
        except ParseError:
            stats["parse_errors"] += 1
            continue
        stats["patterns"] += 1
        if args.dump_tree:
            logger.info(f"Syntax tree for {pattern!r}:\n{describe(tree)}")

        for text in generator.generate(pattern, args.count):
            stats["strings"] += 1
            verified = None
            if sut is not None:
                result = sut.fullmatch(pattern, text)
                verified = result.matched
                if not verified:
                    stats["verify_failures"] += 1
                    logger.warning(f"Generated {text!r} does not match {pattern!r} ({result.error or 'no match'})")

            if jsonl:
                record = {"pattern": pattern, "text": text}
                if verified is not None:
                    record["verified"] = verified
                out.write(json.dumps(record) + "\n")
            else:
                out.write(text + "\n")

    logger.info(
        f"Generated {stats['strings']} strings for {stats['patterns']} patterns "
        f"({stats['parse_errors']} parse errors, {stats['verify_failures']} verification failures)"
    )
    return 1 if stats["parse_errors"] or stats["verify_failures"] else 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the generator.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_arguments(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    patterns = list(args.patterns)
    if args.seed_file:
        try:
            patterns.extend(load_patterns(args.seed_file))
        except OSError as e:
            logger.error(f"Failed to read seed file {args.seed_file}: {e}")
            return 1

    logger.debug(f"Limit: {args.limit}, count: {args.count}, seed: {args.seed}, strict: {args.strict}")

    try:
        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as out:
                code = run(args, patterns, out, jsonl=True)
            logger.info(f"Wrote results to {output_path}")
            return code
        return run(args, patterns, sys.stdout, jsonl=False)
    except KeyboardInterrupt:
        logger.info("Generation interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
