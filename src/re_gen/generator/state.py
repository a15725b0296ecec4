"""Inputs threaded through every generation call."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Protocol

# Fixed alphabet for "any character" and for classes that reach the top of the
# code-point space. The last two characters are newline and carriage return.
PRINTABLE_CHARS = string.digits + string.ascii_lowercase + string.ascii_uppercase + string.punctuation + " \t\n\r"
PRINTABLE_CHARS_NO_NEWLINE = PRINTABLE_CHARS[:-2]


class RandomSource(Protocol):
    """Anything that draws uniform integers in ``[0, n)``; ``random.Random`` qualifies."""

    def randrange(self, n: int) -> int:
        ...


@dataclass(frozen=True, slots=True)
class GenerationState:
    """Read-only settings for one top-level generation call.

    :param limit: Upper bound on the repetitions produced by ``*``, ``+`` and
        the randomised tail of ``{m,n}``.
    :param strict: Raise instead of emitting nothing when a class has no
        printable member.
    """

    limit: int
    strict: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit!r}")
