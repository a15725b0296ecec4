"""
Pytest configuration and shared fixtures.
"""

import random

import pytest

from re_gen.sut.python_re import PythonRe

# Patterns whose generated strings must always be accepted by Python's re.
ROUND_TRIP_PATTERNS = [
    r"123[0-2]+.*\w{3}",
    r"^\d{1,2}[/](1[0-2]|[1-9])[/]((19|20)\d{2})$",
    r"^((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3}(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])$",
    r"^\d+$",
    r"\D{3}",
    r"((123)?){3}",
    r"(ab|bc)def",
    r"[^abcdef]{5}",
    r"[^1]{3,5}",
    r"[^0-5a-z\s]{5}",
    r"Z{2,5}",
    r"[a-zA-Z]{100}",
    r"^[a-z]{5,10}@[a-z]{5,10}\.(com|net|org)$",
    r"(?i)hello [a-c]+",
    r"(?s)a.b",
    r"(?P<year>\d{4})-(?P<month>0[1-9]|1[0-2])",
    r"x{2,}y",
    r"[\w.-]+@example\.com",
    r"(?:ab)*c",
    r"a??b+?",
    r"\Aabc\Z",
    r"[^\W\d]{4}",
    r"café[α-ω]",
    r"a|",
    r"",
]


class ScriptedRandom:
    """Random source that replays fixed draws and records every bound asked for."""

    def __init__(self, draws=()):
        self._draws = list(draws)
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        value = self._draws.pop(0) if self._draws else 0
        assert 0 <= value < n, f"scripted draw {value} outside [0, {n})"
        return value


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def sut() -> PythonRe:
    """Matching engine used to check generated strings."""
    return PythonRe()
