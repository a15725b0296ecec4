from __future__ import annotations

import re
from typing import Callable, Optional

from re_gen.sut.base_sut import BaseSUT
from re_gen.sut.engine_match import EngineMatch


class PythonRe(BaseSUT):
    """Matches generated text with the standard library ``re`` engine."""

    name = "python_re"

    def search(self, pattern: str, text: str, flags: int = 0) -> EngineMatch:
        return self._run(pattern, text, flags, lambda rx: rx.search(text))

    def fullmatch(self, pattern: str, text: str, flags: int = 0) -> EngineMatch:
        return self._run(pattern, text, flags, lambda rx: rx.fullmatch(text))

    @staticmethod
    def _run(
        pattern: str, text: str, flags: int, match: Callable[[re.Pattern[str]], Optional[re.Match[str]]]
    ) -> EngineMatch:
        try:
            m = match(re.compile(pattern, flags))
            return EngineMatch(
                matched=m is not None,
                span=m.span() if m else None,
                error=None,
            )
        except Exception as exc:
            return EngineMatch(
                matched=False,
                span=None,
                error=f"{type(exc).__name__}: {exc}",
            )
