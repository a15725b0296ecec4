from __future__ import annotations

from typing import Protocol

from re_gen.sut.engine_match import EngineMatch


class BaseSUT(Protocol):
    name: str

    def search(self, pattern: str, text: str, flags: int = 0) -> EngineMatch:
        ...

    def fullmatch(self, pattern: str, text: str, flags: int = 0) -> EngineMatch:
        ...
