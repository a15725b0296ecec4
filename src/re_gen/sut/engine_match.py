from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class EngineMatch:
    matched: bool
    span: Optional[Tuple[int, int]]
    error: Optional[str]
