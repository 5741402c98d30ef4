from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List


@dataclass
class DealConfig:
    seed: int = 1
    hand_size: int = 5
    hand_count: int = 5
    backend: str = "imperative"


@dataclass
class DealResult:
    backend: str
    seed: int
    hands: List[List[str]] = field(default_factory=list)
    remaining: int = 0

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
