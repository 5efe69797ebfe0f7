from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Tuple

UNREACHABLE = -1.0

@dataclass(frozen=True)
class Edge:
    src: str
    dest: str
    weight: int  # observed count of "src dest"

class PathStatus(Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"
    WORD_MISSING = "word_missing"

class BridgeStatus(Enum):
    FOUND = "found"
    NO_BRIDGE = "no_bridge"
    WORD_MISSING = "word_missing"

@dataclass
class PathResult:
    distance: float
    path: List[str] = field(default_factory=list)
    status: PathStatus = PathStatus.FOUND

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    def as_tuple(self) -> Tuple[float, List[str]]:
        return self.distance, list(self.path)

    @classmethod
    def missing(cls) -> "PathResult":
        return cls(distance=UNREACHABLE, path=[], status=PathStatus.WORD_MISSING)

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(distance=UNREACHABLE, path=[], status=PathStatus.UNREACHABLE)

@dataclass
class BridgeResult:
    word1: str
    word2: str
    words: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)  # normalized inputs absent from the graph

    @property
    def status(self) -> BridgeStatus:
        if self.missing:
            return BridgeStatus.WORD_MISSING
        return BridgeStatus.FOUND if self.words else BridgeStatus.NO_BRIDGE

RankTable = Dict[str, float]  # vertex -> rank, sums to 1.0
