from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Tuple

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str
    tokens: Tuple[str, ...] = ()
    freq_map: Dict[str, int] = field(default_factory=dict, hash=False)

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges

@dataclass(frozen=True)
class PageRankConfig:
    damping: float = 0.85
    max_iterations: int = 100
    epsilon: float = 1e-6

@dataclass
class SummaryResult:
    sentences: List[str] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)  # one per source sentence
    keywords: List[str] = field(default_factory=list)
    algorithm: str = "graph"

    @property
    def text(self) -> str:
        return " ".join(self.sentences)

ScoreVector = List[float]
SimilarityMatrix = List[List[float]]
