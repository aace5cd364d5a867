from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict

SparseVector = Dict[str, float]  # token -> weight, absent key means 0

@dataclass
class Sentence:
    idx: int
    text: str
    tokens: List[str] = field(default_factory=list)
    tf: Dict[str, int] = field(default_factory=dict)
    tf_idf_vector: SparseVector = field(default_factory=dict)

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # cosine similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges
