from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

import networkx as nx

from .datatypes import Edge
from .preprocessing import normalize_word, tokenize

logger = logging.getLogger(__name__)

def load_text(file_path: Union[str, Path]) -> Optional[str]:
    """Whole file as text, or None (logged) when it cannot be read."""
    try:
        return Path(file_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Could not open file {file_path}: {e}")
        return None

class WordGraph:
    """
    Weighted directed graph of consecutive words.

    ``_adjacency`` maps every vertex to its destinations in first-seen order,
    each with the number of times the pair was observed. Every destination is
    also a key, so traversals never meet an unknown vertex. Algorithms iterate
    vertices through :meth:`vertices`, which is sorted.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Dict[str, int]] = {}
        self._sorted: List[str] = []
        self._dirty = False

    def add_edge(self, src: str, dest: str) -> None:
        out = self._adjacency.get(src)
        if out is None:
            out = self._adjacency[src] = {}
            self._dirty = True
        out[dest] = out.get(dest, 0) + 1
        if dest not in self._adjacency:
            self._adjacency[dest] = {}
            self._dirty = True

    def build_from_text(self, text: str) -> bool:
        """Add an edge for each consecutive word pair. Accumulates across calls."""
        words = tokenize(text)
        for prev, cur in zip(words, words[1:]):
            self.add_edge(prev, cur)
        logger.info(f"Built graph from {len(words)} words: {self.vertex_count} vertices, {self.edge_count} edges")
        return True

    def build_from_file(self, file_path: Union[str, Path]) -> bool:
        text = load_text(file_path)
        if text is None:
            return False
        return self.build_from_text(text)

    def contains_word(self, word: str) -> bool:
        return normalize_word(word) in self._adjacency

    def __contains__(self, word: object) -> bool:
        return word in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def vertices(self) -> List[str]:
        if self._dirty:
            self._sorted = sorted(self._adjacency)
            self._dirty = False
        return list(self._sorted)

    def successors(self, word: str) -> List[str]:
        return list(self._adjacency.get(word, ()))

    def out_edges(self, word: str) -> Dict[str, int]:
        return dict(self._adjacency.get(word, {}))

    def has_edge(self, src: str, dest: str) -> bool:
        return dest in self._adjacency.get(src, ())

    def weight(self, src: str, dest: str) -> int:
        return self._adjacency.get(src, {}).get(dest, 0)

    def out_weight(self, word: str) -> int:
        return sum(self._adjacency.get(word, {}).values())

    def edges(self) -> Iterator[Edge]:
        for src in self.vertices():
            for dest, w in self._adjacency[src].items():
                yield Edge(src=src, dest=dest, weight=w)

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self._adjacency.values())

    @property
    def is_empty(self) -> bool:
        return not self._adjacency

    def to_networkx(self) -> nx.DiGraph:
        G = nx.DiGraph()
        G.add_nodes_from(self.vertices())
        for e in self.edges():
            G.add_edge(e.src, e.dest, weight=e.weight)
        return G
