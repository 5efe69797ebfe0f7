from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional, Union

from .bridges import find_bridge_words, generate_text_with_bridges, query_bridge_words
from .config import DEFAULT_DAMPING_FACTOR, DEFAULT_ITERATIONS
from .datatypes import BridgeResult, PathResult, RankTable
from .graphing import WordGraph, load_text
from .paths import shortest_path, shortest_paths_from_source
from .preprocessing import PreprocessConfig
from .randomness import NumpyRandom, RandomSource
from .scoring import calculate_pagerank, calculate_pagerank_with_tfidf
from .tfidf import calculate_tfidf_ranks
from .walking import random_walk

class TextGraph:
    """
    One word graph plus the raw text it was built from and its random source.

    Not thread-safe: builds need exclusive access, and the random source is
    shared by :meth:`generate_text_with_bridges` and :meth:`random_walk`.
    """

    def __init__(self, rng: Optional[RandomSource] = None, seed: Optional[int] = None,
                 cfg: Optional[PreprocessConfig] = None) -> None:
        self.graph = WordGraph()
        self.rng: RandomSource = rng if rng is not None else NumpyRandom(seed)
        self.cfg = cfg or PreprocessConfig()
        self._texts: List[str] = []

    @property
    def raw_text(self) -> str:
        return "\n".join(self._texts)

    def build_from_text(self, text: str) -> bool:
        self._texts.append(text)
        return self.graph.build_from_text(text)

    def build_from_file(self, file_path: Union[str, Path]) -> bool:
        text = load_text(file_path)
        if text is None:
            return False
        return self.build_from_text(text)

    def contains_word(self, word: str) -> bool:
        return self.graph.contains_word(word)

    def find_bridge_words(self, word1: str, word2: str) -> List[str]:
        return find_bridge_words(self.graph, word1, word2)

    def query_bridge_words(self, word1: str, word2: str) -> BridgeResult:
        return query_bridge_words(self.graph, word1, word2)

    def generate_text_with_bridges(self, text: str) -> str:
        return generate_text_with_bridges(self.graph, text, self.rng)

    def shortest_path(self, start: str, end: str) -> PathResult:
        return shortest_path(self.graph, start, end)

    def shortest_paths_from_source(self, start: str) -> Dict[str, PathResult]:
        return shortest_paths_from_source(self.graph, start)

    def calculate_pagerank(self, damping: float = DEFAULT_DAMPING_FACTOR,
                           iterations: int = DEFAULT_ITERATIONS,
                           initial_ranks: Optional[Dict[str, float]] = None) -> RankTable:
        return calculate_pagerank(self.graph, damping=damping, iterations=iterations, initial_ranks=initial_ranks)

    def calculate_tfidf_ranks(self, raw_text: Optional[str] = None) -> RankTable:
        text = self.raw_text if raw_text is None else raw_text
        return calculate_tfidf_ranks(self.graph, text, cfg=self.cfg)

    def calculate_pagerank_with_tfidf(self, damping: float = DEFAULT_DAMPING_FACTOR,
                                      iterations: int = DEFAULT_ITERATIONS,
                                      raw_text: Optional[str] = None) -> RankTable:
        text = self.raw_text if raw_text is None else raw_text
        return calculate_pagerank_with_tfidf(self.graph, text, damping=damping, iterations=iterations, cfg=self.cfg)

    def random_walk(self) -> List[str]:
        return random_walk(self.graph, self.rng)
