from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .config import DEFAULT_DAMPING_FACTOR, DEFAULT_ITERATIONS, MISSING_SEED_RANK
from .datatypes import RankTable
from .graphing import WordGraph
from .preprocessing import PreprocessConfig
from .tfidf import calculate_tfidf_ranks, normalize_ranks

logger = logging.getLogger(__name__)

@dataclass
class RankConfig:
    damping: float = DEFAULT_DAMPING_FACTOR
    iterations: int = DEFAULT_ITERATIONS
    use_tfidf: bool = False

def _initial_ranks(words: List[str], custom: Optional[Dict[str, float]]) -> RankTable:
    if custom:
        return normalize_ranks({w: custom.get(w, MISSING_SEED_RANK) for w in words})
    return {w: 1.0 / len(words) for w in words}

def calculate_pagerank(graph: WordGraph,
                       damping: float = DEFAULT_DAMPING_FACTOR,
                       iterations: int = DEFAULT_ITERATIONS,
                       initial_ranks: Optional[Dict[str, float]] = None) -> RankTable:
    """
    Weighted PageRank over the word graph.

    PR(w) = (1-d)/N + d * D/N + d * sum(PR(u) * W(u,w) / W(u))

    where D is the summed rank of dangling words (no outgoing edges) and
    W(u) the total outgoing weight of u.

    Args:
        graph: Word graph to rank
        damping: Damping factor d
        iterations: Number of iterations, run in full
        initial_ranks: Optional seed distribution; words missing from it
            start at 0.5 before the seed is renormalized. Uniform when None
            or empty.

    Returns:
        Rank for every word, keys sorted, summing to 1.0. Empty for an
        empty graph.
    """
    words = graph.vertices()
    n = len(words)
    if n == 0:
        return {}

    pr = _initial_ranks(words, initial_ranks)
    logger.debug(f"PageRank over {n} words, d={damping}, {iterations} iterations, "
                 f"{'seeded' if initial_ranks else 'uniform'} start")

    # (word, [(dest, weight / total_out_weight)]) for every non-dangling word
    out_shares: List[Tuple[str, List[Tuple[str, float]]]] = []
    dangling: List[str] = []
    for w in words:
        out = graph.out_edges(w)
        if not out:
            dangling.append(w)
            continue
        total = sum(out.values())
        out_shares.append((w, [(dest, weight / total) for dest, weight in out.items()]))

    for _ in range(iterations):
        dangling_sum = sum(pr[w] for w in dangling)
        base = (1.0 - damping) / n + damping * dangling_sum / n
        new_pr = {w: base for w in words}
        for w, shares in out_shares:
            mass = damping * pr[w]
            for dest, share in shares:
                new_pr[dest] += mass * share
        pr = new_pr

    return pr

def calculate_pagerank_with_tfidf(graph: WordGraph,
                                  raw_text: str,
                                  damping: float = DEFAULT_DAMPING_FACTOR,
                                  iterations: int = DEFAULT_ITERATIONS,
                                  cfg: Optional[PreprocessConfig] = None) -> RankTable:
    seeds = calculate_tfidf_ranks(graph, raw_text, cfg=cfg)
    return calculate_pagerank(graph, damping=damping, iterations=iterations, initial_ranks=seeds)

def top_ranked(ranks: RankTable, k: Optional[int] = None) -> List[Tuple[str, float]]:
    """Highest ranks first, ties by word."""
    ordered = sorted(ranks.items(), key=lambda x: (-x[1], x[0]))
    return ordered if k is None else ordered[:k]
