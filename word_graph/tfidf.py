from __future__ import annotations
import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Tuple

from .config import TFIDF_FLOOR, UNSEEN_TERM_SCORE
from .datatypes import RankTable
from .graphing import WordGraph
from .preprocessing import PreprocessConfig, split_documents

logger = logging.getLogger(__name__)

def _compute_tf_df(documents: List[List[str]]) -> Tuple[Counter, Counter]:
    """
    TF: raw count of a term over all documents
    DF: number of documents containing the term
    """
    tf: Counter = Counter()
    df: Counter = Counter()
    for tokens in documents:
        tf.update(tokens)
        df.update(set(tokens))
    return tf, df

def _tfidf_score(tf: int, df: int, n_docs: int) -> float:
    # ln(N/DF) needs at least two documents; with one, fall back to raw tf
    if df > 0 and n_docs > 1:
        score = tf * math.log(n_docs / df)
    else:
        score = float(tf)
    # a term found in every document scores 0, keep it positive
    return score if score > 0 else TFIDF_FLOOR

def normalize_ranks(scores: Dict[str, float]) -> RankTable:
    total = sum(scores.values())
    if total > 0:
        return {w: s / total for w, s in scores.items()}
    if not scores:
        return {}
    uniform = 1.0 / len(scores)
    return {w: uniform for w in scores}

def calculate_tfidf_ranks(graph: WordGraph, raw_text: str, cfg: Optional[PreprocessConfig] = None) -> RankTable:
    """
    TF-IDF score of every vertex, normalized into a distribution.

    Only used to seed PageRank. Lines of ``raw_text`` are the documents
    (see :func:`split_documents` for the single-line heuristic); vertices
    that never occur as a term get a flat score before normalization.
    """
    documents = split_documents(raw_text, cfg)
    tf, df = _compute_tf_df(documents)
    n_docs = len(documents)

    scores: Dict[str, float] = {}
    for word in graph.vertices():
        if tf[word] > 0:
            scores[word] = _tfidf_score(tf[word], df[word], n_docs)
        else:
            scores[word] = UNSEEN_TERM_SCORE

    ranks = normalize_ranks(scores)
    logger.debug(f"TF-IDF seeds over {n_docs} documents: {len(ranks)} words")
    for word, rank in ranks.items():
        logger.debug(f"\"{word}\" TF-IDF initial rank: {rank:.6f}")
    return ranks
