from __future__ import annotations
import logging
from typing import List

from .datatypes import BridgeResult
from .graphing import WordGraph
from .preprocessing import normalize_word, split_words
from .randomness import RandomSource

logger = logging.getLogger(__name__)

def query_bridge_words(graph: WordGraph, word1: str, word2: str) -> BridgeResult:
    w1, w2 = normalize_word(word1), normalize_word(word2)
    missing = [w for w in dict.fromkeys((w1, w2)) if w not in graph]
    if missing:
        return BridgeResult(word1=w1, word2=w2, missing=missing)
    # successors are unique per source, sorting keeps the listing deterministic
    words = sorted(b for b in graph.successors(w1) if graph.has_edge(b, w2))
    return BridgeResult(word1=w1, word2=w2, words=words)

def find_bridge_words(graph: WordGraph, word1: str, word2: str) -> List[str]:
    """Vertices b with edges word1->b and b->word2; empty if either word is absent."""
    return query_bridge_words(graph, word1, word2).words

def generate_text_with_bridges(graph: WordGraph, text: str, rng: RandomSource) -> str:
    """
    Rewrite ``text`` inserting one random bridge word between each pair of
    consecutive words that has any.

    Output holds normalized words only. Inputs with fewer than two usable
    words are returned unchanged.
    """
    words = split_words(text)
    if len(words) < 2:
        return text

    out = [words[0]]
    inserted = 0
    for cur, nxt in zip(words, words[1:]):
        bridges = find_bridge_words(graph, cur, nxt)
        if bridges:
            out.append(bridges[rng.randrange(len(bridges))])
            inserted += 1
        out.append(nxt)
    logger.debug(f"Inserted {inserted} bridge words into {len(words)} words")
    return " ".join(out)
