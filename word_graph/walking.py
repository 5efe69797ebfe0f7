from __future__ import annotations
import logging
from typing import List, Set, Tuple

from .graphing import WordGraph
from .randomness import RandomSource

logger = logging.getLogger(__name__)

def random_walk(graph: WordGraph, rng: RandomSource) -> List[str]:
    """
    Follow random outgoing edges from a random start word.

    The walk ends at a word without outgoing edges, or when the drawn edge
    was already used in this walk (the walk does not move along it), so no
    directed edge appears twice in the result.
    """
    words = graph.vertices()
    if not words:
        return []

    current = words[rng.randrange(len(words))]
    path = [current]
    used: Set[Tuple[str, str]] = set()
    while True:
        nexts = graph.successors(current)
        if not nexts:
            break
        dest = nexts[rng.randrange(len(nexts))]
        if (current, dest) in used:
            break
        used.add((current, dest))
        current = dest
        path.append(current)

    logger.debug(f"Random walk of {len(path)} words from \"{path[0]}\"")
    return path
