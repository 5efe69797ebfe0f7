from __future__ import annotations
import heapq
import math
from typing import Dict, List, Optional, Tuple

from .datatypes import PathResult, PathStatus
from .graphing import WordGraph
from .preprocessing import normalize_word

def _dijkstra(graph: WordGraph, start: str, end: Optional[str] = None) -> Tuple[Dict[str, float], Dict[str, str]]:
    """
    Dijkstra with edge cost = edge weight.

    Heap entries are (distance, word), so equal distances finalize the
    lexicographically smallest word first and paths are reproducible.
    Stops as soon as ``end`` is finalized when one is given.
    """
    dist: Dict[str, float] = {start: 0.0}
    prev: Dict[str, str] = {}
    done = set()
    heap = [(0.0, start)]
    while heap:
        d, cur = heapq.heappop(heap)
        if cur in done:
            continue
        done.add(cur)
        if cur == end:
            break
        for dest, w in graph.out_edges(cur).items():
            if dest in done:
                continue
            alt = d + w
            if alt < dist.get(dest, math.inf):
                dist[dest] = alt
                prev[dest] = cur
                heapq.heappush(heap, (alt, dest))
    return {v: dist[v] for v in done}, prev

def _walk_back(prev: Dict[str, str], start: str, end: str) -> List[str]:
    path = [end]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return path

def shortest_path(graph: WordGraph, start: str, end: str) -> PathResult:
    """
    Cheapest path from ``start`` to ``end``, heavier edges cost more.

    Distance is -1 with an empty path when either word is missing
    (``WORD_MISSING``) or ``end`` cannot be reached (``UNREACHABLE``).
    """
    s, e = normalize_word(start), normalize_word(end)
    if s not in graph or e not in graph:
        return PathResult.missing()
    dist, prev = _dijkstra(graph, s, e)
    if e not in dist:
        return PathResult.unreachable()
    return PathResult(distance=dist[e], path=_walk_back(prev, s, e), status=PathStatus.FOUND)

def shortest_paths_from_source(graph: WordGraph, start: str) -> Dict[str, PathResult]:
    """Paths from ``start`` to every other reachable word, keyed in sorted order."""
    s = normalize_word(start)
    if s not in graph:
        return {}
    # one full pass finalizes vertices in the same order as the per-pair runs
    dist, prev = _dijkstra(graph, s)
    return {
        v: PathResult(distance=dist[v], path=_walk_back(prev, s, v))
        for v in sorted(dist) if v != s
    }
