from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .config import DOT_EDGE_STYLE, DOT_GRAPH_NAME, DOT_NODE_STYLE, RANK_CSV_PRECISION
from .datatypes import RankTable
from .graphing import WordGraph

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

def to_dot(graph: WordGraph, name: str = DOT_GRAPH_NAME) -> str:
    lines = [f"digraph {name} {{",
             f"  node [{DOT_NODE_STYLE}];",
             f"  edge [{DOT_EDGE_STYLE}];"]
    for e in graph.edges():
        lines.append(f"  \"{e.src}\" -> \"{e.dest}\" [label=\"{e.weight}\"];")
    lines.append("}")
    return "\n".join(lines) + "\n"

def format_adjacency(graph: WordGraph) -> str:
    """One line per word: ``word -> dest (weight: w), ...``."""
    rows = []
    for word in graph.vertices():
        out = graph.out_edges(word)
        if out:
            targets = ", ".join(f"{dest} (weight: {w})" for dest, w in out.items())
        else:
            targets = "(no outgoing edges)"
        rows.append(f"{word} -> {targets}")
    return "\n".join(rows)

def edges_to_frame(graph: WordGraph) -> pd.DataFrame:
    return pd.DataFrame(
        [{"From": e.src, "To": e.dest, "Weight": e.weight} for e in graph.edges()],
        columns=["From", "To", "Weight"],
    )

def ranks_to_frame(ranks: RankTable) -> pd.DataFrame:
    """Two columns, ``word`` and ``rank``, highest rank first."""
    df = pd.DataFrame(list(ranks.items()), columns=["word", "rank"])
    return df.sort_values(["rank", "word"], ascending=[False, True], kind="mergesort").reset_index(drop=True)

def ranks_to_csv(ranks: RankTable, precision: int = RANK_CSV_PRECISION) -> str:
    return ranks_to_frame(ranks).to_csv(index=False, float_format=f"%.{precision}f")

def _write(path: PathLike, content: str, what: str) -> bool:
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write {what} to {path}: {e}")
        return False
    logger.info(f"{what.capitalize()} saved to {path}")
    return True

def save_graph_dot(graph: WordGraph, path: PathLike, name: str = DOT_GRAPH_NAME) -> bool:
    # render with: dot -Tpng graph.dot -o graph.png
    return _write(path, to_dot(graph, name=name), "graph")

def save_ranks_csv(ranks: RankTable, path: PathLike, precision: int = RANK_CSV_PRECISION) -> bool:
    return _write(path, ranks_to_csv(ranks, precision=precision), "ranks")

def save_walk(walk: List[str], path: PathLike) -> bool:
    return _write(path, " ".join(walk), "random walk")
