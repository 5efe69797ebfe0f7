"""
Configuration constants for the word graph engine.

Numeric defaults for ranking, the TF-IDF seeding heuristic and the
export formats live here so the engine and the app agree on them.
"""

import os

# =============================================================================
# PageRank
# =============================================================================

DEFAULT_DAMPING_FACTOR = 0.85
DEFAULT_ITERATIONS = 100

# Pre-normalization rank for vertices missing from a supplied seed table
MISSING_SEED_RANK = 0.5

# =============================================================================
# TF-IDF seeding
# =============================================================================

# Single-line texts are cut into virtual documents of this many tokens
VIRTUAL_DOCUMENT_WINDOW = 5

# Score for vertices never seen as a term
UNSEEN_TERM_SCORE = 0.5

# Replaces non-positive tf-idf scores (ln(N/df) == 0 when df == N)
TFIDF_FLOOR = 0.1

# =============================================================================
# Export
# =============================================================================

DOT_GRAPH_NAME = "TextGraph"
DOT_NODE_STYLE = "shape=box, style=filled, fillcolor=lightblue"
DOT_EDGE_STYLE = "color=gray"

RANK_CSV_PRECISION = 6
DEFAULT_DOT_FILE = "graph.dot"
DEFAULT_RANK_FILE = "pagerank_results.csv"
DEFAULT_WALK_FILE = "random_walk.txt"

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
