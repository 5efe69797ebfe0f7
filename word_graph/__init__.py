from .datatypes import Edge, PathResult, PathStatus, BridgeResult, BridgeStatus, RankTable, UNREACHABLE
from .preprocessing import PreprocessConfig, normalize_word, tokenize, split_words, split_documents
from .graphing import WordGraph, load_text
from .randomness import RandomSource, NumpyRandom
from .bridges import find_bridge_words, query_bridge_words, generate_text_with_bridges
from .paths import shortest_path, shortest_paths_from_source
from .tfidf import calculate_tfidf_ranks
from .scoring import RankConfig, calculate_pagerank, calculate_pagerank_with_tfidf, top_ranked
from .walking import random_walk
from .export import to_dot, format_adjacency, edges_to_frame, ranks_to_frame, ranks_to_csv, save_graph_dot, save_ranks_csv, save_walk
from .engine import TextGraph
