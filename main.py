from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
from typing import List, Optional
import matplotlib.pyplot as plt
import networkx as nx
import io

from word_graph.config import (
    DEFAULT_DAMPING_FACTOR, DEFAULT_ITERATIONS, DEFAULT_DOT_FILE, DEFAULT_RANK_FILE,
    DEFAULT_WALK_FILE, LOG_LEVEL,
)
from word_graph.datatypes import BridgeStatus, PathStatus
from word_graph.engine import TextGraph
from word_graph.export import edges_to_frame, format_adjacency, ranks_to_csv, ranks_to_frame, to_dot
from word_graph.preprocessing import normalize_word
from word_graph.scoring import RankConfig

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    # Remove headers
    text = re.sub(r'^#{1,6}\s+', '', md_content, flags=re.MULTILINE)
    # Remove links, keep the label
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    # Remove code blocks
    text = re.sub(r'```.*?```', '', text, flags=re.DOTALL)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8", errors="replace")
    if file_extension == 'md':
        return extract_markdown_text(content)
    return content

def join_words(words: List[str]) -> str:
    # "a", "a and b", "a, b, and c"
    if len(words) <= 1:
        return "".join(words)
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    return ", ".join(words[:-1]) + ", and " + words[-1]

@st.cache_resource
def build_engine(text: str, seed: Optional[int]) -> TextGraph:
    engine = TextGraph(seed=seed)
    engine.build_from_text(text)
    return engine

def draw_graph_visualization(engine: TextGraph, highlight: Optional[List[str]] = None):
    """Draw the word graph, edge width by weight, with an optional highlighted path."""
    G = engine.graph.to_networkx()
    fig, ax = plt.subplots(figsize=(12, 8))
    ax.set_title("Word Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color='lightblue', node_size=800, alpha=0.7)

        weights = [d['weight'] for _, _, d in G.edges(data=True)]
        if weights:
            max_weight = max(weights)
            nx.draw_networkx_edges(G, pos, ax=ax,
                                   width=[1 + 2 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray', arrows=True,
                                   connectionstyle='arc3,rad=0.1')
        nx.draw_networkx_labels(G, pos, ax=ax, font_size=9, font_weight='bold')

        if len(G.nodes) <= 30:
            edge_labels = {(u, v): str(d['weight']) for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

        if highlight and len(highlight) > 1:
            path_edges = list(zip(highlight, highlight[1:]))
            nx.draw_networkx_nodes(G, pos, nodelist=highlight, ax=ax,
                                   node_color='yellow', node_size=1000, alpha=0.8)
            nx.draw_networkx_edges(G, pos, path_edges, ax=ax, width=3, alpha=0.9,
                                   edge_color='red', arrows=True, connectionstyle='arc3,rad=0.1')

    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()
    return buf

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("PageRank")
    damping = st.sidebar.slider(
        "Damping factor",
        min_value=0.1,
        max_value=0.9,
        value=DEFAULT_DAMPING_FACTOR,
        step=0.05,
    )
    iterations = st.sidebar.number_input(
        "Iterations", min_value=10, max_value=1000, value=DEFAULT_ITERATIONS, step=10,
    )
    use_tfidf = st.sidebar.checkbox("Seed with TF-IDF", value=False,
                                    help="Use TF-IDF scores of the text as initial ranks")
    top_n = st.sidebar.number_input("Show top", min_value=1, max_value=500, value=20)

    st.sidebar.header("Randomness")
    seed_text = st.sidebar.text_input("Random seed", value="", help="Leave empty for a fresh seed")
    seed = int(seed_text) if seed_text.strip().isdigit() else None

    return RankConfig(damping=damping, iterations=int(iterations), use_tfidf=use_tfidf), int(top_n), seed

def show_graph(engine: TextGraph):
    st.header("🕸️ Graph")
    graph = engine.graph
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Words (vertices)", graph.vertex_count)
    with col2:
        st.metric("Edges", graph.edge_count)

    with st.expander("Adjacency", expanded=False):
        st.code(format_adjacency(graph), language=None)
        st.dataframe(edges_to_frame(graph), use_container_width=True)

    if graph.vertex_count <= 60:
        try:
            st.image(draw_graph_visualization(engine), use_container_width=True)
        except Exception as e:
            st.error(f"Could not generate graph visualization: {str(e)}")
    else:
        st.info(f"📊 Graph too large to visualize ({graph.vertex_count} words).")

    st.download_button("Download DOT", to_dot(graph), file_name=DEFAULT_DOT_FILE, mime="text/vnd.graphviz")

def show_bridge_words(engine: TextGraph):
    st.header("🌉 Bridge Words")
    col1, col2 = st.columns(2)
    with col1:
        word1 = st.text_input("First word", key="bridge_w1")
    with col2:
        word2 = st.text_input("Second word", key="bridge_w2")
    if not (word1 and word2):
        return

    result = engine.query_bridge_words(word1, word2)
    if result.status is BridgeStatus.WORD_MISSING:
        st.error(f"No {' or '.join(result.missing)} in the graph!")
    elif result.status is BridgeStatus.NO_BRIDGE:
        st.warning(f"No bridge words from {result.word1} to {result.word2}!")
    else:
        st.success(f"The bridge words from {result.word1} to {result.word2} are: {join_words(result.words)}.")

def show_new_text(engine: TextGraph):
    st.header("✍️ Generate Text with Bridge Words")
    text = st.text_input("Text to process", key="bridge_text")
    if st.button("Generate", key="bridge_generate") and text:
        st.text_area("Generated text", engine.generate_text_with_bridges(text), height=80, disabled=True)

def show_shortest_path(engine: TextGraph):
    st.header("🧭 Shortest Path")
    col1, col2 = st.columns(2)
    with col1:
        start = st.text_input("From", key="path_start")
    with col2:
        end = st.text_input("To (empty for all words)", key="path_end")
    if not start:
        return

    if not engine.contains_word(start):
        st.error(f"No {normalize_word(start)} in the graph!")
        return

    if not end:
        paths = engine.shortest_paths_from_source(start)
        if not paths:
            st.warning(f"No paths found from {normalize_word(start)}.")
            return
        st.dataframe(pd.DataFrame([
            {"To": dest, "Length": r.distance, "Path": " -> ".join(r.path)}
            for dest, r in paths.items()
        ]), use_container_width=True)
        return

    result = engine.shortest_path(start, end)
    if result.status is PathStatus.WORD_MISSING:
        st.error(f"No {normalize_word(end)} in the graph!")
    elif result.status is PathStatus.UNREACHABLE:
        st.warning("No path exists between these words.")
    else:
        st.success(f"Shortest Path: {' -> '.join(result.path)}")
        st.metric("Path Length", f"{result.distance:g}")
        if engine.graph.vertex_count <= 60:
            st.image(draw_graph_visualization(engine, highlight=result.path), use_container_width=True)

def show_pagerank(engine: TextGraph, rank_cfg: RankConfig, top_n: int):
    st.header("📈 PageRank")
    if rank_cfg.use_tfidf:
        ranks = engine.calculate_pagerank_with_tfidf(rank_cfg.damping, rank_cfg.iterations)
    else:
        ranks = engine.calculate_pagerank(rank_cfg.damping, rank_cfg.iterations)
    if not ranks:
        st.warning("The graph is empty.")
        return

    df = ranks_to_frame(ranks)
    st.dataframe(df.head(top_n), use_container_width=True)

    values = np.array(list(ranks.values()))
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Sum", f"{values.sum():.6f}")
    with col2:
        st.metric("Max", f"{values.max():.6f}")
    with col3:
        st.metric("Std", f"{values.std():.6f}")

    st.download_button("Download CSV", ranks_to_csv(ranks), file_name=DEFAULT_RANK_FILE, mime="text/csv")

def show_random_walk(engine: TextGraph):
    st.header("🎲 Random Walk")
    if st.button("Walk", key="walk"):
        walk = engine.random_walk()
        if not walk:
            st.error("Random walk could not be performed on the graph.")
            return
        st.success(" -> ".join(walk))
        st.download_button("Download walk", " ".join(walk), file_name=DEFAULT_WALK_FILE, mime="text/plain")

def main():
    st.title("Word Graph Explorer")
    st.write("Upload a text file to build a word graph and explore it")

    rank_cfg, top_n, seed = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'md'],
        help="Upload a text file (supports .txt, .md formats)"
    )
    pasted = st.text_area("...or paste text", height=120)

    text = load_text_from_file(uploaded_file) if uploaded_file is not None else pasted
    if not text:
        return

    engine = build_engine(text, seed)
    logger.info(f"Graph ready: {engine.graph.vertex_count} words")
    if engine.graph.is_empty:
        st.warning("No words found in the text.")
        return

    show_graph(engine)
    show_bridge_words(engine)
    show_new_text(engine)
    show_shortest_path(engine)
    show_pagerank(engine, rank_cfg, top_n)
    show_random_walk(engine)

if __name__ == "__main__":
    main()
