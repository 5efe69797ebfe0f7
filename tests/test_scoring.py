"""Tests for PageRank and TF-IDF seeding."""

import math

import pytest

from word_graph import (
    PreprocessConfig, WordGraph, calculate_pagerank, calculate_pagerank_with_tfidf,
    calculate_tfidf_ranks, split_documents, top_ranked,
)


def build(text: str) -> WordGraph:
    graph = WordGraph()
    graph.build_from_text(text)
    return graph


class TestPageRank:
    """Test the PageRank iteration."""

    def test_sums_to_one(self, sample_graph):
        """Ranks form a distribution."""
        ranks = calculate_pagerank(sample_graph)
        assert sum(ranks.values()) == pytest.approx(1.0, abs=1e-6)
        assert list(ranks) == sample_graph.vertices()
        assert all(r > 0 for r in ranks.values())

    @pytest.mark.parametrize("damping, iterations", [(0.85, 100), (0.5, 7), (0.1, 1), (1.0, 30)])
    def test_sums_to_one_for_any_parameters(self, damping, iterations):
        """Dangling mass is redistributed, so nothing leaks."""
        graph = build("a b c a d e f g e d x")
        ranks = calculate_pagerank(graph, damping=damping, iterations=iterations)
        assert sum(ranks.values()) == pytest.approx(1.0, abs=1e-6)

    def test_empty_graph(self):
        """No words, no ranks."""
        assert calculate_pagerank(WordGraph()) == {}

    def test_one_iteration_by_hand(self):
        """a -> b with b dangling, one step from uniform."""
        ranks = calculate_pagerank(build("a b"), damping=0.85, iterations=1)
        base = 0.15 / 2 + 0.85 * 0.5 / 2
        assert ranks["a"] == pytest.approx(base)
        assert ranks["b"] == pytest.approx(base + 0.85 * 0.5)

    def test_cycle_stays_uniform(self):
        """A directed cycle keeps the uniform distribution."""
        ranks = calculate_pagerank(build("a b c a"))
        for r in ranks.values():
            assert r == pytest.approx(1 / 3)

    def test_weights_split_rank(self):
        """Heavier edges carry proportionally more rank."""
        # hub -> x twice, hub -> y once, both come back
        ranks = calculate_pagerank(build("hub x hub x hub y hub"), iterations=200)
        assert ranks["x"] > ranks["y"]

    def test_zero_iterations_returns_start(self):
        """With no iterations the start distribution comes back."""
        ranks = calculate_pagerank(build("a b c"), iterations=0)
        assert ranks == pytest.approx({"a": 1 / 3, "b": 1 / 3, "c": 1 / 3})

    def test_seed_renormalized_with_default_for_missing(self):
        """Seeds are renormalized; missing words start at 0.5."""
        ranks = calculate_pagerank(build("a b"), iterations=0, initial_ranks={"a": 1.5})
        assert ranks == pytest.approx({"a": 0.75, "b": 0.25})

    def test_empty_seed_is_uniform(self):
        """An empty seed table means a uniform start."""
        graph = build("a b c b")
        assert calculate_pagerank(graph, initial_ranks={}) == calculate_pagerank(graph)

    def test_top_ranked(self):
        """Highest first, ties by word."""
        assert top_ranked({"b": 0.25, "a": 0.25, "c": 0.5}) == [("c", 0.5), ("a", 0.25), ("b", 0.25)]
        assert top_ranked({"b": 0.25, "a": 0.25, "c": 0.5}, k=1) == [("c", 0.5)]


class TestSplitDocuments:
    """Test how raw text is cut into documents."""

    def test_lines_are_documents(self):
        """Each non-empty line is a document."""
        assert split_documents("a b\n\nc, d\n") == [["a", "b"], ["c", "d"]]

    def test_single_line_is_windowed(self):
        """One line is cut into windows of five tokens."""
        docs = split_documents("one two three four five six seven")
        assert docs == [["one", "two", "three", "four", "five"], ["six", "seven"]]

    def test_window_is_configurable(self):
        """Window size comes from the config."""
        docs = split_documents("a b c d", PreprocessConfig(virtual_document_window=2))
        assert docs == [["a", "b"], ["c", "d"]]

    def test_empty_text(self):
        """No lines, no documents."""
        assert split_documents("") == []


class TestTfIdf:
    """Test TF-IDF seed ranks."""

    def test_sums_to_one(self, sample_graph, sample_text):
        """Seeds form a distribution over every word."""
        ranks = calculate_tfidf_ranks(sample_graph, sample_text)
        assert list(ranks) == sample_graph.vertices()
        assert sum(ranks.values()) == pytest.approx(1.0)

    def test_multi_line_scores(self):
        """A word in every document falls back to the floor."""
        text = "a b\na c"
        ranks = calculate_tfidf_ranks(build(text), text)
        total = 0.1 + 2 * math.log(2)
        assert ranks["a"] == pytest.approx(0.1 / total)
        assert ranks["b"] == pytest.approx(math.log(2) / total)
        assert ranks["c"] == pytest.approx(math.log(2) / total)

    def test_single_line_virtual_documents(self):
        """Six distinct words over two windows score alike."""
        text = "a b c d e f"
        ranks = calculate_tfidf_ranks(build(text), text)
        for r in ranks.values():
            assert r == pytest.approx(1 / 6)

    def test_single_document_uses_raw_tf(self):
        """With one document the term frequency is the score."""
        graph = build("x y")
        ranks = calculate_tfidf_ranks(graph, "y z")
        # x never occurs as a term: 0.5; y occurs once: 1
        assert ranks == pytest.approx({"x": 0.5 / 1.5, "y": 1 / 1.5})

    def test_no_documents_is_uniform(self):
        """Unseen words share the same score."""
        ranks = calculate_tfidf_ranks(build("a b c"), "")
        assert ranks == pytest.approx({"a": 1 / 3, "b": 1 / 3, "c": 1 / 3})

    def test_empty_graph(self):
        """No words, no seeds."""
        assert calculate_tfidf_ranks(WordGraph(), "some text here") == {}

    def test_pagerank_with_tfidf(self, sample_graph, sample_text):
        """TF-IDF seeded PageRank is still a distribution."""
        ranks = calculate_pagerank_with_tfidf(sample_graph, sample_text, damping=0.85, iterations=100)
        assert sum(ranks.values()) == pytest.approx(1.0, abs=1e-6)

    def test_pagerank_with_tfidf_uses_seed(self):
        """With no iterations the TF-IDF seed is returned."""
        text = "a b\na c"
        graph = build(text)
        assert calculate_pagerank_with_tfidf(graph, text, iterations=0) == pytest.approx(
            calculate_tfidf_ranks(graph, text)
        )
