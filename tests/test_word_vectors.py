"""Tests for the WordVectors wrapper."""

import pytest

from embedkit import SimilarityResult, UnknownTokenError, WordVectors
from conftest import SCIENTIST_ROWS, ROYALTY_ROWS


@pytest.fixture
def scientists():
    return WordVectors.from_rows(SCIENTIST_ROWS)


class TestWordVectors:

    def test_vocab_and_size(self, scientists):
        assert scientists.vocab == {"einstein", "bohr", "feynman", "mozart", "bach"}
        assert scientists.vector_size == 3
        assert len(scientists) == 5
        assert "bohr" in scientists
        assert scientists.is_normalized()

    def test_load(self, scientist_file):
        wv = WordVectors.load(scientist_file, limit=3)
        assert wv.vocab == {"einstein", "bohr", "feynman"}

    def test_rejects_non_store(self):
        with pytest.raises(TypeError):
            WordVectors({"a": [1, 0]})

    def test_compare_words_cosim(self, scientists):
        assert scientists.compare_words_cosim("bach", "bach") == pytest.approx(1.0)
        assert scientists.compare_words_cosim("einstein", "feynman") > scientists.compare_words_cosim("einstein", "mozart")

    def test_compare_unknown_word(self, scientists):
        with pytest.raises(UnknownTokenError):
            scientists.compare_words_cosim("einstein", "pterosaur")

    def test_neighbors(self, scientists):
        assert scientists.neighbors("einstein", 2) == ["feynman", "bohr"]
        assert isinstance(scientists.most_similar("einstein", 2), SimilarityResult)

    def test_outlier(self, scientists):
        assert scientists.outlier(["einstein", "bohr", "feynman", "mozart"]) == "mozart"
        assert scientists.centrality(["einstein", "bohr", "feynman", "mozart"])[-1].token == "mozart"

    def test_analogy(self):
        wv = WordVectors.from_rows(ROYALTY_ROWS)
        assert wv.analogy("man", "woman", "king") == ["queen"]
        assert wv.analogy("man", "woman", "king", scored=True).tokens == ["queen"]

    def test_mean_cosine_similarity_to_all(self, scientists):
        everyone = scientists.mean_cosine_similarity_to_all("einstein")
        physicists_only = scientists.mean_cosine_similarity_to_all("einstein", excluded_words={"mozart", "bach"})
        assert physicists_only > everyone
