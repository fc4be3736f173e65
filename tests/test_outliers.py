"""Tests for least_central and centrality_scores."""

from itertools import permutations

import numpy as np
import pytest

from embedkit import (
    InvalidArgumentError,
    UnknownTokenError,
    VectorStore,
    centrality_scores,
    least_central,
)

GROUP = ["einstein", "bohr", "feynman", "mozart"]


class TestLeastCentral:

    def test_distant_member_is_the_outlier(self, scientist_store):
        assert least_central(scientist_store, set(GROUP)) == "mozart"
        assert least_central(scientist_store, GROUP) == "mozart"

    def test_invariant_to_input_order(self, scientist_store):
        for ordering in permutations(GROUP):
            assert least_central(scientist_store, ordering) == "mozart"

    def test_ties_go_to_first_member(self):
        store = VectorStore.build([("p", [1, 0]), ("q", [0, 1])])
        assert least_central(store, ["q", "p"]) == "q"
        assert least_central(store, ["p", "q"]) == "p"

    def test_two_members(self, scientist_store):
        assert least_central(scientist_store, ["einstein", "mozart"]) in {"einstein", "mozart"}

    def test_unknown_member(self, scientist_store):
        with pytest.raises(UnknownTokenError):
            least_central(scientist_store, ["einstein", "pterosaur"])

    @pytest.mark.parametrize("tokens", [[], ["einstein"], ["einstein", "einstein"]])
    def test_fewer_than_two_distinct_members(self, scientist_store, tokens):
        with pytest.raises(InvalidArgumentError):
            least_central(scientist_store, tokens)


class TestCentralityScores:

    def test_scores_against_unnormalized_mean(self, scientist_store):
        result = centrality_scores(scientist_store, GROUP)

        vectors = np.vstack([scientist_store.get(t) for t in GROUP])
        mean = vectors.mean(axis=0)
        expected = dict(zip(GROUP, vectors @ mean))

        assert sorted(result.tokens) == sorted(GROUP)
        for token, score in result:
            assert score == pytest.approx(expected[token])

    def test_outlier_is_last(self, scientist_store):
        result = centrality_scores(scientist_store, GROUP)
        assert result[-1].token == "mozart"
        assert result.scores == sorted(result.scores, reverse=True)
