"""
Cosine similarity and ranking against a VectorStore.

Stored vectors are unit length, so the dot product of two stored vectors is
their cosine similarity. Query vectors are used as given (not re-normalized);
against unit-length store vectors the dot product still ranks by direction
scaled by the query's norm, which leaves the ordering unchanged.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, List, NamedTuple, Optional

import numpy as np
import pandas as pd

from .errors import DimensionMismatchError, InvalidArgumentError
from .vector_store import VectorStore

__all__ = [
    "Neighbor",
    "SimilarityResult",
    "similarity",
    "rank_all",
    "nearest_neighbors",
    "most_similar",
    "mean_similarity_to_all",
    "check_count",
]


class Neighbor(NamedTuple):
    token: str
    score: float


class SimilarityResult(Sequence):
    """
    Ordered (token, score) pairs, highest score first.

    Ties keep the store order of their tokens, so the same query against the
    same store always produces the same sequence.
    """

    def __init__(self, neighbors: Iterable[Neighbor] = ()):
        self._neighbors = tuple(Neighbor(*n) for n in neighbors)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return SimilarityResult(self._neighbors[item])
        return self._neighbors[item]

    def __len__(self) -> int:
        return len(self._neighbors)

    def __eq__(self, other) -> bool:
        if isinstance(other, SimilarityResult):
            return self._neighbors == other._neighbors
        return NotImplemented

    def __repr__(self) -> str:
        return f"SimilarityResult({list(self._neighbors)!r})"

    @property
    def tokens(self) -> List[str]:
        return [n.token for n in self._neighbors]

    @property
    def scores(self) -> List[float]:
        return [n.score for n in self._neighbors]

    def head(self, n: int) -> "SimilarityResult":
        return self[:n]

    def exclude(self, tokens: Iterable[str]) -> "SimilarityResult":
        """Drop the entries for the given tokens, keeping the rest in order."""
        excluded = set(tokens)
        return SimilarityResult(n for n in self._neighbors if n.token not in excluded)

    def to_frame(self) -> pd.DataFrame:
        """
        Return the result as a DataFrame with 'token' and 'score' columns.

        The index is the 0-based rank.
        """
        df = pd.DataFrame(list(self._neighbors), columns=["token", "score"])
        df.index.name = "rank"
        return df


def check_count(name, value, minimum=1):
    """
    Validate an integer count argument such as k or top_n.

    Raises:
        InvalidArgumentError: If value is not an integer or is below minimum.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value}")
    return int(value)


def _as_query(query, dimension) -> np.ndarray:
    vector = np.asarray(query, dtype=np.float64)
    if vector.ndim != 1 or vector.shape[0] != dimension:
        raise DimensionMismatchError(dimension, vector.shape[0] if vector.ndim == 1 else vector.shape)
    return vector


def similarity(u, v) -> float:
    """
    Compute the similarity of two vectors as their dot product.

    For unit vectors this is the cosine similarity.

    Args:
        u: First vector.
        v: Second vector.

    Returns:
        float: The dot product of u and v.

    Raises:
        DimensionMismatchError: If the vectors differ in length.
    """
    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    if u.shape != v.shape:
        raise DimensionMismatchError(u.shape[0] if u.ndim == 1 else u.shape,
                                     v.shape[0] if v.ndim == 1 else v.shape)
    return float(np.dot(u, v))


def rank_all(store: VectorStore, query) -> SimilarityResult:
    """
    Rank every token in the store by similarity to a query vector.

    Args:
        store: The VectorStore to search.
        query: Query vector of the store's dimension.

    Returns:
        SimilarityResult: All tokens, highest score first; ties in store order.

    Raises:
        DimensionMismatchError: If the query length differs from the store dimension.
    """
    query = _as_query(query, store.dimension())
    scores = store.matrix @ query
    # Stable sort on negated scores gives descending order with ties in store order
    order = np.argsort(-scores, kind="stable")
    tokens = store.tokens
    return SimilarityResult(Neighbor(tokens[i], float(scores[i])) for i in order)


def most_similar(store: VectorStore, token: str, k: int) -> SimilarityResult:
    """
    Return the k tokens most similar to a stored token, with their scores.

    The queried token's own entry is removed by identity before taking k, so
    another token with an identical vector is still returned.

    Args:
        store: The VectorStore to search.
        token: Token whose neighbours are wanted.
        k: Number of neighbours to return.

    Returns:
        SimilarityResult: Exactly k neighbours, highest score first.

    Raises:
        UnknownTokenError: If the token is not in the store.
        InvalidArgumentError: If k < 1 or k + 1 > store.size().
    """
    query = store.get(token)
    k = check_count("k", k)
    if k + 1 > store.size():
        raise InvalidArgumentError(
            f"k={k} requires at least {k + 1} tokens in the store, found {store.size()}"
        )

    return rank_all(store, query).exclude([token])[:k]


def nearest_neighbors(store: VectorStore, token: str, k: int) -> List[str]:
    """
    Return the k tokens nearest to a stored token, excluding the token itself.

    See most_similar() for arguments and errors.
    """
    return most_similar(store, token, k).tokens


def mean_similarity_to_all(store: VectorStore, token: str,
                           excluded: Optional[Iterable[str]] = None) -> float:
    """
    Compute the mean cosine similarity of a token with every other token.

    Args:
        store: The VectorStore to search.
        token: The token for which to compute the mean similarity.
        excluded: Tokens to leave out of the mean. Tokens not in the store are ignored.

    Returns:
        float: Mean similarity, or 0.0 if no other tokens remain.

    Raises:
        UnknownTokenError: If the token is not in the store.
    """
    scores = store.matrix @ store.get(token)

    mask = np.ones(store.size(), dtype=bool)
    mask[store.index_of(token)] = False
    for other in excluded or ():
        if store.contains(other):
            mask[store.index_of(other)] = False

    if not mask.any():
        return 0.0
    return float(scores[mask].mean())
