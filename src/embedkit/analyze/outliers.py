"""Find the member of a word group that sits furthest from the group's centre."""
from __future__ import annotations

import numpy as np

from ..common.errors import InvalidArgumentError
from ..common.similarity import Neighbor, SimilarityResult
from ..common.vector_store import VectorStore

__all__ = ["least_central", "centrality_scores"]


def _member_scores(store, tokens):
    # Duplicates collapse to their first occurrence; order is kept for tie-breaks
    members = list(dict.fromkeys(tokens))
    vectors = [store.get(t) for t in members]

    if len(members) < 2:
        raise InvalidArgumentError(
            f"Centrality needs at least 2 distinct tokens, got {len(members)}"
        )

    matrix = np.vstack(vectors)
    # Centroid is not re-normalized
    centroid = matrix.mean(axis=0)
    return members, matrix @ centroid


def least_central(store: VectorStore, tokens) -> str:
    """
    Return the token least similar to the mean vector of the group.

    The mean of the member vectors is not re-normalized, so each score is the
    dot product with the raw centroid rather than a strict cosine similarity.

    Args:
        store: The VectorStore holding the member vectors.
        tokens: The word group. Any iterable; repeated tokens count once.

    Returns:
        str: The member with the lowest score. Ties go to the member that
        comes first in the input's iteration order.

    Raises:
        UnknownTokenError: If any token is not in the store.
        InvalidArgumentError: If fewer than 2 distinct tokens are given.

    Example:
        >>> least_central(store, ["einstein", "bohr", "feynman", "mozart"])
        'mozart'
    """
    members, scores = _member_scores(store, tokens)
    return members[int(np.argmin(scores))]


def centrality_scores(store: VectorStore, tokens) -> SimilarityResult:
    """
    Score every member of a group against the group's mean vector.

    Same arguments and errors as least_central(). The result is ordered most
    central first, so the outlier is the last entry (ties in input order).
    """
    members, scores = _member_scores(store, tokens)
    order = np.argsort(-scores, kind="stable")
    return SimilarityResult(Neighbor(members[i], float(scores[i])) for i in order)
