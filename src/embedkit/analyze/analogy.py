"""Solve a:b :: c:? analogy queries by vector offset."""
from __future__ import annotations

from typing import List

from ..common.errors import InsufficientResultsError
from ..common.similarity import SimilarityResult, check_count, rank_all
from ..common.vector_store import VectorStore

__all__ = ["solve", "solve_scored", "analogy_target"]


def analogy_target(store: VectorStore, a: str, b: str, c: str):
    """
    Return the target vector c - a + b for the query a:b :: c:?.

    The result is not re-normalized.

    Raises:
        UnknownTokenError: If a, b or c is not in the store.
    """
    return store.get(c) - store.get(a) + store.get(b)


def solve_scored(store: VectorStore, a: str, b: str, c: str, top_n: int) -> SimilarityResult:
    """
    Resolve a:b :: c:? and return the answers with their scores.

    Every store token is ranked by dot product with c - a + b. The query
    words a, b and c are never returned, whatever their rank.

    Args:
        store: The VectorStore to search.
        a: First word of the source pair.
        b: Second word of the source pair.
        c: First word of the target pair.
        top_n: Number of answers to return.

    Returns:
        SimilarityResult: The top_n best answers, highest score first.

    Raises:
        UnknownTokenError: If a, b or c is not in the store.
        InvalidArgumentError: If top_n < 1.
        InsufficientResultsError: If fewer than top_n tokens remain once the
            query words are removed.
    """
    target = analogy_target(store, a, b, c)
    top_n = check_count("top_n", top_n)

    excluded = {a, b, c}
    # The query words can take at most len(excluded) slots of the window
    candidates = rank_all(store, target)[:top_n + len(excluded)]
    answers = candidates.exclude(excluded)[:top_n]

    if len(answers) < top_n:
        raise InsufficientResultsError(top_n, len(answers))
    return answers


def solve(store: VectorStore, a: str, b: str, c: str, top_n: int) -> List[str]:
    """
    Resolve a:b :: c:? and return the top_n answer tokens in rank order.

    See solve_scored() for arguments and errors.

    Example:
        >>> solve(store, "man", "woman", "king", 1)
        ['queen']
    """
    return solve_scored(store, a, b, c, top_n).tokens
