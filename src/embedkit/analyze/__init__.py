"""
General-purpose analysis tools for word-vector stores.

These tools work with any embeddings loaded into a VectorStore, whether they
come from GloVe text files, word2vec binaries or saved gensim KeyedVectors.
"""

from .outliers import least_central, centrality_scores
from .analogy import solve, solve_scored, analogy_target
from .evaluation import (
    PairEvaluation,
    AnalogyEvaluation,
    evaluate_word_pairs,
    evaluate_analogies,
    read_word_pairs,
    read_analogy_questions,
)
from .word_vectors import WordVectors

__all__ = [
    "least_central",
    "centrality_scores",
    "solve",
    "solve_scored",
    "analogy_target",
    "PairEvaluation",
    "AnalogyEvaluation",
    "evaluate_word_pairs",
    "evaluate_analogies",
    "read_word_pairs",
    "read_analogy_questions",
    "WordVectors",
]
