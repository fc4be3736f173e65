"""
Word-vector geometry toolkit.

This package provides tools for exploring dense word-vector spaces:
normalized vector storage, nearest-neighbour search, outlier detection
within a word group, and analogy solving by vector arithmetic.

Main components:
    - common: VectorStore, similarity ranking and the error hierarchy
    - analyze: outlier detection, analogy solving, intrinsic evaluation
    - vectors_acquire: reading embedding files into (token, vector) rows
"""

from .common.errors import (
    EmbedkitError,
    DuplicateTokenError,
    DimensionMismatchError,
    ZeroVectorError,
    NonFiniteVectorError,
    UnknownTokenError,
    InvalidArgumentError,
    InsufficientResultsError,
)
from .common.vector_store import VectorStore
from .common.similarity import (
    Neighbor,
    SimilarityResult,
    similarity,
    rank_all,
    nearest_neighbors,
    most_similar,
    mean_similarity_to_all,
)
from .analyze.outliers import least_central, centrality_scores
from .analyze.analogy import solve, solve_scored
from .analyze.word_vectors import WordVectors

__version__ = "0.1.0"

__all__ = [
    "EmbedkitError",
    "DuplicateTokenError",
    "DimensionMismatchError",
    "ZeroVectorError",
    "NonFiniteVectorError",
    "UnknownTokenError",
    "InvalidArgumentError",
    "InsufficientResultsError",
    "VectorStore",
    "Neighbor",
    "SimilarityResult",
    "similarity",
    "rank_all",
    "nearest_neighbors",
    "most_similar",
    "mean_similarity_to_all",
    "least_central",
    "centrality_scores",
    "solve",
    "solve_scored",
    "WordVectors",
]
