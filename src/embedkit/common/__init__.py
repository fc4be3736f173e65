"""Vector storage, similarity ranking and errors shared by the analysis tools."""

from .errors import (
    EmbedkitError,
    DuplicateTokenError,
    DimensionMismatchError,
    ZeroVectorError,
    NonFiniteVectorError,
    UnknownTokenError,
    InvalidArgumentError,
    InsufficientResultsError,
)
from .vector_store import VectorStore
from .similarity import (
    Neighbor,
    SimilarityResult,
    similarity,
    rank_all,
    nearest_neighbors,
    most_similar,
    mean_similarity_to_all,
)

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
]
