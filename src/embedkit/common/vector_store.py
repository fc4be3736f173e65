"""Immutable store of unit-length word vectors keyed by token."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    DimensionMismatchError,
    DuplicateTokenError,
    InvalidArgumentError,
    NonFiniteVectorError,
    UnknownTokenError,
    ZeroVectorError,
)

__all__ = ["VectorStore"]


def _normalize_rows(tokens, matrix):
    """Return matrix with every row scaled to unit L2 norm, checking each row first."""
    bad_rows = np.flatnonzero(~np.isfinite(matrix).all(axis=1))
    if bad_rows.size:
        raise NonFiniteVectorError(tokens[bad_rows[0]])

    with np.errstate(over="ignore"):
        norms = np.linalg.norm(matrix, axis=1, keepdims=True)

    zero_rows = np.flatnonzero(norms[:, 0] == 0)
    if zero_rows.size:
        raise ZeroVectorError(tokens[zero_rows[0]])

    # Finite components can still overflow when squared
    overflow_rows = np.flatnonzero(~np.isfinite(norms[:, 0]))
    if overflow_rows.size:
        raise NonFiniteVectorError(tokens[overflow_rows[0]])

    return matrix / norms


class VectorStore:
    """
    A mapping from token to L2-normalized vector, built once and read-only after.

    Vectors are held as the rows of a single (N x D) float64 matrix in the
    order their tokens were first supplied. That order is the "store order"
    used to break ties when ranking.

    ``VectorStore.build(rows)`` is the usual way to construct a store. The
    constructor takes the same data as parallel tokens and matrix rows, and
    applies the same checks and normalization to a private copy of the matrix.
    """

    def __init__(self, tokens: Sequence[str], matrix):
        """
        Args:
            tokens: Tokens in store order.
            matrix: (N x D) array of raw vectors, one row per token. It is
                copied, never modified.

        Raises:
            InvalidArgumentError: If matrix is not 2-D or its row count differs
                from the number of tokens.
            DuplicateTokenError: If a token appears more than once.
            NonFiniteVectorError: If any row has a NaN or infinite component.
            ZeroVectorError: If any row has norm exactly 0.
        """
        tokens = tuple(tokens)
        matrix = np.array(matrix, dtype=np.float64)

        if matrix.ndim != 2:
            raise InvalidArgumentError(f"matrix must be 2-D, got shape {matrix.shape}")
        if matrix.shape[0] != len(tokens):
            raise InvalidArgumentError(
                f"Got {len(tokens)} tokens for {matrix.shape[0]} matrix rows"
            )

        index = {}
        for i, token in enumerate(tokens):
            if token in index:
                raise DuplicateTokenError(token)
            index[token] = i

        self._tokens = tokens
        self._index = index
        self._matrix = _normalize_rows(tokens, matrix)
        self._matrix.setflags(write=False)

    @classmethod
    def build(
        cls,
        rows: Iterable[Tuple[str, Sequence[float]]],
        dimension: Optional[int] = None,
    ) -> "VectorStore":
        """
        Build a store from raw (token, vector) rows, normalizing every vector.

        Args:
            rows: Iterable of (token, raw vector) pairs.
            dimension: Expected vector length. If None, the length of the
                first row is used. An empty input gives an empty store of this
                dimension (0 if not given).

        Returns:
            VectorStore: A new store holding unit-length vectors.

        Raises:
            DuplicateTokenError: If a token appears more than once.
            DimensionMismatchError: If any row is not 1-D or its length differs
                from the dimension.
            NonFiniteVectorError: If any row has a NaN or infinite component.
            ZeroVectorError: If any row has norm exactly 0.
        """
        tokens = []
        seen = set()
        vectors = []

        for token, raw in rows:
            if token in seen:
                raise DuplicateTokenError(token)

            vector = np.asarray(raw, dtype=np.float64)
            if vector.ndim != 1:
                raise DimensionMismatchError(dimension, vector.shape, token)
            if dimension is None:
                dimension = vector.shape[0]
            if vector.shape[0] != dimension:
                raise DimensionMismatchError(dimension, vector.shape[0], token)

            seen.add(token)
            tokens.append(token)
            vectors.append(vector)

        if not vectors:
            return cls((), np.empty((0, dimension or 0), dtype=np.float64))

        return cls(tokens, np.vstack(vectors))

    def get(self, token: str) -> np.ndarray:
        """
        Return the unit vector stored for a token.

        Raises:
            UnknownTokenError: If the token is not in the store.
        """
        return self._matrix[self.index_of(token)]

    def index_of(self, token: str) -> int:
        """Return the row position of a token in store order."""
        try:
            return self._index[token]
        except KeyError:
            raise UnknownTokenError(token) from None

    def contains(self, token: str) -> bool:
        return token in self._index

    def size(self) -> int:
        return len(self._tokens)

    def dimension(self) -> int:
        return self._matrix.shape[1]

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Tokens in store order."""
        return self._tokens

    @property
    def matrix(self) -> np.ndarray:
        """Read-only (N x D) matrix of unit vectors, rows in store order."""
        return self._matrix

    def is_normalized(self, tolerance: float = 1e-6) -> bool:
        """
        Check that every stored vector has unit L2 norm.

        Args:
            tolerance: Allowed deviation from norm 1 due to floating-point precision.

        Returns:
            bool: True if all vectors are normalized, False otherwise.
        """
        norms = np.linalg.norm(self._matrix, axis=1)
        return bool(np.all(np.abs(norms - 1) < tolerance))

    def __contains__(self, token) -> bool:
        return self.contains(token)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"VectorStore(size={self.size()}, dimension={self.dimension()})"
