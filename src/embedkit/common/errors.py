"""Error types raised by the vector store and the query functions."""

__all__ = [
    "EmbedkitError",
    "DuplicateTokenError",
    "DimensionMismatchError",
    "ZeroVectorError",
    "NonFiniteVectorError",
    "UnknownTokenError",
    "InvalidArgumentError",
    "InsufficientResultsError",
]


class EmbedkitError(Exception):
    """Base class for every error raised by embedkit."""


class DuplicateTokenError(EmbedkitError, ValueError):
    """A token appears more than once in the rows used to build a store."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Duplicate token in input rows: '{token}'")


class DimensionMismatchError(EmbedkitError, ValueError):
    """A vector's length differs from the store's dimensionality."""

    def __init__(self, expected, actual, token=None):
        self.expected = expected
        self.actual = actual
        self.token = token
        where = f" for token '{token}'" if token is not None else ""
        if isinstance(actual, tuple):
            length = f" of length {expected}" if expected is not None else ""
            message = f"Expected a 1-D vector{length}{where}, got shape {actual}"
        else:
            message = f"Expected a vector of length {expected}{where}, got length {actual}"
        super().__init__(message)


class ZeroVectorError(EmbedkitError, ValueError):
    """A row has norm 0, so it has no direction to normalize to."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Vector for token '{token}' has zero norm and cannot be normalized")


class NonFiniteVectorError(EmbedkitError, ValueError):
    """A row has a NaN or infinite component, or a norm too large to represent."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Vector for token '{token}' has non-finite values and cannot be normalized")


class UnknownTokenError(EmbedkitError, KeyError):
    """A queried token is not in the store."""

    def __init__(self, token):
        self.token = token
        super().__init__(token)

    def __str__(self):
        return f"Word '{self.token}' is not in the vocabulary."


class InvalidArgumentError(EmbedkitError, ValueError):
    """A query argument is out of range (k, top_n, group size)."""


class InsufficientResultsError(EmbedkitError, LookupError):
    """Fewer candidates survived filtering than the caller asked for."""

    def __init__(self, requested, available):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} results but only {available} remain after exclusions"
        )
