"""Readers that turn embedding files into (token, vector) rows."""
from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path
from typing import Iterator, Tuple

import numpy as np
import pandas as pd
from gensim.models import KeyedVectors
from tqdm import tqdm

from ..common.vector_store import VectorStore
from .config import LoadConfig, build_load_config

logger = logging.getLogger(__name__)

__all__ = [
    "read_text_rows",
    "read_csv_rows",
    "read_keyed_vector_rows",
    "read_vector_rows",
    "load_store",
]

Row = Tuple[str, np.ndarray]


def _is_word2vec_header(fields) -> bool:
    return len(fields) == 2 and all(f.isdigit() for f in fields)


def read_text_rows(config: LoadConfig) -> Iterator[Row]:
    """
    Read a GloVe-style text file: one token per line followed by its components.

    A word2vec "<count> <dimension>" first non-blank line is skipped when
    has_header is None. Blank lines are ignored, and so are empty trailing
    fields left by a delimiter at the end of a line.

    Args:
        config: Load options

    Yields:
        (token, vector) tuples in file order

    Raises:
        ValueError: If a line has no components or a component is not numeric
    """
    first_line = True
    with open(config.path, "r", encoding=config.encoding) as f:
        for line_no, line in enumerate(f, start=1):
            fields = line.rstrip("\r\n").split(config.delimiter)
            if not any(fields):
                continue
            if config.delimiter is not None:
                while fields and fields[-1] == "":
                    fields.pop()

            if first_line:
                first_line = False
                if config.has_header or (config.has_header is None and _is_word2vec_header(fields)):
                    logger.debug(f"Skipping header line: {line.strip()}")
                    continue

            token, components = fields[0], fields[1:]
            if not components:
                raise ValueError(f"{config.path}:{line_no}: no vector components for '{token}'")
            try:
                vector = np.array(components, dtype=np.float64)
            except ValueError as e:
                raise ValueError(f"{config.path}:{line_no}: {e}") from None

            yield token, vector


def read_csv_rows(config: LoadConfig) -> Iterator[Row]:
    """
    Read a delimited table whose first column is the token.

    Every cell is read as text first so tokens such as "null" or "NA" are kept
    verbatim. With has_header None, the first row is a header when any of its
    vector cells fails to parse as a number.

    Args:
        config: Load options

    Yields:
        (token, vector) tuples in table order

    Raises:
        ValueError: If the table has fewer than 2 columns or a cell is not numeric
    """
    df = pd.read_csv(
        config.path,
        sep=config.delimiter or ",",
        header=None,
        dtype=str,
        encoding=config.encoding,
        keep_default_na=False,
        na_filter=False,
    )
    if df.shape[1] < 2:
        raise ValueError(f"{config.path}: expected a token column and at least one vector column")

    has_header = config.has_header
    if has_header is None and len(df):
        has_header = pd.to_numeric(df.iloc[0, 1:], errors="coerce").isna().any()
    if has_header:
        logger.debug(f"Skipping header row: {list(df.iloc[0])}")
        df = df.iloc[1:]

    try:
        values = df.iloc[:, 1:].astype(np.float64).to_numpy()
    except ValueError as e:
        raise ValueError(f"{config.path}: {e}") from None

    for token, vector in zip(df.iloc[:, 0], values):
        yield token, vector


def read_keyed_vector_rows(config: LoadConfig) -> Iterator[Row]:
    """
    Read a gensim model, either a saved KeyedVectors (.kv) or a word2vec file.

    Yields:
        (token, vector) tuples in the model's index order
    """
    if config.format == "kv":
        model = KeyedVectors.load(str(config.path), mmap="r")
    else:
        model = KeyedVectors.load_word2vec_format(
            str(config.path), binary=config.binary, limit=config.limit
        )

    logger.info(f"Loaded gensim model with {len(model.index_to_key)} words, "
                f"{model.vector_size} dimensions")
    for token in model.index_to_key:
        yield token, np.array(model[token], dtype=np.float64)


READERS = {
    "text": read_text_rows,
    "csv": read_csv_rows,
    "kv": read_keyed_vector_rows,
    "word2vec": read_keyed_vector_rows,
}


def read_vector_rows(config: LoadConfig) -> Iterator[Row]:
    """
    Stream (token, vector) rows from an embedding file.

    Applies the lowercase and limit options on top of the format reader.
    When lowercasing makes two tokens identical, the first one read is kept.

    Args:
        config: Load options

    Returns:
        Iterator of (token, vector) tuples

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not Path(config.path).exists():
        raise FileNotFoundError(f"Embedding file not found: {config.path}")

    logger.info(f"Reading {config.format} vectors from {config.path}")
    rows = READERS[config.format](config)

    if config.lowercase:
        rows = _lowercase_rows(rows)
    if config.limit is not None:
        rows = islice(rows, config.limit)

    return tqdm(rows, desc="Reading vectors", unit=" rows",
                total=config.limit, disable=not config.show_progress)


def _lowercase_rows(rows):
    seen = set()
    collisions = 0
    for token, vector in rows:
        token = token.lower()
        if token in seen:
            collisions += 1
            continue
        seen.add(token)
        yield token, vector

    if collisions:
        logger.info(f"Dropped {collisions} rows that collided after lowercasing")


def load_store(path, **overrides) -> VectorStore:
    """
    Read an embedding file into a normalized VectorStore.

    Args:
        path: Path to the embedding file
        **overrides: LoadConfig options (format, delimiter, limit, ...)

    Returns:
        VectorStore built from the file's rows

    Example:
        >>> store = load_store("glove.6B.100d.txt", limit=50_000)
        >>> store.dimension()
        100
    """
    config = build_load_config(path, **overrides)
    store = VectorStore.build(read_vector_rows(config))
    logger.info(f"Built vector store: {store.size()} tokens, {store.dimension()} dimensions")
    return store
