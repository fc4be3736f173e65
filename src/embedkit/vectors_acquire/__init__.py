"""
Embedding file acquisition.

This module reads word-vector files from disk and turns them into the
(token, vector) rows that VectorStore.build() consumes.

Main entry points:
    read_vector_rows() - Stream rows from a configured source
    load_store() - Read a file straight into a VectorStore

Key components:
    - config: File format detection and load options
    - reader: Text, CSV and gensim readers
"""

from .config import LoadConfig, build_load_config, detect_format, FORMATS
from .reader import read_vector_rows, load_store

__all__ = [
    "LoadConfig",
    "build_load_config",
    "detect_format",
    "FORMATS",
    "read_vector_rows",
    "load_store",
]
