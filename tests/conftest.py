"""Shared fixtures: small hand-built vector stores with known geometry."""

import pytest

from embedkit import VectorStore


ROYALTY_ROWS = [
    ("king", [1.0, 0.0]),
    ("queen", [0.9, 0.436]),
    ("man", [0.0, 1.0]),
    ("woman", [-0.1, 0.995]),
]

# Three physicists cluster near the first axis, two composers near the third
SCIENTIST_ROWS = [
    ("einstein", [1.0, 0.1, 0.0]),
    ("bohr", [0.95, 0.0, 0.15]),
    ("feynman", [0.9, 0.15, 0.1]),
    ("mozart", [0.0, 0.2, 1.0]),
    ("bach", [0.1, 0.1, 0.95]),
]


@pytest.fixture
def royalty_store():
    return VectorStore.build(ROYALTY_ROWS)


@pytest.fixture
def scientist_store():
    return VectorStore.build(SCIENTIST_ROWS)


@pytest.fixture
def scientist_file(tmp_path):
    """The scientist vectors as a GloVe-style text file."""
    path = tmp_path / "scientists.txt"
    lines = [" ".join([token] + [str(x) for x in vector]) for token, vector in SCIENTIST_ROWS]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
