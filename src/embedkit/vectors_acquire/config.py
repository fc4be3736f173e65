"""Configuration and format detection for reading embedding files."""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

__all__ = [
    "FORMATS",
    "LoadConfig",
    "detect_format",
    "build_load_config",
]

FORMATS = ("text", "csv", "kv", "word2vec")

SUFFIX_FORMATS = {
    ".txt": "text",
    ".vec": "text",
    ".csv": "csv",
    ".tsv": "csv",
    ".kv": "kv",
    ".bin": "word2vec",
}


@dataclass
class LoadConfig:
    """Options for reading an embedding file.

    Attributes:
        path: Path to the embedding file
        format: One of "text", "csv", "kv" or "word2vec"
        delimiter: Field delimiter; None splits text files on any whitespace
            and reads CSV files with a comma
        has_header: Whether the first line is a header. None auto-detects a
            word2vec "N D" line (text) or a non-numeric first row (csv)
        encoding: Text encoding of the file
        limit: Stop after this many rows
        lowercase: Lowercase tokens; the first row wins when two tokens collide
        binary: Read word2vec files in binary format
        show_progress: Show a tqdm progress bar while reading
    """
    path: Path
    format: str = "text"
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    encoding: str = "utf-8"
    limit: Optional[int] = None
    lowercase: bool = False
    binary: bool = True
    show_progress: bool = False

    def __post_init__(self):
        self.path = Path(self.path)
        if self.format not in FORMATS:
            raise ValueError(
                f"Unsupported format '{self.format}'. Choose one of: {', '.join(FORMATS)}"
            )
        if self.limit is not None and self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit}")


def detect_format(path: str | Path) -> str:
    """Infer the file format from its suffix.

    Args:
        path: Path to the embedding file

    Returns:
        Format name

    Raises:
        ValueError: If the suffix is not recognised

    Example:
        >>> detect_format("glove.6B.100d.txt")
        'text'
    """
    suffix = Path(path).suffix.lower()
    try:
        return SUFFIX_FORMATS[suffix]
    except KeyError:
        raise ValueError(
            f"Cannot infer format from suffix '{suffix}' of {path}. "
            f"Pass format= explicitly (one of: {', '.join(FORMATS)})."
        ) from None


def build_load_config(path: str | Path, **overrides) -> LoadConfig:
    """Build a LoadConfig for a file, inferring its format when not given.

    Args:
        path: Path to the embedding file
        **overrides: Any LoadConfig field. Options set to None are ignored,
            so unset CLI arguments can be passed through unchanged.

    Returns:
        LoadConfig for the file
    """
    known = {f.name for f in fields(LoadConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown load options: {', '.join(sorted(unknown))}")

    options = {k: v for k, v in overrides.items() if v is not None}
    if "format" not in options:
        options["format"] = detect_format(path)
    if Path(path).suffix.lower() == ".tsv" and "delimiter" not in options:
        options["delimiter"] = "\t"

    return LoadConfig(path=Path(path), **options)
