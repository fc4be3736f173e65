"""
Intrinsic evaluation of a vector store on word-similarity and analogy benchmarks.

Word-similarity files hold one pair per line: two words and a human score
(e.g. WordSim-353, SimLex-999). Analogy files hold four words per line,
"a b c d" meaning a:b :: c:d, with ": section" headers (Google analogy set).
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

import scipy.stats as stats

from ..common.errors import InsufficientResultsError, InvalidArgumentError
from ..common.similarity import similarity
from ..common.vector_store import VectorStore
from .analogy import solve

__all__ = [
    "PairEvaluation",
    "AnalogyEvaluation",
    "read_word_pairs",
    "read_analogy_questions",
    "evaluate_word_pairs",
    "evaluate_analogies",
]


@dataclass(frozen=True)
class PairEvaluation:
    """Correlation between model similarities and human judgements.

    Attributes:
        spearman: Spearman rank correlation
        spearman_pvalue: Two-sided p-value of the Spearman correlation
        pearson: Pearson correlation
        pairs_used: Number of pairs with both words in the vocabulary
        pairs_skipped: Number of pairs skipped as out of vocabulary
    """
    spearman: float
    spearman_pvalue: float
    pearson: float
    pairs_used: int
    pairs_skipped: int

    @property
    def oov_ratio(self) -> float:
        total = self.pairs_used + self.pairs_skipped
        return self.pairs_skipped / total if total else 0.0


@dataclass(frozen=True)
class AnalogyEvaluation:
    """Top-1 accuracy on analogy questions.

    Attributes:
        correct: Questions whose top answer matched the expected word
        total: Questions evaluated (all four words in the vocabulary)
        skipped: Questions skipped as out of vocabulary
    """
    correct: int
    total: int
    skipped: int

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0


def _data_lines(path: str | Path, encoding: str):
    with open(path, "r", encoding=encoding) as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#") or line.startswith(":"):
                continue
            yield line_no, line.split()


def read_word_pairs(path: str | Path, encoding: str = "utf-8") -> List[Tuple[str, str, float]]:
    """Read (word1, word2, score) triples from a word-similarity file.

    Raises:
        ValueError: If a line does not hold two words and a numeric score
    """
    pairs = []
    for line_no, fields in _data_lines(path, encoding):
        if len(fields) != 3:
            raise ValueError(f"{path}:{line_no}: expected 'word1 word2 score', got {fields}")
        try:
            score = float(fields[2])
        except ValueError:
            raise ValueError(f"{path}:{line_no}: score is not a number: {fields[2]!r}") from None
        pairs.append((fields[0], fields[1], score))
    return pairs


def read_analogy_questions(path: str | Path, encoding: str = "utf-8") -> List[Tuple[str, str, str, str]]:
    """Read (a, b, c, expected) questions from an analogy file.

    Raises:
        ValueError: If a line does not hold exactly four words
    """
    questions = []
    for line_no, fields in _data_lines(path, encoding):
        if len(fields) != 4:
            raise ValueError(f"{path}:{line_no}: expected 4 words, got {fields}")
        questions.append(tuple(fields))
    return questions


def evaluate_word_pairs(store: VectorStore, pairs: Iterable[Tuple[str, str, float]]) -> PairEvaluation:
    """
    Correlate model similarities with human similarity scores.

    Args:
        store: The VectorStore to evaluate.
        pairs: (word1, word2, human score) triples. Pairs with a word missing
            from the store are skipped.

    Returns:
        PairEvaluation: Spearman and Pearson correlations plus coverage counts.

    Raises:
        InvalidArgumentError: If fewer than 2 pairs are in the vocabulary.
    """
    model_scores = []
    human_scores = []
    skipped = 0

    for word1, word2, score in pairs:
        if word1 not in store or word2 not in store:
            skipped += 1
            continue
        model_scores.append(similarity(store.get(word1), store.get(word2)))
        human_scores.append(score)

    if len(model_scores) < 2:
        raise InvalidArgumentError(
            f"Need at least 2 in-vocabulary pairs to correlate, found {len(model_scores)}"
        )

    spearman = stats.spearmanr(model_scores, human_scores)
    pearson = stats.pearsonr(model_scores, human_scores)

    return PairEvaluation(
        spearman=float(spearman[0]),
        spearman_pvalue=float(spearman[1]),
        pearson=float(pearson[0]),
        pairs_used=len(model_scores),
        pairs_skipped=skipped,
    )


def evaluate_analogies(store: VectorStore, questions: Iterable[Tuple[str, str, str, str]]) -> AnalogyEvaluation:
    """
    Measure top-1 accuracy of solve() on analogy questions.

    Args:
        store: The VectorStore to evaluate.
        questions: (a, b, c, expected) tuples meaning a:b :: c:expected.
            Questions with any word missing from the store are skipped.

    Returns:
        AnalogyEvaluation: Correct, evaluated and skipped counts.
    """
    correct = 0
    total = 0
    skipped = 0

    for a, b, c, expected in questions:
        if not all(w in store for w in (a, b, c, expected)):
            skipped += 1
            continue

        total += 1
        try:
            answer = solve(store, a, b, c, 1)
        except InsufficientResultsError:
            # Store too small to answer; counts as incorrect
            continue
        if answer[0] == expected:
            correct += 1

    return AnalogyEvaluation(correct=correct, total=total, skipped=skipped)
