"""Command-line entry point for querying a word-vector file."""

import argparse
import logging
import sys

from .analyze.analogy import solve_scored
from .analyze.evaluation import (
    evaluate_analogies,
    evaluate_word_pairs,
    read_analogy_questions,
    read_word_pairs,
)
from .analyze.outliers import centrality_scores
from .common.errors import EmbedkitError
from .common.similarity import most_similar, similarity
from .display import (
    print_analogy_evaluation,
    print_outlier_report,
    print_pair_evaluation,
    print_ranked_table,
    print_store_header,
)
from .vectors_acquire.config import FORMATS
from .vectors_acquire.reader import load_store

logger = logging.getLogger(__name__)


def run_info(store, args):
    print_store_header(args.vectors, store)


def run_neighbors(store, args):
    result = most_similar(store, args.word, args.k)
    print_ranked_table(f"NEAREST NEIGHBOURS OF '{args.word}'", result)


def run_analogy(store, args):
    result = solve_scored(store, args.a, args.b, args.c, args.top_n)
    print_ranked_table(f"ANALOGY {args.a} : {args.b} :: {args.c} : ?", result)


def run_outlier(store, args):
    print_outlier_report(centrality_scores(store, args.words))


def run_similarity(store, args):
    score = similarity(store.get(args.word1), store.get(args.word2))
    print(f"cos({args.word1}, {args.word2}) = {score:+.4f}", flush=True)


def run_evaluate_pairs(store, args):
    evaluation = evaluate_word_pairs(store, read_word_pairs(args.dataset))
    print_pair_evaluation(args.dataset, evaluation)


def run_evaluate_analogies(store, args):
    evaluation = evaluate_analogies(store, read_analogy_questions(args.dataset))
    print_analogy_evaluation(args.dataset, evaluation)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="embedkit",
        description="Explore a word-vector file: neighbours, analogies and outliers."
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--vectors", required=True, help="Path to the embedding file")
    common.add_argument("--format", choices=FORMATS, default=None,
                        help="File format (default: inferred from the suffix)")
    common.add_argument("--delimiter", default=None, help="Field delimiter for text/csv files")
    common.add_argument("--limit", type=int, default=None, help="Read at most this many vectors")
    common.add_argument("--lowercase", action="store_true", default=None,
                        help="Lowercase tokens while reading")
    common.add_argument("--progress", action="store_true", help="Show a progress bar while reading")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("info", parents=[common], help="Summarize the vector file")
    p.set_defaults(func=run_info)

    p = subparsers.add_parser("neighbors", parents=[common], help="Nearest neighbours of a word")
    p.add_argument("word")
    p.add_argument("-k", type=int, default=10, help="Number of neighbours (default: 10)")
    p.set_defaults(func=run_neighbors)

    p = subparsers.add_parser("analogy", parents=[common], help="Solve a:b :: c:?")
    p.add_argument("a")
    p.add_argument("b")
    p.add_argument("c")
    p.add_argument("--top-n", type=int, default=5, help="Number of answers (default: 5)")
    p.set_defaults(func=run_analogy)

    p = subparsers.add_parser("outlier", parents=[common], help="Least central word in a group")
    p.add_argument("words", nargs="+")
    p.set_defaults(func=run_outlier)

    p = subparsers.add_parser("similarity", parents=[common], help="Cosine similarity of two words")
    p.add_argument("word1")
    p.add_argument("word2")
    p.set_defaults(func=run_similarity)

    p = subparsers.add_parser("evaluate-pairs", parents=[common],
                              help="Correlate with a word-similarity dataset")
    p.add_argument("dataset")
    p.set_defaults(func=run_evaluate_pairs)

    p = subparsers.add_parser("evaluate-analogies", parents=[common],
                              help="Top-1 accuracy on an analogy dataset")
    p.add_argument("dataset")
    p.set_defaults(func=run_evaluate_analogies)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        store = load_store(
            args.vectors,
            format=args.format,
            delimiter=args.delimiter,
            limit=args.limit,
            lowercase=args.lowercase,
            show_progress=args.progress,
        )
        args.func(store, args)
    except (EmbedkitError, FileNotFoundError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
