"""Display formatting for the embedkit command line."""

__all__ = [
    "truncate_path_to_fit",
    "print_store_header",
    "print_ranked_table",
    "print_outlier_report",
    "print_pair_evaluation",
    "print_analogy_evaluation",
    "LINE_WIDTH",
]

LINE_WIDTH = 100


def truncate_path_to_fit(path, prefix, width=LINE_WIDTH):
    """
    Shorten a path from the left so prefix + path fits in width characters.

    Args:
        path (str or Path): Path to display.
        prefix (str): Label printed before the path.
        width (int): Total line width.

    Returns:
        str: The path, with leading components replaced by '...' if needed.
    """
    path = str(path)
    available = width - len(prefix)
    if len(path) <= available:
        return path
    if available <= 3:
        return path[-available:] if available > 0 else ""
    return "..." + path[-(available - 3):]


def print_store_header(path, store):
    """
    Print a summary of a loaded vector store.

    Args:
        path (str): Path the vectors were read from.
        store (VectorStore): The loaded store.
    """
    path_str = truncate_path_to_fit(path, "Vectors:              ")

    lines = [
        "",
        "VECTOR STORE",
        "━" * LINE_WIDTH,
        f"Vectors:              {path_str}",
        f"Tokens:               {store.size():,}",
        f"Dimensions:           {store.dimension()}",
        f"Unit length:          {'Yes' if store.is_normalized() else 'No'}",
        "",
    ]
    print("\n".join(lines), flush=True)


def print_ranked_table(title, result):
    """
    Print a SimilarityResult as a ranked table.

    Args:
        title (str): Heading printed above the table.
        result (SimilarityResult): Ranked (token, score) pairs.
    """
    lines = [
        "",
        title,
        "═" * LINE_WIDTH,
        f"{'Rank':<8} {'Token':<40} {'Score':>15}",
        "─" * LINE_WIDTH,
    ]
    for rank, (token, score) in enumerate(result, start=1):
        lines.append(f"{rank:<8} {token:<40} {score:>15.4f}")
    lines.append("")
    print("\n".join(lines), flush=True)


def print_outlier_report(result):
    """
    Print each group member's score against the group mean and name the outlier.

    Args:
        result (SimilarityResult): Centrality scores, most central first.
    """
    print_ranked_table("CENTRALITY (similarity to group mean)", result)
    print(f"Least central:        {result[-1].token}", flush=True)
    print("━" * LINE_WIDTH, flush=True)


def print_pair_evaluation(path, evaluation):
    path_str = truncate_path_to_fit(path, "Dataset:              ")
    lines = [
        "",
        "WORD SIMILARITY EVALUATION",
        "═" * LINE_WIDTH,
        f"Dataset:              {path_str}",
        f"Pairs used:           {evaluation.pairs_used}",
        f"Pairs skipped (OOV):  {evaluation.pairs_skipped} ({evaluation.oov_ratio * 100:.1f}%)",
        f"Spearman rho:         {evaluation.spearman:+.4f} (p={evaluation.spearman_pvalue:.3g})",
        f"Pearson r:            {evaluation.pearson:+.4f}",
        "━" * LINE_WIDTH,
        "",
    ]
    print("\n".join(lines), flush=True)


def print_analogy_evaluation(path, evaluation):
    path_str = truncate_path_to_fit(path, "Dataset:              ")
    lines = [
        "",
        "ANALOGY EVALUATION",
        "═" * LINE_WIDTH,
        f"Dataset:              {path_str}",
        f"Questions evaluated:  {evaluation.total}",
        f"Questions skipped:    {evaluation.skipped}",
        f"Correct:              {evaluation.correct}",
        f"Accuracy:             {evaluation.accuracy * 100:.2f}%",
        "━" * LINE_WIDTH,
        "",
    ]
    print("\n".join(lines), flush=True)
