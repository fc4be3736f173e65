from ..common.similarity import mean_similarity_to_all, most_similar, similarity
from ..common.vector_store import VectorStore
from ..vectors_acquire.reader import load_store
from .analogy import solve, solve_scored
from .outliers import centrality_scores, least_central


class WordVectors:
    """
    A class wrapping one VectorStore with methods for neighbour search,
    analogies, outlier detection and pairwise comparison.

    Every method is a read-only query against the wrapped store, so one
    instance can be shared between callers.
    """

    def __init__(self, store):
        """
        Initialize the WordVectors instance around an existing store.

        Args:
            store (VectorStore): A built, normalized vector store.

        Raises:
            TypeError: If store is not a VectorStore.
        """
        if not isinstance(store, VectorStore):
            raise TypeError("store must be an instance of VectorStore.")

        self.store = store

    @classmethod
    def load(cls, path, **options):
        """
        Load an embedding file (.txt, .vec, .csv, .tsv, .kv or .bin).

        Args:
            path (str): Path to the embedding file.
            **options: Load options such as format, limit or lowercase.

        Returns:
            WordVectors: A new instance holding the normalized vectors.
        """
        return cls(load_store(path, **options))

    @classmethod
    def from_rows(cls, rows, dimension=None):
        """Build from raw (token, vector) rows; see VectorStore.build()."""
        return cls(VectorStore.build(rows, dimension=dimension))

    @property
    def vocab(self):
        """
        Extract the vocabulary.

        Returns:
            set: The vocabulary as a set of words.
        """
        return set(self.store.tokens)

    @property
    def vector_size(self):
        return self.store.dimension()

    def __contains__(self, word):
        return word in self.store

    def __len__(self):
        return len(self.store)

    def __getitem__(self, word):
        return self.store.get(word)

    def is_normalized(self, tolerance=1e-6):
        return self.store.is_normalized(tolerance)

    def compare_words_cosim(self, word1, word2):
        """
        Compute the cosine similarity between two words.

        Args:
            word1 (str): The first word.
            word2 (str): The second word.

        Returns:
            float: Cosine similarity score between the two words.

        Raises:
            UnknownTokenError: If either word is not in the vocabulary.
        """
        return similarity(self.store.get(word1), self.store.get(word2))

    def neighbors(self, word, k=10):
        """Return the k nearest words to word, excluding word itself."""
        return most_similar(self.store, word, k).tokens

    def most_similar(self, word, k=10):
        """Return the k nearest words to word with their similarity scores."""
        return most_similar(self.store, word, k)

    def analogy(self, a, b, c, top_n=1, scored=False):
        """
        Solve a:b :: c:? by the vector offset c - a + b.

        Args:
            a (str): First word of the source pair.
            b (str): Second word of the source pair.
            c (str): First word of the target pair.
            top_n (int): Number of answers to return.
            scored (bool): If True, return a SimilarityResult with scores.

        Returns:
            list or SimilarityResult: The best answers, never including a, b or c.
        """
        if scored:
            return solve_scored(self.store, a, b, c, top_n)
        return solve(self.store, a, b, c, top_n)

    def outlier(self, words):
        """Return the word in the group least similar to the group's mean vector."""
        return least_central(self.store, words)

    def centrality(self, words):
        """Score every word in the group against the group's mean vector."""
        return centrality_scores(self.store, words)

    def mean_cosine_similarity_to_all(self, word, excluded_words=None):
        """
        Compute the mean cosine similarity of a given word with every other word in the vocabulary.

        Args:
            word (str): The word for which to compute the mean similarity.
            excluded_words (list or set): Words to exclude from similarity calculations.

        Returns:
            float: Mean cosine similarity score of the word with all other words in the vocabulary.

        Raises:
            UnknownTokenError: If the word is not in the vocabulary.
        """
        return mean_similarity_to_all(self.store, word, excluded_words)

    def __repr__(self):
        return f"WordVectors(size={len(self.store)}, vector_size={self.vector_size})"
