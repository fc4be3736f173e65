"""Tests for loading embedding files into rows and stores."""

import numpy as np
import pytest
from gensim.models import KeyedVectors

from embedkit import NonFiniteVectorError
from embedkit.vectors_acquire import (
    LoadConfig,
    build_load_config,
    detect_format,
    load_store,
    read_vector_rows,
)


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestConfig:

    @pytest.mark.parametrize("name, expected", [
        ("glove.6B.100d.txt", "text"),
        ("wiki.en.vec", "text"),
        ("vectors.csv", "csv"),
        ("vectors.TSV", "csv"),
        ("w2v_y1900.kv", "kv"),
        ("GoogleNews-vectors.bin", "word2vec"),
    ])
    def test_detect_format(self, name, expected):
        assert detect_format(name) == expected

    def test_unknown_suffix(self):
        with pytest.raises(ValueError):
            detect_format("vectors.parquet")

    def test_explicit_format_wins(self):
        config = build_load_config("vectors.dat", format="text")
        assert config.format == "text"

    def test_tsv_uses_tab_delimiter(self):
        assert build_load_config("vectors.tsv").delimiter == "\t"

    def test_none_overrides_are_ignored(self):
        config = build_load_config("vectors.txt", limit=None, lowercase=None)
        assert config.limit is None
        assert config.lowercase is False

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            build_load_config("vectors.txt", colour="blue")

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            LoadConfig(path="vectors.txt", format="parquet")

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            LoadConfig(path="vectors.txt", limit=0)


class TestTextReader:

    def test_glove_file(self, scientist_file):
        rows = list(read_vector_rows(build_load_config(scientist_file)))
        assert [t for t, _ in rows] == ["einstein", "bohr", "feynman", "mozart", "bach"]
        assert np.allclose(rows[0][1], [1.0, 0.1, 0.0])

    def test_word2vec_header_is_skipped(self, tmp_path):
        path = write(tmp_path / "v.txt", "2 3\ncat 1 0 0\ndog 0 1 0\n")
        rows = list(read_vector_rows(build_load_config(path)))
        assert [t for t, _ in rows] == ["cat", "dog"]

    def test_blank_lines_are_ignored(self, tmp_path):
        path = write(tmp_path / "v.txt", "cat 1 0\n\ndog 0 1\n\n")
        assert len(list(read_vector_rows(build_load_config(path)))) == 2

    def test_explicit_header(self, tmp_path):
        path = write(tmp_path / "v.txt", "word x y\ncat 1 0\n")
        rows = list(read_vector_rows(build_load_config(path, has_header=True)))
        assert [t for t, _ in rows] == ["cat"]

    def test_non_numeric_component(self, tmp_path):
        path = write(tmp_path / "v.txt", "cat 1 0\ndog 0 one\n")
        with pytest.raises(ValueError, match=":2:"):
            list(read_vector_rows(build_load_config(path)))

    def test_token_without_components(self, tmp_path):
        path = write(tmp_path / "v.txt", "cat 1 0\ndog\n")
        with pytest.raises(ValueError):
            list(read_vector_rows(build_load_config(path)))

    def test_limit(self, scientist_file):
        rows = list(read_vector_rows(build_load_config(scientist_file, limit=2)))
        assert [t for t, _ in rows] == ["einstein", "bohr"]

    def test_lowercase_keeps_first_collision(self, tmp_path):
        path = write(tmp_path / "v.txt", "Apple 1 0\napple 0 1\nPear 1 1\n")
        rows = list(read_vector_rows(build_load_config(path, lowercase=True)))
        assert [t for t, _ in rows] == ["apple", "pear"]
        assert np.allclose(rows[0][1], [1, 0])

    def test_trailing_delimiter(self, tmp_path):
        path = write(tmp_path / "v.txt", "cat\t1\t0\t\ndog\t0\t1\t\n")
        rows = list(read_vector_rows(build_load_config(path, delimiter="\t")))
        assert [t for t, _ in rows] == ["cat", "dog"]
        assert np.allclose(rows[1][1], [0, 1])

    def test_word2vec_header_after_blank_line(self, tmp_path):
        path = write(tmp_path / "v.txt", "\n2 3\ncat 1 0 0\ndog 0 1 0\n")
        rows = list(read_vector_rows(build_load_config(path)))
        assert [t for t, _ in rows] == ["cat", "dog"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_vector_rows(build_load_config(tmp_path / "missing.txt"))


class TestCsvReader:

    def test_header_is_detected(self, tmp_path):
        path = write(tmp_path / "v.csv", "word,d1,d2\ncat,1,0\ndog,0,1\n")
        rows = list(read_vector_rows(build_load_config(path)))
        assert [t for t, _ in rows] == ["cat", "dog"]

    def test_headerless(self, tmp_path):
        path = write(tmp_path / "v.csv", "cat,1,0\ndog,0,1\n")
        rows = list(read_vector_rows(build_load_config(path)))
        assert [t for t, _ in rows] == ["cat", "dog"]
        assert np.allclose(rows[1][1], [0, 1])

    def test_na_like_tokens_are_kept(self, tmp_path):
        path = write(tmp_path / "v.csv", "null,1,0\nNA,0,1\n")
        rows = list(read_vector_rows(build_load_config(path)))
        assert [t for t, _ in rows] == ["null", "NA"]

    def test_tsv(self, tmp_path):
        path = write(tmp_path / "v.tsv", "cat\t1\t0\ndog\t0\t1\n")
        assert load_store(path).tokens == ("cat", "dog")

    def test_non_numeric_cell(self, tmp_path):
        path = write(tmp_path / "v.csv", "cat,1,0\ndog,0,x\n")
        with pytest.raises(ValueError):
            list(read_vector_rows(build_load_config(path)))

    def test_single_column(self, tmp_path):
        path = write(tmp_path / "v.csv", "cat\ndog\n")
        with pytest.raises(ValueError):
            list(read_vector_rows(build_load_config(path)))


class TestGensimReader:

    @pytest.fixture
    def keyed_vectors(self):
        kv = KeyedVectors(vector_size=2)
        kv.add_vectors(["cat", "dog"], np.array([[3.0, 4.0], [0.0, 2.0]], dtype=np.float32))
        return kv

    def test_kv_file(self, tmp_path, keyed_vectors):
        path = tmp_path / "w2v_y2000.kv"
        keyed_vectors.save(str(path))

        store = load_store(path)
        assert store.tokens == ("cat", "dog")
        assert np.allclose(store.get("cat"), [0.6, 0.8])

    def test_word2vec_binary(self, tmp_path, keyed_vectors):
        path = tmp_path / "vectors.bin"
        keyed_vectors.save_word2vec_format(str(path), binary=True)

        store = load_store(path)
        assert store.tokens == ("cat", "dog")
        assert np.allclose(store.get("dog"), [0.0, 1.0])


class TestLoadStore:

    def test_builds_normalized_store(self, scientist_file):
        store = load_store(scientist_file)
        assert store.size() == 5
        assert store.dimension() == 3
        assert store.is_normalized()

    def test_non_finite_values_in_file(self, tmp_path):
        path = write(tmp_path / "v.txt", "a 1 0\nb inf 1\n")
        with pytest.raises(NonFiniteVectorError):
            load_store(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_store(tmp_path / "missing.txt")
