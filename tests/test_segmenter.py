"""
Tests for the jieba-backed segmenter.
"""

from __future__ import annotations

import pytest

from keytags import IdfTable, Segmenter, TagExtractor


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("今天 10 t\n天气 10 n\n不错 10 a\n", encoding="utf-8")
    return path


def test_load_missing_dictionary_fails_at_load(tmp_path):
    segmenter = Segmenter()
    with pytest.raises(OSError):
        segmenter.load_dictionary(str(tmp_path / "missing.txt"))


def test_cut_is_lazy_precise_mode(dict_file):
    segmenter = Segmenter()
    segmenter.load_dictionary(str(dict_file))

    tokens = segmenter.cut("今天天气不错")

    assert not isinstance(tokens, list)
    assert list(tokens) == ["今天", "天气", "不错"]


def test_cut_keeps_english_words(dict_file):
    segmenter = Segmenter()
    segmenter.load_dictionary(str(dict_file))

    tokens = [t for t in segmenter.cut("quick brown fox") if t.strip()]

    assert tokens == ["quick", "brown", "fox"]


def test_extractor_with_jieba_dictionary(dict_file):
    extractor = TagExtractor(idf=IdfTable({"天气": 2.0, "不错": 1.0, "今天": 0.5}))
    extractor.load_dictionary(str(dict_file))

    tags = extractor.extract_tags("今天天气不错", 1)

    assert [t.text for t in tags] == ["天气"]
    assert tags[0].weight == pytest.approx(2.0 / 3)
