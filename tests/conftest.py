from __future__ import annotations

import pytest

from keytags import IdfTable, StopWords, TagExtractor


class WhitespaceSegmenter:
    """Splits on single spaces and keeps the separators, like jieba does."""

    def __init__(self):
        self.calls = 0

    def cut(self, text):
        self.calls += 1
        parts = text.split(" ")
        for i, part in enumerate(parts):
            if i:
                yield " "
            if part:
                yield part


@pytest.fixture
def segmenter() -> WhitespaceSegmenter:
    return WhitespaceSegmenter()


@pytest.fixture
def idf_table() -> IdfTable:
    # sorted values: 0.2, 0.5, 1.0, 1.5, 2.0 -> median 1.0
    return IdfTable({"quick": 2.0, "brown": 1.5, "jumps": 1.0, "lazy": 0.5, "dog": 0.2})


@pytest.fixture
def extractor(segmenter, idf_table) -> TagExtractor:
    return TagExtractor(segmenter=segmenter, idf=idf_table, stop_words=StopWords())


@pytest.fixture
def idf_file(tmp_path):
    path = tmp_path / "idf.txt"
    path.write_text("quick 2.0\nbrown 1.5\n\njumps 1.0\nlazy 0.5\ndog 0.2\n", encoding="utf-8")
    return path


@pytest.fixture
def stop_words_file(tmp_path):
    path = tmp_path / "stop_words.txt"
    path.write_text("lazy\n  over  \n\n", encoding="utf-8")
    return path
