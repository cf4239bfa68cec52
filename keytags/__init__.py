"""
TF-IDF keyword extraction.
"""
from .dictionary import DictionaryError
from .extractor import TagExtractor, is_digit, is_pure_digit_letters
from .idf import IdfTable
from .segment import Segment, sort_segments, top_k
from .segmenter import Segmenter
from .stopwords import DEFAULT_STOPWORDS, StopWords

__all__ = [
    "DictionaryError",
    "TagExtractor",
    "is_digit",
    "is_pure_digit_letters",
    "IdfTable",
    "Segment",
    "sort_segments",
    "top_k",
    "Segmenter",
    "DEFAULT_STOPWORDS",
    "StopWords",
]
