"""
Tag extraction module.
Scores candidate tokens of a sentence by TF-IDF and returns the top-K tags.
"""
import unicodedata

from .idf import IdfTable
from .segment import Segment, sort_segments, top_k as take_top_k
from .segmenter import Segmenter
from .stopwords import DEFAULT_STOPWORDS, StopWords


def is_digit(token):
    """True iff token is non-empty and every character is a number."""
    if not token:
        return False
    return all(unicodedata.category(ch).startswith("N") for ch in token)


def is_pure_digit_letters(token):
    """True iff token mixes numbers and ASCII letters and nothing else."""
    has_digit = has_letter = False
    for ch in token:
        if unicodedata.category(ch).startswith("N"):
            has_digit = True
        elif ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
            has_letter = True
        else:
            return False
    return has_digit and has_letter


class TagExtractor:
    """
    TF-IDF keyword extractor.

    Args:
        segmenter: object with cut(text) -> iterable of str. Defaults to a
            jieba-backed Segmenter.
        idf: IdfTable instance.
        stop_words: StopWords instance. Defaults to DEFAULT_STOPWORDS.
        min_len: tokens shorter than this (in characters) are ignored.
        numeric_allowance: numeric tokens cn_extract_tags lets through
            before suppressing the rest.
    """

    is_digit = staticmethod(is_digit)
    is_pure_digit_letters = staticmethod(is_pure_digit_letters)

    def __init__(self, segmenter=None, idf=None, stop_words=None, min_len=2, numeric_allowance=0):
        self._segmenter = segmenter if segmenter is not None else Segmenter()
        self._idf = idf if idf is not None else IdfTable()
        self._stop_words = stop_words if stop_words is not None else StopWords(DEFAULT_STOPWORDS)
        self.min_len = min_len
        self.numeric_allowance = numeric_allowance

    @property
    def segmenter(self):
        return self._segmenter

    @property
    def idf(self):
        return self._idf

    @property
    def stop_words(self):
        return self._stop_words

    def load_dictionary(self, path):
        """Replace the segmenter with one built from a jieba dictionary file."""
        segmenter = Segmenter()
        segmenter.load_dictionary(path)
        self._segmenter = segmenter

    def load_idf(self, path, show_progress=False):
        idf = IdfTable()
        idf.load_dictionary(path, show_progress=show_progress)
        self._idf = idf

    def load_stop_words(self, path, show_progress=False):
        stop_words = StopWords()
        stop_words.load_dictionary(path, show_progress=show_progress)
        self._stop_words = stop_words

    def _candidates(self, sentence):
        """Yield trimmed tokens that pass the length and stop-word filters."""
        for word in self._segmenter.cut(sentence):
            word = word.strip()
            if len(word) < self.min_len:
                continue
            if self._stop_words.is_stop_word(word):
                continue
            yield word

    def term_frequencies(self, sentence):
        """
        Normalized term frequencies of the surviving tokens.

        Returns {} when nothing survives filtering.
        """
        freq_map = {}
        for word in self._candidates(sentence):
            freq_map[word] = freq_map.get(word, 0.0) + 1.0

        total = sum(freq_map.values())
        if not total:
            return {}
        return {word: freq / total for word, freq in freq_map.items()}

    def extract_tags(self, sentence, top_k=20):
        """
        Extract the top_k keywords of sentence.

        weight = idf(word) * tf(word), falling back to the IDF median for
        words missing from the table. A negative top_k returns every tag.

        Returns: [Segment, ...] weight desc, text asc
        """
        segments = []
        for word, tf in self.term_frequencies(sentence).items():
            idf, found = self._idf.frequency(word)
            if not found:
                idf = self._idf.median
            segments.append(Segment(word, idf * tf))

        return take_top_k(sort_segments(segments), top_k)

    def cn_extract_tags(self, sentence, top_k=20):
        """
        Stricter extraction: numeric tokens are suppressed, each distinct
        word counts once, and words without an IDF entry are dropped.

        Returns: ([Segment, ...], [word, ...]) where the word list keeps
        every surviving token in order of appearance, duplicates included.
        """
        freq_map = {}
        words = []
        num_count = 0
        for word in self._candidates(sentence):
            if is_digit(word):
                num_count += 1
                if num_count > self.numeric_allowance:
                    continue

            words.append(word)
            freq_map[word] = 1.0

        segments = []
        for word, tf in freq_map.items():
            idf, found = self._idf.frequency(word)
            if not found:
                continue
            segments.append(Segment(word, idf * tf))

        return take_top_k(sort_segments(segments), top_k), words
