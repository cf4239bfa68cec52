"""
Stop-word module.
Decides which tokens are excluded from tag scoring.
"""
from .dictionary import read_dictionary_lines

DEFAULT_STOPWORDS = frozenset({
    "the", "of", "is", "and", "to", "in", "that", "we", "for", "an", "are",
    "by", "be", "as", "on", "with", "can", "if", "from", "which", "you", "it",
    "this", "then", "at", "have", "all", "not", "one", "has", "or"
})


class StopWords:
    """Read-only stop-word set. Empty unless built with words or loaded."""

    def __init__(self, words=None):
        self._words = frozenset(words or ())

    def is_stop_word(self, token):
        return token in self._words

    def load_dictionary(self, path, show_progress=False):
        """
        Load one stop word per line on top of DEFAULT_STOPWORDS.

        The current set is only replaced once the whole file has been read.
        """
        words = set(DEFAULT_STOPWORDS)
        for _, fields in read_dictionary_lines(path, desc="StopWords", show_progress=show_progress):
            words.add(" ".join(fields))

        self._words = frozenset(words)
        print(f"[StopWords] Loaded {len(self._words)} stop words from {path}")

    def __contains__(self, token):
        return token in self._words

    def __len__(self):
        return len(self._words)
