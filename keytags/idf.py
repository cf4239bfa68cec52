"""
IDF table module.
Maps tokens to precomputed inverse document frequencies.
"""
import math

from .dictionary import DictionaryError, read_dictionary_lines


class IdfTable:
    """
    Precomputed IDF lookup.

    Structure:
    - freqs: {token: idf}
    - median: upper median of the loaded values, used as the fallback
      weight for unseen tokens (0.0 while empty)
    """

    def __init__(self, freqs=None):
        self._freqs = {}
        self._median = 0.0
        if freqs:
            self._set(dict(freqs))

    def _set(self, freqs):
        values = sorted(freqs.values())
        self._freqs = freqs
        self._median = values[len(values) // 2] if values else 0.0

    @property
    def median(self):
        return self._median

    def frequency(self, token):
        """Return (idf, found). A miss returns (0.0, False)."""
        if token in self._freqs:
            return self._freqs[token], True
        return 0.0, False

    def load_dictionary(self, path, show_progress=False):
        """
        Load `word idf` lines from a file.

        Raises DictionaryError on a malformed line; the table keeps its
        previous contents in that case.
        """
        freqs = {}
        for line_no, fields in read_dictionary_lines(path, desc="Idf", show_progress=show_progress):
            if len(fields) < 2:
                raise DictionaryError(path, line_no, "expected '<word> <idf>'")
            try:
                value = float(fields[-1])
            except ValueError:
                raise DictionaryError(path, line_no, f"invalid idf value {fields[-1]!r}") from None
            if not math.isfinite(value):
                raise DictionaryError(path, line_no, f"non-finite idf value {fields[-1]!r}")
            freqs[" ".join(fields[:-1])] = value

        self._set(freqs)
        print(f"[Idf] Loaded {len(self._freqs)} terms from {path} (median={self._median:.4f})")

    def __contains__(self, token):
        return token in self._freqs

    def __len__(self):
        return len(self._freqs)
