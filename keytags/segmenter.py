"""
Segmenter module.
Wraps jieba's tokenizer to produce candidate tokens.
"""
import jieba


class Segmenter:
    """
    Precise-mode word segmentation backed by jieba.

    Without load_dictionary() the bundled jieba dictionary is used and
    initialized lazily on the first cut.
    """

    def __init__(self, hmm=True):
        self.hmm = hmm
        self._tokenizer = jieba.Tokenizer()

    def load_dictionary(self, path):
        """Load a segmentation dictionary. Errors surface here, not in cut()."""
        tokenizer = jieba.Tokenizer(dictionary=path)
        tokenizer.initialize()
        self._tokenizer = tokenizer
        print(f"[Segmenter] Loaded dictionary {path}")

    def cut(self, text):
        """Lazily yield tokens of text in precise (non search) mode."""
        return self._tokenizer.cut(text, cut_all=False, HMM=self.hmm)
