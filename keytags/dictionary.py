"""
Dictionary file reader.
Shared line reader for the IDF and stop-word dictionaries.
"""
from tqdm import tqdm


class DictionaryError(ValueError):
    """Raised when a dictionary file contains a malformed line."""

    def __init__(self, path, line_no, message):
        super().__init__(f"{path}:{line_no}: {message}")
        self.path = path
        self.line_no = line_no


def read_dictionary_lines(path, desc="Loading", show_progress=False):
    """
    Yield (line_no, fields) for every non-blank line of a UTF-8 file.

    Fields are split on whitespace. Missing files raise OSError when the
    generator is first advanced.
    """
    with open(path, 'r', encoding='utf-8') as f:
        for line_no, line in enumerate(tqdm(f, desc=desc, disable=not show_progress), 1):
            fields = line.split()
            if not fields:
                continue
            yield line_no, fields
