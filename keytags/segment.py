"""
Segment ranking module.
Weighted tag results and their total order.
"""
from collections import namedtuple


class Segment(namedtuple("Segment", ["text", "weight"])):
    """
    An immutable (text, weight) tag result.

    Plain tuple comparison orders by text first; rank with sort_segments
    or rank_key instead.
    """

    __slots__ = ()

    def __repr__(self):
        return f"Segment({self.text!r}, {self.weight:.6g})"


def rank_key(segment):
    """Weight descending, then text ascending."""
    return -segment.weight, segment.text


def sort_segments(segments):
    return sorted(segments, key=rank_key)


def top_k(segments, k):
    """Return the first k segments; a negative k keeps all of them."""
    if k >= 0 and len(segments) > k:
        return segments[:k]
    return segments
