"""
segmenter.py

PhraseSegmenter: cut raw text into RAKE candidate phrases.

A candidate phrase is a maximal run of content words. Runs are broken by
*boundaries*:

- stopwords (e.g. "the", "and", "for"),
- tokens made only of punctuation ("--", "...", "&"),
- punctuation at the edges of a token ("data," ends a phrase,
  "(big" starts a new one).

Quick usage
-----------
    from keyphraseminer.segmenter import segment

    segment("Compatibility of systems, of linear constraints", {"of"})
    # ['compatibility', 'systems', 'linear constraints']
"""

from __future__ import annotations

import unicodedata
from typing import AbstractSet, List


def is_punctuation(char: str) -> bool:
    """True for any character in a Unicode punctuation category (Pc, Pd, Ps, ...)."""
    return unicodedata.category(char).startswith("P")


def is_all_punctuation(token: str) -> bool:
    return bool(token) and all(is_punctuation(c) for c in token)


def strip_punctuation(token: str) -> str:
    """Strip leading and trailing punctuation characters from ``token``."""
    start, end = 0, len(token)
    while start < end and is_punctuation(token[start]):
        start += 1
    while end > start and is_punctuation(token[end - 1]):
        end -= 1
    return token[start:end]


class PhraseSegmenter:
    """
    Stopword/punctuation-delimited phrase segmentation.

    The segmenter is stateless apart from its stopword set, so one instance
    can be reused across calls and threads.

    Parameters
    ----------
    stopwords:
        Normalized (lowercase) stopwords acting as phrase boundaries.
    """

    def __init__(self, stopwords: AbstractSet[str] = frozenset()) -> None:
        self.stopwords = stopwords

    def segment(self, text: str) -> List[str]:
        """
        Split ``text`` into candidate phrases, in order of appearance.

        Pipeline per whitespace token:
        1. Boundary tokens (stopword / pure punctuation) flush the current phrase.
        2. A token *starting* with punctuation flushes, then its leading
           punctuation is dropped.
        3. A token *ending* with punctuation is appended without it and the
           phrase is flushed right away.
        4. Anything else is appended to the current phrase.

        Duplicates are kept: "big data ... big data" yields two entries.
        """
        phrases: List[str] = []
        current: List[str] = []

        def flush() -> None:
            if current:
                phrases.append(" ".join(current))
                current.clear()

        for token in text.lower().split():
            token = token.strip()
            if self._is_boundary(token):
                flush()
                continue

            if is_punctuation(token[0]):
                flush()

            ends_phrase = is_punctuation(token[-1])
            word = strip_punctuation(token)

            if self._is_boundary(word):
                flush()
                continue

            current.append(word)
            if ends_phrase:
                flush()

        flush()
        return phrases

    def _is_boundary(self, token: str) -> bool:
        return not token or token in self.stopwords or is_all_punctuation(token)


def segment(text: str, stopwords: AbstractSet[str] = frozenset()) -> List[str]:
    """Functional shortcut for :meth:`PhraseSegmenter.segment`."""
    return PhraseSegmenter(stopwords).segment(text)
