"""
filters.py

Acceptability filters: small predicate objects that prune unsuitable
candidate phrases before scoring.

Every filter implements a single method, ``accepts(phrase) -> bool``.
:class:`FilterChain` evaluates an ordered tuple of filters and stops at the
first rejection. The result does not depend on the order; cheap filters go
first only to save work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Tuple

from .options import ExtractionOptions


class AcceptabilityFilter(ABC):
    """Predicate over a normalized phrase string."""

    @abstractmethod
    def accepts(self, phrase: str) -> bool:
        ...

    def __call__(self, phrase: str) -> bool:
        return self.accepts(phrase)


@dataclass(frozen=True)
class MinCharLengthFilter(AcceptabilityFilter):
    """Keep phrases with at least ``min_char_length`` characters."""

    min_char_length: int = 1

    def accepts(self, phrase: str) -> bool:
        return len(phrase) >= self.min_char_length


@dataclass(frozen=True)
class MaxWordsLengthFilter(AcceptabilityFilter):
    """Keep phrases with at most ``max_words_length`` whitespace-separated words."""

    max_words_length: int = 5

    def accepts(self, phrase: str) -> bool:
        return len(phrase.split()) <= self.max_words_length


@dataclass(frozen=True)
class AlphaDigitRatioFilter(AcceptabilityFilter):
    """
    Keep phrases that contain letters and strictly fewer digits than letters.

    "cfm56" (4 letters, 2 digits) passes; "b2" (1 letter, 1 digit) and
    "2024" (no letters) are rejected.
    """

    def accepts(self, phrase: str) -> bool:
        alpha = digits = 0
        for char in phrase:
            if char.isdigit():
                digits += 1
            elif char.isalpha():
                alpha += 1
        return alpha > 0 and digits < alpha


@dataclass(frozen=True)
class StopwordFilter(AcceptabilityFilter):
    """Reject phrases that are, as a whole, a stopword."""

    stopwords: AbstractSet[str] = frozenset()

    def accepts(self, phrase: str) -> bool:
        return phrase not in self.stopwords


@dataclass(frozen=True)
class FilterChain(AcceptabilityFilter):
    """Ordered conjunction of filters with short-circuit evaluation."""

    filters: Tuple[AcceptabilityFilter, ...] = ()

    def accepts(self, phrase: str) -> bool:
        return all(f.accepts(phrase) for f in self.filters)

    def apply(self, phrases: Iterable[str]) -> List[str]:
        """Return the accepted phrases, preserving order and duplicates."""
        return [p for p in phrases if self.accepts(p)]


def build_filter_chain(
    options: ExtractionOptions,
    stopwords: AbstractSet[str],
) -> FilterChain:
    """
    Assemble the standard chain for ``options``:
    stopword → min length → max words → alpha/digit ratio.
    """
    return FilterChain(
        (
            StopwordFilter(frozenset(stopwords)),
            MinCharLengthFilter(options.min_char_length),
            MaxWordsLengthFilter(options.max_words_length),
            AlphaDigitRatioFilter(),
        )
    )
