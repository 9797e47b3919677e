"""Order scored phrases by descending score."""

from __future__ import annotations

from typing import List, Mapping, NamedTuple

from .scorer import PhraseStatistics


class RankedPhrase(NamedTuple):
    phrase: str
    score: float


def rank_phrases(phrase_stats: Mapping[str, PhraseStatistics]) -> List[RankedPhrase]:
    """
    Sort phrases by score, highest first.

    ``sorted`` is stable (also with ``reverse=True``), so equal scores keep
    the mapping's insertion order, i.e. first appearance in the text.
    """
    pairs = [RankedPhrase(phrase, stats.score) for phrase, stats in phrase_stats.items()]
    return sorted(pairs, key=lambda p: p.score, reverse=True)
