"""
scorer.py

Co-occurrence scoring (RAKE word degree / frequency).

For every candidate phrase occurrence:
  * the phrase frequency goes up by one,
  * each constituent word's frequency goes up by one,
  * each constituent word's degree goes up by ``len(words) - 1``
    (the number of other words it co-occurs with in that phrase).

A word's score is ``degree / frequency``; a phrase's score is the sum of
its word scores, one term per word occurrence. Words that favour long
phrases therefore score higher than words that mostly stand alone.
Purely numeric words ("2024", "3.5") stay part of the phrase text but
are ignored for scoring.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import pandas as pd


_NUMERIC_WORD_RE = re.compile(r"^[+-]?\d+(?:[.,]\d+)*$")


# ---------------------------------------------------------------------
# Dataclasses for scoring results
# ---------------------------------------------------------------------


@dataclass
class WordStatistics:
    """
    Per-word RAKE statistics.

    Attributes
    ----------
    frequency:
        Number of phrase occurrences containing the word.
    degree:
        Accumulated co-occurrence weight over all those occurrences.
    score:
        ``degree / frequency`` (filled in once all phrases are counted).
    """

    frequency: int = 0
    degree: int = 0
    score: float = 0.0


@dataclass
class PhraseStatistics:
    """Occurrence count and summed word score of a candidate phrase."""

    frequency: int = 0
    score: float = 0.0


@dataclass
class ScoringResult:
    """
    Output of :func:`score_phrases`.

    Attributes
    ----------
    phrases:
        Phrase → statistics, in order of first appearance, restricted to
        phrases meeting the minimum frequency.
    words:
        Word → statistics over *all* filtered phrases, including phrases
        later dropped by the frequency threshold.
    """

    phrases: Dict[str, PhraseStatistics] = field(default_factory=dict)
    words: Dict[str, WordStatistics] = field(default_factory=dict)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Phrase-level diagnostics table.

        Columns: 'phrase', 'frequency', 'score', 'n_words'.
        Rows follow first-appearance order.
        """
        rows = [
            {
                "phrase": phrase,
                "frequency": stats.frequency,
                "score": stats.score,
                "n_words": len(phrase.split()),
            }
            for phrase, stats in self.phrases.items()
        ]
        return pd.DataFrame(rows, columns=["phrase", "frequency", "score", "n_words"])

    def words_dataframe(self) -> pd.DataFrame:
        """Word-level diagnostics table ('word', 'frequency', 'degree', 'score')."""
        rows = [
            {
                "word": word,
                "frequency": stats.frequency,
                "degree": stats.degree,
                "score": stats.score,
            }
            for word, stats in self.words.items()
        ]
        return pd.DataFrame(rows, columns=["word", "frequency", "degree", "score"])


def is_numeric_word(word: str) -> bool:
    return bool(_NUMERIC_WORD_RE.match(word))


def split_scoring_words(phrase: str) -> List[str]:
    """Words of ``phrase`` that take part in scoring (numbers removed)."""
    return [w for w in phrase.split() if not is_numeric_word(w)]


def score_phrases(
    phrases: Iterable[str],
    min_keyword_frequency: int = 1,
) -> ScoringResult:
    """
    Compute word and phrase statistics for filtered candidate phrases.

    Every phrase is scored, then phrases seen fewer than
    ``min_keyword_frequency`` times are dropped from the phrase map. Their
    words keep contributing to the word statistics.

    Runs in linear time: each phrase occurrence is split once, and each
    distinct phrase is re-split once more for the final sum.
    """
    phrase_stats: Dict[str, PhraseStatistics] = {}
    word_stats: Dict[str, WordStatistics] = {}

    for phrase in phrases:
        stats = phrase_stats.get(phrase)
        if stats is None:
            stats = phrase_stats[phrase] = PhraseStatistics()
        stats.frequency += 1

        words = split_scoring_words(phrase)
        degree = len(words) - 1
        for word in words:
            ws = word_stats.get(word)
            if ws is None:
                ws = word_stats[word] = WordStatistics()
            ws.frequency += 1
            ws.degree += degree

    for ws in word_stats.values():
        ws.score = ws.degree / ws.frequency

    for phrase, stats in phrase_stats.items():
        stats.score = sum(word_stats[w].score for w in split_scoring_words(phrase))

    kept = {
        phrase: stats
        for phrase, stats in phrase_stats.items()
        if stats.frequency >= min_keyword_frequency
    }
    return ScoringResult(phrases=kept, words=word_stats)
