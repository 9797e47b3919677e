"""
Shared fixtures: in-memory stopword and tag resources, so the test-suite
never touches NLTK downloads or spaCy models.
"""

from __future__ import annotations

import pytest

from keyphraseminer import KeywordExtractor, LexiconTagProvider, StopwordTable


ENGLISH_STOPWORDS = {
    "a", "an", "and", "are", "for", "have", "here", "i", "in", "is",
    "of", "over", "some", "the", "to", "with",
}


@pytest.fixture
def stopword_table() -> StopwordTable:
    return StopwordTable({"en": ENGLISH_STOPWORDS, "none": []})


@pytest.fixture
def lexicon() -> LexiconTagProvider:
    return LexiconTagProvider(
        {
            "a": ["NN", "DT"],
            "ab": ["NN"],
            "cat": ["NN"],
            "bananas": ["NNS"],
            "table": ["NN", "VB"],
            "I": ["PRP"],
            "apples": ["NNS"],
            "cfm56": ["NN"],
            "systems": ["NNS"],
            "compatibility": ["NN"],
        }
    )


@pytest.fixture
def extractor(stopword_table, lexicon) -> KeywordExtractor:
    return KeywordExtractor(stopword_provider=stopword_table, tag_provider=lexicon)
