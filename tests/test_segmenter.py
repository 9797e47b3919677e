from __future__ import annotations

from keyphraseminer.segmenter import (
    PhraseSegmenter,
    is_all_punctuation,
    segment,
    strip_punctuation,
)


def test_stopwords_split_phrases():
    phrases = segment("Compatibility of systems, of linear constraints", {"of"})

    assert phrases == ["compatibility", "systems", "linear constraints"]


def test_text_is_lowercased_and_whitespace_collapsed():
    assert segment("  Linear\tDiophantine \n Equations  ") == ["linear diophantine equations"]


def test_leading_punctuation_flushes_before_the_token():
    assert segment("big (data science) rules") == ["big", "data science", "rules"]


def test_punctuation_only_tokens_are_boundaries():
    assert segment("alpha -- beta ... gamma") == ["alpha", "beta", "gamma"]


def test_duplicates_are_kept_in_order():
    assert segment("Big data. Big data, again") == ["big data", "big data", "again"]


def test_stopword_revealed_by_stripping_is_a_boundary():
    assert segment("the end, the. start", {"the"}) == ["end", "start"]


def test_symbols_are_word_characters():
    assert segment("c++ rocks") == ["c++ rocks"]


def test_empty_input():
    assert segment("") == []
    assert segment("   \n\t ") == []
    assert segment("the and", {"the", "and"}) == []


def test_segmenter_instance_is_reusable():
    segmenter = PhraseSegmenter(frozenset({"and"}))

    first = segmenter.segment("apples and pears")
    second = segmenter.segment("apples and pears")

    assert first == second == ["apples", "pears"]


def test_punctuation_helpers():
    assert strip_punctuation("«quoted»,") == "quoted"
    assert strip_punctuation("...") == ""
    assert is_all_punctuation("—")
    assert not is_all_punctuation("a.")
    assert not is_all_punctuation("")
