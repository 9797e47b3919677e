from __future__ import annotations

import pytest

from keyphraseminer.ranker import RankedPhrase, rank_phrases
from keyphraseminer.scorer import (
    PhraseStatistics,
    is_numeric_word,
    score_phrases,
    split_scoring_words,
)


def test_word_statistics_follow_degree_over_frequency():
    result = score_phrases(["big data", "data", "data mining"])

    data = result.words["data"]
    assert (data.frequency, data.degree) == (3, 2)
    assert data.score == pytest.approx(2 / 3)
    assert result.words["big"].score == pytest.approx(1.0)
    assert result.words["mining"].score == pytest.approx(1.0)


def test_phrase_score_is_sum_of_word_scores():
    result = score_phrases(["big data", "data"])
    s_big = result.words["big"].score
    s_data = result.words["data"].score

    assert (s_big, s_data) == (pytest.approx(1.0), pytest.approx(0.5))
    assert result.phrases["big data"].score == pytest.approx(s_big + s_data)
    assert result.phrases["data"].score == pytest.approx(s_data)


def test_repeated_word_counts_once_per_occurrence():
    result = score_phrases(["data data"])

    assert result.words["data"].frequency == 2
    assert result.words["data"].degree == 2
    assert result.phrases["data data"].score == pytest.approx(2.0)


def test_numeric_words_are_not_scored():
    result = score_phrases(["windows 10 release"])

    assert "10" not in result.words
    assert result.words["windows"].degree == 1
    assert result.phrases["windows 10 release"].score == pytest.approx(2.0)


def test_phrase_frequency_counts_exact_strings():
    result = score_phrases(["ab", "ab", "cat"])

    assert result.phrases["ab"].frequency == 2
    assert result.phrases["cat"].frequency == 1


def test_min_keyword_frequency_drops_phrases_but_keeps_words():
    result = score_phrases(["ab", "ab", "cat"], min_keyword_frequency=2)

    assert list(result.phrases) == ["ab"]
    assert result.words["cat"].frequency == 1


def test_phrases_keep_first_appearance_order():
    result = score_phrases(["zeta", "alpha beta", "zeta", "gamma"])

    assert list(result.phrases) == ["zeta", "alpha beta", "gamma"]


def test_empty_input():
    result = score_phrases([])

    assert result.phrases == {}
    assert result.words == {}
    assert result.to_dataframe().empty


def test_dataframes():
    result = score_phrases(["big data", "data"])

    df = result.to_dataframe()
    assert list(df.columns) == ["phrase", "frequency", "score", "n_words"]
    assert df["phrase"].tolist() == ["big data", "data"]
    assert df["n_words"].tolist() == [2, 1]

    words = result.words_dataframe().set_index("word")
    assert words.loc["data", "frequency"] == 2
    assert words.loc["big", "degree"] == 1


def test_numeric_word_detection():
    assert is_numeric_word("2024")
    assert is_numeric_word("3.5")
    assert is_numeric_word("1,000")
    assert not is_numeric_word("cfm56")
    assert split_scoring_words("top 10 tips") == ["top", "tips"]


def test_rank_descending_with_stable_ties():
    stats = {
        "x": PhraseStatistics(frequency=1, score=0.0),
        "y": PhraseStatistics(frequency=1, score=1.5),
        "z": PhraseStatistics(frequency=1, score=0.0),
        "w": PhraseStatistics(frequency=1, score=1.5),
    }

    ranked = rank_phrases(stats)

    assert [p.phrase for p in ranked] == ["y", "w", "x", "z"]
    assert ranked[0] == RankedPhrase("y", 1.5)


def test_rank_empty():
    assert rank_phrases({}) == []
