"""
options.py

Run-time configuration for a single extraction call.

Out-of-range numeric thresholds are clamped to the nearest valid value
instead of being rejected, so a caller passing ``min_keyword_frequency=0``
gets the same result as ``1``. Wrongly-typed values and unknown option
names (e.g. a misspelled override) still raise pydantic's ``ValidationError``.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_NOUN_TAGS: FrozenSet[str] = frozenset({"NN", "NNS"})


class ExtractionOptions(BaseModel):
    """
    Options recognised by :func:`keyphraseminer.extract_keywords`.

    Attributes
    ----------
    language:
        Language code selecting the default stopword set (``"en"``).
    additional_stopwords:
        Extra stopwords, unioned with the language default.
    allowed_role_tags:
        If set, only phrases carrying at least one of these role tags are
        returned. ``None`` disables the role filter.
    min_char_length:
        Minimum phrase length in characters (clamped to ``>= 0``).
    max_words_length:
        Maximum words per phrase (clamped to ``>= 1``).
    min_keyword_frequency:
        Minimum number of occurrences for a phrase to be scored
        (clamped to ``>= 1``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: str = Field("en", description="Language code for the default stopwords.")
    additional_stopwords: FrozenSet[str] = Field(default_factory=frozenset)
    allowed_role_tags: Optional[FrozenSet[str]] = None
    min_char_length: int = 1
    max_words_length: int = 5
    min_keyword_frequency: int = 1

    @field_validator("additional_stopwords", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return frozenset() if value is None else value

    @field_validator("additional_stopwords")
    @classmethod
    def _normalize_stopwords(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(w.strip().lower() for w in value if w.strip())

    @field_validator("min_char_length")
    @classmethod
    def _clamp_min_char_length(cls, value: int) -> int:
        return max(value, 0)

    @field_validator("max_words_length")
    @classmethod
    def _clamp_max_words_length(cls, value: int) -> int:
        return max(value, 1)

    @field_validator("min_keyword_frequency")
    @classmethod
    def _clamp_min_keyword_frequency(cls, value: int) -> int:
        return max(value, 1)

    def with_overrides(self, **overrides) -> "ExtractionOptions":
        """Return a validated copy with ``overrides`` applied."""
        if not overrides:
            return self
        return type(self).model_validate({**self.model_dump(), **overrides})
