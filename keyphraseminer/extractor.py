"""
extractor.py

KeywordExtractor: RAKE keyword extraction with optional role-tag filtering.

Pipeline
--------
1. Resolve the stopword set (language default ∪ caller additions).
2. Segment the text into candidate phrases (:mod:`.segmenter`).
3. Prune candidates with the acceptability filter chain (:mod:`.filters`).
4. Score words and phrases by co-occurrence degree (:mod:`.scorer`).
5. Rank phrases by score, ties in order of appearance (:mod:`.ranker`).
6. Optionally keep only phrases carrying an allowed role tag
   (:mod:`.role_filter`).

Every call builds its own intermediate structures, so one extractor can be
shared between threads as long as its providers are not mutated.

Quick usage
-----------
    from keyphraseminer import extract_keywords, DEFAULT_NOUN_TAGS

    extract_keywords(
        "I have some apples and bananas here for the table",
        additional_stopwords={"apples"},
        allowed_role_tags=DEFAULT_NOUN_TAGS,
    )
    # ['bananas', 'table']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional

from .filters import build_filter_chain
from .options import ExtractionOptions
from .ranker import RankedPhrase, rank_phrases
from .resources import (
    StopwordProvider,
    TagProvider,
    default_stopword_table,
    make_tag_provider,
)
from .role_filter import RoleFilter
from .scorer import ScoringResult, score_phrases
from .segmenter import PhraseSegmenter


@dataclass
class ExtractionResult:
    """
    All intermediate stages of one extraction call.

    Attributes
    ----------
    options:
        The validated (clamped) options used for this call.
    candidate_phrases:
        Segmenter output, in order of appearance, duplicates included.
    accepted_phrases:
        Candidates that passed the acceptability filter chain.
    scoring:
        Word and phrase statistics (phrases below the frequency threshold
        already removed).
    ranked:
        ``(phrase, score)`` pairs, highest score first.
    keywords:
        Final phrase strings after the optional role filter.
    """

    options: ExtractionOptions
    candidate_phrases: List[str] = field(default_factory=list)
    accepted_phrases: List[str] = field(default_factory=list)
    scoring: ScoringResult = field(default_factory=ScoringResult)
    ranked: List[RankedPhrase] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)


class KeywordExtractor:
    """
    Embeddable RAKE extractor with injected lookup resources.

    Parameters
    ----------
    stopword_provider:
        Object with ``lookup(language) -> set of words``. Defaults to the
        process-wide NLTK-backed :func:`~keyphraseminer.resources.default_stopword_table`.
    tag_provider:
        Object with ``lookup(word) -> tags``. Only consulted when
        ``allowed_role_tags`` is set; if omitted, one is created on first
        need with :func:`~keyphraseminer.resources.make_tag_provider`.
    tag_method:
        Backend for the lazily-created tag provider: ``"nltk"`` (default) or
        ``"spacy"``.
    options:
        Default :class:`ExtractionOptions` for every call.
    logger:
        Optional callable receiving a single message string. This allows you
        to plug in different UIs:

        - Console:   `logger=None` (falls back to `print`)
        - stdlib:    `logger=logging.getLogger("kp").info`
        - Rich/loguru/etc.: wrap their log methods here.
    """

    def __init__(
        self,
        stopword_provider: Optional[StopwordProvider] = None,
        tag_provider: Optional[TagProvider] = None,
        tag_method: str = "nltk",
        options: Optional[ExtractionOptions] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._stopword_provider = stopword_provider
        self._tag_provider = tag_provider
        self.tag_method = tag_method
        self.options = options if options is not None else ExtractionOptions()
        self.logger = logger

    # ------------------------------------------------------------------
    # Internal helper – unified logging
    # ------------------------------------------------------------------
    def _log(self, message: str, verbose: bool = True) -> None:
        if not verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    @property
    def stopword_provider(self) -> StopwordProvider:
        if self._stopword_provider is None:
            self._stopword_provider = default_stopword_table()
        return self._stopword_provider

    @property
    def tag_provider(self) -> TagProvider:
        if self._tag_provider is None:
            self._tag_provider = make_tag_provider(self.tag_method, logger=self.logger)
        return self._tag_provider

    def stopwords_for(self, options: ExtractionOptions) -> FrozenSet[str]:
        """Language stopwords ∪ ``options.additional_stopwords``."""
        base = self.stopword_provider.lookup(options.language)
        return frozenset(base) | options.additional_stopwords

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def analyze(
        self,
        text: str,
        options: Optional[ExtractionOptions] = None,
        *,
        verbose: bool = False,
        **overrides,
    ) -> ExtractionResult:
        """
        Run the full pipeline and keep every intermediate stage.

        Keyword ``overrides`` (e.g. ``min_keyword_frequency=2``) are applied
        on top of ``options`` (or the extractor defaults) and validated.
        """
        opts = (options if options is not None else self.options).with_overrides(**overrides)
        result = ExtractionResult(options=opts)

        if not text or not text.strip():
            self._log("[KeywordExtractor] Empty input text; nothing to extract.", verbose)
            return result

        stopwords = self.stopwords_for(opts)
        result.candidate_phrases = PhraseSegmenter(stopwords).segment(text)
        self._log(
            f"[KeywordExtractor] {len(result.candidate_phrases)} candidate phrases "
            f"({len(stopwords)} stopwords, language='{opts.language}').",
            verbose,
        )

        chain = build_filter_chain(opts, stopwords)
        result.accepted_phrases = chain.apply(result.candidate_phrases)
        self._log(
            f"[KeywordExtractor] {len(result.accepted_phrases)} phrases passed the filters.",
            verbose,
        )

        result.scoring = score_phrases(result.accepted_phrases, opts.min_keyword_frequency)
        result.ranked = rank_phrases(result.scoring.phrases)
        self._log(
            f"[KeywordExtractor] {len(result.ranked)} phrases with frequency "
            f">= {opts.min_keyword_frequency} scored.",
            verbose,
        )

        if opts.allowed_role_tags is None:
            result.keywords = [p.phrase for p in result.ranked]
        else:
            role_filter = RoleFilter(self.tag_provider, logger=self.logger, verbose=verbose)
            result.keywords = role_filter.filter(result.ranked, opts.allowed_role_tags)
            self._log(
                f"[KeywordExtractor] {len(result.keywords)} phrases kept by role filter "
                f"{sorted(opts.allowed_role_tags)}.",
                verbose,
            )
        return result

    def extract(
        self,
        text: str,
        options: Optional[ExtractionOptions] = None,
        *,
        verbose: bool = False,
        **overrides,
    ) -> List[str]:
        """Ranked keyword phrases for ``text``."""
        return self.analyze(text, options, verbose=verbose, **overrides).keywords

    def extract_with_scores(
        self,
        text: str,
        options: Optional[ExtractionOptions] = None,
        *,
        verbose: bool = False,
        **overrides,
    ) -> List[RankedPhrase]:
        """Like :meth:`extract`, but returns ``(phrase, score)`` pairs."""
        result = self.analyze(text, options, verbose=verbose, **overrides)
        kept = set(result.keywords)
        return [p for p in result.ranked if p.phrase in kept]


def extract_keywords(
    text: str,
    *,
    language: str = "en",
    additional_stopwords=None,
    allowed_role_tags=None,
    min_char_length: int = 1,
    max_words_length: int = 5,
    min_keyword_frequency: int = 1,
    stopword_provider: Optional[StopwordProvider] = None,
    tag_provider: Optional[TagProvider] = None,
) -> List[str]:
    """
    Extract RAKE keywords from ``text``.

    Parameters
    ----------
    text:
        Input document (any length; one call handles one string).
    language:
        Code of the default stopword set (``"en"``). Unknown codes fall back
        to an empty set.
    additional_stopwords:
        Extra stopwords unioned with the language default.
    allowed_role_tags:
        If given, only phrases whose role tags intersect this set are kept
        (e.g. :data:`~keyphraseminer.options.DEFAULT_NOUN_TAGS`).
    min_char_length, max_words_length, min_keyword_frequency:
        Candidate filters; out-of-range values are clamped.
    stopword_provider, tag_provider:
        Optional lookup resources replacing the NLTK-backed defaults.

    Returns
    -------
    List[str]
        Phrases ordered by descending RAKE score.
    """
    options = ExtractionOptions(
        language=language,
        additional_stopwords=additional_stopwords,
        allowed_role_tags=allowed_role_tags,
        min_char_length=min_char_length,
        max_words_length=max_words_length,
        min_keyword_frequency=min_keyword_frequency,
    )
    extractor = KeywordExtractor(
        stopword_provider=stopword_provider,
        tag_provider=tag_provider,
    )
    return extractor.extract(text, options)
