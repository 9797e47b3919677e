"""
keyphraseminer

RAKE keyword extraction with grammatical-role post-filtering.

High-level API
--------------
- extract_keywords     → one-call extraction with default NLTK resources
- KeywordExtractor     → reusable extractor with injected stopword/tag providers
- ExtractionOptions    → validated per-call configuration
- Pipeline pieces:
    * PhraseSegmenter / segment
    * FilterChain and the standard acceptability filters
    * score_phrases, rank_phrases
    * RoleFilter / filter_by_roles
- Resources:
    * StopwordTable, default_stopword_table
    * LexiconTagProvider, NltkTagProvider, SpacyTagProvider
"""

from importlib.metadata import PackageNotFoundError, version


# Core APIs
from .extractor import ExtractionResult, KeywordExtractor, extract_keywords
from .options import DEFAULT_NOUN_TAGS, ExtractionOptions
from .segmenter import PhraseSegmenter, segment
from .filters import (
    AcceptabilityFilter,
    AlphaDigitRatioFilter,
    FilterChain,
    MaxWordsLengthFilter,
    MinCharLengthFilter,
    StopwordFilter,
    build_filter_chain,
)
from .scorer import PhraseStatistics, ScoringResult, WordStatistics, score_phrases
from .ranker import RankedPhrase, rank_phrases
from .role_filter import RoleFilter, filter_by_roles, tag_lookup_forms

# Resources
from .resources import (
    LexiconTagProvider,
    NltkTagProvider,
    SpacyTagProvider,
    StopwordProvider,
    StopwordTable,
    TagProvider,
    default_stopword_table,
    make_tag_provider,
)


# ---------------------------------------------------------------------
# Runtime version (single source of truth = pyproject.toml)
# ---------------------------------------------------------------------
try:
    __version__ = version("keyphraseminer")
except PackageNotFoundError:
    # Fallback when running directly from a clone without installation
    __version__ = "0.0.0"

__all__ = [
    "extract_keywords",
    "KeywordExtractor",
    "ExtractionResult",
    "ExtractionOptions",
    "DEFAULT_NOUN_TAGS",
    "PhraseSegmenter",
    "segment",
    "AcceptabilityFilter",
    "AlphaDigitRatioFilter",
    "FilterChain",
    "MaxWordsLengthFilter",
    "MinCharLengthFilter",
    "StopwordFilter",
    "build_filter_chain",
    "PhraseStatistics",
    "ScoringResult",
    "WordStatistics",
    "score_phrases",
    "RankedPhrase",
    "rank_phrases",
    "RoleFilter",
    "filter_by_roles",
    "tag_lookup_forms",
    "LexiconTagProvider",
    "NltkTagProvider",
    "SpacyTagProvider",
    "StopwordProvider",
    "StopwordTable",
    "TagProvider",
    "default_stopword_table",
    "make_tag_provider",
    "__version__",
]
