"""
resources.py

Read-only lookup resources consumed by the extraction pipeline.

Two capabilities are injected into :class:`~keyphraseminer.extractor.KeywordExtractor`:

- a **stopword provider**  → ``lookup(language_code) -> frozenset[str]``
- a **tag provider**       → ``lookup(word) -> sequence of role tags``

Both are plain protocols so callers (and tests) can pass any object with a
matching ``lookup`` method. This module also ships the default backends:

- :class:`StopwordTable` built from NLTK's ``stopwords`` corpus (ISO 639-1
  language codes are translated to NLTK's corpus file names).
- :class:`LexiconTagProvider` over an in-memory word → tags mapping.
- :class:`NltkTagProvider` building a Penn-Treebank lexicon from NLTK data.
- :class:`SpacyTagProvider` tagging single tokens with a spaCy pipeline.

Heavy imports are kept local to the loaders so that ``import keyphraseminer``
stays cheap and spaCy remains optional.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Set,
    runtime_checkable,
)


# ISO 639-1 code → NLTK stopwords corpus file id.
NLTK_STOPWORD_LANGUAGES: Dict[str, str] = {
    "ar": "arabic",
    "az": "azerbaijani",
    "be": "belarusian",
    "bn": "bengali",
    "ca": "catalan",
    "da": "danish",
    "de": "german",
    "el": "greek",
    "en": "english",
    "es": "spanish",
    "eu": "basque",
    "fi": "finnish",
    "fr": "french",
    "he": "hebrew",
    "hu": "hungarian",
    "id": "indonesian",
    "it": "italian",
    "kk": "kazakh",
    "ne": "nepali",
    "nl": "dutch",
    "no": "norwegian",
    "pt": "portuguese",
    "ro": "romanian",
    "ru": "russian",
    "sl": "slovene",
    "sq": "albanian",
    "sv": "swedish",
    "ta": "tamil",
    "tg": "tajik",
    "tr": "turkish",
    "uz": "uzbek",
    "zh": "chinese",
}


# ---------------------------------------------------------------------
# Provider protocols
# ---------------------------------------------------------------------


@runtime_checkable
class StopwordProvider(Protocol):
    """Anything that maps a language code to a set of stopwords."""

    def lookup(self, language: str) -> FrozenSet[str]:
        ...


@runtime_checkable
class TagProvider(Protocol):
    """Anything that maps a word to zero or more grammatical-role tags."""

    def lookup(self, word: str) -> Sequence[str]:
        ...


# ---------------------------------------------------------------------
# Stopwords
# ---------------------------------------------------------------------


class StopwordTable:
    """
    Immutable language code → stopword set table.

    Unknown language codes are a valid, degraded configuration: :meth:`lookup`
    returns an empty set (and reports it once per code through ``logger`` when
    one is given) instead of raising.

    Parameters
    ----------
    table:
        Mapping from language code to an iterable of stopwords. Words are
        lowercased and stripped on construction.
    logger:
        Optional callable receiving a single message string, e.g. ``print``
        or ``logging.getLogger(__name__).warning``.
    """

    def __init__(
        self,
        table: Mapping[str, Iterable[str]],
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        frozen = {
            code.lower(): frozenset(w.strip().lower() for w in words if w.strip())
            for code, words in table.items()
        }
        self._table: Mapping[str, FrozenSet[str]] = MappingProxyType(frozen)
        self.logger = logger
        self._reported: Set[str] = set()

    @property
    def languages(self) -> List[str]:
        return sorted(self._table)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self._table

    def lookup(self, language: str) -> FrozenSet[str]:
        words = self._table.get(language.lower())
        if words is None:
            if self.logger is not None and language not in self._reported:
                self._reported.add(language)
                self.logger(
                    f"[StopwordTable] No stopwords for language '{language}'; "
                    "continuing with an empty stopword set."
                )
            return frozenset()
        return words

    @classmethod
    def from_nltk(
        cls,
        languages: Optional[Mapping[str, str]] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> "StopwordTable":
        """
        Build a table from NLTK's ``stopwords`` corpus.

        ``languages`` maps ISO codes to NLTK file ids and defaults to
        :data:`NLTK_STOPWORD_LANGUAGES`. Languages missing from the installed
        corpus version are skipped.
        """
        stopwords = _load_nltk_stopwords()
        available = set(stopwords.fileids())
        mapping = languages if languages is not None else NLTK_STOPWORD_LANGUAGES
        table = {
            code: stopwords.words(fileid)
            for code, fileid in mapping.items()
            if fileid in available
        }
        return cls(table, logger=logger)


@lru_cache(maxsize=1)
def default_stopword_table() -> StopwordTable:
    """
    Process-wide default table, built once from NLTK on first use.

    Unknown languages are reported once per code with ``print`` (the same
    console fallback the rest of the package uses when no logger is supplied).
    """
    return StopwordTable.from_nltk(logger=print)


# ---------------------------------------------------------------------
# Role taggers
# ---------------------------------------------------------------------


class LexiconTagProvider:
    """
    Tag provider backed by an in-memory lexicon (word → tags).

    This mirrors Brill-style lexicons: a word maps to every tag it was seen
    with, the most frequent first. Lookups are case-sensitive, so lexicons
    can keep proper nouns capitalised; the role filter takes care of trying
    several casings.
    """

    def __init__(self, lexicon: Mapping[str, Iterable[str]]) -> None:
        self._lexicon: Mapping[str, tuple] = MappingProxyType(
            {word: tuple(tags) for word, tags in lexicon.items()}
        )

    def __len__(self) -> int:
        return len(self._lexicon)

    def lookup(self, word: str) -> Sequence[str]:
        return self._lexicon.get(word, ())


class NltkTagProvider:
    """
    Penn-Treebank lexicon built lazily from NLTK data.

    The lexicon is the union of:
      * every (word, tag) pair in the ``treebank`` tagged corpus sample, and
      * the ``PerceptronTagger`` tag dictionary (frequent unambiguous words).

    Only words that were actually observed are known; everything else is a
    miss, which the role filter treats as "no tags".
    """

    def __init__(
        self,
        logger: Optional[Callable[[str], None]] = None,
        verbose: bool = False,
    ) -> None:
        self.logger = logger
        self.verbose = verbose
        self._lexicon: Optional[Dict[str, List[str]]] = None

    def _log(self, message: str) -> None:
        if not self.verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    @property
    def lexicon(self) -> Dict[str, List[str]]:
        if self._lexicon is None:
            self._lexicon = self._build_lexicon()
        return self._lexicon

    def lookup(self, word: str) -> Sequence[str]:
        return self.lexicon.get(word, [])

    def _build_lexicon(self) -> Dict[str, List[str]]:
        self._log("[NltkTagProvider] Building tag lexicon from NLTK data…")
        tagged_words, tagdict = _load_nltk_tagging_resources()

        lexicon: Dict[str, List[str]] = {}
        seen: Dict[str, Set[str]] = {}
        for word, tag in tagged_words:
            # Treebank traces like *T*-1 and -NONE- carry no lexical content.
            if tag == "-NONE-":
                continue
            tags = seen.setdefault(word, set())
            if tag not in tags:
                tags.add(tag)
                lexicon.setdefault(word, []).append(tag)

        for word, tag in tagdict.items():
            tags = seen.setdefault(word, set())
            if tag not in tags:
                tags.add(tag)
                lexicon.setdefault(word, []).append(tag)

        self._log(f"[NltkTagProvider] Lexicon ready ({len(lexicon)} entries).")
        return lexicon


class SpacyTagProvider:
    """
    Tag provider running a spaCy pipeline over the looked-up string.

    A lookup succeeds only when the string is a single spaCy token; its
    fine-grained ``tag_`` (Penn Treebank for English models) is returned.
    Multi-token strings are a miss, matching lexicon semantics.
    """

    def __init__(
        self,
        spacy_model: str = "en_core_web_sm",
        nlp=None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.spacy_model = spacy_model
        self.logger = logger
        self._nlp = nlp

    @property
    def nlp(self):
        if self._nlp is None:
            self._nlp = _load_spacy_model(self.spacy_model, logger=self.logger)
        return self._nlp

    def lookup(self, word: str) -> Sequence[str]:
        word = word.strip()
        if not word:
            return []
        doc = self.nlp(word)
        if len(doc) != 1:
            return []
        tag = doc[0].tag_
        return [tag] if tag else []


def make_tag_provider(
    method: str = "nltk",
    spacy_model: str = "en_core_web_sm",
    logger: Optional[Callable[[str], None]] = None,
) -> TagProvider:
    """Create a default tag provider for ``method`` (``"nltk"`` or ``"spacy"``)."""
    method = method.lower()
    if method == "nltk":
        return NltkTagProvider(logger=logger)
    if method == "spacy":
        return SpacyTagProvider(spacy_model=spacy_model, logger=logger)
    raise ValueError("method must be 'spacy' or 'nltk'")


# ---------------------------------------------------------------------
# Lazy back-end loaders (keep heavy imports optional)
# ---------------------------------------------------------------------


def _load_nltk_stopwords():
    """Return NLTK's stopwords corpus reader, downloading it quietly if needed."""
    import nltk

    try:
        from nltk.corpus import stopwords

        stopwords.fileids()
    except LookupError:
        nltk.download("stopwords", quiet=True)
        from nltk.corpus import stopwords
    return stopwords


def _load_nltk_tagging_resources():
    """
    Return ``(treebank_tagged_words, perceptron_tagdict)``.

    The minimal resources (``treebank`` + the averaged perceptron model) are
    downloaded automatically in quiet mode. Newer NLTK releases ship the
    English perceptron model as ``averaged_perceptron_tagger_eng``.
    """
    import nltk

    nltk.download("treebank", quiet=True)
    nltk.download("averaged_perceptron_tagger", quiet=True)
    nltk.download("averaged_perceptron_tagger_eng", quiet=True)

    from nltk.corpus import treebank
    from nltk.tag import PerceptronTagger

    return treebank.tagged_words(), dict(PerceptronTagger().tagdict)


def _load_spacy_model(model_name: str, logger: Optional[Callable[[str], None]] = None):
    """
    Load a spaCy model, downloading it on-the-fly if necessary.
    """
    import subprocess
    import sys

    log = logger if logger is not None else print
    try:
        import spacy

        return spacy.load(model_name, disable=["parser", "ner", "lemmatizer"])
    except OSError:
        # Model not downloaded yet → auto-download.
        log(f"[SpacyTagProvider] spaCy model '{model_name}' not found. Downloading…")
        subprocess.run([sys.executable, "-m", "spacy", "download", model_name], check=True)
        import spacy

        return spacy.load(model_name, disable=["parser", "ner", "lemmatizer"])
    except ImportError as e:  # spaCy not installed
        raise ImportError(
            "spaCy is required for SpacyTagProvider. Install with 'pip install spacy'."
        ) from e
