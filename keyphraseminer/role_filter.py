"""
role_filter.py

Grammatical-role post-filter: keep ranked phrases whose role tags (e.g.
Penn Treebank ``NN`` / ``NNS``) intersect an allowed set.

Tag lookups are case-sensitive in most lexicons, while phrases are
lowercased by the segmenter. Each phrase is therefore looked up under
several surface forms and the resulting tags are merged.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Callable, Iterable, List, Optional, Sequence, Union

from .ranker import RankedPhrase
from .resources import TagProvider


_NON_ALNUM_RE = re.compile(r"[\W_]")


def tag_lookup_forms(phrase: str) -> List[str]:
    """
    Surface forms tried for a lookup, in order: exact, UPPER, Title, and
    non-alphanumerics replaced by spaces.
    """
    return [
        phrase,
        phrase.upper(),
        phrase.title(),
        _NON_ALNUM_RE.sub(" ", phrase),
    ]


class RoleFilter:
    """
    Role-tag post-filter over a :class:`~keyphraseminer.resources.TagProvider`.

    Parameters
    ----------
    tag_provider:
        Lookup capability returning the tags of a word (possibly none).
    logger, verbose:
        Optional message sink; when ``verbose`` is True each dropped phrase
        is reported.
    """

    def __init__(
        self,
        tag_provider: TagProvider,
        logger: Optional[Callable[[str], None]] = None,
        verbose: bool = False,
    ) -> None:
        self.tag_provider = tag_provider
        self.logger = logger
        self.verbose = verbose

    def _log(self, message: str) -> None:
        if not self.verbose:
            return
        if self.logger is not None:
            self.logger(message)
        else:
            print(message)

    def tags_for(self, phrase: str) -> List[str]:
        """Deduplicated union of tags over all lookup forms (first-seen order)."""
        tags = {}
        for form in tag_lookup_forms(phrase):
            for tag in self.tag_provider.lookup(form) or ():
                tags[tag] = None
        return list(tags)

    def filter(
        self,
        ranked: Iterable[Union[RankedPhrase, str]],
        allowed_tags: Optional[AbstractSet[str]],
    ) -> List[str]:
        """
        Return the phrase strings of ``ranked`` that carry an allowed tag.

        ``allowed_tags=None`` disables filtering: all phrases pass, in order.
        Phrases unknown to the tagger are dropped when filtering is active.
        """
        phrases = [_phrase_of(item) for item in ranked]
        if allowed_tags is None:
            return phrases

        kept: List[str] = []
        for phrase in phrases:
            tags = self.tags_for(phrase)
            if any(tag in allowed_tags for tag in tags):
                kept.append(phrase)
            else:
                self._log(f"[RoleFilter] drop '{phrase}' (tags: {tags or 'none'})")
        return kept


def filter_by_roles(
    ranked: Iterable[Union[RankedPhrase, str]],
    allowed_tags: Optional[AbstractSet[str]],
    tag_provider: TagProvider,
) -> List[str]:
    """Functional shortcut for :meth:`RoleFilter.filter`."""
    return RoleFilter(tag_provider).filter(ranked, allowed_tags)


def _phrase_of(item: Union[RankedPhrase, Sequence, str]) -> str:
    return item if isinstance(item, str) else item[0]
