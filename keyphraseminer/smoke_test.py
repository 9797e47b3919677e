"""
keyphraseminer.smoke_test

Minimal end-to-end smoke test for keyphraseminer with the real NLTK
resources (stopwords corpus + treebank lexicon).

Usage (from any directory where the env is active):

    python -m keyphraseminer.smoke_test

What it does:
- Creates a tiny in-memory corpus (3 short English paragraphs).
- Runs KeywordExtractor on each, with and without the noun filter.
- Prints the top phrases with their RAKE scores.

The first run downloads the NLTK ``stopwords``, ``treebank`` and
perceptron tagger data in quiet mode.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .extractor import KeywordExtractor
from .options import DEFAULT_NOUN_TAGS, ExtractionOptions


def run_smoke_test(verbose: bool = True, top_n: int = 8) -> Dict[str, Any]:
    """
    Run a small end-to-end test of the extraction pipeline.

    Returns
    -------
    result : dict
        A dictionary containing:
        - "docs"
        - "ranked"   (list of RankedPhrase lists, one per doc)
        - "keywords" (noun-filtered keyword lists, one per doc)
    """
    docs = [
        # Doc 1 – the classic RAKE abstract
        """
        Compatibility of systems of linear constraints over the set of natural
        numbers. Criteria of compatibility of a system of linear Diophantine
        equations, strict inequations, and nonstrict inequations are considered.
        Upper bounds for components of a minimal set of solutions and algorithms
        of construction of minimal generating sets of solutions for all types of
        systems are given.
        """,

        # Doc 2 – maintenance notes with part numbers
        """
        The CFM56 engine passed its borescope inspection. Fan blade erosion was
        within limits, but the fuel nozzle assembly needs replacement before the
        next heavy maintenance check. Schedule the fuel nozzle assembly swap with
        the hangar team.
        """,

        # Doc 3 – product feedback
        """
        Users love the dark mode toggle, yet onboarding emails feel repetitive.
        Several customers asked for a faster export button and clearer billing
        pages; the export button request came up in every interview.
        """,
    ]

    log = print if verbose else (lambda *_args, **_kwargs: None)
    log("[smoke_test] Starting keyphraseminer smoke test...")
    log(f"[smoke_test] Using {len(docs)} small demo documents.")

    extractor = KeywordExtractor(logger=log)
    nouns = ExtractionOptions(allowed_role_tags=DEFAULT_NOUN_TAGS)

    ranked_by_doc: List[list] = []
    keywords_by_doc: List[List[str]] = []
    for doc_index, doc in enumerate(docs):
        ranked = extractor.extract_with_scores(doc)
        keywords = extractor.extract(doc, nouns)
        ranked_by_doc.append(ranked)
        keywords_by_doc.append(keywords)

        log(f"\n[smoke_test] Doc {doc_index}: {len(ranked)} ranked phrases")
        for phrase, score in ranked[:top_n]:
            log(f"    {score:6.2f}  {phrase}")
        log(f"[smoke_test] Noun keywords: {keywords[:top_n]}")

    log("\n[smoke_test] Smoke test completed successfully ✅")

    return {
        "docs": docs,
        "ranked": ranked_by_doc,
        "keywords": keywords_by_doc,
    }


def main() -> None:
    """
    CLI entrypoint for: python -m keyphraseminer.smoke_test
    """
    try:
        run_smoke_test(verbose=True)
    except LookupError as e:
        # Common case: NLTK data could not be downloaded (offline machine)
        print("\n[smoke_test] ERROR during keyphraseminer smoke test.")
        print(f"[smoke_test] Underlying error: {e}\n")
        print(
            "[smoke_test] It looks like NLTK data is missing.\n"
            "Try installing it with:\n\n"
            "    python -m nltk.downloader stopwords treebank averaged_perceptron_tagger_eng\n"
        )
        # Re-raise so CI / scripts still see a failure
        raise


if __name__ == "__main__":
    main()
