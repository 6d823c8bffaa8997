"""
Relevance scoring of candidate text against a job keyword set.

A candidate (bullet, skill, title) is tokenized with the same tokenizer that
built the keyword set, then scored as the sum of keyword weights over every
matching token occurrence, plus every occurrence of a multi-word keyword
phrase. Scores are NOT length-normalized: more genuine keyword hits rank
higher, and short text is neither penalized nor boosted.
"""

from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence, Tuple

from tailor.contexts.intake.keyword_extractor import KeywordSet, build_tokenizer
from tailor.utils.token_processing import Tokenizer


def _phrase_terms(keywords: Mapping) -> Tuple[frozenset, int]:
    """Phrase terms and the longest phrase length (in tokens) of a keyword mapping."""
    if isinstance(keywords, KeywordSet):
        return keywords.phrases, keywords.max_phrase_length
    phrases = frozenset(term for term in keywords if " " in term)
    return phrases, max((len(p.split(" ")) for p in phrases), default=0)


def score(text: Optional[str], keywords: Mapping, tokenizer: Optional[Tokenizer] = None) -> float:
    """
    Score a piece of candidate text against a keyword set.

    Args:
        text: Candidate text (None or empty scores 0)
        keywords: KeywordSet, or any mapping of normalized term -> weight
        tokenizer: Tokenizer override (defaults to the keyword set's own)

    Returns:
        Sum of matched keyword weights (0.0 when nothing matches)

    Example:
        >>> keywords = extract_keywords("Python engineer for data pipelines")
        >>> score("Built Python data pipelines", keywords) > score("Led hiring", keywords)
        True
    """
    if not text or not keywords:
        return 0.0

    if tokenizer is None:
        tokenizer = keywords.tokenizer if isinstance(keywords, KeywordSet) else build_tokenizer()

    tokens = tokenizer.scan(text)
    total = 0.0

    for token in tokens:
        if token.kept and token.term in keywords:
            total += keywords[token.term]

    phrases, max_length = _phrase_terms(keywords)
    for n in range(2, max_length + 1):
        for key in tokenizer.phrase_ngrams(tokens, n):
            if key in phrases:
                total += keywords[key]

    return total


def rank_by_score(
    items: Sequence[Any],
    keywords: Mapping,
    text_of: Callable[[Any], str] = str,
    tokenizer: Optional[Tokenizer] = None,
) -> List[Tuple[int, Any, float]]:
    """
    Rank items by descending score; equal scores keep their original order.

    Args:
        items: Candidates in original order
        keywords: Keyword mapping to score against
        text_of: Extracts the text to score from an item
        tokenizer: Tokenizer override

    Returns:
        List of (original_index, item, score) triples, best first
    """
    scored = [
        (index, item, score(text_of(item), keywords, tokenizer)) for index, item in enumerate(items)
    ]
    # sorted() is stable, so ties stay in original order
    return sorted(scored, key=lambda entry: -entry[2])
