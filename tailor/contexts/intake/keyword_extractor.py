"""
Keyword extraction for the Intake context.

Turns raw job description text into a weighted KeywordSet:

1. Tokenize (unicode normalization, lowercase, stopword/length/letter filters, stemming)
2. Count occurrences of every kept term (base weight)
3. Count configured multi-word phrases as their own terms, weighted by
   count * phrase_weight_multiplier
4. Add a one-time proper_noun_bonus to terms seen as product/technology names
   (mixed case, or capitalized mid-sentence)
5. Collect role phrases ("python engineer") for title derivation

Extraction is deterministic and linear in the input length. Terms keep the
order of their first appearance in the text.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from tailor.contexts.intake.logger import _log_debug, _log_info
from tailor.contexts.intake.patterns import (
    MAX_ROLE_MODIFIERS,
    ROLE_NOUNS,
    STOPWORDS,
    TECH_PHRASES,
)
from tailor.utils.token_processing import Token, Tokenizer

DEFAULT_MIN_TOKEN_LENGTH = 2
DEFAULT_PHRASE_WEIGHT_MULTIPLIER = 2.0
DEFAULT_PROPER_NOUN_BONUS = 1.0

_ROLE_NOUN_SET = frozenset(ROLE_NOUNS)


def build_tokenizer(
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
    use_stemming: bool = True,
    extra_stopwords: Iterable[str] = (),
) -> Tokenizer:
    """
    Build the tokenizer shared by keyword extraction and relevance scoring.

    Args:
        min_token_length: Minimum token length to keep
        use_stemming: Whether alphabetic tokens are Porter-stemmed
        extra_stopwords: Additional words to reject on top of STOPWORDS

    Returns:
        Configured Tokenizer
    """
    return Tokenizer(
        stopwords=tuple(STOPWORDS) + tuple(extra_stopwords),
        use_stemming=use_stemming,
        min_token_length=min_token_length,
    )


class KeywordSet(Mapping):
    """
    Weighted vocabulary extracted from one job description.

    Read-only mapping from normalized term to weight. Iteration follows first
    appearance in the source text. Also carries the tokenizer that produced
    the terms so candidate text can be normalized identically.

    Attributes:
        surface: Term -> first display form seen in the source
        phrases: Terms that are multi-word phrases (space-separated)
        role_phrases: Role phrase term -> occurrence count, in first-seen order
        role_surface: Role phrase term -> words of its first occurrence
        tokenizer: Tokenizer used for extraction
    """

    def __init__(
        self,
        weights: Dict[str, float],
        surface: Dict[str, str],
        phrases: Iterable[str] = (),
        role_phrases: Optional[Dict[str, int]] = None,
        role_surface: Optional[Dict[str, str]] = None,
        tokenizer: Optional[Tokenizer] = None,
    ):
        self._weights = dict(weights)
        self.surface = dict(surface)
        self.phrases = frozenset(phrases)
        self.role_phrases = dict(role_phrases or {})
        self.role_surface = dict(role_surface or {})
        self.tokenizer = tokenizer or build_tokenizer()

    @classmethod
    def empty(cls, tokenizer: Optional[Tokenizer] = None) -> "KeywordSet":
        return cls({}, {}, tokenizer=tokenizer)

    def __getitem__(self, term: str) -> float:
        return self._weights[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"KeywordSet({len(self)} terms, {len(self.phrases)} phrases)"

    @property
    def max_phrase_length(self) -> int:
        """Longest phrase in tokens (0 when there are no phrases)."""
        return max((len(phrase.split(" ")) for phrase in self.phrases), default=0)

    def display(self, term: str) -> str:
        """Display form for a term (falls back to the term itself)."""
        return self.surface.get(term, term)

    def top(self, n: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Terms sorted by descending weight, ties in first-appearance order.

        Args:
            n: Number of terms to return (all if None)
        """
        ranked = sorted(self._weights.items(), key=lambda item: -item[1])
        return ranked if n is None else ranked[:n]

    def display_role(self, role_phrase: str) -> str:
        """Display form for a role phrase ('senior backend developer')."""
        return self.role_surface.get(role_phrase, role_phrase)

    def role_phrase_weight(self, role_phrase: str) -> float:
        """Sum of keyword weights of the terms making up a role phrase."""
        return sum(self._weights.get(term, 0.0) for term in role_phrase.split(" "))


def _phrase_lookup(tokenizer: Tokenizer, phrases: Iterable[str]) -> Dict[str, str]:
    """Map phrase key -> display phrase, keeping only genuine multi-word phrases."""
    lookup = {}
    for phrase in phrases:
        key = tokenizer.phrase_key(phrase)
        if " " in key and key not in lookup:
            lookup[key] = phrase.strip().lower()
    return lookup


def _role_phrases(tokens: List[Token]) -> Tuple[Dict[str, int], Dict[str, List[Token]]]:
    """
    Find role phrases: a role noun with up to MAX_ROLE_MODIFIERS kept tokens
    immediately before it in the same sentence.

    Returns:
        (counts, first_tokens): space-joined terms -> occurrence count in
        first-seen order, and terms -> tokens of the first occurrence
    """
    counts: Dict[str, int] = {}
    first_tokens: Dict[str, List[Token]] = {}

    for index, token in enumerate(tokens):
        if not token.kept or token.word not in _ROLE_NOUN_SET:
            continue

        modifiers = []
        cursor = index
        while len(modifiers) < MAX_ROLE_MODIFIERS and cursor > 0:
            current = tokens[cursor]
            previous = tokens[cursor - 1]
            if current.sentence_start or not previous.kept:
                break
            modifiers.insert(0, previous)
            cursor -= 1

        if not modifiers:
            continue

        phrase_tokens = modifiers + [token]
        key = " ".join(t.term for t in phrase_tokens)
        counts[key] = counts.get(key, 0) + 1
        first_tokens.setdefault(key, phrase_tokens)

    return counts, first_tokens


def _role_word(token: Token, surface: Dict[str, str]) -> str:
    """Source form of a role phrase word, upgraded to its proper-noun form (AWS) if one was seen."""
    display = surface.get(token.term, "")
    return display if display.lower() == token.word else token.surface


def extract_keywords(
    jd_text: Optional[str],
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
    use_stemming: bool = True,
    phrase_weight_multiplier: float = DEFAULT_PHRASE_WEIGHT_MULTIPLIER,
    proper_noun_bonus: float = DEFAULT_PROPER_NOUN_BONUS,
    extra_stopwords: Iterable[str] = (),
    extra_phrases: Iterable[str] = (),
    tokenizer: Optional[Tokenizer] = None,
) -> KeywordSet:
    """
    Extract a weighted keyword set from job description text.

    Args:
        jd_text: Raw job description (None or whitespace yields an empty set)
        min_token_length: Minimum token length to keep
        use_stemming: Whether alphabetic tokens are Porter-stemmed
        phrase_weight_multiplier: Weight per occurrence of a configured phrase
        proper_noun_bonus: One-time bonus for terms seen as proper nouns
        extra_stopwords: Additional words to reject
        extra_phrases: Additional multi-word phrases to detect
        tokenizer: Prebuilt tokenizer (overrides the three tokenizer settings)

    Returns:
        KeywordSet mapping term -> weight

    Example:
        >>> keywords = extract_keywords("Seeking a Python engineer to build data pipelines")
        >>> keywords["python"]
        2.0
        >>> "data pipelin" in keywords.phrases
        True
    """
    if tokenizer is None:
        tokenizer = build_tokenizer(min_token_length, use_stemming, extra_stopwords)

    if not jd_text or not jd_text.strip():
        _log_debug("Empty job description, returning empty keyword set")
        return KeywordSet.empty(tokenizer)

    tokens = tokenizer.scan(jd_text)

    weights: Dict[str, float] = {}
    surface: Dict[str, str] = {}
    proper_terms = set()

    for token in tokens:
        if not token.kept:
            continue
        weights[token.term] = weights.get(token.term, 0.0) + 1.0
        if token.term not in surface or (token.looks_proper and token.term not in proper_terms):
            surface[token.term] = token.surface
        if token.looks_proper:
            proper_terms.add(token.term)

    # Multi-word phrases, matched over the full token stream
    lookup = _phrase_lookup(tokenizer, tuple(TECH_PHRASES) + tuple(extra_phrases))
    lengths = sorted({len(key.split(" ")) for key in lookup})
    phrase_counts: Dict[str, int] = {}
    for n in lengths:
        for key in tokenizer.phrase_ngrams(tokens, n):
            if key in lookup:
                phrase_counts[key] = phrase_counts.get(key, 0) + 1

    for key, count in phrase_counts.items():
        weights[key] = weights.get(key, 0.0) + count * phrase_weight_multiplier
        surface.setdefault(key, lookup[key])

    for term in proper_terms:
        weights[term] += proper_noun_bonus

    # Stems collide across word forms (engineering/engineer), so role phrases
    # keep the words of their first occurrence
    role_phrases, role_tokens = _role_phrases(tokens)
    role_surface = {
        key: " ".join(_role_word(token, surface) for token in occurrence)
        for key, occurrence in role_tokens.items()
    }

    _log_info(
        f"Extracted {len(weights)} keywords ({len(phrase_counts)} phrases, "
        f"{len(proper_terms)} proper nouns, {len(role_phrases)} role phrases) "
        f"from {len(tokens)} tokens"
    )

    return KeywordSet(
        weights,
        surface,
        phrases=phrase_counts.keys(),
        role_phrases=role_phrases,
        role_surface=role_surface,
        tokenizer=tokenizer,
    )
