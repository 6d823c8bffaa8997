"""
Standardized text tokenization utilities.

Provides configurable tokenization with optional normalization steps:
- Unicode normalization
- Stopword removal (caller-supplied list)
- Stemming (NLTK Porter stemmer, alphabetic tokens only)
- Minimum length and letter-content filtering
- N-gram generation for phrase lookup

Designed to be domain-agnostic - all domain-specific word lists are passed in,
not hardcoded. The same Tokenizer instance must be used for both sides of a
comparison so that terms line up.

Usage:
    from tailor.utils.token_processing import Tokenizer

    tokenizer = Tokenizer(stopwords={"the", "a"})
    tokens = tokenizer.tokenize("Built the data pipelines in C++")
    # ['built', 'data', 'pipelin', 'c++']
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from nltk.stem import PorterStemmer
from nltk.util import ngrams

from tailor.utils.text_processing import normalize_unicode

# Word-ish tokens: keeps c++, c#, node.js, 3d, ec2 intact. A trailing sentence
# period is never consumed because a dot must be followed by another character.
TOKEN_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9+#]*(?:\.[A-Za-z0-9][A-Za-z0-9+#]*)*")

# Characters in the gap between two tokens that end a sentence
SENTENCE_BREAK_CHARS = frozenset(".!?:;\n")


@dataclass(frozen=True)
class Token:
    """
    A single token with enough context for keyword heuristics.

    Attributes:
        term: Normalized form used for matching (lowercased, possibly stemmed)
        word: Lowercased unstemmed form
        surface: Form as written in the source text
        position: Index in the full token stream (before filtering)
        sentence_start: True if the token opens a sentence or line
        kept: False if the token was rejected by stopword/length/letter filters
    """

    term: str
    word: str
    surface: str
    position: int
    sentence_start: bool
    kept: bool

    @property
    def looks_proper(self) -> bool:
        """
        Heuristic for product/technology names.

        Mixed or upper case anywhere past the first character (PyTorch, AWS)
        always counts; a leading capital only counts mid-sentence.
        """
        if not any(c.isalpha() for c in self.surface):
            return False
        if any(c.isupper() for c in self.surface[1:]):
            return True
        return self.surface[0].isupper() and not self.sentence_start


class Tokenizer:
    """
    Configurable tokenizer with normalization pipeline.

    Pipeline order:
    1. Unicode normalization
    2. Tokenization (TOKEN_PATTERN)
    3. Lowercase
    4. Stopword / min length / letter-content filtering (marks tokens as not kept)
    5. Stemming of alphabetic tokens

    Runs in time linear in the input length: one regex pass with no
    backtracking-prone constructs plus constant work per token.

    The tokenizer is callable, returning the kept terms.
    """

    def __init__(
        self,
        stopwords: Optional[Iterable[str]] = None,
        use_stemming: bool = True,
        min_token_length: int = 2,
    ):
        """
        Initialize tokenizer.

        Args:
            stopwords: Lowercased words to reject (empty if None)
            use_stemming: Whether to apply Porter stemming to alphabetic tokens
            min_token_length: Minimum token length to keep
        """
        self.stopwords = frozenset(w.lower() for w in (stopwords or ()))
        self.use_stemming = use_stemming
        self.min_token_length = min_token_length
        self._stemmer = PorterStemmer() if use_stemming else None
        self._stem_cache: dict[str, str] = {}

    def _normalize_word(self, word: str) -> str:
        """Stem purely alphabetic words; leave c++, node.js, ec2 untouched."""
        if self._stemmer is None or not word.isalpha():
            return word
        stem = self._stem_cache.get(word)
        if stem is None:
            stem = self._stemmer.stem(word)
            self._stem_cache[word] = stem
        return stem

    def _keep(self, word: str) -> bool:
        """Token policy: long enough, not a stopword, contains a letter."""
        if len(word) < self.min_token_length:
            return False
        if word in self.stopwords:
            return False
        return any(c.isalpha() for c in word)

    def scan(self, text: str) -> List[Token]:
        """
        Tokenize text into Token records, including rejected tokens.

        Rejected tokens are returned with kept=False so callers can reason
        about adjacency and phrases over the full stream.

        Args:
            text: Raw text

        Returns:
            List of Token in source order
        """
        if not text:
            return []

        text = normalize_unicode(text)
        tokens = []
        prev_end = 0

        for position, match in enumerate(TOKEN_PATTERN.finditer(text)):
            surface = match.group(0)
            gap = text[prev_end : match.start()]
            sentence_start = position == 0 or any(c in SENTENCE_BREAK_CHARS for c in gap)
            prev_end = match.end()

            word = surface.lower()
            tokens.append(
                Token(
                    term=self._normalize_word(word),
                    word=word,
                    surface=surface,
                    position=position,
                    sentence_start=sentence_start,
                    kept=self._keep(word),
                )
            )

        return tokens

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text with full normalization pipeline.

        Returns:
            List of normalized kept terms
        """
        return [token.term for token in self.scan(text) if token.kept]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def phrase_key(self, phrase: str) -> str:
        """
        Normalize a multi-word phrase to its lookup key.

        All tokens participate (stopwords included) so that phrase keys line
        up with n-grams built by phrase_ngrams().

        Example:
            >>> Tokenizer().phrase_key("Machine Learning")
            'machin learn'
        """
        return " ".join(token.term for token in self.scan(phrase))

    @staticmethod
    def phrase_ngrams(tokens: List[Token], n: int) -> List[str]:
        """
        Build space-joined n-gram keys over the full token stream.

        N-grams never cross a sentence boundary.
        """
        keys = []
        for gram in ngrams(tokens, n):
            if any(token.sentence_start for token in gram[1:]):
                continue
            keys.append(" ".join(token.term for token in gram))
        return keys

    def get_config_dict(self) -> dict:
        """Return tokenizer settings as a dictionary."""
        return {
            "stopwords": len(self.stopwords),
            "use_stemming": self.use_stemming,
            "min_token_length": self.min_token_length,
        }
