"""
Standardized text tokenization utilities.

Normalizes free text into comparable tokens for keyword overlap scoring:
- Lowercasing
- Splitting on anything that is not a lowercase letter, digit, "+", "#" or "."
  (so "c++", "c#" and "node.js" survive as single tokens)
- Minimum length filtering
- Stopword removal (English filler plus domain-generic job posting words)

There is no stemming or synonym expansion: two texts match only
on literal token overlap.

Usage:
    from vitae.utils.token_processing import tokenize, unique

    tokens = tokenize("Built weekly KPI tracker using SQL")
    # ['built', 'weekly', 'kpi', 'tracker', 'sql']

    # Custom configuration
    tokenizer = Tokenizer(custom_stopwords={"intern"}, min_token_length=3)
    tokens = tokenizer("Operations intern")
"""

import re
from typing import Iterable, List, Optional, Set, TypeVar

T = TypeVar("T")

# English filler and words that appear in nearly every job posting
STOPWORDS = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "this",
        "you",
        "your",
        "our",
        "are",
        "was",
        "were",
        "will",
        "have",
        "has",
        "had",
        "from",
        "into",
        "about",
        "over",
        "across",
        "through",
        "using",
        "used",
        "use",
        "role",
        "team",
        "teams",
        "work",
        "working",
        "experience",
        "preferred",
        "requirements",
        "responsibilities",
        "candidate",
        "ability",
        "skills",
    }
)

TOKEN_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9+#.]+")


class Tokenizer:
    """
    Configurable tokenizer with a fixed normalization pipeline.

    Pipeline order:
    1. Lowercase
    2. Split on separator runs
    3. Trim
    4. Min length filtering
    5. Stopword removal

    The tokenizer is callable so it can be passed wherever a
    ``Callable[[str], list[str]]`` is expected.
    """

    def __init__(
        self,
        custom_stopwords: Optional[Set[str]] = None,
        use_stopwords: bool = True,
        min_token_length: int = 2,
    ):
        """
        Initialize tokenizer.

        Args:
            custom_stopwords: Stopword set replacing the default STOPWORDS
            use_stopwords: Whether to remove stopwords at all
            min_token_length: Minimum token length to keep
        """
        self.use_stopwords = use_stopwords
        self.min_token_length = min_token_length

        if use_stopwords:
            self._stopwords = frozenset(custom_stopwords) if custom_stopwords else STOPWORDS
        else:
            self._stopwords = frozenset()

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text with the normalization pipeline.

        Duplicates are kept; callers that need uniqueness use unique().

        Returns:
            List of normalized tokens (empty for empty input)
        """
        if not text:
            return []

        tokens = (token.strip() for token in TOKEN_SEPARATOR_PATTERN.split(text.lower()))
        return [
            token
            for token in tokens
            if len(token) >= self.min_token_length and token not in self._stopwords
        ]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def get_config_dict(self) -> dict:
        """Return tokenizer settings as a dictionary."""
        return {
            "use_stopwords": self.use_stopwords,
            "stopword_count": len(self._stopwords),
            "min_token_length": self.min_token_length,
        }


_DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> List[str]:
    """Tokenize text with the default tokenizer configuration."""
    return _DEFAULT_TOKENIZER.tokenize(text)


def unique(values: Iterable[T]) -> List[T]:
    """Deduplicate values, keeping first-seen order."""
    return list(dict.fromkeys(values))
