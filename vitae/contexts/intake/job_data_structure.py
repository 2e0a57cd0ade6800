"""
Job description data structure for the Intake context.

Provides the JobDescription class that represents a pasted job description
in the two forms the Targeting context compares against: a lower-cased raw
string (for substring checks) and a deduplicated token set (for overlap).
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from vitae.utils.token_processing import tokenize, unique


@dataclass(frozen=True)
class JobDescription:
    """
    Job description prepared for matching.

    Built once per match request and shared by every bullet comparison.

    Attributes:
        raw_text: Text exactly as pasted
        lowered: raw_text lower-cased, for substring checks
        tokens: Deduplicated tokens in first-seen order
        token_set: The same tokens as a set, for membership checks
    """

    raw_text: str
    lowered: str
    tokens: Tuple[str, ...] = ()
    token_set: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_text(cls, text: str) -> "JobDescription":
        """
        Prepare pasted job description text.

        Empty or whitespace-only text yields an empty token set, not an error.
        """
        text = text or ""
        tokens = tuple(unique(tokenize(text)))
        return cls(raw_text=text, lowered=text.lower(), tokens=tokens, token_set=frozenset(tokens))

    def contains_phrase(self, phrase: str) -> bool:
        """Case-insensitive substring check against the raw text."""
        return bool(phrase) and phrase.lower() in self.lowered

    def shares_token_with(self, text: str) -> bool:
        """True when any token of text appears in this description's token set."""
        return any(token in self.token_set for token in tokenize(text))

    @property
    def is_empty(self) -> bool:
        return not self.tokens
