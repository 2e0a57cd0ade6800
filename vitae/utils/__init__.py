"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Text tokenization
- Display formatting (dates, links, file names)
- Logging setup
- Timestamps
"""

from vitae.utils.timestamp import now_exact, today
from vitae.utils.token_processing import tokenize, unique

__all__ = ["now_exact", "today", "tokenize", "unique"]
