"""Custom exceptions for the templating context."""

from typing import Optional


class UnknownSectionError(ValueError):
    """
    Exception raised when a section key outside the resume schema is used.

    This is a programmer-visible contract violation, not a recoverable case:
    every caller is expected to pass one of the known section keys.

    Attributes:
        section_key: The unrecognized key
        expected: Keys that would have been accepted
    """

    def __init__(self, section_key: str, expected: Optional[tuple] = None):
        self.section_key = section_key
        self.expected = expected

        message = f"Unknown section key: {section_key!r}"
        if expected:
            message += f". Expected one of: {', '.join(expected)}"
        super().__init__(message)


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when stored resume data cannot be repaired into a document.

    Raised by the normalizer when a nested value has a type that cannot be
    coerced (e.g., a bullet stored as a number rather than an object).
    """

    pass
