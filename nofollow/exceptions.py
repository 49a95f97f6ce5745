"""
Custom exceptions for the nofollow link annotator.

Error philosophy:
  - ParseError     → FAIL HARD: the input could not be parsed at all, no output.
  - Parser fallback → NON-FATAL: the next parser is tried, warning logged.
  - Missing href   → NON-FATAL: the anchor is skipped and reported.

Everything short of a hard parse failure degrades gracefully, so callers only
ever need to catch ParseError (or the NoFollowError base).
"""

from typing import Optional


class NoFollowError(Exception):
    """Base exception for all nofollow errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# --- FAIL HARD: nothing is returned ---

class ParseError(NoFollowError):
    """
    Raised when the HTML cannot be parsed by any available parser.

    Malformed-but-recoverable markup (unclosed tags and the like) never
    raises this; only a total failure of the parser chain does.
    """

    def __init__(
        self,
        message: str,
        attempts: Optional[list[tuple[str, str]]] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        # (parser name, error text) for every parser that was tried
        self.attempts = attempts or []
        if self.attempts:
            self.details.setdefault(
                "attempts", [{"parser": p, "error": e} for p, e in self.attempts]
            )

    def to_response(self) -> dict:
        """Convert to a plain dict for logging or API error payloads."""
        return {
            "error": "ParseError",
            "message": self.message,
            "attempts": [{"parser": p, "error": e} for p, e in self.attempts],
            "details": self.details
        }


MalformedInputError = ParseError
