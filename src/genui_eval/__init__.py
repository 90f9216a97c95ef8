"""
GenUI Eval
Validation and content matching for generated UI protocol messages.
"""

from .schema import (
    ContentMatcher,
    MatchResult,
    MessageKind,
    MessageValidator,
    check_message,
    ensure_valid,
    validate_message,
)

__version__ = "0.1.0"

__all__ = [
    "ContentMatcher",
    "MatchResult",
    "MessageKind",
    "MessageValidator",
    "check_message",
    "ensure_valid",
    "validate_message",
]
