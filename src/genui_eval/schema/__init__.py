"""
Protocol Message Validation
Structural checks and content matching for generated UI messages.
"""

from .kinds import MessageKind
from .matcher import ContentMatcher, MatchResult, find_text
from .components import COMPONENT_RULES, ComponentRule, validate_component
from .messages import (
    collect_component_ids,
    validate_begin_rendering,
    validate_component_update,
    validate_data_model_update,
    validate_stream_header,
)
from .dispatcher import MessageValidator, check_message, ensure_valid, validate_message

__all__ = [
    "MessageKind",
    "ContentMatcher",
    "MatchResult",
    "find_text",
    "COMPONENT_RULES",
    "ComponentRule",
    "validate_component",
    "collect_component_ids",
    "validate_begin_rendering",
    "validate_component_update",
    "validate_data_model_update",
    "validate_stream_header",
    "MessageValidator",
    "check_message",
    "ensure_valid",
    "validate_message",
]
