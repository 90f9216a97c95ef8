"""Message validation entry points."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from returns.result import Result, Success, Failure

from ..core import get_logger, ValidationError, ValidationReport
from .kinds import MessageKind
from .matcher import ContentMatcher
from .messages import (
    validate_begin_rendering,
    validate_component_update,
    validate_data_model_update,
    validate_stream_header,
)

logger = get_logger(__name__)

_VALIDATORS: dict[MessageKind, Callable[[Any, list[str]], None]] = {
    MessageKind.STREAM_HEADER: validate_stream_header,
    MessageKind.COMPONENT_UPDATE: validate_component_update,
    MessageKind.DATA_MODEL_UPDATE: validate_data_model_update,
    MessageKind.BEGIN_RENDERING: validate_begin_rendering,
}


def _kind_name(kind: str | MessageKind) -> str:
    return kind.value if isinstance(kind, MessageKind) else str(kind)


def validate_message(
    message: Any,
    kind: str | MessageKind,
    matchers: Iterable[ContentMatcher] | None = None,
) -> list[str]:
    """
    Validate a parsed protocol message.

    Args:
        message: Parsed JSON message
        kind: Message kind (or its schema file name)
        matchers: Content expectations, checked only for component updates

    Returns:
        Error strings in discovery order; empty when the message is valid
    """
    errors: list[str] = []

    resolved = MessageKind.resolve(kind)
    if resolved is None:
        errors.append(f"Unknown schema for validation: {_kind_name(kind)}")
        return errors

    _VALIDATORS[resolved](message, errors)

    if resolved is MessageKind.COMPONENT_UPDATE and matchers:
        for matcher in matchers:
            result = matcher.validate(message)
            if not result.success:
                errors.append(result.error)

    return errors


def check_message(
    message: Any,
    kind: str | MessageKind,
    matchers: Iterable[ContentMatcher] | None = None,
) -> Result[None, ValidationReport]:
    """
    Validate a message (Result pattern version).

    Returns:
        Success(None), or Failure carrying the report of all errors
    """
    errors = validate_message(message, kind, matchers)
    if errors:
        return Failure(ValidationReport(_kind_name(kind), tuple(errors)))
    return Success(None)


def ensure_valid(
    message: Any,
    kind: str | MessageKind,
    matchers: Iterable[ContentMatcher] | None = None,
) -> None:
    """
    Validate a message, raising on any error.

    Raises:
        ValidationError: Carrying every error in ``errors``
    """
    errors = validate_message(message, kind, matchers)
    if errors:
        raise ValidationError(_kind_name(kind), errors)


class MessageValidator:
    """Validator bound to one message kind and its content expectations."""

    def __init__(
        self,
        kind: str | MessageKind,
        matchers: Sequence[ContentMatcher] = (),
    ):
        self.kind = kind
        self.matchers = tuple(matchers)

    def validate(self, message: Any) -> list[str]:
        errors = validate_message(message, self.kind, self.matchers)
        logger.debug(
            "message_validated",
            kind=_kind_name(self.kind),
            matchers=len(self.matchers),
            errors=len(errors),
        )
        return errors

    def check(self, message: Any) -> Result[None, ValidationReport]:
        return check_message(message, self.kind, self.matchers)

    def __repr__(self) -> str:
        return f"MessageValidator(kind={_kind_name(self.kind)!r}, matchers={len(self.matchers)})"
