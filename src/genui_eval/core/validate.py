"""Validation errors and Result-pattern payloads."""

from dataclasses import dataclass


class ValidationError(Exception):
    """Validation failed."""

    def __init__(self, kind: str, errors: list[str]) -> None:
        summary = errors[0] if errors else "unknown error"
        if len(errors) > 1:
            summary += f" (and {len(errors) - 1} more)"
        super().__init__(f"{kind} validation failed: {summary}")
        self.kind = kind
        self.errors = errors


@dataclass(frozen=True)
class ValidationReport:
    """Validation errors for one message (for Result pattern)."""

    kind: str
    errors: tuple[str, ...]

    @property
    def valid(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        return "\n".join(f"- {error}" for error in self.errors)
