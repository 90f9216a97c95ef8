"""Content matcher for generated component trees."""

from dataclasses import dataclass
from typing import Any

from .values import as_mapping, is_present

MISSING_COMPONENTS_ERROR = 'ComponentUpdate message must have a "components" array.'


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one content expectation."""

    success: bool
    error: str | None = None


@dataclass(frozen=True)
class ContentMatcher:
    """
    Expectation that a ComponentUpdate contains a given component.

    Optionally the component must carry a property, and that property must
    contain some text (case-insensitive, anywhere in its nested value).

    Examples:
        >>> matcher = ContentMatcher("Button", "label", "sign in")
        >>> matcher.validate({"components": [
        ...     {"id": "b1", "componentProperties": {"Button": {"label": "Sign In"}}}
        ... ]}).success
        True
    """

    component_name: str
    property_name: str | None = None
    match_text: str | None = None

    @classmethod
    def parse(cls, spec: str) -> "ContentMatcher":
        """
        Build a matcher from ``Component[:property[:text]]``.

        Raises:
            ValueError: If the component name is empty
        """
        parts = spec.split(":", 2)
        name = parts[0].strip()
        if not name:
            raise ValueError(f"Matcher needs a component name: {spec!r}")
        prop = parts[1].strip() if len(parts) > 1 and parts[1].strip() else None
        text = parts[2] if len(parts) > 2 and parts[2] else None
        return cls(name, prop, text)

    def validate(self, message: Any) -> MatchResult:
        """Check the expectation against a whole ComponentUpdate message."""
        components = as_mapping(message).get("components")
        if not isinstance(components, list):
            return MatchResult(success=False, error=MISSING_COMPONENTS_ERROR)

        for component in components:
            component_props = as_mapping(as_mapping(component).get("componentProperties"))
            if not is_present(component_props.get(self.component_name)):
                continue

            if not self.property_name:
                # Component found, no property check needed
                return MatchResult(success=True)

            properties = as_mapping(component_props[self.component_name])
            value = properties.get(self.property_name)
            if not is_present(value):
                continue

            if not self.match_text:
                return MatchResult(success=True)

            if find_text(value, self.match_text):
                return MatchResult(success=True)

        return MatchResult(success=False, error=self.describe_failure())

    def describe_failure(self) -> str:
        error = f"Failed to find component '{self.component_name}'"
        if self.property_name:
            error += f" with property '{self.property_name}'"
        if self.match_text:
            error += f" containing text '{self.match_text}'"
        return error + "."

    def __str__(self) -> str:
        parts = [self.component_name]
        if self.property_name or self.match_text:
            parts.append(self.property_name or "")
        if self.match_text:
            parts.append(self.match_text)
        return ":".join(parts)


def find_text(value: Any, text: str) -> bool:
    """
    Case-insensitive substring search over a JSON value.

    Strings are searched directly; objects and arrays match if any of
    their immediate values match, recursively. Other scalars never match.
    """
    if isinstance(value, str):
        return text.lower() in value.lower()
    if isinstance(value, dict):
        return any(find_text(item, text) for item in value.values())
    if isinstance(value, list):
        return any(find_text(item, text) for item in value)
    return False
