"""Per-type structural validation of UI components.

Each component carries exactly one entry in ``componentProperties``; its key
is the component type and its value the property bag. Required properties
and any extra structural checks are looked up in ``COMPONENT_RULES``.
"""

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any

from .values import as_mapping, id_key, is_present


class ComponentCheck:
    """Validation context for a single component."""

    def __init__(
        self,
        component_id: Any,
        component_type: str,
        properties: dict[str, Any],
        all_ids: set[Hashable],
        errors: list[str],
    ):
        self.component_id = component_id
        self.component_type = component_type
        self.properties = properties
        self.all_ids = all_ids
        self.errors = errors

    def error(self, message: str) -> None:
        self.errors.append(message)

    def check_required(self, props: Iterable[str]) -> None:
        """Report every required property whose key is absent."""
        for prop in props:
            if prop not in self.properties:
                self.error(
                    f"Component '{self.component_id}' of type '{self.component_type}' "
                    f"is missing required property '{prop}'."
                )

    def check_refs(self, refs: Iterable[Any]) -> None:
        """Report every non-empty reference that names no component in the message."""
        for ref in refs:
            if is_present(ref) and id_key(ref) not in self.all_ids:
                self.error(
                    f"Component '{self.component_id}' references non-existent component ID '{ref}'."
                )


StructureCheck = Callable[[ComponentCheck], None]


@dataclass(frozen=True)
class ComponentRule:
    """Required properties and optional structural check for one component type."""

    required: tuple[str, ...] = ()
    check: StructureCheck | None = None


def check_children(check: ComponentCheck) -> None:
    """Row/Column/List: exactly one of explicitList or template."""
    children = check.properties.get("children")
    if not is_present(children):
        return

    children = as_mapping(children)
    explicit_list = children.get("explicitList")
    template = children.get("template")
    has_explicit = is_present(explicit_list)
    has_template = is_present(template)

    if has_explicit == has_template:
        check.error(
            f"Component '{check.component_id}' must have either 'explicitList' or 'template' "
            "in children, but not both or neither."
        )
    if has_explicit:
        check.check_refs(explicit_list if isinstance(explicit_list, list) else [explicit_list])
    if has_template:
        check.check_refs([as_mapping(template).get("componentId")])


def check_card(check: ComponentCheck) -> None:
    check.check_refs([check.properties.get("child")])


def check_tabs(check: ComponentCheck) -> None:
    """Every tab item needs a title and a child that exists."""
    tab_items = check.properties.get("tabItems")
    if not isinstance(tab_items, list):
        return

    for item in tab_items:
        tab = as_mapping(item)
        if not is_present(tab.get("title")):
            check.error(f"Tab item in component '{check.component_id}' is missing a 'title'.")
        if not is_present(tab.get("child")):
            check.error(f"Tab item in component '{check.component_id}' is missing a 'child'.")
        check.check_refs([tab.get("child")])


def check_modal(check: ComponentCheck) -> None:
    check.check_refs(
        [check.properties.get("entryPointChild"), check.properties.get("contentChild")]
    )


_CONTAINER = ComponentRule(required=("children",), check=check_children)

COMPONENT_RULES: dict[str, ComponentRule] = {
    "Heading": ComponentRule(required=("text",)),
    "Text": ComponentRule(required=("text",)),
    "Image": ComponentRule(required=("url",)),
    "Video": ComponentRule(required=("url",)),
    "AudioPlayer": ComponentRule(required=("url",)),
    "TextField": ComponentRule(required=("label",)),
    "DateTimeInput": ComponentRule(required=("value",)),
    "MultipleChoice": ComponentRule(required=("selections",)),
    "Slider": ComponentRule(required=("value",)),
    "CheckBox": ComponentRule(required=("value", "label")),
    "Row": _CONTAINER,
    "Column": _CONTAINER,
    "List": _CONTAINER,
    "Card": ComponentRule(required=("child",), check=check_card),
    "Tabs": ComponentRule(required=("tabItems",), check=check_tabs),
    "Modal": ComponentRule(required=("entryPointChild", "contentChild"), check=check_modal),
    "Button": ComponentRule(required=("label", "action")),
    "Divider": ComponentRule(),
}


def validate_component(component: Any, all_ids: set[Hashable], errors: list[str]) -> None:
    """
    Validate one component against its type's rule.

    Errors are appended to ``errors`` in check order. A missing id, missing
    property bag or a bag without exactly one type stops the checks for
    this component.

    Args:
        component: Component object from the message
        all_ids: Every component ID declared in the message
        errors: Accumulator shared across the message
    """
    component = as_mapping(component)
    component_id = component.get("id")
    if not is_present(component_id):
        errors.append("Component is missing an 'id'.")
        return

    component_properties = component.get("componentProperties")
    if not is_present(component_properties):
        errors.append(f"Component '{component_id}' is missing 'componentProperties'.")
        return

    component_types = list(as_mapping(component_properties))
    if len(component_types) != 1:
        errors.append(
            f"Component '{component_id}' must have exactly one property in "
            f"'componentProperties', but found {len(component_types)}."
        )
        return

    component_type = component_types[0]
    rule = COMPONENT_RULES.get(component_type)
    if rule is None:
        errors.append(f"Unknown component type '{component_type}' in component '{component_id}'.")
        return

    check = ComponentCheck(
        component_id,
        component_type,
        as_mapping(component_properties[component_type]),
        all_ids,
        errors,
    )
    check.check_required(rule.required)
    if rule.check is not None:
        rule.check(check)
