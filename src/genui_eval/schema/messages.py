"""Validators for each top-level message kind."""

from collections.abc import Hashable
from typing import Any

from .components import validate_component
from .values import as_mapping, id_key, is_present

STREAM_HEADER_KEYS = ("version",)
DATA_MODEL_UPDATE_KEYS = ("path", "contents")


def validate_stream_header(message: Any, errors: list[str]) -> None:
    data = as_mapping(message)
    if not is_present(data.get("version")):
        errors.append("StreamHeader must have a 'version' property.")
    for key in data:
        if key not in STREAM_HEADER_KEYS:
            errors.append(f"StreamHeader has unexpected property: {key}")


def validate_data_model_update(message: Any, errors: list[str]) -> None:
    data = as_mapping(message)
    # contents may be null; only absence is an error
    if "contents" not in data:
        errors.append("DataModelUpdate must have a 'contents' property.")
    for key in data:
        if key not in DATA_MODEL_UPDATE_KEYS:
            errors.append(f"DataModelUpdate has unexpected property: {key}")


def validate_begin_rendering(message: Any, errors: list[str]) -> None:
    if not is_present(as_mapping(message).get("root")):
        errors.append("BeginRendering message must have a 'root' property.")


def collect_component_ids(components: list[Any], errors: list[str]) -> set[Hashable]:
    """
    Build the ID universe for a message.

    Every repeated occurrence of an ID after the first is reported, so an
    ID declared k times yields k - 1 duplicate errors.
    """
    component_ids: set[Hashable] = set()
    for component in components:
        component_id = as_mapping(component).get("id")
        if not is_present(component_id):
            continue
        key = id_key(component_id)
        if key in component_ids:
            errors.append(f"Duplicate component ID found: {component_id}")
        component_ids.add(key)
    return component_ids


def validate_component_update(message: Any, errors: list[str]) -> None:
    """
    Validate a ComponentUpdate message.

    IDs are collected before any component is checked, so references to
    components declared later in the list resolve.
    """
    components = as_mapping(message).get("components")
    if not isinstance(components, list):
        errors.append("ComponentUpdate must have a 'components' array.")
        return

    component_ids = collect_component_ids(components, errors)
    for component in components:
        validate_component(component, component_ids, errors)
