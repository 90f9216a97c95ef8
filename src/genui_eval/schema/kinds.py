"""Protocol message kinds."""

from enum import Enum


class MessageKind(str, Enum):
    """Top-level protocol message kinds."""

    STREAM_HEADER = "stream_header"
    COMPONENT_UPDATE = "component_update"
    DATA_MODEL_UPDATE = "data_model_update"
    BEGIN_RENDERING = "begin_rendering"

    @classmethod
    def resolve(cls, name: "str | MessageKind") -> "MessageKind | None":
        """
        Look up a kind by name.

        Schema file names such as ``component_update.json`` are accepted
        as aliases for the bare kind name.

        Returns:
            The matching kind, or None if the name is unknown
        """
        if isinstance(name, MessageKind):
            return name
        if not isinstance(name, str):
            return None
        key = name.removesuffix(".json")
        try:
            return cls(key)
        except ValueError:
            return None
