"""NodeConfig: the reserved labels and ids ValueNode reports.

NodeConfig is a frozen (immutable) dataclass. Every ValueNode carries one and
hands it to the child nodes it creates, so a whole traversal shares the same
labels.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["NodeConfig"]


@dataclass(frozen=True, slots=True)
class NodeConfig:
    """Immutable labelling configuration for ValueNode.

    Attributes:
        anonymous_label: Name shown for nameless callables and for types whose
            constructor cannot be resolved.
        null_type_label: Type label of values that have no supertype.
        prototype_label: Name of the supertype-link entry and sub-node.
        prototype_id: Id of the supertype-link entry and sub-node.
        field_id_prefix: Prefix of positional field ids (``f0``, ``f1``, ...).
        qualify_child_names: When True, child nodes are named
            ``"<parent name>.<key>"``; when False, just ``"<key>"``.
    """

    anonymous_label: str = "<anon>"
    null_type_label: str = "<null>"
    prototype_label: str = "<prototype>"
    prototype_id: str = "proto"
    field_id_prefix: str = "f"
    qualify_child_names: bool = True

    def __post_init__(self) -> None:
        for attr in (
            "anonymous_label",
            "null_type_label",
            "prototype_label",
            "prototype_id",
            "field_id_prefix",
        ):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value:
                msg = f"{attr} must be a non-empty string, got {value!r}"
                raise ValueError(msg)
        if re.fullmatch(re.escape(self.field_id_prefix) + r"\d+", self.prototype_id):
            msg = (
                f"prototype_id {self.prototype_id!r} collides with field ids "
                f"using prefix {self.field_id_prefix!r}"
            )
            raise ValueError(msg)

    def field_id(self, index: int) -> str:
        """Return the positional id of the field at ``index``."""
        return f"{self.field_id_prefix}{index}"
