"""NodeAttributes - A node's label and optional reference.

Equality is a one-level structural rule: labels compare exactly and
extracts compare through the shared null-aware comparator, which in turn
delegates to NodeId identity.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, TypeVar

from vargraph.graph.node_id import NodeId, is_equal

T = TypeVar("T")


def equals_manage_null(
    equals: Callable[[T, T], bool],
) -> Callable[[T | None, T | None], bool]:
    """Lift an equality function over optional values.

    None equals None, None never equals a value, and two values are
    compared with ``equals``.

    Args:
        equals: Equality for present values.

    Returns:
        Comparator accepting optional values.
    """

    def compare(x: T | None, y: T | None) -> bool:
        if x is not None and y is not None:
            return equals(x, y)
        return x is None and y is None

    return compare


extracts_equal = equals_manage_null(is_equal)


@dataclass(frozen=True, eq=False)
class NodeAttributes:
    """Label plus optional reference to another node.

    The reference may dangle or point at the node itself; neither is
    validated here.

    Attributes:
        label: Display text, compared case-sensitively.
        extract: Referenced node, or None.
    """

    label: str
    extract: NodeId | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.label, str):
            raise TypeError(f"label must be a string, got {type(self.label).__name__}")
        if self.extract is not None and not isinstance(self.extract, NodeId):
            raise TypeError(f"extract must be a NodeId or None, got {type(self.extract).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeAttributes):
            return NotImplemented
        return attributes_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.label, self.extract))

    def with_label(self, label: str) -> NodeAttributes:
        return replace(self, label=label)

    def with_extract(self, extract: NodeId | None) -> NodeAttributes:
        return replace(self, extract=extract)

    def to_dict(self) -> dict[str, Any]:
        """Encode as ``{"label": ..., "extract": id-text | None}``."""
        return {
            "label": self.label,
            "extract": self.extract.value if self.extract is not None else None,
        }

    @classmethod
    def from_dict(cls, data: object) -> NodeAttributes | None:
        """Decode from :meth:`to_dict` output.

        A missing or null ``extract`` decodes to no reference.

        Returns:
            NodeAttributes, or None when the record does not match the schema.
        """
        if not isinstance(data, dict):
            return None
        label = data.get("label")
        if not isinstance(label, str):
            return None
        raw_extract = data.get("extract")
        if raw_extract is None:
            return cls(label=label)
        extract = NodeId.parse(raw_extract)
        if extract is None:
            return None
        return cls(label=label, extract=extract)


def attributes_equal(attributes_a: NodeAttributes, attributes_b: NodeAttributes) -> bool:
    """Structural equality: same label and null-aware equal extracts."""
    return attributes_a.label == attributes_b.label and extracts_equal(
        attributes_a.extract, attributes_b.extract
    )


# Comparator for attributes-or-absent values; "both absent" counts as equal.
optional_attributes_equal = equals_manage_null(attributes_equal)


__all__ = [
    "NodeAttributes",
    "attributes_equal",
    "equals_manage_null",
    "extracts_equal",
    "optional_attributes_equal",
]
