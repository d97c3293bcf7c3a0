"""NodeId - Opaque node identity.

Identity is carried by a random token generated once per node. Two ids
are equal only when they carry the same token; nothing about the node's
label or position participates in identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class NodeId:
    """Opaque identifier for a graph node.

    Attributes:
        value: Token text. Also used as the node key in encoded graphs.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"NodeId text must be a non-empty string, got {self.value!r}")

    @classmethod
    def create_unique(cls) -> NodeId:
        """Create a fresh id.

        Collisions are not detected; random UUIDs make them an accepted risk.
        """
        return cls(str(uuid4()))

    @classmethod
    def parse(cls, text: object) -> NodeId | None:
        """Rebuild an id from its text form, or None if the text is unusable."""
        if not isinstance(text, str) or not text:
            return None
        return cls(text)

    def __str__(self) -> str:
        return self.value


def stringify(node_id: NodeId) -> str:
    """Deterministic text rendering for display and fallback labels."""
    return node_id.value


def is_equal(node_id_a: NodeId, node_id_b: NodeId) -> bool:
    """Identity comparison between two node ids."""
    return node_id_a.value == node_id_b.value


__all__ = ["NodeId", "stringify", "is_equal"]
