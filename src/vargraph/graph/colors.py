"""GraphColor - Variant tags used to tell compared graphs apart.

A tag is independent of how it is rendered; ``to_css_color`` is only a
pass-through for presentation layers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class GraphColor:
    """A variant tag.

    Attributes:
        name: Tag text, doubling as its CSS color.
    """

    name: str

    def to_css_color(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


SAMPLES: tuple[GraphColor, ...] = tuple(
    GraphColor(name) for name in ("red", "green", "blue", "yellow", "orange", "purple")
)

# "No diff variant assigned": the baseline editing target.
DEFAULT = GraphColor("transparent")


def allocate_diff_color(
    assigned: Iterable[GraphColor],
    samples: Sequence[GraphColor] = SAMPLES,
) -> GraphColor | None:
    """Pick the first sample not already assigned.

    Args:
        assigned: Colors held by currently active diff variants.
        samples: Ordered palette to allocate from.

    Returns:
        The allocated color, or None when every sample is taken.
    """
    taken = set(assigned)
    for color in samples:
        if color not in taken:
            return color
    return None


def palette_from_config(config: dict) -> tuple[tuple[GraphColor, ...], GraphColor]:
    """Build (samples, default) from the ``[palette]`` config section."""
    palette = config.get("palette", {})
    names = palette.get("samples") or [c.name for c in SAMPLES]
    default = palette.get("default") or DEFAULT.name
    return tuple(GraphColor(str(name)) for name in names), GraphColor(str(default))


def swatch_colors(
    colors: Sequence[GraphColor],
    is_present: Callable[[GraphColor], bool],
) -> list[GraphColor]:
    """Colors to mark on a subgroup's swatch strip.

    When every active variant is present nothing is marked, so nodes all
    variants agree on stay unmarked.
    """
    if all(is_present(color) for color in colors):
        return []
    return [color for color in colors if is_present(color)]


__all__ = [
    "GraphColor",
    "SAMPLES",
    "DEFAULT",
    "allocate_diff_color",
    "palette_from_config",
    "swatch_colors",
]
