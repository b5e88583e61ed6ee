"""Border property identities and the shared edge/facet tables.

Every tracked property is one of four kinds:

    border                      SHORTHAND
    border-<edge>               EDGE
    border-<facet>              FACET
    border-<edge>-<facet>       LONGHAND

Edges are always ordered (top, right, bottom, left) and facets
(width, style, color).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Edge(Enum):
    """One side of the box, in shorthand order."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Facet(Enum):
    """One sub-property of a border, in shorthand order."""

    WIDTH = "width"
    STYLE = "style"
    COLOR = "color"


class Kind(Enum):
    """Shape of a tracked border property name."""

    SHORTHAND = "shorthand"
    EDGE = "edge"
    FACET = "facet"
    LONGHAND = "longhand"


EDGES: tuple[Edge, ...] = tuple(Edge)
FACETS: tuple[Facet, ...] = tuple(Facet)

# Initial value of each facet when a shorthand leaves it out.
DEFAULTS: dict[Facet, str] = {
    Facet.WIDTH: "medium",
    Facet.STYLE: "none",
    Facet.COLOR: "currentColor",
}

CSS_WIDE_KEYWORDS = frozenset({"inherit", "initial", "unset", "revert", "revert-layer"})

BORDER_STYLES = frozenset({
    "none",
    "hidden",
    "dotted",
    "dashed",
    "solid",
    "double",
    "groove",
    "ridge",
    "inset",
    "outset",
})

BORDER_WIDTH_KEYWORDS = frozenset({"thin", "medium", "thick"})


@dataclass(frozen=True)
class BorderProperty:
    """A tracked border property, identified by its optional edge and facet."""

    edge: Edge | None = None
    facet: Facet | None = None

    @property
    def kind(self) -> Kind:
        if self.edge is None and self.facet is None:
            return Kind.SHORTHAND
        if self.facet is None:
            return Kind.EDGE
        if self.edge is None:
            return Kind.FACET
        return Kind.LONGHAND

    @property
    def name(self) -> str:
        parts = ["border"]
        if self.edge is not None:
            parts.append(self.edge.value)
        if self.facet is not None:
            parts.append(self.facet.value)
        return "-".join(parts)

    @property
    def longhands(self) -> frozenset[str]:
        """Names of the longhands this property sets."""
        edges = EDGES if self.edge is None else (self.edge,)
        facets = FACETS if self.facet is None else (self.facet,)
        return frozenset(
            BorderProperty(edge, facet).name for edge in edges for facet in facets
        )

    @classmethod
    def parse(cls, name: str) -> BorderProperty | None:
        """Look up a property name; returns None for untracked names."""
        return _BY_NAME.get(name.strip().lower())

    def __str__(self) -> str:
        return self.name


BORDER = BorderProperty()

_BY_NAME: dict[str, BorderProperty] = {}
for _edge in (None, *EDGES):
    for _facet in (None, *FACETS):
        _prop = BorderProperty(_edge, _facet)
        _BY_NAME[_prop.name] = _prop

EDGE_NAMES: tuple[str, ...] = tuple(BorderProperty(edge=e).name for e in EDGES)
FACET_NAMES: tuple[str, ...] = tuple(BorderProperty(facet=f).name for f in FACETS)
TRACKED_NAMES: frozenset[str] = frozenset(_BY_NAME)


def longhands_of(name: str) -> frozenset[str]:
    """Longhands set by *name*, empty for untracked properties."""
    prop = BorderProperty.parse(name)
    if prop is None:
        return frozenset()
    return prop.longhands
