"""bordermerge model layer -- public type re-exports."""

from bordermerge.model.declaration import Declaration, Rule
from bordermerge.model.properties import (
    BORDER,
    DEFAULTS,
    EDGES,
    FACETS,
    BorderProperty,
    Edge,
    Facet,
    Kind,
)

__all__ = [
    # tree
    "Declaration",
    "Rule",
    # properties
    "BorderProperty",
    "Edge",
    "Facet",
    "Kind",
    "BORDER",
    "EDGES",
    "FACETS",
    "DEFAULTS",
]
