"""Stylesheet model: at-rules and the top-level Stylesheet container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from bordermerge.model.declaration import Rule


@dataclass
class AtRule:
    """An ``@name prelude`` construct.

    Exactly one of the body forms applies:
        nodes: nested rules, e.g. ``@media``, ``@supports``, ``@keyframes``
        declarations: a declaration block, e.g. ``@font-face``, ``@page``
        neither: a statement ending in ``;``, e.g. ``@import``
    """

    name: str
    prelude: str = ""
    nodes: list[Node] | None = None
    declarations: Rule | None = None

    @property
    def is_statement(self) -> bool:
        return self.nodes is None and self.declarations is None


Node = Union[Rule, AtRule]


@dataclass
class Stylesheet:
    """A parsed style sheet, nodes in source order."""

    nodes: list[Node] = field(default_factory=list)

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every declaration block, nested ones included, in order."""
        yield from _walk(self.nodes)


def _walk(nodes: list[Node]) -> Iterator[Rule]:
    for node in nodes:
        if isinstance(node, Rule):
            yield node
        elif node.declarations is not None:
            yield node.declarations
        elif node.nodes is not None:
            yield from _walk(node.nodes)
