"""Color canonicalization and the four-edge color merge."""

from __future__ import annotations

from typing import Sequence

import tinycss2
from tinycss2.ast import FunctionBlock, Node

from bordermerge.checks.compat import can_merge
from bordermerge.model.declaration import Declaration
from bordermerge.values import minify_trbl, split_space

# No space is kept around these inside color functions.
_TIGHT_LITERALS = (",", "/")


def _arguments(nodes: list[Node]) -> str:
    parts: list[str] = []
    space = False
    for node in nodes:
        if node.type in ("whitespace", "comment"):
            space = True
            continue
        tight = node.type == "literal" and node.value in _TIGHT_LITERALS
        if space and parts and not tight and parts[-1] not in _TIGHT_LITERALS:
            parts.append(" ")
        space = False
        parts.append(_canonical(node))
    return "".join(parts)


def _canonical(node: Node) -> str:
    if node.type == "ident":
        if node.lower_value == "currentcolor":
            return "currentColor"
        return node.lower_value
    if node.type == "hash":
        return f"#{node.value.lower()}"
    if isinstance(node, FunctionBlock):
        return f"{node.lower_name}({_arguments(node.arguments)})"
    return node.serialize()


def normalize_color(value: str) -> str:
    """Canonical spelling of a single color token.

    Only case and whitespace change; ``#FFF`` and ``#ffffff`` stay distinct.
    """
    nodes = [
        node
        for node in tinycss2.parse_component_value_list(value, skip_comments=True)
        if node.type != "whitespace"
    ]
    if len(nodes) != 1:
        return value.strip()
    return _canonical(nodes[0])


def merge_colors(decls: Sequence[Declaration], normalize: bool = True) -> str | None:
    """Compact four per-edge color declarations into one value.

    Returns None to refuse the merge.
    """
    if not can_merge(*decls):
        return None
    values = [d.value.strip() for d in decls]
    if any(len(split_space(v)) != 1 for v in values):
        return None
    if normalize:
        values = [normalize_color(v) for v in values]
    return minify_trbl(values)
