"""Value helpers: tokenizing, 1-4 value edge shorthands, border triples.

Values are tokenized with tinycss2; a "token" here is one whitespace-separated
component of a declaration value, serialized back to text.
"""

from __future__ import annotations

from typing import Sequence

import tinycss2
from tinycss2.ast import Node, WhitespaceToken
from tinycss2.color5 import parse_color

from bordermerge.model.properties import (
    BORDER_STYLES,
    BORDER_WIDTH_KEYWORDS,
    CSS_WIDE_KEYWORDS,
    DEFAULTS,
    FACETS,
    Facet,
)

__all__ = [
    "split_space",
    "strip_comments",
    "expand",
    "compact",
    "minify_trbl",
    "classify_border",
    "border_triple",
]

LENGTH_UNITS = frozenset({
    "px", "em", "rem", "ex", "rex", "ch", "rch", "cap", "rcap", "ic", "ric",
    "lh", "rlh", "vw", "vh", "vi", "vb", "vmin", "vmax", "svw", "svh", "lvw",
    "lvh", "dvw", "dvh", "cqw", "cqh", "cqi", "cqb", "cqmin", "cqmax",
    "cm", "mm", "q", "in", "pt", "pc",
})

# Math functions resolve to a length when used in a border shorthand.
_WIDTH_FUNCTIONS = frozenset({"calc", "min", "max", "clamp"})

_SEPARATORS = ("whitespace", "comment")


def _components(value: str) -> list[Node]:
    return tinycss2.parse_component_value_list(value)


def _groups(value: str) -> list[list[Node]]:
    """Component values of *value*, grouped between whitespace and comments."""
    groups: list[list[Node]] = []
    current: list[Node] = []
    for node in _components(value):
        if node.type in _SEPARATORS:
            if current:
                groups.append(current)
                current = []
            continue
        current.append(node)
    if current:
        groups.append(current)
    return groups


def split_space(value: str) -> list[str]:
    """Split *value* on whitespace, never inside ``func(...)`` or quotes.

    Comments separate tokens like whitespace and are dropped.
    """
    return [tinycss2.serialize(group) for group in _groups(value)]


def strip_comments(value: str) -> str:
    """*value* with top-level comments removed and whitespace runs collapsed."""
    nodes: list[Node] = []
    for node in _components(value):
        if node.type in _SEPARATORS:
            if nodes and nodes[-1].type == "whitespace":
                continue
            node = WhitespaceToken(node.source_line, node.source_column, " ")
        nodes.append(node)
    return tinycss2.serialize(nodes).strip()


def _tokens(value: str | Sequence[str]) -> list[str]:
    if isinstance(value, str):
        return split_space(value)
    return list(value)


def expand(tokens: str | Sequence[str]) -> list[str]:
    """Expand a 1-4 value edge shorthand into (top, right, bottom, left).

    Missing tokens follow the usual shorthand rule: right and bottom default
    to top, left defaults to right.  Tokens past the fourth are ignored.
    """
    tokens = _tokens(tokens)
    if not tokens:
        return ["", "", "", ""]
    top = tokens[0]
    right = tokens[1] if len(tokens) > 1 else top
    bottom = tokens[2] if len(tokens) > 2 else top
    left = tokens[3] if len(tokens) > 3 else right
    return [top, right, bottom, left]


def compact(values: str | Sequence[str]) -> list[str]:
    """Collapse (top, right, bottom, left) into the shortest 1-4 value form."""
    top, right, bottom, left = expand(values)
    if left != right:
        return [top, right, bottom, left]
    if bottom != top:
        return [top, right, bottom]
    if right != top:
        return [top, right]
    return [top]


def minify_trbl(values: str | Sequence[str]) -> str:
    """Space-joined :func:`compact`."""
    return " ".join(compact(values))


def _has_var(node: Node) -> bool:
    if node.type == "function":
        if node.lower_name == "var":
            return True
        return any(_has_var(child) for child in node.arguments)
    if node.type in ("() block", "[] block", "{} block"):
        return any(_has_var(child) for child in node.content)
    return False


def _facet_of(group: list[Node]) -> Facet | None:
    """Facet a single border token belongs to, None if it cannot be told."""
    if len(group) != 1:
        return None
    token = group[0]
    if _has_var(token):
        return None
    if token.type == "ident":
        keyword = token.lower_value
        if keyword in BORDER_STYLES:
            return Facet.STYLE
        if keyword in BORDER_WIDTH_KEYWORDS:
            return Facet.WIDTH
        if keyword in CSS_WIDE_KEYWORDS:
            return None
        if keyword == "currentcolor":
            return Facet.COLOR
    elif token.type == "dimension":
        return Facet.WIDTH if token.lower_unit in LENGTH_UNITS else None
    elif token.type == "number":
        return Facet.WIDTH if token.value == 0 else None
    elif token.type == "function" and token.lower_name in _WIDTH_FUNCTIONS:
        return Facet.WIDTH
    if parse_color(token) is not None:
        return Facet.COLOR
    return None


def classify_border(value: str) -> list[tuple[Facet, str]] | None:
    """Assign each token of a border shorthand value to its facet.

    Returns ``(facet, token)`` pairs in source order, or None when the value
    cannot be taken apart safely: ``var()``, CSS-wide keywords, tokens that
    are neither a width, a style nor a color, more than three tokens or two
    tokens for the same facet.
    """
    groups = _groups(value)
    if len(groups) > len(FACETS):
        return None
    pairs: list[tuple[Facet, str]] = []
    seen: set[Facet] = set()
    for group in groups:
        facet = _facet_of(group)
        if facet is None or facet in seen:
            return None
        seen.add(facet)
        pairs.append((facet, tinycss2.serialize(group)))
    return pairs


def border_triple(value: str) -> list[str] | None:
    """``[width, style, color]`` of a border shorthand, defaults filled in."""
    pairs = classify_border(value)
    if pairs is None:
        return None
    explicit = dict(pairs)
    return [explicit.get(facet, DEFAULTS[facet]) for facet in FACETS]
