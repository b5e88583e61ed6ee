"""Turn a Stylesheet back into CSS text, compact or indented."""

from __future__ import annotations

from bordermerge.model.declaration import Declaration, Rule
from bordermerge.stylesheet.model import AtRule, Node, Stylesheet

__all__ = ["serialize"]

_INDENT = "    "


def _declaration(decl: Declaration, pretty: bool) -> str:
    if pretty:
        important = " !important" if decl.important else ""
        return f"{decl.prop}: {decl.value}{important}"
    important = "!important" if decl.important else ""
    return f"{decl.prop}:{decl.value}{important}"


def _block(rule: Rule, pretty: bool, depth: int) -> str:
    if not pretty:
        return "{" + ";".join(_declaration(d, False) for d in rule) + "}"
    pad = _INDENT * (depth + 1)
    lines = [f"{pad}{_declaration(d, True)};" for d in rule]
    return "{\n" + "\n".join(lines) + ("\n" if lines else "") + _INDENT * depth + "}"


def _header(node: AtRule) -> str:
    return f"{node.name} {node.prelude}" if node.prelude else node.name


def _node(node: Node, pretty: bool, depth: int) -> str:
    pad = _INDENT * depth if pretty else ""
    space = " " if pretty else ""
    if isinstance(node, Rule):
        return f"{pad}{node.selector}{space}{_block(node, pretty, depth)}"
    if node.is_statement:
        return f"{pad}{_header(node)};"
    if node.declarations is not None:
        return f"{pad}{_header(node)}{space}{_block(node.declarations, pretty, depth)}"
    children = [_node(child, pretty, depth + 1) for child in node.nodes or []]
    if not pretty:
        return f"{_header(node)}{{{''.join(children)}}}"
    inner = "\n".join(children)
    return f"{pad}{_header(node)} {{\n{inner}\n{pad}}}"


def serialize(stylesheet: Stylesheet, pretty: bool = False) -> str:
    """Render *stylesheet* as CSS.

    The compact form drops all optional whitespace; the pretty form puts one
    declaration per line, indented by nesting depth.
    """
    nodes = [_node(node, pretty, 0) for node in stylesheet.nodes]
    if pretty:
        return "\n\n".join(nodes) + ("\n" if nodes else "")
    return "".join(nodes)
