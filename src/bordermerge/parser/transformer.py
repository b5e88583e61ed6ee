"""Lark Transformer that converts a CSS parse tree into a Stylesheet model."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from bordermerge.model.declaration import Declaration, Rule
from bordermerge.parser.errors import ParseError
from bordermerge.stylesheet.model import AtRule, Node, Stylesheet
from bordermerge.values import strip_comments

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_IMPORTANT_RE = re.compile(r"!\s*important\s*$", re.IGNORECASE)


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Rule / AtRule / Stylesheet objects."""

    def declaration(self, items: list[Token]) -> Declaration:
        prop = str(items[0]).strip()
        value = str(items[1]).strip() if len(items) > 1 else ""
        if "/*" in value:
            value = strip_comments(value)
        match = _IMPORTANT_RE.search(value)
        if match:
            value = value[: match.start()].rstrip()
        return Declaration(prop=prop, value=value, important=match is not None)

    def rule(self, items: list[object]) -> Rule:
        selector = str(items[0]).strip()
        decls = [item for item in items[1:] if isinstance(item, Declaration)]
        return Rule(decls, selector=selector)

    def block_at_rule(self, items: list[object]) -> AtRule:
        name, prelude, body = _split_at_rule(items)
        return AtRule(name=name, prelude=prelude, nodes=[n for n in body if isinstance(n, (Rule, AtRule))])

    def decl_at_rule(self, items: list[object]) -> AtRule:
        name, prelude, body = _split_at_rule(items)
        header = f"{name} {prelude}".strip()
        decls = [d for d in body if isinstance(d, Declaration)]
        return AtRule(name=name, prelude=prelude, declarations=Rule(decls, selector=header))

    def statement_at_rule(self, items: list[object]) -> AtRule:
        name, prelude, _ = _split_at_rule(items)
        return AtRule(name=name, prelude=prelude)

    def start(self, items: list[Node]) -> Stylesheet:
        return Stylesheet(nodes=list(items))


def _split_at_rule(items: list[object]) -> tuple[str, str, list[object]]:
    """Split at-rule children into (name, prelude, body items)."""
    name = str(items[0])
    rest = items[1:]
    prelude = ""
    if rest and isinstance(rest[0], Token) and rest[0].type == "PRELUDE":
        prelude = " ".join(str(rest[0]).split())
        rest = rest[1:]
    return name, prelude, rest


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", lexer="contextual", start="start")


def parse_css(source: str) -> Stylesheet:
    """Parse a CSS source string into a Stylesheet model."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        raise ParseError.from_lark(e) from e
    return CssTransformer().transform(tree)
