"""Shared helpers for building rules from declaration text."""

from __future__ import annotations

from bordermerge.model import Declaration, Rule


def make_rule(text: str) -> Rule:
    """Build a Rule from ``prop: value [!important]; ...`` text."""
    decls = []
    for part in text.split(";"):
        if not part.strip():
            continue
        prop, value = part.split(":", 1)
        value = value.strip()
        important = value.endswith("!important")
        if important:
            value = value[: -len("!important")].strip()
        decls.append(Declaration(prop.strip(), value, important))
    return Rule(decls, selector="a")


def rule_text(rule: Rule) -> str:
    return "; ".join(str(d) for d in rule)
