"""Explode border shorthands into the twelve ``border-<edge>-<facet>`` longhands."""

from __future__ import annotations

import logging

from bordermerge.accessor import border_image_before
from bordermerge.checks import DEFAULT_CHECKS, Checks
from bordermerge.model.declaration import Declaration, Rule
from bordermerge.model.properties import CSS_WIDE_KEYWORDS, EDGES, FACETS, BorderProperty, Kind
from bordermerge.values import border_triple, expand, split_space

logger = logging.getLogger(__name__)


def _explode_one(rule: Rule, decl: Declaration) -> list[Declaration] | None:
    """Replacement declarations for *decl*, or None to leave it alone."""
    prop = BorderProperty.parse(decl.prop)
    if prop is None or prop.kind is Kind.LONGHAND:
        return None
    if decl.value.strip().lower() in CSS_WIDE_KEYWORDS or "var(" in decl.value.lower():
        return None

    if prop.kind is Kind.SHORTHAND:
        # The edge shorthands produced here must explode further.
        if border_triple(decl.value) is None:
            return None
        if border_image_before(rule, decl, decl.important):
            return None
        return [decl.clone(prop=BorderProperty(edge=edge).name) for edge in EDGES]

    if prop.kind is Kind.EDGE:
        triple = border_triple(decl.value)
        if triple is None:
            return None
        return [
            decl.clone(prop=BorderProperty(prop.edge, facet).name, value=value)
            for facet, value in zip(FACETS, triple)
        ]

    tokens = split_space(decl.value)
    if not 1 <= len(tokens) <= 4:
        return None
    return [
        decl.clone(prop=BorderProperty(edge, prop.facet).name, value=value)
        for edge, value in zip(EDGES, expand(tokens))
    ]


def explode(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> bool:
    """Expand every border shorthand in *rule* down to longhands, in place.

    Replacements take the position of the declaration they replace and are
    examined again, so ``border`` ends up as twelve longhands.  Returns True
    if anything was rewritten; a rule containing a hack is left alone and
    returns False.
    """
    if any(checks.is_hack(d) for d in rule):
        logger.debug("Skipping explode of %r: rule contains a hack", rule.selector)
        return False

    changed = False
    i = 0
    while i < len(rule):
        decl = rule[i]
        replacements = _explode_one(rule, decl)
        if replacements is None:
            i += 1
            continue
        logger.debug("Exploding %s into %d declaration(s)", decl, len(replacements))
        rule.replace(decl, replacements)
        changed = True
    return changed
