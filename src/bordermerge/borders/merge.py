"""Merge border longhands into the shortest equivalent set of shorthands.

The passes run in a fixed order, each one only seeing what the previous
ones left behind:

    A  border-<edge>-<facet> x3   -> border-<edge>
    B  border-<edge>-<facet> x4   -> border-<facet>
    C  border-<edge> x4           -> border-width + border-style + border-color
    D  border-<facet> x3          -> border (+ one border-<edge>)
    E  border-<edge> + longhands  -> border-<facet>
    F  border; border-<edge>      -> border; one longhand or border-<facet>
    G  trailing default tokens of border / border-<edge> are dropped

Every pass only merges declarations sharing the same ``!important`` flag
and leaves the rule unchanged when a check refuses.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from bordermerge.accessor import (
    border_image_before,
    effective_set,
    find_all,
    has_all,
    important_groups,
)
from bordermerge.checks import DEFAULT_CHECKS, Checks, is_custom_prop
from bordermerge.model.declaration import Declaration, Rule
from bordermerge.model.properties import (
    BORDER,
    CSS_WIDE_KEYWORDS,
    DEFAULTS,
    EDGE_NAMES,
    EDGES,
    FACET_NAMES,
    FACETS,
    TRACKED_NAMES,
    BorderProperty,
    Facet,
    Kind,
    longhands_of,
)
from bordermerge.values import (
    border_triple,
    classify_border,
    expand,
    minify_trbl,
    split_space,
)

logger = logging.getLogger(__name__)

ValueBuilder = Callable[[Sequence[Declaration]], "str | None"]


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _span_is_clear(
    rule: Rule,
    anchors: Sequence[Declaration],
    members: Sequence[Declaration],
    covered: frozenset[str] | None = None,
) -> bool:
    """True if no outside declaration is reordered against the merged ones.

    The merged declaration lands at one end of the span covered by *anchors*;
    any other same-importance declaration inside that span touching the same
    longhands would then cascade differently.  *covered* defaults to every
    longhand the anchors set.
    """
    member_ids = {id(d) for d in members}
    important = anchors[0].important
    if covered is None:
        covered = frozenset().union(*(longhands_of(d.prop) for d in anchors))
    positions = [rule.index(d) for d in anchors]
    for decl in rule.declarations[min(positions) : max(positions) + 1]:
        if id(decl) in member_ids or decl.important != important:
            continue
        if longhands_of(decl.prop) & covered:
            logger.debug("Merge blocked by interleaved %s", decl)
            return False
    return True


def _replace(
    rule: Rule,
    ref: Declaration,
    merged: Sequence[Declaration],
    members: Sequence[Declaration],
    before: bool = False,
) -> None:
    """Insert *merged* next to *ref*, then drop every one of *members*."""
    if before:
        rule.insert_before(ref, *merged)
    else:
        rule.insert_after(ref, *merged)
    for decl in members:
        if decl in rule:
            rule.remove(decl)
    logger.debug(
        "Replaced %d declaration(s) with %s",
        len(members),
        "; ".join(str(d) for d in merged),
    )


def _generic_merge(
    rule: Rule,
    prop: str,
    names: Sequence[str],
    value: ValueBuilder,
    gate: Callable[..., bool] | None = None,
) -> None:
    """Replace a complete set of *names* with a single *prop* declaration."""
    for last, group in important_groups(find_all(rule, names)):
        decls = effective_set(group, names)
        if not has_all(decls, *names):
            continue
        if gate is not None and not gate(*decls):
            continue
        merged_value = value(decls)
        if merged_value is None or not _span_is_clear(rule, decls, group):
            continue
        _replace(rule, last, [last.clone(prop=prop, value=merged_value)], group)


def _size(decls: Iterable[Declaration], trimmed: bool = False) -> int:
    """Minified length of *decls*, optionally after default trimming."""
    total = 0
    for decl in decls:
        value = _trim_defaults(decl.value) if trimmed else decl.value
        total += len(decl.prop) + len(value) + 2
    return total


def _single_tokens(decls: Sequence[Declaration]) -> list[str] | None:
    values = [d.value.strip() for d in decls]
    if any(len(split_space(v)) != 1 for v in values):
        return None
    return values


def _is_plain(decl: Declaration) -> bool:
    return not is_custom_prop(decl) and decl.value.strip().lower() not in CSS_WIDE_KEYWORDS


def _lift_inherited(rule: Rule) -> list[Declaration]:
    lifted = [
        d for d in find_all(rule, TRACKED_NAMES) if d.value.strip().lower() == "inherit"
    ]
    for decl in lifted:
        rule.remove(decl)
    return lifted


# ---------------------------------------------------------------------------
# Pass A: border-<edge>-<facet> -> border-<edge>
# ---------------------------------------------------------------------------


def _join_facets(decls: Sequence[Declaration]) -> str | None:
    value = " ".join(d.value.strip() for d in decls)
    if classify_border(value) is None:
        return None
    return value


def merge_edge_facets(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for edge in EDGES:
        _generic_merge(
            rule,
            BorderProperty(edge=edge).name,
            [BorderProperty(edge, facet).name for facet in FACETS],
            _join_facets,
            gate=checks.can_merge,
        )


# ---------------------------------------------------------------------------
# Pass B: border-<edge>-<facet> -> border-<facet>
# ---------------------------------------------------------------------------


def _compact_edges(decls: Sequence[Declaration]) -> str | None:
    values = _single_tokens(decls)
    if values is None:
        return None
    return minify_trbl(values)


def merge_facet_edges(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for facet in FACETS:
        names = [BorderProperty(edge, facet).name for edge in EDGES]
        prop = BorderProperty(facet=facet).name
        if facet is Facet.COLOR:
            # Colors go through the color merger: spelling differences must
            # not defeat the equality checks of the compaction.
            _generic_merge(rule, prop, names, checks.merge_colors)
        else:
            _generic_merge(rule, prop, names, _compact_edges, gate=checks.can_merge)


# ---------------------------------------------------------------------------
# Pass C: border-<edge> x4 -> border-width + border-style + border-color
# ---------------------------------------------------------------------------


def _merged_size(merged: Sequence[Declaration], checks: Checks) -> int:
    """Size of the family declarations once Passes D and G had their turn."""
    scratch = Rule([d.clone() for d in merged])
    merge_facets_to_border(scratch, checks)
    clean_values(scratch, checks)
    return min(_size(merged), _size(scratch))


def merge_edges_to_facets(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for last, group in important_groups(find_all(rule, EDGE_NAMES)):
        decls = effective_set(group, EDGE_NAMES)
        if not has_all(decls, *EDGE_NAMES):
            continue
        triples = [border_triple(d.value) for d in decls]
        if any(t is None for t in triples) or not _span_is_clear(rule, decls, group):
            continue
        merged = [
            last.clone(
                prop=BorderProperty(facet=facet).name,
                value=minify_trbl([t[i] for t in triples]),  # type: ignore[index]
            )
            for i, facet in enumerate(FACETS)
        ]
        if _merged_size(merged, checks) > _size(group, trimmed=True):
            logger.debug("Keeping edge shorthands: family form is longer")
            continue
        _replace(rule, last, merged, group)


# ---------------------------------------------------------------------------
# Pass D: border-width + border-style + border-color -> border
# ---------------------------------------------------------------------------


def _is_close_enough(triples: Sequence[str]) -> bool:
    """True if three cyclically consecutive edges share one triple."""
    return any(
        triples[i] == triples[(i + 1) % 4] == triples[(i + 2) % 4] for i in range(4)
    )


def merge_facets_to_border(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for last, group in important_groups(find_all(rule, FACET_NAMES)):
        decls = effective_set(group, FACET_NAMES)
        if not has_all(decls, *FACET_NAMES):
            continue
        width, style, color = decls
        if any(not 1 <= len(split_space(d.value)) <= 4 for d in decls):
            continue
        columns = [expand(d.value) for d in decls]
        triples = [" ".join(column[i] for column in columns) for i in range(4)]
        distinct = list(dict.fromkeys(triples))

        keywords = any(d.value.strip().lower() in CSS_WIDE_KEYWORDS for d in decls)
        if (
            not keywords
            and len(distinct) <= 2
            and _is_close_enough(triples)
            and checks.can_merge(*decls)
        ):
            if border_image_before(rule, last, last.important):
                continue
            if not _span_is_clear(rule, decls, group):
                continue
            # max() keeps the first of equally frequent triples.
            shared = max(distinct, key=triples.count)
            merged = [last.clone(prop=BORDER.name, value=shared)]
            for triple in distinct:
                if triple != shared:
                    edge = EDGES[triples.index(triple)]
                    merged.append(last.clone(prop=BorderProperty(edge=edge).name, value=triple))
            _replace(rule, last, merged, group)

        elif len(distinct) == 1 and _is_plain(width) and _is_plain(style):
            # Colors refused to merge; keep border-color after a color-less border.
            if border_image_before(rule, color, last.important):
                continue
            if not _span_is_clear(rule, decls, group):
                continue
            border = last.clone(prop=BORDER.name, value=f"{columns[0][0]} {columns[1][0]}")
            color_name = FACET_NAMES[2]
            members = [d for d in group if d.prop.strip().lower() != color_name]
            _replace(rule, color, [border], members, before=True)


# ---------------------------------------------------------------------------
# Pass E: border-<edge> + the other edges' longhands -> border-<facet>
# ---------------------------------------------------------------------------


def _fold_into_facets(rule: Rule, last: Declaration) -> None:
    own = BorderProperty.parse(last.prop).edge  # type: ignore[union-attr]
    pairs = classify_border(last.value)
    if pairs is None:
        return
    explicit = dict(pairs)
    triple = [explicit.get(facet, DEFAULTS[facet]) for facet in FACETS]
    covered: set[Facet] = set()

    for i, facet in enumerate(FACETS):
        names = [BorderProperty(edge, facet).name for edge in EDGES if edge is not own]
        props = [d for d in find_all(rule, names) if d.important == last.important]
        decls = effective_set(props, names)
        if not has_all(decls, *names):
            continue
        others = _single_tokens(decls)
        if others is None or not all(_is_plain(d) for d in decls):
            continue
        family = BorderProperty(facet=facet)
        if not _span_is_clear(rule, [*decls, last], [*props, last], family.longhands):
            continue
        by_edge = {
            BorderProperty.parse(d.prop).edge: v for d, v in zip(decls, others)  # type: ignore[union-attr]
        }
        by_edge[own] = triple[i]
        values = [by_edge[edge] for edge in EDGES]

        if len(set(values)) == 1:
            # The edge shorthand's own slice is now redundant.
            ref = last
            covered.add(facet)
            if facet in explicit and len(explicit) > 1:
                del explicit[facet]
                last.value = " ".join(token for f, token in pairs if f in explicit)
        else:
            ref = props[-1]
        merged = last.clone(prop=family.name, value=minify_trbl(values))
        _replace(rule, ref, [merged], props)

    if len(covered) == len(FACETS):
        rule.remove(last)


def optimize_edge_shorthands(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for last in reversed(find_all(rule, EDGE_NAMES)):
        if last in rule:
            _fold_into_facets(rule, last)


# ---------------------------------------------------------------------------
# Pass F: border followed by a near-identical border-<edge>
# ---------------------------------------------------------------------------


def _fold_redundant(
    border: Declaration,
    edge_decl: Declaration,
    facet: Facet,
    own: list[tuple[Facet, str]],
    other: list[str],
) -> None:
    edge = BorderProperty.parse(edge_decl.prop).edge  # type: ignore[union-attr]
    i = FACETS.index(facet)
    own_value = border_triple(border.value)[i]  # type: ignore[index]
    original = len(border.value) + len(edge_decl.prop) + len(edge_decl.value)

    # Keep border as is, narrow the edge declaration to its one differing longhand.
    longhand = BorderProperty(edge, facet).name
    narrowed = len(border.value) + len(longhand) + len(other[i])

    # Take the facet out of border and set it per edge instead.
    values = [own_value] * 4
    values[EDGES.index(edge)] = other[i]  # type: ignore[arg-type]
    family_value = minify_trbl(values)
    remaining = " ".join(token for f, token in own if f is not facet) or DEFAULTS[Facet.WIDTH]
    family = BorderProperty(facet=facet).name
    moved = len(remaining) + len(family) + len(family_value)

    if narrowed < original and narrowed <= moved:
        edge_decl.prop, edge_decl.value = longhand, other[i]
    elif moved < original:
        border.value = remaining
        edge_decl.prop, edge_decl.value = family, family_value
    else:
        return
    logger.debug("Folded redundant edge into %s: %s", edge_decl.prop, edge_decl.value)


def _collapse_next(rule: Rule, border: Declaration) -> bool:
    """Fold the edge shorthand right after *border* into it.

    Returns True when that edge repeated *border* and was dropped, so the
    declaration now following *border* has to be looked at as well.
    """
    following = rule.next(border)
    if following is None or following.important != border.important:
        return False
    prop = BorderProperty.parse(following.prop)
    if prop is None or prop.kind is not Kind.EDGE:
        return False
    own = classify_border(border.value)
    theirs = classify_border(following.value)
    a = border_triple(border.value)
    b = border_triple(following.value)
    if own is None or theirs is None or a is None or b is None:
        return False

    if a == b:
        rule.remove(following)
        return True
    if a[0] == b[0] and a[2] == b[2]:
        facet = Facet.STYLE
    elif a[1] == b[1] and a[2] == b[2]:
        facet = Facet.WIDTH
    elif a[0] == b[0] and a[1] == b[1] and Facet.COLOR in dict(own) and Facet.COLOR in dict(theirs):
        facet = Facet.COLOR
    else:
        return False
    _fold_redundant(border, following, facet, own, b)
    return False


def collapse_redundant_edges(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for border in find_all(rule, [BORDER.name]):
        while border in rule and _collapse_next(rule, border):
            pass


# ---------------------------------------------------------------------------
# Pass G: value clean-up
# ---------------------------------------------------------------------------


def _trim_defaults(value: str) -> str:
    """*value* without its trailing initial-value tokens, never longer."""
    pairs = classify_border(value)
    if pairs is None:
        return value
    while pairs and pairs[-1][1].lower() == DEFAULTS[pairs[-1][0]].lower():
        pairs.pop()
    trimmed = " ".join(token for _, token in pairs) or DEFAULTS[Facet.WIDTH]
    # "border: none" would otherwise become the longer "border: medium".
    return trimmed if len(trimmed) <= len(value) else value


def clean_values(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    for decl in rule:
        prop = BorderProperty.parse(decl.prop)
        if prop is None or prop.kind not in (Kind.SHORTHAND, Kind.EDGE):
            continue
        decl.value = _trim_defaults(decl.value)


# ---------------------------------------------------------------------------
# Rule driver
# ---------------------------------------------------------------------------

PASSES = (
    merge_edge_facets,
    merge_facet_edges,
    merge_edges_to_facets,
    merge_facets_to_border,
    optimize_edge_shorthands,
    collapse_redundant_edges,
    clean_values,
)


def merge(rule: Rule, checks: Checks = DEFAULT_CHECKS) -> None:
    """Rewrite the border declarations of *rule* into their shortest form.

    ``inherit`` declarations are set aside for the duration of the passes and
    appended back, unchanged, at the end.  A rule containing a hack is left
    untouched.
    """
    if any(checks.is_hack(d) for d in rule):
        logger.debug("Skipping merge of %r: rule contains a hack", rule.selector)
        return
    lifted = _lift_inherited(rule)
    for merge_pass in PASSES:
        merge_pass(rule, checks)
    rule.append(*lifted)
