"""Queries over a rule's declarations: lookup, shadowing, important groups."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from bordermerge.model.declaration import Declaration, Rule

__all__ = [
    "find_all",
    "effective",
    "effective_set",
    "has_all",
    "important_groups",
    "border_image_before",
]


def _name(decl: Declaration) -> str:
    return decl.prop.strip().lower()


def find_all(rule: Iterable[Declaration], names: Iterable[str]) -> list[Declaration]:
    """Declarations whose property is one of *names*, in rule order."""
    wanted = {n.lower() for n in names}
    return [d for d in rule if _name(d) in wanted]


def effective(group: Sequence[Declaration], name: str) -> Declaration | None:
    """The last declaration of *name* in *group*; earlier ones are shadowed."""
    name = name.lower()
    for decl in reversed(group):
        if _name(decl) == name:
            return decl
    return None


def effective_set(group: Sequence[Declaration], names: Iterable[str]) -> list[Declaration]:
    """The effective declaration for each of *names*, in *names* order."""
    found = (effective(group, name) for name in names)
    return [decl for decl in found if decl is not None]


def has_all(group: Iterable[Declaration], *names: str) -> bool:
    """True iff every one of *names* is declared at least once in *group*."""
    present = {_name(d) for d in group}
    return all(name.lower() in present for name in names)


def important_groups(
    decls: Sequence[Declaration],
) -> Iterator[tuple[Declaration, list[Declaration]]]:
    """Yield ``(last, group)`` for each ``!important`` flag, latest group first.

    *last* is the final declaration of the group; merged replacements are
    anchored on it.
    """
    pending = list(decls)
    while pending:
        last = pending[-1]
        group = [d for d in pending if d.important == last.important]
        yield last, group
        pending = [d for d in pending if d.important != last.important]


def border_image_before(rule: Rule, ref: Declaration, important: bool) -> bool:
    """True if a ``border`` placed at *ref* would reset an earlier ``border-image``.

    A normal ``border`` cannot override an ``!important`` border-image, so
    only declarations it would actually win against count.
    """
    for decl in rule.declarations[: rule.index(ref)]:
        if _name(decl).startswith("border-image") and (important or not decl.important):
            return True
    return False
