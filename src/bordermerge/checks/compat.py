"""Compatibility check: may these declarations be folded into one?"""

from __future__ import annotations

from bordermerge.model.declaration import Declaration
from bordermerge.model.properties import CSS_WIDE_KEYWORDS


def is_custom_prop(decl: Declaration) -> bool:
    """True if the value depends on a custom property."""
    return "var(" in decl.value.lower()


def can_merge(*decls: Declaration) -> bool:
    """Return True if *decls* can share a single shorthand declaration.

    Refuses when a CSS-wide keyword is mixed with other values, when
    ``var()`` values are mixed with plain ones, and when ``!important`` and
    normal declarations are mixed.
    """
    values = {d.value.strip().lower() for d in decls}
    if len(values) > 1 and values & CSS_WIDE_KEYWORDS:
        return False
    custom = [is_custom_prop(d) for d in decls]
    if any(custom) and not all(custom):
        return False
    flags = {d.important for d in decls}
    return len(flags) <= 1
