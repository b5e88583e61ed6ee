"""Detection of browser-specific CSS hacks.

A rule containing any of these is left untouched: hacks rely on the exact
property spelling and order browsers see, which merging would destroy.
"""

from __future__ import annotations

import re

from bordermerge.model.declaration import Declaration

# *zoom: 1 (IE7 and below), _height: 1px (IE6)
_PROPERTY_PREFIXES = ("*", "_")

# color: red\9 (IE8-10), width: 10px\0/ (IE8)
_VALUE_HACK_RE = re.compile(r"\\(?:9|0)(?:/)?\s*$|\\0/")

# color: red !ie
_IE_IMPORTANT_RE = re.compile(r"!\s*ie\b", re.IGNORECASE)


def is_hack(decl: Declaration) -> bool:
    """Return True if *decl* is written as a browser hack."""
    if decl.prop.startswith(_PROPERTY_PREFIXES):
        return True
    if _VALUE_HACK_RE.search(decl.value):
        return True
    return bool(_IE_IMPORTANT_RE.search(decl.value))
