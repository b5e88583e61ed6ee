"""Pluggable safety checks consulted by the explode and merge passes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Sequence

from bordermerge.checks.colors import merge_colors, normalize_color
from bordermerge.checks.compat import can_merge, is_custom_prop
from bordermerge.checks.hacks import is_hack
from bordermerge.config import MergeConfig
from bordermerge.model.declaration import Declaration

HackDetector = Callable[[Declaration], bool]
MergeGate = Callable[..., bool]
ColorMerger = Callable[[Sequence[Declaration]], "str | None"]


@dataclass(frozen=True)
class Checks:
    """The collaborators the border passes consult.

    Attributes:
        is_hack: Flags a declaration written as a browser hack; one hack
            anywhere in a rule disables every pass for that rule.
        can_merge: Decides whether several declarations may share one
            shorthand declaration.
        merge_colors: Compacts four per-edge colors, or returns None to
            refuse the ``border-color`` merge.
    """

    is_hack: HackDetector = is_hack
    can_merge: MergeGate = can_merge
    merge_colors: ColorMerger = merge_colors

    @classmethod
    def from_config(cls, config: MergeConfig) -> Checks:
        return cls(merge_colors=partial(merge_colors, normalize=config.normalize_colors))


DEFAULT_CHECKS = Checks()

__all__ = [
    "Checks",
    "DEFAULT_CHECKS",
    "is_hack",
    "can_merge",
    "is_custom_prop",
    "merge_colors",
    "normalize_color",
]
