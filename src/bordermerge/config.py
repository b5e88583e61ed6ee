from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MergeConfig:
    explode_first: bool = True  # expand to longhands before merging
    normalize_colors: bool = True
    pretty: bool = False  # indented output instead of minified
