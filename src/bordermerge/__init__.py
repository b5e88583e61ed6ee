"""bordermerge: compact CSS border declarations into their shortest form."""
from __future__ import annotations

from bordermerge.borders import explode, merge
from bordermerge.config import MergeConfig
from bordermerge.model import Declaration, Rule
from bordermerge.parser import ParseError, parse_css
from bordermerge.stylesheet import Stylesheet, serialize
from bordermerge.transforms import apply_transforms

__version__ = "0.1.0"


def minify(source: str, config: MergeConfig | None = None) -> str:
    """Parse *source*, merge its border declarations and render it back."""
    config = config or MergeConfig()
    stylesheet = apply_transforms(parse_css(source), config)
    return serialize(stylesheet, pretty=config.pretty)


__all__ = [
    "Declaration",
    "MergeConfig",
    "ParseError",
    "Rule",
    "Stylesheet",
    "apply_transforms",
    "explode",
    "merge",
    "minify",
    "parse_css",
    "serialize",
]
