from __future__ import annotations

from bordermerge.checks import Checks
from bordermerge.config import MergeConfig
from bordermerge.transforms.base import Transform
from bordermerge.transforms.borders import BorderExplodeTransform, BorderMergeTransform


def builtin_transforms(config=None):
    """The built-in transform chain for *config*."""
    config = config or MergeConfig()
    checks = Checks.from_config(config)
    transforms: list[Transform] = []
    if config.explode_first:
        transforms.append(BorderExplodeTransform(checks))
    transforms.append(BorderMergeTransform(checks))
    return transforms


def apply_transforms(stylesheet, config=None, custom_transforms=None):
    """Apply the built-in transforms (and any custom ones) to *stylesheet*."""
    transforms = builtin_transforms(config)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        stylesheet = t.apply(stylesheet)
    return stylesheet
