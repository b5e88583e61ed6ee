"""Border transforms: run explode / merge over every rule of a stylesheet."""

from __future__ import annotations

import logging

from bordermerge.borders import explode, merge
from bordermerge.checks import DEFAULT_CHECKS, Checks
from bordermerge.stylesheet.model import Stylesheet

logger = logging.getLogger(__name__)


class BorderExplodeTransform:
    """Expand every border shorthand down to the twelve longhands.

    Used ahead of :class:`BorderMergeTransform` so that merging always starts
    from the same normalized longhand set, whatever mix of shorthands the
    author wrote.
    """

    def __init__(self, checks: Checks = DEFAULT_CHECKS) -> None:
        self.checks = checks

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        exploded = sum(1 for rule in stylesheet.walk_rules() if explode(rule, self.checks))
        logger.debug("Exploded border declarations in %d rule(s)", exploded)
        return stylesheet


class BorderMergeTransform:
    """Merge border declarations of every rule into their shortest form."""

    def __init__(self, checks: Checks = DEFAULT_CHECKS) -> None:
        self.checks = checks

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        for rule in stylesheet.walk_rules():
            merge(rule, self.checks)
        return stylesheet
