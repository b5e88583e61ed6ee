from bordermerge.borders.explode import explode
from bordermerge.borders.merge import PASSES, merge

__all__ = ["explode", "merge", "PASSES"]
