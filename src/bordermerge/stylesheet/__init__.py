from bordermerge.stylesheet.model import AtRule, Node, Stylesheet
from bordermerge.stylesheet.serializer import serialize

__all__ = ["Stylesheet", "AtRule", "Node", "serialize"]
