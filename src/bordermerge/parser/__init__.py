from bordermerge.parser.errors import ParseError
from bordermerge.parser.transformer import parse_css

__all__ = ["ParseError", "parse_css"]
