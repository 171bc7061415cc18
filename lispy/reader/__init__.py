from lispy.reader.parser import AstNode, Parser, parse
from lispy.reader.reader import read

__all__ = ["AstNode", "Parser", "parse", "read"]
