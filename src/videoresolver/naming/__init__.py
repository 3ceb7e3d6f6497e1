"""Name parsing for videoresolver.

NameParser is the interface resolvers depend on; FilenameParser is the
default implementation based on filename tokens.
"""

from videoresolver.naming.base import NameParser, NamingOptions
from videoresolver.naming.parser import FilenameParser

__all__ = ["FilenameParser", "NameParser", "NamingOptions"]
