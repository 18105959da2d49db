"""
Generic writers that do not depend on a particular RDF syntax.

- rss_writer: RSS 1.0 feed of typed resources
- text_writer: Literal values as plain text
"""

from .rss_writer import RSS1p0Writer
from .text_writer import TextWriter

__all__ = ['RSS1p0Writer', 'TextWriter']
