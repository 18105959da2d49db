"""
Format tags.

Every serialization the converter can read or write is named by a
FormatTag. Command-line and configuration strings are turned into tags
once, at the boundary, with FormatTag.parse().
"""

from enum import Enum
from typing import Union

from shared.errors import UnsupportedFormatError


class FormatTag(Enum):
    """Enumerated names of the supported serializations."""
    TSV = "tsv"
    RDF_XML = "rdf-xml"
    TURTLE = "turtle"
    N3 = "n3"
    RSS1_0 = "rss1.0"
    TEXT = "text"

    @classmethod
    def parse(cls, name: Union[str, 'FormatTag']) -> 'FormatTag':
        """
        Resolve a format name, ignoring case and surrounding whitespace.

        Raises:
            UnsupportedFormatError: If no format has that name.
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower()
        for tag in cls:
            if tag.value == normalized:
                return tag
        raise UnsupportedFormatError(str(name), [tag.value for tag in cls])
