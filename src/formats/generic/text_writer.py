"""Plain-text writer: the lexical form of every literal, space separated."""

from typing import Optional, TextIO

from rdflib import Graph, Literal

from shared.models import ConversionOptions, FormatTag


class TextWriter:
    """Text Writer"""

    format_tag = FormatTag.TEXT
    label = "Text Writer"
    description = "Writes the text of every literal value"

    def write(
        self,
        stream: TextIO,
        graph: Graph,
        options: Optional[ConversionOptions] = None,
    ) -> None:
        for _, _, obj in graph:
            if isinstance(obj, Literal):
                stream.write(str(obj))
                stream.write(' ')
        stream.flush()
