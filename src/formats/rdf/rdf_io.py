"""
RDF serialization pass-throughs.

Reading and writing RDF/XML, Turtle and N3 is delegated entirely to
rdflib's parsers and serializers. One class serves as both reader and
writer for a given serialization.

Usage:
    from formats.rdf import TURTLE, RDF_XML

    result = TURTLE.read(stream, sink, options)
    RDF_XML.write(out, graph, options)
"""

import logging
from typing import Optional, TextIO

from rdflib import Graph

from shared.errors import ConversionError
from shared.models import ConversionOptions, ConversionResult, FormatTag, GraphSink

logger = logging.getLogger(__name__)


class RdfSerializationConverter:
    """
    Reader and writer for one rdflib-supported serialization.

    Args:
        format_tag: Tag the converter is registered under.
        rdflib_format: rdflib parser/serializer name ("xml", "turtle", "n3").
        label: Human-readable name.
    """

    def __init__(self, format_tag: FormatTag, rdflib_format: str, label: str):
        self.format_tag = format_tag
        self.rdflib_format = rdflib_format
        self.label = label
        self.description = f"Reads and writes generic data as {label}"

    def read(
        self,
        stream: TextIO,
        sink: GraphSink,
        options: Optional[ConversionOptions] = None,
    ) -> ConversionResult:
        """
        Parse the whole stream and copy its triples into ``sink``.

        Relative URIs are resolved against ``options.namespace``.

        Raises:
            ConversionError: If the content is not valid for this serialization.
        """
        options = options or ConversionOptions()
        content = stream.read()
        content_size_kb = len(content.encode('utf-8')) / 1024
        logger.info(f"Parsing {self.label} content ({content_size_kb:.1f} KB)")

        parsed = Graph()
        try:
            parsed.parse(data=content, format=self.rdflib_format, publicID=options.namespace)
        except Exception as e:
            logger.error(f"Failed to parse {self.label} content: {e}")
            raise ConversionError(f"Invalid {self.label} syntax: {e}", format_name=self.format_tag.value) from e

        result = ConversionResult()
        for subject, predicate, obj in parsed:
            sink.add_statement(subject, predicate, obj)
            result.statements += 1

        logger.info(f"Read {result.statements} triples from {self.label}")
        return result

    def write(
        self,
        stream: TextIO,
        graph: Graph,
        options: Optional[ConversionOptions] = None,
    ) -> None:
        """Serialize ``graph`` to ``stream`` with rdflib."""
        serialized = graph.serialize(format=self.rdflib_format)
        if isinstance(serialized, bytes):
            serialized = serialized.decode('utf-8')
        stream.write(serialized)
        stream.flush()
        logger.info(f"Wrote {len(graph)} triples as {self.label}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_tag.value!r})"


RDF_XML = RdfSerializationConverter(FormatTag.RDF_XML, "xml", "RDF/XML")
TURTLE = RdfSerializationConverter(FormatTag.TURTLE, "turtle", "Turtle")
N3 = RdfSerializationConverter(FormatTag.N3, "n3", "N3")
