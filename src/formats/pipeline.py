"""
Conversion pipeline.

Runs one reader into a fresh rdflib Graph and hands the graph to one
writer. The graph is complete before the writer starts.

Usage:
    from formats.pipeline import convert_file

    result = convert_file("people.tsv", "tsv", "people.ttl", "turtle")
    print(result.get_summary())
"""

import io
import logging
import sys
from typing import Optional, TextIO, Tuple, Union

from rdflib import RDF, RDFS, Graph, Namespace

from constants import ConversionDefaults, Vocabulary
from plugins.protocols import ReaderProtocol, WriterProtocol
from plugins.registry import get_reader, get_writer
from shared.models import ConversionOptions, ConversionResult, FormatTag, RdflibGraphSink

logger = logging.getLogger(__name__)


def create_graph(options: ConversionOptions) -> Graph:
    """Create an empty graph with the converter's prefixes bound."""
    graph = Graph()
    graph.bind("rdf", RDF)
    graph.bind("rdfs", RDFS)
    graph.bind("exhibit", Namespace(Vocabulary.EXHIBIT_NAMESPACE))
    graph.bind("data", Namespace(options.namespace))
    return graph


def read_graph(
    input_stream: TextIO,
    reader: ReaderProtocol,
    options: Optional[ConversionOptions] = None,
) -> Tuple[Graph, ConversionResult]:
    """Read ``input_stream`` into a fresh graph with ``reader``."""
    options = options or ConversionOptions()
    graph = create_graph(options)
    sink = RdflibGraphSink(graph)

    logger.info(f"Reading with {reader.label}")
    result = reader.read(input_stream, sink, options)
    return graph, result


def render_graph(
    graph: Graph,
    writer: WriterProtocol,
    options: Optional[ConversionOptions] = None,
) -> str:
    """Serialize ``graph`` with ``writer`` into a string."""
    logger.info(f"Writing {len(graph)} triples with {writer.label}")
    buffer = io.StringIO()
    writer.write(buffer, graph, options or ConversionOptions())
    return buffer.getvalue()


def convert_stream(
    input_stream: TextIO,
    output_stream: TextIO,
    reader: ReaderProtocol,
    writer: WriterProtocol,
    options: Optional[ConversionOptions] = None,
) -> ConversionResult:
    """
    Read ``input_stream`` with ``reader`` and write the graph with ``writer``.

    Nothing is written to ``output_stream`` unless reading and serializing
    both succeed.

    Returns:
        ConversionResult reported by the reader.
    """
    graph, result = read_graph(input_stream, reader, options)
    output_stream.write(render_graph(graph, writer, options))
    output_stream.flush()
    return result


def convert_file(
    input_path: str,
    input_format: Union[str, FormatTag],
    output_path: Optional[str] = None,
    output_format: Union[str, FormatTag] = ConversionDefaults.OUTPUT_FORMAT,
    options: Optional[ConversionOptions] = None,
) -> ConversionResult:
    """
    Convert a file from one format to another.

    The output file is opened only after the input has been read and
    serialized, so a failed conversion leaves an existing output file as
    it was.

    Args:
        input_path: Source file.
        input_format: Name or tag of a readable format.
        output_path: Destination file; stdout when None.
        output_format: Name or tag of a writable format.
        options: Conversion options (namespace, url, encodings).

    Raises:
        UnsupportedFormatError: If either format is not available.
        ConversionError: If the input cannot be parsed.
        OSError: If a file cannot be opened, read or written.
    """
    options = options or ConversionOptions()
    reader = get_reader(input_format)
    writer = get_writer(output_format)

    with open(input_path, 'r', encoding=options.input_encoding, newline='') as input_stream:
        graph, result = read_graph(input_stream, reader, options)
    rendered = render_graph(graph, writer, options)

    if output_path is None:
        sys.stdout.write(rendered)
        sys.stdout.flush()
    else:
        with open(output_path, 'w', encoding=options.output_encoding) as output_stream:
            output_stream.write(rendered)
    return result
