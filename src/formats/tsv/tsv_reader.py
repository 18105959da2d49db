"""
TSV Reader.

Reads tab-separated text into a graph in two passes:

1. Header: the first non-blank line is parsed into column descriptors
2. Resolution: every data row is folded into an entity keyed by id
3. Emission: statements are added once the whole input has been read,
   so item references can point at entities defined on later rows

Usage:
    from formats.tsv import TSVReader, read_tsv_content

    graph, result = read_tsv_content(tsv_text, namespace="http://example.org/")
    print(result.get_summary())
"""

import io
import logging
from typing import Iterator, Optional, TextIO, Tuple

from rdflib import Graph

from shared.models import (
    ConversionOptions,
    ConversionResult,
    FormatTag,
    GraphSink,
    RdflibGraphSink,
)

from .column_parser import ColumnSpecParser
from .entity_resolver import EntityResolver
from .statement_emitter import StatementEmitter
from .tsv_models import HeaderLayout

logger = logging.getLogger(__name__)


class TSVReader:
    """
    Tab-separated value reader.

    The stream is read to exhaustion before any statement is emitted.
    I/O and decoding errors raised by the stream propagate unchanged;
    statements are only added after reading succeeded.
    """

    format_tag = FormatTag.TSV
    label = "TSV Reader"
    description = "Tab-separated value reader"

    def read(
        self,
        stream: TextIO,
        sink: GraphSink,
        options: Optional[ConversionOptions] = None,
    ) -> ConversionResult:
        """
        Read a TSV stream into ``sink``.

        Args:
            stream: Text stream positioned at the start of the source.
            sink: Destination for statements.
            options: Conversion options; only ``namespace`` and
                ``progress_threshold`` are used.

        Returns:
            ConversionResult with row, entity and statement counts.
        """
        options = options or ConversionOptions()
        result = ConversionResult()
        lines = enumerate(stream, start=1)

        layout = self._read_header(lines, options.namespace)
        if layout is None or not layout.is_usable:
            return result

        resolver = EntityResolver(layout, options.namespace, result)
        index = resolver.resolve(lines)

        emitter = StatementEmitter(
            sink,
            options.namespace,
            result,
            progress_threshold=options.progress_threshold,
        )
        emitter.emit(index)
        return result

    def _read_header(self, lines: Iterator[Tuple[int, str]], namespace: str) -> Optional[HeaderLayout]:
        for line_number, line in lines:
            if line.strip():
                logger.debug(f"Header found on line {line_number}")
                return ColumnSpecParser(namespace).parse_header(line)
        logger.warning("Input contains no header line")
        return None


def read_tsv_content(
    content: str,
    namespace: Optional[str] = None,
    graph: Optional[Graph] = None,
) -> Tuple[Graph, ConversionResult]:
    """
    Convert TSV text into an rdflib Graph.

    Args:
        content: TSV source text.
        namespace: URI prefix for synthesized resources.
        graph: Optional graph to add to; a new one is created otherwise.

    Returns:
        Tuple of (graph, result).
    """
    options = ConversionOptions() if namespace is None else ConversionOptions(namespace=namespace)
    sink = RdflibGraphSink(graph)
    result = TSVReader().read(io.StringIO(content), sink, options)
    return sink.graph, result


def read_tsv_file(
    file_path: str,
    options: Optional[ConversionOptions] = None,
    graph: Optional[Graph] = None,
) -> Tuple[Graph, ConversionResult]:
    """Convert a TSV file into an rdflib Graph."""
    options = options or ConversionOptions()
    sink = RdflibGraphSink(graph)
    with open(file_path, 'r', encoding=options.input_encoding, newline='') as f:
        result = TSVReader().read(f, sink, options)
    return sink.graph, result
