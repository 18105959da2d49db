"""
Protocol Definitions for Format Components.

This module defines the protocols (interfaces) that readers and writers
must implement. Using protocols allows for duck typing while still
providing type hints and documentation.

Protocols:
    ReaderProtocol: Read a serialization into a graph sink
    WriterProtocol: Write a graph out in a serialization
"""

from typing import Any, Optional, Protocol, TextIO, runtime_checkable

from rdflib import Graph

from shared.models import ConversionOptions, ConversionResult, FormatTag, GraphSink


__all__ = [
    # Core protocols
    "ReaderProtocol",
    "WriterProtocol",
    # Type checking utilities
    "is_reader",
    "is_writer",
]


@runtime_checkable
class ReaderProtocol(Protocol):
    """
    Protocol for reading a source serialization.

    Readers consume a text stream completely and add the resulting
    statements to a GraphSink. They never remove statements.

    Example implementation:
        class LineReader(ReaderProtocol):
            format_tag = FormatTag.TEXT
            label = "Line Reader"
            description = "One literal per line"

            def read(self, stream, sink, options=None):
                result = ConversionResult()
                for line in stream:
                    ...
                return result
    """

    format_tag: FormatTag
    label: str
    description: str

    def read(
        self,
        stream: TextIO,
        sink: GraphSink,
        options: Optional[ConversionOptions] = None,
    ) -> ConversionResult:
        """
        Read ``stream`` into ``sink``.

        Args:
            stream: Text stream positioned at the start of the source.
            sink: Destination for statements.
            options: Conversion options (namespace, url, encodings).

        Returns:
            ConversionResult describing what was read.

        Raises:
            OSError: If reading the stream fails.
            ConversionError: If the source cannot be parsed at all.
        """
        ...


@runtime_checkable
class WriterProtocol(Protocol):
    """
    Protocol for writing a graph.

    Writers serialize the full graph to a text stream and do not modify
    the graph.
    """

    format_tag: FormatTag
    label: str
    description: str

    def write(
        self,
        stream: TextIO,
        graph: Graph,
        options: Optional[ConversionOptions] = None,
    ) -> None:
        """
        Serialize ``graph`` to ``stream``.

        Args:
            stream: Text stream to write to.
            graph: Graph to serialize.
            options: Conversion options (namespace, url, encodings).
        """
        ...


# =============================================================================
# Type Checking Utilities
# =============================================================================

def is_reader(obj: Any) -> bool:
    """Check if object implements ReaderProtocol."""
    return isinstance(obj, ReaderProtocol)


def is_writer(obj: Any) -> bool:
    """Check if object implements WriterProtocol."""
    return isinstance(obj, WriterProtocol)
