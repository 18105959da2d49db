"""
Format registry for the TSV Graph Converter.

This module maps format names and mime types to the readers and writers
that handle them.

Usage:
    from plugins import get_reader, get_writer

    reader = get_reader("tsv")
    writer = get_writer("rdf-xml")
"""

from .protocols import (
    # Core protocols
    ReaderProtocol,
    WriterProtocol,
    # Type checking utilities
    is_reader,
    is_writer,
)
from .registry import (
    READERS,
    WRITERS,
    READER_MIME_TYPES,
    WRITER_MIME_TYPES,
    FormatInfo,
    get_reader,
    get_writer,
    get_reader_for_mime_type,
    get_writer_for_mime_type,
    list_formats,
)

__all__ = [
    # Core Protocols
    "ReaderProtocol",
    "WriterProtocol",
    # Type checking utilities
    "is_reader",
    "is_writer",
    # Registry
    "READERS",
    "WRITERS",
    "READER_MIME_TYPES",
    "WRITER_MIME_TYPES",
    "FormatInfo",
    "get_reader",
    "get_writer",
    "get_reader_for_mime_type",
    "get_writer_for_mime_type",
    "list_formats",
]
