"""
Format Registry - static mapping of format tags to readers and writers.

Every supported serialization is listed here at import time. A name or
mime type is turned into a FormatTag first; the tag then selects a
factory from READERS or WRITERS. Requests for a format that cannot be
read or written raise UnsupportedFormatError.

Usage:
    from plugins.registry import get_reader, get_writer

    reader = get_reader("tsv")
    writer = get_writer(FormatTag.TURTLE)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from formats.generic import RSS1p0Writer, TextWriter
from formats.rdf import N3, RDF_XML, TURTLE
from formats.tsv import TSVReader
from shared.errors import UnsupportedFormatError
from shared.models import FormatTag

from .protocols import ReaderProtocol, WriterProtocol

logger = logging.getLogger(__name__)


READERS: Dict[FormatTag, Callable[[], ReaderProtocol]] = {
    FormatTag.TSV: TSVReader,
    FormatTag.RDF_XML: lambda: RDF_XML,
    FormatTag.TURTLE: lambda: TURTLE,
    FormatTag.N3: lambda: N3,
}

WRITERS: Dict[FormatTag, Callable[[], WriterProtocol]] = {
    FormatTag.RDF_XML: lambda: RDF_XML,
    FormatTag.TURTLE: lambda: TURTLE,
    FormatTag.N3: lambda: N3,
    FormatTag.RSS1_0: RSS1p0Writer,
    FormatTag.TEXT: TextWriter,
}

READER_MIME_TYPES: Dict[str, FormatTag] = {
    "application/rdf+xml": FormatTag.RDF_XML,
    "application/rdf+n3": FormatTag.N3,
    "application/rdf+turtle": FormatTag.TURTLE,
    "text/turtle": FormatTag.TURTLE,
    "text/tab-separated-values": FormatTag.TSV,
}

WRITER_MIME_TYPES: Dict[str, FormatTag] = {
    "application/rdf+xml": FormatTag.RDF_XML,
    "application/rdf+n3": FormatTag.TURTLE,
    "application/rdf+turtle": FormatTag.TURTLE,
    "text/turtle": FormatTag.TURTLE,
    "application/rss+xml": FormatTag.RSS1_0,
    "text/plain": FormatTag.TEXT,
}


@dataclass(frozen=True)
class FormatInfo:
    """Summary of one format for listings."""
    tag: FormatTag
    label: str
    description: str
    can_read: bool
    can_write: bool


def get_reader(name: Union[str, FormatTag]) -> ReaderProtocol:
    """
    Return a reader for a format name or tag.

    Raises:
        UnsupportedFormatError: If the format is unknown or cannot be read.
    """
    tag = FormatTag.parse(name)
    factory = READERS.get(tag)
    if factory is None:
        raise UnsupportedFormatError(tag.value, [t.value for t in READERS], kind="input format")
    return factory()


def get_writer(name: Union[str, FormatTag]) -> WriterProtocol:
    """
    Return a writer for a format name or tag.

    Raises:
        UnsupportedFormatError: If the format is unknown or cannot be written.
    """
    tag = FormatTag.parse(name)
    factory = WRITERS.get(tag)
    if factory is None:
        raise UnsupportedFormatError(tag.value, [t.value for t in WRITERS], kind="output format")
    return factory()


def get_reader_for_mime_type(mime_type: str) -> ReaderProtocol:
    """Return the reader registered for a mime type."""
    tag = READER_MIME_TYPES.get(mime_type.strip().lower())
    if tag is None:
        raise UnsupportedFormatError(mime_type, READER_MIME_TYPES, kind="input mime type")
    return get_reader(tag)


def get_writer_for_mime_type(mime_type: str) -> WriterProtocol:
    """Return the writer registered for a mime type."""
    tag = WRITER_MIME_TYPES.get(mime_type.strip().lower())
    if tag is None:
        raise UnsupportedFormatError(mime_type, WRITER_MIME_TYPES, kind="output mime type")
    return get_writer(tag)


def list_formats() -> List[FormatInfo]:
    """Describe every known format, in FormatTag order."""
    formats: List[FormatInfo] = []
    for tag in FormatTag:
        component = None
        if tag in READERS:
            component = READERS[tag]()
        elif tag in WRITERS:
            component = WRITERS[tag]()
        formats.append(FormatInfo(
            tag=tag,
            label=component.label if component else tag.value,
            description=component.description if component else "",
            can_read=tag in READERS,
            can_write=tag in WRITERS,
        ))
    return formats
