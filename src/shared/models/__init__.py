"""
Shared data models for the TSV Graph Converter.

This module contains the data classes used by every reader and writer to
describe a conversion run and the graph sink readers write into.

Usage:
    from shared.models import ConversionOptions, ConversionResult

    # Or import specific classes
    from shared.models.graph_sink import GraphSink, RdflibGraphSink
"""

from .conversion import (
    ConversionOptions,
    ConversionResult,
    SkippedRow,
)
from .format_tag import FormatTag
from .graph_sink import (
    GraphSink,
    RdflibGraphSink,
    TripleListSink,
)

__all__ = [
    # Conversion configuration and results
    "ConversionOptions",
    "ConversionResult",
    "SkippedRow",
    # Format names
    "FormatTag",
    # Graph sinks
    "GraphSink",
    "RdflibGraphSink",
    "TripleListSink",
]
