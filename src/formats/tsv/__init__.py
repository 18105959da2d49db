"""
TSV Import Module

This module reads tab-separated text whose header row declares column
semantics and converts every data row into graph statements.

Key Components:
- column_parser: Parse the header row into column descriptors
- value_coercer: Coerce cell strings into typed literals or item references
- entity_resolver: First pass; deduplicate rows into entities keyed by id
- statement_emitter: Second pass; add statements to a graph sink
- tsv_reader: Reader tying the passes together

Header Syntax:
    label    id    born:date,single    friends:item    tags

Usage:
    from formats.tsv import TSVReader, read_tsv_content

    graph, result = read_tsv_content(content, namespace="http://example.org/")
"""

from .tsv_models import (
    ColumnSpec,
    Entity,
    HeaderLayout,
    Multiplicity,
    ReservedColumn,
    ValueKind,
)

from .uri_encoding import percent_encode, qualify

from .column_parser import ColumnSpecParser, split_fields

from .value_coercer import ValueCoercer

from .entity_resolver import EntityResolver

from .statement_emitter import EXHIBIT_ID, StatementEmitter, quiet_literal_warnings, split_values

from .tsv_reader import TSVReader, read_tsv_content, read_tsv_file

__all__ = [
    # Models
    'ColumnSpec',
    'Entity',
    'HeaderLayout',
    'Multiplicity',
    'ReservedColumn',
    'ValueKind',
    # URI helpers
    'percent_encode',
    'qualify',
    # Passes
    'ColumnSpecParser',
    'split_fields',
    'ValueCoercer',
    'EntityResolver',
    'StatementEmitter',
    'split_values',
    'quiet_literal_warnings',
    'EXHIBIT_ID',
    # Reader
    'TSVReader',
    'read_tsv_content',
    'read_tsv_file',
]
