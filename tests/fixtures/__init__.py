"""
Centralized test fixtures for the TSV Graph Converter test suite.

This package provides reusable sample content:
- TSV sources exercising headers, merging and value coercion
- RDF samples for the pass-through readers
- Configuration dictionaries

Usage:
    from fixtures import PEOPLE_TSV, SAMPLE_CONFIG

Or use the pytest fixtures in conftest.py which import from here.
"""

from .tsv_fixtures import (
    # Simple TSV content
    PEOPLE_TSV,
    MINIMAL_TSV,
    EMPTY_TSV,

    # Header edge cases
    NO_LABEL_HEADER_TSV,
    BLANK_LINES_TSV,
    HEADER_ONLY_TSV,

    # Entity merging and references
    MERGED_ROWS_TSV,
    FORWARD_REFERENCE_TSV,

    # Typed values
    TYPED_VALUES_TSV,

    # Large content
    generate_large_tsv,
)

from .rdf_fixtures import (
    SIMPLE_TURTLE,
    SIMPLE_RDF_XML,
    INVALID_TURTLE,
)

from .config_fixtures import (
    SAMPLE_CONFIG,
    MINIMAL_CONFIG,
)

__all__ = [
    'PEOPLE_TSV',
    'MINIMAL_TSV',
    'EMPTY_TSV',
    'NO_LABEL_HEADER_TSV',
    'BLANK_LINES_TSV',
    'HEADER_ONLY_TSV',
    'MERGED_ROWS_TSV',
    'FORWARD_REFERENCE_TSV',
    'TYPED_VALUES_TSV',
    'generate_large_tsv',
    'SIMPLE_TURTLE',
    'SIMPLE_RDF_XML',
    'INVALID_TURTLE',
    'SAMPLE_CONFIG',
    'MINIMAL_CONFIG',
]
