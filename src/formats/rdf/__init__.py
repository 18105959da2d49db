"""
RDF package - rdflib-backed serializations.

Components:
- rdf_io: RDF/XML, Turtle and N3 readers/writers delegating to rdflib
"""

from .rdf_io import (
    RdfSerializationConverter,
    RDF_XML,
    TURTLE,
    N3,
)

__all__ = [
    'RdfSerializationConverter',
    'RDF_XML',
    'TURTLE',
    'N3',
]
