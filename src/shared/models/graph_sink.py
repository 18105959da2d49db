"""
Graph sink abstraction.

Readers never talk to a graph engine directly. They add statements through
the narrow GraphSink interface, which keeps the ingestion code independent of
any particular store:

- RdflibGraphSink: writes into an rdflib.Graph (used by the pipeline)
- TripleListSink: append-only list of triples (handy in tests)
"""

from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable

from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

Triple = Tuple[URIRef, URIRef, Node]


@runtime_checkable
class GraphSink(Protocol):
    """Append-only destination for statements."""

    def add_statement(self, subject: URIRef, predicate: URIRef, obj: Node) -> None:
        """Add one statement."""
        ...

    def new_typed_literal(self, value: Any, datatype: Optional[URIRef]) -> Literal:
        """Build a literal carrying the given datatype."""
        ...

    def new_literal(self, text: str) -> Literal:
        """Build a plain string literal."""
        ...

    def new_resource(self, uri: str) -> URIRef:
        """Build a resource reference."""
        ...


class _TermFactory:
    """rdflib term construction shared by the concrete sinks."""

    def new_typed_literal(self, value: Any, datatype: Optional[URIRef]) -> Literal:
        # String values keep their lexical form exactly as given
        return Literal(value, datatype=datatype, normalize=False)

    def new_literal(self, text: str) -> Literal:
        return Literal(text)

    def new_resource(self, uri: str) -> URIRef:
        return URIRef(uri)


class RdflibGraphSink(_TermFactory):
    """Sink writing into an rdflib Graph."""

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = graph if graph is not None else Graph()
        self.added = 0

    def add_statement(self, subject: URIRef, predicate: URIRef, obj: Node) -> None:
        self.graph.add((subject, predicate, obj))
        self.added += 1


class TripleListSink(_TermFactory):
    """Sink recording statements in insertion order, duplicates included."""

    def __init__(self) -> None:
        self.triples: List[Triple] = []

    def add_statement(self, subject: URIRef, predicate: URIRef, obj: Node) -> None:
        self.triples.append((subject, predicate, obj))

    def objects(self, subject: URIRef, predicate: URIRef) -> List[Node]:
        """Return the objects recorded for a subject and predicate."""
        return [o for s, p, o in self.triples if s == subject and p == predicate]

    def __len__(self) -> int:
        return len(self.triples)
