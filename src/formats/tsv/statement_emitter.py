"""
Statement emission (second pass).

Writes the resolved entities into a graph sink. Each entity yields its
rdf:type, rdfs:label and exhibit:id statements, followed by one statement
per property value. Multi-valued cells fan out on ';'.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from rdflib import RDF, RDFS, URIRef
from tqdm import tqdm

from constants import ConversionDefaults, TSVSyntax, Vocabulary
from shared.models import ConversionResult, GraphSink

from .tsv_models import ColumnSpec, Entity
from .value_coercer import ValueCoercer

logger = logging.getLogger(__name__)

EXHIBIT_ID = URIRef(Vocabulary.EXHIBIT_NAMESPACE + "id")

# rdflib warns, with a traceback, for every typed literal it cannot parse.
RDFLIB_TERM_LOGGER = "rdflib.term"


@contextmanager
def quiet_literal_warnings() -> Iterator[None]:
    """Raise the rdflib.term logger to ERROR for the duration of the block."""
    term_logger = logging.getLogger(RDFLIB_TERM_LOGGER)
    previous = term_logger.level
    term_logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        term_logger.setLevel(previous)


def split_values(column: ColumnSpec, raw: str) -> Iterator[str]:
    """Yield the values held by one raw cell of ``column``."""
    if column.is_single:
        yield raw
        return
    for piece in raw.split(TSVSyntax.VALUE_SEPARATOR):
        piece = piece.strip()
        if piece:
            yield piece


class StatementEmitter:
    """Emit statements for every entity of an identifier index."""

    def __init__(
        self,
        sink: GraphSink,
        namespace: str,
        result: Optional[ConversionResult] = None,
        progress_threshold: int = ConversionDefaults.PROGRESS_THRESHOLD,
    ):
        self.sink = sink
        self.namespace = namespace
        self.result = result if result is not None else ConversionResult()
        self.progress_threshold = progress_threshold

    def emit(self, index: Mapping[str, Entity]) -> int:
        """
        Add statements for all entities in ``index``.

        Returns:
            Number of statements added.
        """
        coercer = ValueCoercer(self.namespace, index, self.sink, self.result)
        before = self.result.statements

        entities = list(index.values())
        # Date cells are carried unvalidated, so ill-typed literals are expected.
        with quiet_literal_warnings():
            for entity in tqdm(
                entities,
                desc="Emitting statements",
                unit="entity",
                disable=len(entities) < self.progress_threshold,
            ):
                self._emit_entity(entity, coercer)

        emitted = self.result.statements - before
        logger.info(f"Emitted {emitted} statements for {len(entities)} entities")
        return emitted

    def _emit_entity(self, entity: Entity, coercer: ValueCoercer) -> None:
        self._add(entity.uri, RDF.type, entity.type)
        self._add(entity.uri, RDFS.label, self.sink.new_literal(entity.label))
        self._add(entity.uri, EXHIBIT_ID, self.sink.new_literal(entity.id))

        for column, raw_values in entity.properties.items():
            if column.is_reserved:
                continue
            for raw in raw_values:
                for value in split_values(column, raw):
                    self._add(entity.uri, column.predicate, coercer.coerce(value, column.value_kind))

    def _add(self, subject, predicate, obj) -> None:
        self.sink.add_statement(subject, predicate, obj)
        self.result.statements += 1
