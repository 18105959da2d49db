"""
Entity resolution (first pass).

Streams the data rows of a TSV source and folds them into entities keyed
by id. Every row with a non-blank label resolves to exactly one entity;
rows sharing an id merge into the entity created by the first of them.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from rdflib import URIRef

from constants import TSVSyntax
from shared.models import ConversionResult

from .column_parser import split_fields
from .tsv_models import Entity, HeaderLayout
from .uri_encoding import qualify

logger = logging.getLogger(__name__)


class EntityResolver:
    """
    Build the identifier index from data rows.

    Example:
        >>> resolver = EntityResolver(layout, "urn:x:")
        >>> index = resolver.resolve([(2, "Paris\\tFrance")])
        >>> index["Paris"].uri
        rdflib.term.URIRef('urn:x:Paris')
    """

    def __init__(
        self,
        layout: HeaderLayout,
        namespace: str,
        result: Optional[ConversionResult] = None,
    ):
        self.layout = layout
        self.namespace = namespace
        self.result = result if result is not None else ConversionResult()
        self.index: Dict[str, Entity] = {}

    def resolve(self, lines: Iterable[Tuple[int, str]]) -> Dict[str, Entity]:
        """
        Consume numbered lines and return the id -> Entity index.

        Args:
            lines: (line_number, line) pairs following the header.

        Returns:
            Insertion-ordered mapping of id to Entity.
        """
        if not self.layout.is_usable:
            return self.index

        for line_number, line in lines:
            if not line.strip():
                continue
            self.result.rows_read += 1
            self.resolve_row(split_fields(line), line_number)

        self.result.entities = len(self.index)
        logger.info(
            f"Resolved {len(self.index)} entities from {self.result.rows_read} rows "
            f"({self.result.rows_skipped} skipped)"
        )
        return self.index

    def resolve_row(self, fields: List[str], line_number: int = 0) -> Optional[Entity]:
        """Fold one split row into the index; return its entity or None if skipped."""
        layout = self.layout

        label = self._field(fields, layout.label_column)
        if not label:
            self.result.skip_row(line_number, "blank label")
            logger.debug(f"Skipping line {line_number}: blank label")
            return None

        entity_id = self._field(fields, layout.id_column) or label
        entity = self.index.get(entity_id)

        if entity is None:
            uri = self._field(fields, layout.uri_column) or qualify(self.namespace, entity_id)
            type_name = self._field(fields, layout.type_column) or TSVSyntax.DEFAULT_TYPE
            entity = Entity(
                id=entity_id,
                uri=URIRef(uri),
                label=label,
                type=URIRef(qualify(self.namespace, type_name)),
            )
            self.index[entity_id] = entity
        else:
            logger.debug(f"Line {line_number} merges into existing entity '{entity_id}'")

        for position, raw in enumerate(fields):
            column = layout.column_at(position)
            if column is None or column.is_reserved:
                continue
            value = raw.strip()
            if value:
                entity.add_value(column, value)

        return entity

    @staticmethod
    def _field(fields: List[str], index: int) -> str:
        if 0 <= index < len(fields):
            return fields[index].strip()
        return ""
