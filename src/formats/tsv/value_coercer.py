"""
Cell value coercion.

Turns a raw, trimmed cell string into a graph node according to the
column's value kind. Coercion never drops data: whenever a typed value
cannot be produced, the raw string is kept as a plain literal.

    ITEM     -> URI of the entity with that id, else namespace + encoded value
    BOOLEAN  -> xsd:boolean for true/false (any case)
    NUMBER   -> xsd:long, then xsd:double (NaN, INF, -INF when not finite)
    DATE     -> xsd:dateTime carrying the raw string unvalidated
    TEXT/URL -> plain literal
"""

import logging
import math
import re
from typing import Mapping, Optional

from rdflib import XSD
from rdflib.term import Node

from shared.models import ConversionResult, GraphSink

from .tsv_models import Entity, ValueKind
from .uri_encoding import qualify

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(NaN|Infinity|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)"
)
_LONG_MIN = -(2 ** 63)
_LONG_MAX = 2 ** 63 - 1


class ValueCoercer:
    """
    Coerce raw cell strings into typed graph nodes.

    Args:
        namespace: Prefix for synthesized item URIs.
        index: Identifier index built by the entity resolver.
        sink: Graph sink used to construct terms.
        result: Optional statistics collector.
    """

    def __init__(
        self,
        namespace: str,
        index: Mapping[str, Entity],
        sink: GraphSink,
        result: Optional[ConversionResult] = None,
    ):
        self.namespace = namespace
        self.index = index
        self.sink = sink
        self.result = result if result is not None else ConversionResult()

    def coerce(self, raw: str, kind: ValueKind) -> Node:
        """Return the graph node for ``raw`` interpreted as ``kind``."""
        value: Optional[Node] = None

        if kind is ValueKind.ITEM:
            value = self._coerce_item(raw)
        elif kind is ValueKind.BOOLEAN:
            value = self._coerce_boolean(raw)
        elif kind is ValueKind.NUMBER:
            value = self._coerce_number(raw)
        elif kind is ValueKind.DATE:
            value = self.sink.new_typed_literal(raw, XSD.dateTime)

        if value is None:
            if kind in (ValueKind.BOOLEAN, ValueKind.NUMBER):
                self.result.coercion_fallbacks += 1
                logger.debug(f"Keeping '{raw}' as plain text; not a valid {kind.value}")
            value = self.sink.new_literal(raw)
        return value

    def _coerce_item(self, raw: str) -> Node:
        entity = self.index.get(raw)
        if entity is not None:
            return entity.uri
        self.result.dangling_references += 1
        logger.debug(f"No entity with id '{raw}'; referencing it by synthesized URI")
        return self.sink.new_resource(qualify(self.namespace, raw))

    def _coerce_boolean(self, raw: str) -> Optional[Node]:
        lowered = raw.lower()
        if lowered == "true":
            return self.sink.new_typed_literal(True, XSD.boolean)
        if lowered == "false":
            return self.sink.new_typed_literal(False, XSD.boolean)
        return None

    def _coerce_number(self, raw: str) -> Optional[Node]:
        if _INTEGER_PATTERN.fullmatch(raw):
            number = int(raw)
            if _LONG_MIN <= number <= _LONG_MAX:
                return self.sink.new_typed_literal(number, XSD.long)
        if _FLOAT_PATTERN.fullmatch(raw):
            number = float(raw)
            if math.isnan(number):
                return self.sink.new_typed_literal("NaN", XSD.double)
            if math.isinf(number):
                return self.sink.new_typed_literal("INF" if number > 0 else "-INF", XSD.double)
            return self.sink.new_typed_literal(number, XSD.double)
        return None
