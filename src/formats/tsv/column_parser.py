"""
TSV Header Parser.

Parses the header row of a tab-separated source. Each header cell has the
form ``name[:detail,detail,...]``:

- details: ``single`` plus one of ``item``, ``number``, ``boolean``,
  ``date``, ``url`` (case-insensitive, last value kind wins, unknown
  details ignored)
- names ``uri``, ``id``, ``label`` and ``type`` (case-insensitive) are
  reserved and configure entities instead of becoming properties

Usage:
    from formats.tsv.column_parser import ColumnSpecParser

    parser = ColumnSpecParser("http://example.org/")
    layout = parser.parse_header("label\\tage:number,single\\tfriends:item")
"""

import logging
from typing import List, Optional

from rdflib import URIRef

from constants import TSVSyntax

from .tsv_models import ColumnSpec, HeaderLayout, Multiplicity, ReservedColumn, ValueKind
from .uri_encoding import qualify

logger = logging.getLogger(__name__)

_VALUE_KIND_DETAILS = {
    "item": ValueKind.ITEM,
    "number": ValueKind.NUMBER,
    "boolean": ValueKind.BOOLEAN,
    "date": ValueKind.DATE,
    "url": ValueKind.URL,
}


def split_fields(line: str) -> List[str]:
    """Split a line on tabs, keeping every empty field."""
    return line.rstrip("\r\n").split(TSVSyntax.FIELD_SEPARATOR)


class ColumnSpecParser:
    """
    Turn a header line into a HeaderLayout.

    Example:
        >>> parser = ColumnSpecParser("urn:x:")
        >>> layout = parser.parse_header("Name\\t\\tborn:date")
        >>> layout.columns[1] is None
        True
        >>> layout.label_column
        0
    """

    def __init__(self, namespace: str):
        self.namespace = namespace

    def parse_cell(self, cell: str) -> Optional[ColumnSpec]:
        """
        Parse a single header cell.

        Returns:
            ColumnSpec, or None for a blank cell.
        """
        spec = cell.strip()
        if not spec:
            return None

        name, separator, detail_text = spec.partition(TSVSyntax.DETAIL_SEPARATOR)
        column = ColumnSpec(name=name.strip())

        if separator:
            for detail in detail_text.split(TSVSyntax.DETAIL_LIST_SEPARATOR):
                detail = detail.strip().lower()
                if detail == "single":
                    column.multiplicity = Multiplicity.SINGLE
                elif detail in _VALUE_KIND_DETAILS:
                    column.value_kind = _VALUE_KIND_DETAILS[detail]
                elif detail:
                    logger.debug(f"Ignoring unknown detail '{detail}' on column '{column.name}'")

        role = ReservedColumn.match(column.name)
        if role is not None:
            column.name = role.value
        else:
            column.predicate = URIRef(qualify(self.namespace, column.name))

        return column

    def parse_header(self, line: str) -> HeaderLayout:
        """
        Parse the header line into column descriptors and reserved positions.

        When no label column is declared, the first non-blank column becomes
        the label column. A layout without any column is not usable.
        """
        layout = HeaderLayout()

        for index, cell in enumerate(split_fields(line)):
            column = self.parse_cell(cell)
            layout.columns.append(column)
            if column is None or not column.is_reserved:
                continue
            self._bind_reserved(layout, ReservedColumn(column.name), index)

        if layout.label_column < 0:
            for index, column in enumerate(layout.columns):
                if column is not None:
                    layout.label_column = index
                    logger.debug(f"No label column declared; using column {index} ('{column.name}')")
                    break

        if layout.is_usable:
            logger.info(
                f"Parsed header: {len(layout.columns)} columns, "
                f"{len(layout.property_columns)} properties, label column {layout.label_column}"
            )
        else:
            logger.warning("Header has no usable columns; no rows will be read")

        return layout

    def _bind_reserved(self, layout: HeaderLayout, role: ReservedColumn, index: int) -> None:
        attribute = f"{role.value}_column"
        previous = getattr(layout, attribute)
        if previous >= 0:
            logger.warning(
                f"Column '{role.value}' declared more than once (positions {previous} and {index}); "
                f"using position {index}"
            )
        setattr(layout, attribute, index)
