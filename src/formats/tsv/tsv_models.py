"""
TSV Data Models.

This module defines the data structures produced while reading a
tab-separated source:

- ValueKind: target literal type of a column
- Multiplicity: single value or ';'-separated list per cell
- ColumnSpec: parsed header cell
- HeaderLayout: all header cells plus the reserved column positions
- Entity: deduplicated, row-derived record keyed by its id
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from rdflib import URIRef


class ValueKind(Enum):
    """Literal type a column's values are coerced toward."""
    ITEM = "item"
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    URL = "url"


class Multiplicity(Enum):
    """Whether a cell holds one value or a ';'-separated list."""
    SINGLE = "single"
    MULTI = "multi"


class ReservedColumn(Enum):
    """Column names that shape entities instead of becoming properties."""
    URI = "uri"
    TYPE = "type"
    LABEL = "label"
    ID = "id"

    @classmethod
    def match(cls, name: str) -> Optional['ReservedColumn']:
        """Return the reserved role for a column name, ignoring case."""
        lowered = name.lower()
        for role in cls:
            if role.value == lowered:
                return role
        return None


@dataclass(eq=False)
class ColumnSpec:
    """
    Parsed header cell.

    Columns are compared by identity: two header cells with the same
    name are still two distinct columns.

    Attributes:
        name: Declared name; lower-cased for reserved columns.
        predicate: Property URI, or None for reserved columns.
        multiplicity: SINGLE or MULTI (default).
        value_kind: Target literal type (default TEXT).
    """
    name: str
    predicate: Optional[URIRef] = None
    multiplicity: Multiplicity = Multiplicity.MULTI
    value_kind: ValueKind = ValueKind.TEXT

    @property
    def is_single(self) -> bool:
        return self.multiplicity is Multiplicity.SINGLE

    @property
    def is_reserved(self) -> bool:
        return self.predicate is None


@dataclass
class HeaderLayout:
    """
    Parsed header row.

    ``columns`` is aligned 1:1 with the tab positions of the header; blank
    header cells are kept as None so data fields keep their positions.
    Reserved positions are -1 when absent.
    """
    columns: List[Optional[ColumnSpec]] = field(default_factory=list)
    uri_column: int = -1
    id_column: int = -1
    label_column: int = -1
    type_column: int = -1

    @property
    def is_usable(self) -> bool:
        """True when a label column is known; otherwise no row can be read."""
        return self.label_column >= 0

    @property
    def property_columns(self) -> List[ColumnSpec]:
        return [c for c in self.columns if c is not None and not c.is_reserved]

    def column_at(self, index: int) -> Optional[ColumnSpec]:
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None


@dataclass
class Entity:
    """
    Deduplicated record built from one or more rows sharing an id.

    uri, label and type are fixed by the first row; later rows only
    append to ``properties``.
    """
    id: str
    uri: URIRef
    label: str
    type: URIRef
    properties: Dict[ColumnSpec, List[str]] = field(default_factory=dict)

    def add_value(self, column: ColumnSpec, raw_value: str) -> None:
        """Append a raw cell value for the given column."""
        self.properties.setdefault(column, []).append(raw_value)

    def values_for(self, column: ColumnSpec) -> List[str]:
        return self.properties.get(column, [])
