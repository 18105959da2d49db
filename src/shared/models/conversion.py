"""
Conversion options and results.

This module contains the configuration handed to every reader and writer
and the statistics a reader reports back after filling the graph.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from constants import ConversionDefaults


@dataclass
class ConversionOptions:
    """Configuration for a single conversion run."""
    namespace: str = ConversionDefaults.NAMESPACE
    url: str = ConversionDefaults.URL
    input_encoding: str = ConversionDefaults.INPUT_ENCODING
    output_encoding: str = ConversionDefaults.OUTPUT_ENCODING
    progress_threshold: int = ConversionDefaults.PROGRESS_THRESHOLD

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ConversionOptions':
        """Create ConversionOptions from a dictionary."""
        conversion_config = config_dict.get('conversion', config_dict)
        return cls(
            namespace=conversion_config.get('namespace', ConversionDefaults.NAMESPACE),
            url=conversion_config.get('url', ConversionDefaults.URL),
            input_encoding=conversion_config.get('input_encoding', ConversionDefaults.INPUT_ENCODING),
            output_encoding=conversion_config.get('output_encoding', ConversionDefaults.OUTPUT_ENCODING),
            progress_threshold=int(
                conversion_config.get('progress_threshold', ConversionDefaults.PROGRESS_THRESHOLD)
            ),
        )

    @classmethod
    def from_file(cls, config_path: str) -> 'ConversionOptions':
        """Load configuration from a JSON file."""
        if not config_path:
            raise ValueError("config_path cannot be empty")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")
        except UnicodeDecodeError as e:
            raise ValueError(f"Encoding error reading {config_path}: {e}")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file must contain a JSON object, got {type(config_dict)}")

        return cls.from_dict(config_dict)


@dataclass
class SkippedRow:
    """A data row that produced no entity."""
    line_number: int
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ConversionResult:
    """
    Statistics collected while reading a source into the graph.

    Attributes:
        rows_read: Non-blank data rows seen after the header.
        rows_skipped: Data rows that contributed nothing.
        entities: Distinct entities created.
        statements: Statements added to the graph.
        coercion_fallbacks: Typed values that fell back to plain strings.
        dangling_references: Item references with no matching entity.
        skipped_rows: Details of each skipped row.
    """
    rows_read: int = 0
    rows_skipped: int = 0
    entities: int = 0
    statements: int = 0
    coercion_fallbacks: int = 0
    dangling_references: int = 0
    skipped_rows: List[SkippedRow] = field(default_factory=list)

    def skip_row(self, line_number: int, reason: str) -> None:
        self.rows_skipped += 1
        self.skipped_rows.append(SkippedRow(line_number=line_number, reason=reason))

    def get_summary(self) -> str:
        """Return a human-readable summary of the conversion."""
        lines = [
            f"Rows read: {self.rows_read}",
            f"Rows skipped: {self.rows_skipped}",
            f"Entities: {self.entities}",
            f"Statements: {self.statements}",
        ]
        if self.coercion_fallbacks:
            lines.append(f"Values kept as plain text: {self.coercion_fallbacks}")
        if self.dangling_references:
            lines.append(f"Unresolved item references: {self.dangling_references}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rowsRead": self.rows_read,
            "rowsSkipped": self.rows_skipped,
            "entities": self.entities,
            "statements": self.statements,
            "coercionFallbacks": self.coercion_fallbacks,
            "danglingReferences": self.dangling_references,
            "skippedRows": [row.to_dict() for row in self.skipped_rows],
        }
