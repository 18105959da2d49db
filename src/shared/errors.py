"""Custom exceptions for the TSV Graph Converter."""

from typing import Iterable, Optional, Tuple


class ConversionError(Exception):
    """A conversion could not be carried out."""

    def __init__(self, message: str, format_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.format_name = format_name

    def __str__(self) -> str:
        if self.format_name:
            return f"[{self.format_name}] {self.message}"
        return self.message


class UnsupportedFormatError(ConversionError, ValueError):
    """No reader or writer is registered under the requested name."""

    def __init__(self, name: str, supported: Iterable[str], kind: str = "format"):
        self.name = name
        self.supported: Tuple[str, ...] = tuple(supported)
        super().__init__(
            f"Unsupported {kind} '{name}'. Supported: {', '.join(self.supported)}"
        )
