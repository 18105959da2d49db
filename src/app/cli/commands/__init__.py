"""
CLI command implementations.

- base.py: Base command class and summary helper
- convert.py: ConvertCommand
- formats.py: FormatsCommand
"""

from .base import (
    BaseCommand,
    print_conversion_summary,
)

from .convert import ConvertCommand
from .formats import FormatsCommand


__all__ = [
    # Base
    'BaseCommand',
    'print_conversion_summary',
    # Commands
    'ConvertCommand',
    'FormatsCommand',
]
