"""
Formats command: list readable and writable formats.
"""

import argparse

from .base import BaseCommand
from constants import ExitCode
from plugins.registry import list_formats


class FormatsCommand(BaseCommand):
    """List every registered format."""

    def execute(self, args: argparse.Namespace) -> int:
        """Print one line per format with its read/write capabilities."""
        print(f"{'Format':<10} {'Read':<6} {'Write':<6} {'Description'}")
        print("-" * 70)
        for info in list_formats():
            can_read = "yes" if info.can_read else "-"
            can_write = "yes" if info.can_write else "-"
            print(f"{info.tag.value:<10} {can_read:<6} {can_write:<6} {info.description}")
        return ExitCode.SUCCESS
