#!/usr/bin/env python3
"""
TSV Graph Converter

Main entry point for converting Exhibit-style tab-separated data and RDF
serializations into one another.

Usage:
    python main.py convert <input_file> <input_format> [output_file] [output_format]
    python main.py formats
"""

import sys
from typing import Dict, List, Optional, Type

from app.cli.commands import BaseCommand, ConvertCommand, FormatsCommand
from app.cli.parsers import create_argument_parser


COMMANDS: Dict[str, Type[BaseCommand]] = {
    'convert': ConvertCommand,
    'formats': FormatsCommand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command = COMMANDS[args.command](config_path=getattr(args, 'config', None))
    return int(command.execute(args))


if __name__ == '__main__':
    sys.exit(main())
