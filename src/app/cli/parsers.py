"""
CLI argument parser configuration.

This module defines the argument parser structure for all CLI commands.
It centralizes all argument parsing logic and provides a clean interface
for the main entry point.
"""

import argparse

from constants import ConversionDefaults, LoggingConfig


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        description="Convert tab-separated data and RDF serializations into one another",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s convert people.tsv tsv
    %(prog)s convert people.tsv tsv people.rdf rdf-xml
    %(prog)s convert people.tsv tsv feed.xml rss1.0 --url http://example.org/people
    %(prog)s convert data.ttl turtle data.rdf rdf-xml --namespace http://example.org/
    %(prog)s formats
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _add_convert_parser(subparsers)
    _add_formats_parser(subparsers)

    return parser


def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the convert command parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Convert a file from one format to another'
    )
    parser.add_argument('input_file', help='Path to the file to convert')
    parser.add_argument('input_format', help='Format of the input file (e.g. tsv, turtle, rdf-xml)')
    parser.add_argument(
        'output_file',
        nargs='?',
        help='Output file path (default: standard output)'
    )
    parser.add_argument(
        'output_format',
        nargs='?',
        default=None,
        help=f'Format to write (default: {ConversionDefaults.OUTPUT_FORMAT})'
    )
    parser.add_argument(
        '--input-encoding', '-i',
        help=f'Input file encoding (default: {ConversionDefaults.INPUT_ENCODING})'
    )
    parser.add_argument(
        '--output-encoding', '-o',
        help='Output file encoding (default: same as the configured output encoding)'
    )
    parser.add_argument(
        '--namespace', '-n',
        help=f'URI prefix for generated resources (default: {ConversionDefaults.NAMESPACE})'
    )
    parser.add_argument(
        '--url',
        help=f'URL advertised by feed writers (default: {ConversionDefaults.URL})'
    )
    _add_common_arguments(parser)


def _add_formats_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the formats command parser."""
    parser = subparsers.add_parser(
        'formats',
        help='List the formats that can be read and written'
    )
    _add_common_arguments(parser)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--config', '-c', help='Path to configuration file')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help=f'Logging level (default: {LoggingConfig.DEFAULT_LOG_LEVEL} or the configured level)'
    )
