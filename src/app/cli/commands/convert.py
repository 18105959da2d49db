"""
Convert command: read one format, write another.
"""

import argparse
import logging
import os
import sys

from .base import BaseCommand, print_conversion_summary
from constants import ConversionDefaults, ExitCode
from formats.pipeline import convert_file
from shared.errors import ConversionError, UnsupportedFormatError


logger = logging.getLogger(__name__)


class ConvertCommand(BaseCommand):
    """
    Convert a file between formats.

    Usage:
        convert <input_file> <input_format> [output_file] [output_format]
    """

    def execute(self, args: argparse.Namespace) -> int:
        """Execute the conversion."""
        try:
            options = self.get_options(args)
            self.setup_logging_from_config(getattr(args, 'log_level', None))
        except (ValueError, FileNotFoundError, PermissionError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.CONFIG_ERROR

        input_file = args.input_file
        if not os.path.exists(input_file):
            print(f"Error: Can't find the input file '{input_file}'.", file=sys.stderr)
            return ExitCode.FILE_NOT_FOUND
        if not os.access(input_file, os.R_OK):
            print(f"Error: You don't have permission to read from the input file '{input_file}'.", file=sys.stderr)
            return ExitCode.PERMISSION_DENIED

        output_format = args.output_format or ConversionDefaults.OUTPUT_FORMAT
        logger.info(
            f"Converting {input_file} ({args.input_format}) -> "
            f"{args.output_file or 'stdout'} ({output_format})"
        )

        try:
            result = convert_file(
                input_file,
                args.input_format,
                args.output_file,
                output_format,
                options,
            )
        except UnsupportedFormatError as e:
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.VALIDATION_ERROR
        except ConversionError as e:
            logger.error(f"Conversion failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.ERROR
        except UnicodeDecodeError as e:
            print(f"Error: Failed to decode '{input_file}' as {options.input_encoding}: {e}", file=sys.stderr)
            return ExitCode.ERROR
        except PermissionError as e:
            print(f"Error: Permission denied: {e}", file=sys.stderr)
            return ExitCode.PERMISSION_DENIED
        except OSError as e:
            logger.error(f"I/O error during conversion: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return ExitCode.ERROR

        print_conversion_summary(result, heading="Conversion Summary")
        return ExitCode.SUCCESS
