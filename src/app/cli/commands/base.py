"""
Base command class.

This module contains the base command class that all CLI commands inherit
from. It owns configuration loading and logging setup so individual
commands only implement execute().
"""

import argparse
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..helpers import (
    load_config,
    get_default_config_path,
    setup_logging,
    print_header,
    print_footer,
)
from shared.models import ConversionOptions, ConversionResult


logger = logging.getLogger(__name__)


# ============================================================================
# Helper Utilities
# ============================================================================

def print_conversion_summary(result: ConversionResult, heading: Optional[str] = None) -> None:
    """Print a consistent summary for any reader result."""
    if heading:
        print_header(heading)
    for line in result.get_summary().splitlines():
        logger.info(line)
    if heading:
        print_footer()


# ============================================================================
# Base Command Class
# ============================================================================

class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides common functionality like configuration loading and logging setup.
    Subclasses should implement the execute() method.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file. When omitted, the default
                config.json is used if it exists.
        """
        self._explicit_config = config_path is not None
        self.config_path = config_path or get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """Lazy-load configuration; an absent default config is empty."""
        if self._config is None:
            if not self._explicit_config and not Path(self.config_path).exists():
                self._config = {}
            else:
                self._config = load_config(self.config_path)
        return self._config

    def setup_logging_from_config(self, level: Optional[str] = None) -> None:
        """Setup logging from the config's ``logging`` section, with an optional level override."""
        log_config = dict(self.config.get('logging', {}))
        if level:
            log_config['level'] = level
        setup_logging(config=log_config)

    def get_options(self, args: argparse.Namespace) -> ConversionOptions:
        """Build conversion options from config, overridden by CLI arguments."""
        options = ConversionOptions.from_dict(self.config)
        for attribute in ('namespace', 'url', 'input_encoding', 'output_encoding'):
            value = getattr(args, attribute, None)
            if value:
                setattr(options, attribute, value)
        return options

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
