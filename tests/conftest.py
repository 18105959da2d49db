"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # File and CLI round trips

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import pytest
import json
import sys
import os

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    # TSV fixtures
    PEOPLE_TSV,
    MINIMAL_TSV,
    MERGED_ROWS_TSV,
    TYPED_VALUES_TSV,
    generate_large_tsv,

    # RDF fixtures
    SIMPLE_TURTLE,

    # Config fixtures
    SAMPLE_CONFIG,
)

from shared.models import ConversionOptions, TripleListSink


NAMESPACE = "http://example.org/data/"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: File and CLI round trips")


# =============================================================================
# Core Fixtures
# =============================================================================

@pytest.fixture
def namespace():
    """Namespace used for synthesized URIs in tests."""
    return NAMESPACE


@pytest.fixture
def options():
    """Conversion options with the test namespace and no progress bars."""
    return ConversionOptions(
        namespace=NAMESPACE,
        url="http://example.org/feed",
        progress_threshold=1000,
    )


@pytest.fixture
def sink():
    """Fresh list-backed graph sink."""
    return TripleListSink()


# =============================================================================
# TSV Fixtures
# =============================================================================

@pytest.fixture
def people_tsv():
    """People with ids, types, a numeric column and item references."""
    return PEOPLE_TSV


@pytest.fixture
def minimal_tsv():
    """Single label column with one row."""
    return MINIMAL_TSV


@pytest.fixture
def merged_rows_tsv():
    """Two rows sharing one id."""
    return MERGED_ROWS_TSV


@pytest.fixture
def typed_values_tsv():
    """One column per value kind, with valid and invalid values."""
    return TYPED_VALUES_TSV


@pytest.fixture
def large_tsv():
    """Enough rows to enable progress reporting."""
    return generate_large_tsv(num_rows=50)


@pytest.fixture
def temp_tsv_file(tmp_path, people_tsv):
    """Create a temporary TSV file for testing."""
    tsv_file = tmp_path / "people.tsv"
    tsv_file.write_text(people_tsv, encoding="utf-8")
    return str(tsv_file)


@pytest.fixture
def temp_turtle_file(tmp_path):
    """Create a temporary Turtle file for testing."""
    ttl_file = tmp_path / "people.ttl"
    ttl_file.write_text(SIMPLE_TURTLE, encoding="utf-8")
    return str(ttl_file)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def sample_config():
    """Full configuration dictionary."""
    return json.loads(json.dumps(SAMPLE_CONFIG))


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Create a temporary config.json for testing."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(sample_config, indent=2), encoding="utf-8")
    return str(config_file)
