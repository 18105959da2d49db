"""
CLI Command Integration Tests.

Tests for the command-line entry point:
- convert between formats, to files and to stdout
- formats listing
- configuration loading and CLI overrides
- exit codes for invalid input
"""

import json

import pytest
from rdflib import RDFS, Graph, Literal, URIRef

from app.cli import helpers
from app.cli.parsers import create_argument_parser
from constants import ExitCode
from fixtures import INVALID_TURTLE
from main import main

NS = "http://example.org/data/"


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    helpers._clear_managed_handlers()
    helpers._LOGGING_SIGNATURE = None


@pytest.mark.unit
class TestArgumentParser:
    """Tests for create_argument_parser()."""

    def test_convert_positionals(self):
        args = create_argument_parser().parse_args(
            ["convert", "in.tsv", "tsv", "out.rdf", "rdf-xml", "-n", NS]
        )
        assert args.command == "convert"
        assert args.input_file == "in.tsv"
        assert args.input_format == "tsv"
        assert args.output_file == "out.rdf"
        assert args.output_format == "rdf-xml"
        assert args.namespace == NS

    def test_optional_output(self):
        args = create_argument_parser().parse_args(["convert", "in.tsv", "tsv"])
        assert args.output_file is None
        assert args.output_format is None

    def test_encodings(self):
        args = create_argument_parser().parse_args(
            ["convert", "in.tsv", "tsv", "-i", "latin-1", "-o", "utf-16"]
        )
        assert args.input_encoding == "latin-1"
        assert args.output_encoding == "utf-16"

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["formats", "--log-level", "LOUD"])


@pytest.mark.integration
class TestConvertCommand:
    """Tests for the convert command."""

    def test_tsv_to_rdf_xml_file(self, temp_tsv_file, tmp_path):
        output = tmp_path / "people.rdf"
        exit_code = main(["convert", temp_tsv_file, "tsv", str(output), "rdf-xml", "-n", NS])
        assert exit_code == ExitCode.SUCCESS
        graph = Graph()
        graph.parse(str(output), format="xml")
        assert (URIRef(NS + "alice"), RDFS.label, Literal("Alice Smith")) in graph

    def test_stdout_defaults_to_turtle(self, temp_tsv_file, capsys):
        exit_code = main(["convert", temp_tsv_file, "tsv", "--namespace", NS, "--log-level", "WARNING"])
        assert exit_code == ExitCode.SUCCESS
        captured = capsys.readouterr()
        graph = Graph()
        graph.parse(data=captured.out, format="turtle")
        assert (URIRef(NS + "bob"), RDFS.label, Literal("Bob Jones")) in graph

    def test_summary_logged_to_stderr(self, temp_tsv_file, tmp_path, capsys):
        output = tmp_path / "out.ttl"
        exit_code = main(["convert", temp_tsv_file, "tsv", str(output), "turtle", "--log-level", "INFO"])
        assert exit_code == ExitCode.SUCCESS
        captured = capsys.readouterr()
        assert "Entities: 3" in captured.err
        assert "Conversion Summary" in captured.err
        assert captured.out == ""

    def test_turtle_to_text(self, temp_turtle_file, tmp_path):
        output = tmp_path / "labels.txt"
        exit_code = main(["convert", temp_turtle_file, "turtle", str(output), "text", "--log-level", "ERROR"])
        assert exit_code == ExitCode.SUCCESS
        assert sorted(output.read_text(encoding="utf-8").split()) == ["Alice", "Bob"]

    def test_config_file_namespace(self, temp_tsv_file, temp_config_file, tmp_path):
        output = tmp_path / "out.ttl"
        exit_code = main(["convert", temp_tsv_file, "tsv", str(output), "turtle", "--config", temp_config_file])
        assert exit_code == ExitCode.SUCCESS
        graph = Graph()
        graph.parse(str(output), format="turtle")
        assert (URIRef("http://example.org/data/carol"), RDFS.label, Literal("Carol White")) in graph

    def test_cli_namespace_overrides_config(self, temp_tsv_file, temp_config_file, tmp_path):
        output = tmp_path / "out.ttl"
        main([
            "convert", temp_tsv_file, "tsv", str(output), "turtle",
            "--config", temp_config_file, "--namespace", "urn:override:",
        ])
        graph = Graph()
        graph.parse(str(output), format="turtle")
        assert (URIRef("urn:override:carol"), RDFS.label, Literal("Carol White")) in graph

    def test_missing_input_file(self, tmp_path, capsys):
        exit_code = main(["convert", str(tmp_path / "missing.tsv"), "tsv"])
        assert exit_code == ExitCode.FILE_NOT_FOUND
        assert "Can't find the input file" in capsys.readouterr().err

    def test_unknown_input_format(self, temp_tsv_file, capsys):
        exit_code = main(["convert", temp_tsv_file, "csv"])
        assert exit_code == ExitCode.VALIDATION_ERROR
        assert "Unsupported" in capsys.readouterr().err

    def test_unwritable_format(self, temp_tsv_file, tmp_path):
        exit_code = main(["convert", temp_tsv_file, "tsv", str(tmp_path / "out.tsv"), "tsv"])
        assert exit_code == ExitCode.VALIDATION_ERROR

    def test_invalid_rdf_input(self, tmp_path, capsys):
        source = tmp_path / "bad.ttl"
        source.write_text(INVALID_TURTLE, encoding="utf-8")
        exit_code = main(["convert", str(source), "turtle", str(tmp_path / "out.rdf"), "rdf-xml"])
        assert exit_code == ExitCode.ERROR
        assert "[turtle]" in capsys.readouterr().err

    def test_failed_conversion_keeps_existing_output(self, tmp_path):
        source = tmp_path / "bad.ttl"
        source.write_text(INVALID_TURTLE, encoding="utf-8")
        output = tmp_path / "out.rdf"
        output.write_text("PREVIOUS CONTENT", encoding="utf-8")
        exit_code = main(["convert", str(source), "turtle", str(output), "rdf-xml"])
        assert exit_code == ExitCode.ERROR
        assert output.read_text(encoding="utf-8") == "PREVIOUS CONTENT"

    def test_undecodable_input(self, tmp_path, capsys):
        source = tmp_path / "latin.tsv"
        source.write_bytes("label\nCaf\xe9\n".encode("latin-1"))
        exit_code = main(["convert", str(source), "tsv", str(tmp_path / "out.ttl")])
        assert exit_code == ExitCode.ERROR
        assert "Failed to decode" in capsys.readouterr().err

    def test_input_encoding_option(self, tmp_path):
        source = tmp_path / "latin.tsv"
        source.write_bytes("label\nCaf\xe9\n".encode("latin-1"))
        output = tmp_path / "out.ttl"
        exit_code = main(["convert", str(source), "tsv", str(output), "turtle", "-i", "iso-8859-1", "-n", NS])
        assert exit_code == ExitCode.SUCCESS
        graph = Graph()
        graph.parse(str(output), format="turtle")
        assert graph.value(URIRef(NS + "Caf%C3%A9"), RDFS.label) == Literal("Caf\xe9")

    def test_missing_config_file(self, temp_tsv_file, tmp_path, capsys):
        exit_code = main(["convert", temp_tsv_file, "tsv", "--config", str(tmp_path / "nope.json")])
        assert exit_code == ExitCode.CONFIG_ERROR
        assert "Configuration file not found" in capsys.readouterr().err

    def test_invalid_config_file(self, temp_tsv_file, tmp_path):
        config = tmp_path / "bad.json"
        config.write_text(json.dumps(["not", "an", "object"]), encoding="utf-8")
        exit_code = main(["convert", temp_tsv_file, "tsv", "--config", str(config)])
        assert exit_code == ExitCode.CONFIG_ERROR


@pytest.mark.unit
class TestFormatsCommand:
    """Tests for the formats command."""

    def test_lists_every_format(self, capsys):
        assert main(["formats"]) == ExitCode.SUCCESS
        out = capsys.readouterr().out
        for name in ("tsv", "rdf-xml", "turtle", "n3", "rss1.0", "text"):
            assert name in out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "convert" in capsys.readouterr().out
