"""
Entity resolution tests (first pass).

Covers:
- Default id, uri and type derivation
- Explicit id, uri and type columns
- Merging rows that share an id
- Blank-label rows and short rows
"""

import pytest
from rdflib import URIRef

from formats.tsv import ColumnSpecParser, EntityResolver
from shared.models import ConversionResult

NS = "http://example.org/data/"


def resolve(header, *rows, result=None):
    layout = ColumnSpecParser(NS).parse_header(header)
    resolver = EntityResolver(layout, NS, result)
    numbered = [(line_number, row) for line_number, row in enumerate(rows, start=2)]
    return resolver.resolve(numbered), layout


@pytest.mark.unit
class TestDefaults:
    """Entities without id, uri or type columns."""

    def test_label_only(self):
        index, _ = resolve("label", "Paris")
        entity = index["Paris"]
        assert entity.id == "Paris"
        assert entity.label == "Paris"
        assert entity.uri == URIRef(NS + "Paris")
        assert entity.type == URIRef(NS + "Item")

    def test_uri_is_percent_encoded(self):
        index, _ = resolve("label", "New York")
        assert index["New York"].uri == URIRef(NS + "New%20York")

    def test_blank_id_cell_falls_back_to_label(self):
        index, _ = resolve("label\tid", "Rome\t")
        assert "Rome" in index

    def test_blank_type_cell_uses_default_type(self):
        index, _ = resolve("label\ttype", "Rome\t  ")
        assert index["Rome"].type == URIRef(NS + "Item")


@pytest.mark.unit
class TestExplicitColumns:
    """id, uri and type columns."""

    def test_id_column(self):
        index, _ = resolve("label\tid", "Alice Smith\talice")
        assert list(index) == ["alice"]
        assert index["alice"].uri == URIRef(NS + "alice")
        assert index["alice"].label == "Alice Smith"

    def test_uri_column_used_verbatim(self):
        index, _ = resolve("label\turi", "Alice\thttp://people.example.org/alice")
        assert index["Alice"].uri == URIRef("http://people.example.org/alice")

    def test_type_column_is_qualified(self):
        index, _ = resolve("label\ttype", "Alice\tResearch Scientist")
        assert index["Alice"].type == URIRef(NS + "Research%20Scientist")

    def test_values_are_trimmed(self):
        index, _ = resolve("label\tid\tcolor", "  Apple \t fruit1 \t red ")
        entity = index["fruit1"]
        assert entity.label == "Apple"
        assert list(entity.properties.values()) == [["red"]]


@pytest.mark.unit
class TestMerging:
    """Rows sharing an id collapse into one entity."""

    def test_first_row_fixes_identity(self):
        index, layout = resolve(
            "label\tid\ttype\tcolor",
            "Apple\tfruit1\tFruit\tred",
            "Green Apple\tfruit1\tVegetable\tgreen",
        )
        assert len(index) == 1
        entity = index["fruit1"]
        assert entity.label == "Apple"
        assert entity.type == URIRef(NS + "Fruit")
        color = layout.property_columns[0]
        assert entity.values_for(color) == ["red", "green"]

    def test_insertion_order_preserved(self):
        index, _ = resolve("label", "b", "a", "c", "a")
        assert list(index) == ["b", "a", "c"]

    def test_blank_values_not_recorded(self):
        index, layout = resolve("label\tcolor", "Apple\t", "Apple\t  ")
        assert index["Apple"].values_for(layout.property_columns[0]) == []


@pytest.mark.unit
class TestSkippedRows:
    """Rows that contribute nothing."""

    def test_blank_label_row_is_skipped(self):
        result = ConversionResult()
        index, _ = resolve("label\tid", "\tghost", "Real\treal", result=result)
        assert list(index) == ["real"]
        assert result.rows_read == 2
        assert result.rows_skipped == 1
        assert result.skipped_rows[0].line_number == 2
        assert result.skipped_rows[0].reason == "blank label"

    def test_blank_label_does_not_corrupt_following_rows(self):
        index, _ = resolve("label\tid", "A\ta", "\ta", "B\ta")
        assert len(index) == 1
        assert index["a"].label == "A"

    def test_blank_lines_are_not_rows(self):
        result = ConversionResult()
        resolve("label", "", "   ", "X", result=result)
        assert result.rows_read == 1
        assert result.rows_skipped == 0

    def test_row_shorter_than_label_column(self):
        result = ConversionResult()
        index, _ = resolve("id\tlabel", "only-id", result=result)
        assert index == {}
        assert result.rows_skipped == 1

    def test_extra_fields_ignored(self):
        index, layout = resolve("label\tcolor", "Apple\tred\textra\tmore")
        assert index["Apple"].values_for(layout.property_columns[0]) == ["red"]
        assert len(index["Apple"].properties) == 1

    def test_fields_under_blank_header_cells_ignored(self):
        index, _ = resolve("label\t\tcolor", "Apple\tignored\tred")
        assert [v for values in index["Apple"].properties.values() for v in values] == ["red"]

    def test_unusable_layout_reads_nothing(self):
        layout = ColumnSpecParser(NS).parse_header("\t")
        result = ConversionResult()
        index = EntityResolver(layout, NS, result).resolve([(2, "a\tb")])
        assert index == {}
        assert result.rows_read == 0

    def test_result_counts_entities(self):
        result = ConversionResult()
        resolve("label", "a", "b", "a", result=result)
        assert result.entities == 2
