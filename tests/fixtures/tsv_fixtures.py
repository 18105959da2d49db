"""
TSV test fixtures for the test suite.

Tab characters are written as \t escapes so the column positions stay
visible in the source.
"""

# =============================================================================
# Simple TSV Content
# =============================================================================

PEOPLE_TSV = (
    "label\tid\ttype\tage:number,single\tfriends:item\ttags\n"
    "Alice Smith\talice\tPerson\t34\tbob;carol\tadmin; staff\n"
    "Bob Jones\tbob\tPerson\t29\talice\tstaff\n"
    "Carol White\tcarol\tPerson\t41\t\t\n"
)

MINIMAL_TSV = (
    "label\n"
    "Paris\n"
)

EMPTY_TSV = ""

# =============================================================================
# Header Edge Cases
# =============================================================================

# No label column: the first non-blank column ("name") takes its place.
NO_LABEL_HEADER_TSV = (
    "\tname\tcountry\n"
    "x\tParis\tFrance\n"
)

# Only whitespace and tabs: there is no header line at all.
BLANK_LINES_TSV = (
    "\n"
    "   \n"
    "\t\t\n"
)

# Header preceded by blank lines and followed by no data.
HEADER_ONLY_TSV = (
    "\n"
    "\t\n"
    "label\tid\n"
)

# =============================================================================
# Entity Merging and References
# =============================================================================

MERGED_ROWS_TSV = (
    "label\tid\ttype\tcolor\n"
    "Apple\tfruit1\tFruit\tred\n"
    "Green Apple\tfruit1\tVegetable\tgreen\n"
)

FORWARD_REFERENCE_TSV = (
    "label\tknows:item\n"
    "Alice\tBob\n"
    "Bob\tNobody Here\n"
)

# =============================================================================
# Typed Values
# =============================================================================

TYPED_VALUES_TSV = (
    "label\tcount:number\tratio:number\tactive:boolean\tborn:date\thome:url\n"
    "Row\t42\t2.5\tTRUE\t1970-01-01\thttp://example.org/\n"
    "Other\tmany\tNaN\tyes\tnot a date\tnot a url\n"
)

# =============================================================================
# Large TSV Content
# =============================================================================


def generate_large_tsv(num_rows: int = 100) -> str:
    """
    Generate TSV content with ``num_rows`` distinct entities.

    Each row references the next one through an item column, and the last
    row references the first.
    """
    lines = ["label\tid\tscore:number,single\tnext:item"]
    for i in range(num_rows):
        lines.append(f"Entity {i}\te{i}\t{i}\te{(i + 1) % num_rows}")
    return "\n".join(lines) + "\n"
