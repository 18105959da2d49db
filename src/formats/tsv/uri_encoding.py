"""
URI helpers for synthesized resources and predicates.

Names taken from cells are percent-encoded byte-wise after UTF-8
encoding. Only the characters in TSVSyntax.URI_SAFE_CHARACTERS are left
as-is; space becomes %20.
"""

from constants import TSVSyntax


def percent_encode(text: str) -> str:
    """
    Percent-encode a string for use as a URI local name.

    Example:
        >>> percent_encode("New York")
        'New%20York'
        >>> percent_encode("café")
        'caf%C3%A9'
    """
    safe = TSVSyntax.URI_SAFE_CHARACTERS
    return "".join(
        chr(byte) if chr(byte) in safe else f"%{byte:02X}"
        for byte in text.encode("utf-8")
    )


def qualify(namespace: str, name: str) -> str:
    """Return ``namespace`` followed by the percent-encoded ``name``."""
    return namespace + percent_encode(name)
