from __future__ import annotations

from functools import lru_cache

from methods_extractor.core import constants as cs
from methods_extractor.data_models.types_defs import ASTNode


@lru_cache(maxsize=10000)
def _cached_decode_bytes(text_bytes: bytes) -> str:
    return text_bytes.decode(cs.ENCODING_UTF8)


def safe_decode_text(node: ASTNode | None) -> str | None:
    """
    Safely decodes the text content of a Tree-sitter node.

    Args:
        node (ASTNode | None): The node to extract text from.

    Returns:
        str | None: The decoded string or None if node is None or has no text.
    """
    if node is None or (text_bytes := node.text) is None:
        return None
    if isinstance(text_bytes, bytes):
        return _cached_decode_bytes(text_bytes)
    return str(text_bytes)


def is_identifier_named(node: ASTNode | None, name: str) -> bool:
    """Checks that `node` is a plain identifier spelled `name`."""
    return (
        node is not None
        and node.type == cs.TS_IDENTIFIER
        and safe_decode_text(node) == name
    )


def has_keyword_child(node: ASTNode, keyword: str) -> bool:
    """Checks for an anonymous keyword token, such as `default`, among children."""
    return any(
        not child.is_named and child.type == keyword for child in node.children
    )
