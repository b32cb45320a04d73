"""
Shared type definitions used across the extractor.

It centralizes the aliases for tree-sitter objects and the serializable
records printed by the command line.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from tree_sitter import Node

type LanguageLoader = Callable[[], object] | None
"""A callable returning a tree-sitter language capsule, or None."""

type ASTNode = Node
"""A node of a tree-sitter syntax tree."""


class MethodRecordDict(TypedDict):
    name: str
    lineno: int


class ExtractorOutputDict(TypedDict):
    """The serializable form of an extraction result."""

    kind: str
    methods: list[MethodRecordDict]
