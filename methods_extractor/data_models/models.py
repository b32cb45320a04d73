"""
This module defines the data models flowing through the extraction pipeline.

Using `dataclass`, it provides small immutable records for:
-   `LanguageSpec`: the grammar used for a family of file extensions.
-   `ExtractorOptions`: the normalized options of a single extraction.
-   `SourceTree`: a parsed module together with its line mapping.
-   `ExportCandidate`: the tagged value narrowed by each pipeline stage.
-   `MethodMember`: a descriptor answering questions about a member node.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING

from methods_extractor.core import constants as cs
from methods_extractor.core.constants import (
    CandidateKind,
    ScriptTarget,
    SupportedLanguage,
)

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

_LINE_BREAK_RE = re.compile(cs.LINE_BREAK_PATTERN)


@dataclass(frozen=True)
class LanguageSpec:
    """
    Associates a tree-sitter grammar with the file extensions it parses.

    Attributes:
        language (SupportedLanguage): The grammar name.
        file_extensions (frozenset[str]): Extensions parsed with this grammar.
        module_path (str): The Python module shipping the grammar.
        attr_name (str): The attribute of `module_path` returning the grammar.
    """

    language: SupportedLanguage
    file_extensions: frozenset[str]
    module_path: str
    attr_name: str


@dataclass(frozen=True)
class ExtractorOptions:
    """
    Options of a single extraction.

    Attributes:
        filename (str): Used for diagnostics and to select the grammar.
        script_target (ScriptTarget): The language version the caller targets.
    """

    filename: str = cs.DEFAULT_FILENAME
    script_target: ScriptTarget = cs.DEFAULT_SCRIPT_TARGET


@dataclass(frozen=True)
class SourceTree:
    """
    A parsed module, owned by one extraction call.

    Attributes:
        tree (Tree): The tree-sitter syntax tree.
        source (bytes): The encoded source the tree was built from.
        filename (str): The name the source was parsed under.
        language (SupportedLanguage): The grammar used.
    """

    tree: Tree
    source: bytes
    filename: str
    language: SupportedLanguage

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @cached_property
    def statements(self) -> tuple[Node, ...]:
        """Top-level statements in source order, comments excluded."""
        return tuple(
            child
            for child in self.root.named_children
            if child.type not in cs.TS_NON_STATEMENT_NODES
        )

    @cached_property
    def line_starts(self) -> tuple[int, ...]:
        """Byte offsets at which each line of the source begins."""
        breaks = _LINE_BREAK_RE.finditer(self.source)
        return (0, *(match.end() for match in breaks))

    def line_of(self, node: Node) -> int:
        """Returns the 1-based line on which `node` starts.

        Lines end at any JavaScript line terminator, so a lone CR or U+2028
        starts a new line even though tree-sitter rows only count LF.
        """
        return bisect_right(self.line_starts, node.start_byte)


@dataclass(frozen=True)
class ExportCandidate:
    """
    The value currently believed to be the module's sole export.

    Attributes:
        kind (CandidateKind): The variant tag.
        node (Node | None): The syntax node, None only for ABSENT.
        hops (int): Assignment hops of the exporting statement already consumed.
    """

    kind: CandidateKind
    node: Node | None = None
    hops: int = 0

    @classmethod
    def absent(cls) -> ExportCandidate:
        return cls(CandidateKind.ABSENT)

    @classmethod
    def of(cls, node: Node | None, hops: int = 0) -> ExportCandidate:
        """Tags `node` with the variant matching its syntax type."""
        if node is None:
            return cls.absent()
        return cls(_classify(node), node, hops)

    @property
    def is_absent(self) -> bool:
        return self.kind is CandidateKind.ABSENT


def _classify(node: Node) -> CandidateKind:
    match node.type:
        case cs.TS_CLASS_DECLARATION | cs.TS_ABSTRACT_CLASS_DECLARATION | cs.TS_CLASS:
            return CandidateKind.CLASS_LIKE
        case cs.TS_OBJECT:
            return CandidateKind.OBJECT_LITERAL
        case cs.TS_IDENTIFIER:
            return CandidateKind.IDENTIFIER
        case cs.TS_ASSIGNMENT_EXPRESSION:
            return CandidateKind.CHAINED_ASSIGNMENT
        case cs.TS_EXPORT_STATEMENT:
            return CandidateKind.EXPORT_ASSIGNMENT
        case _:
            return CandidateKind.OTHER


@dataclass(frozen=True)
class MethodMember:
    """
    Describes a `method_definition` member of a class body or object literal.

    The enumerator only asks questions of this descriptor, so the grammar
    details of modifiers and accessor keywords stay in one place.

    Attributes:
        node (Node): The `method_definition` node.
        name (str | None): The member name when it is a plain identifier.
        modifiers (frozenset[str]): Keyword tokens written before the name.
        start_node (Node): The first node of the member, leading decorators included.
    """

    node: Node
    name: str | None
    modifiers: frozenset[str] = field(default_factory=frozenset)
    start_node: Node | None = None

    @property
    def has_simple_name(self) -> bool:
        return self.name is not None

    @property
    def is_constructor(self) -> bool:
        return self.name == cs.JS_CONSTRUCTOR_NAME

    @property
    def is_accessor(self) -> bool:
        return bool(self.modifiers & cs.TS_ACCESSOR_KEYWORDS)

    @property
    def is_public(self) -> bool:
        return not self.modifiers & cs.TS_NON_PUBLIC_MODIFIERS

    @property
    def is_plain_method(self) -> bool:
        return self.has_simple_name and not self.is_constructor and not self.is_accessor
