from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from methods_extractor.core import constants as cs
from methods_extractor.core import logs as ls
from methods_extractor.core.constants import CandidateKind, OutputKind
from methods_extractor.data_models.models import (
    ExportCandidate,
    MethodMember,
    SourceTree,
)
from methods_extractor.data_models.schemas import ExtractorOutput, MethodRecord
from methods_extractor.data_models.types_defs import ASTNode

from ..utils import safe_decode_text


def _leading_node(node: ASTNode) -> ASTNode:
    """Returns the first decorator written before `node`, or `node` itself.

    TypeScript class bodies keep member decorators as siblings of the member.
    """
    start = node
    previous = start.prev_named_sibling
    while previous is not None and previous.type == cs.TS_DECORATOR:
        start = previous
        previous = start.prev_named_sibling
    return start


def describe_member(node: ASTNode) -> MethodMember:
    """
    Builds the descriptor of a `method_definition` node.

    Args:
        node: A `method_definition` from a class body or an object literal.

    Returns:
        MethodMember: The name, when it is a plain identifier, and the keywords
        written before it (`static`, `async`, `get`, `private`, ...).
    """
    name_node = node.child_by_field_name(cs.FIELD_NAME)
    name = (
        safe_decode_text(name_node)
        if name_node is not None and name_node.type == cs.TS_PROPERTY_IDENTIFIER
        else None
    )

    modifiers: set[str] = set()
    for child in node.children:
        if name_node is not None and child == name_node:
            break
        if child.type == cs.TS_ACCESSIBILITY_MODIFIER:
            if text := safe_decode_text(child):
                modifiers.add(text)
        elif not child.is_named:
            modifiers.add(child.type)

    return MethodMember(
        node=node,
        name=name,
        modifiers=frozenset(modifiers),
        start_node=_leading_node(node),
    )


def _collect(
    tree: SourceTree,
    members: Iterable[ASTNode],
    accept: Callable[[MethodMember], bool],
) -> tuple[MethodRecord, ...]:
    records: list[MethodRecord] = []
    for node in members:
        if node.type != cs.TS_METHOD_DEFINITION:
            continue
        member = describe_member(node)
        if member.name is None or not accept(member):
            continue
        records.append(
            MethodRecord(
                name=member.name,
                lineno=tree.line_of(
                    member.start_node if member.start_node is not None else node
                ),
            )
        )
    return tuple(records)


def extract_class_methods(
    tree: SourceTree, class_node: ASTNode
) -> tuple[MethodRecord, ...]:
    """Extracts public methods from a class declaration or class expression."""
    body = class_node.child_by_field_name(cs.FIELD_BODY)
    if body is None:
        return ()
    return _collect(
        tree,
        body.named_children,
        lambda member: member.is_plain_method and member.is_public,
    )


def extract_object_literal_methods(
    tree: SourceTree, object_node: ASTNode
) -> tuple[MethodRecord, ...]:
    """Extracts shorthand methods from an object literal."""
    return _collect(
        tree, object_node.named_children, lambda member: member.is_plain_method
    )


def enumerate_methods(
    tree: SourceTree, candidate: ExportCandidate
) -> ExtractorOutput | None:
    """
    Lists the methods of the exported class or object literal.

    Args:
        tree: The parsed module.
        candidate: The fully resolved export candidate.

    Returns:
        ExtractorOutput | None: The methods in declaration order, or None when
        the export is neither a class nor an object literal.
    """
    node = candidate.node
    match candidate.kind:
        case CandidateKind.CLASS_LIKE if node is not None:
            output = ExtractorOutput(
                kind=OutputKind.CLASS, methods=extract_class_methods(tree, node)
            )
        case CandidateKind.OBJECT_LITERAL if node is not None:
            output = ExtractorOutput(
                kind=OutputKind.OBJECT,
                methods=extract_object_literal_methods(tree, node),
            )
        case _:
            kind = node.type if node is not None else candidate.kind
            logger.debug(ls.UNSUPPORTED_EXPORT.format(kind=kind))
            return None

    logger.debug(
        ls.EXTRACTED_METHODS.format(count=len(output.methods), kind=output.kind)
    )
    return output
