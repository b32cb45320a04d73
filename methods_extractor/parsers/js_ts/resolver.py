from __future__ import annotations

from loguru import logger

from methods_extractor.core import constants as cs
from methods_extractor.core import logs as ls
from methods_extractor.core.constants import CandidateKind
from methods_extractor.data_models.models import ExportCandidate, SourceTree
from methods_extractor.data_models.types_defs import ASTNode

from ..utils import is_identifier_named, safe_decode_text


def _unwrap_export(statement: ASTNode) -> ASTNode:
    """Looks through `export class ...` and `export const ...` at the declaration."""
    if statement.type == cs.TS_EXPORT_STATEMENT:
        if declaration := statement.child_by_field_name(cs.FIELD_DECLARATION):
            return declaration
    return statement


def _find_declarator(statement: ASTNode, name: str) -> ASTNode | None:
    for declarator in statement.named_children:
        if declarator.type != cs.TS_VARIABLE_DECLARATOR:
            continue
        if is_identifier_named(declarator.child_by_field_name(cs.FIELD_NAME), name):
            return declarator
    return None


def resolve_identifier(tree: SourceTree, name: str) -> ExportCandidate:
    """
    Resolves an identifier by scanning the top-level statements for a class
    declaration or a variable declaration with the given name.

    Resolution is shallow: an initializer that is itself an identifier is
    returned as is.

    Args:
        tree: The parsed module.
        name: The identifier to resolve.

    Returns:
        The class declaration or the variable initializer, or ABSENT when the
        name is undefined or the variable is uninitialized.
    """
    for child in tree.statements:
        statement = _unwrap_export(child)

        if statement.type in cs.TS_CLASS_DECLARATION_NODES:
            class_name = statement.child_by_field_name(cs.FIELD_NAME)
            if safe_decode_text(class_name) == name:
                logger.debug(
                    ls.RESOLVED_IDENTIFIER.format(name=name, kind=statement.type)
                )
                return ExportCandidate.of(statement)

        if statement.type in cs.TS_VARIABLE_STATEMENT_NODES:
            if declarator := _find_declarator(statement, name):
                initializer = declarator.child_by_field_name(cs.FIELD_VALUE)
                logger.debug(
                    ls.RESOLVED_IDENTIFIER.format(
                        name=name,
                        kind=initializer.type if initializer else CandidateKind.ABSENT,
                    )
                )
                return ExportCandidate.of(initializer)

    logger.debug(ls.UNRESOLVED_IDENTIFIER.format(name=name))
    return ExportCandidate.absent()


def unwind_assignment(candidate: ExportCandidate) -> ExportCandidate:
    """
    Follows a chained assignment to its final right-hand side.

    Multiple assignments in a single statement are common in CommonJS modules:

    ```js
    module.exports = exports = noop = UserController
    ```

    At most `MAX_ASSIGNMENT_HOPS` assignments per statement are followed,
    counting the export assignment itself; longer chains resolve to ABSENT.

    Args:
        candidate: A CHAINED_ASSIGNMENT candidate.

    Returns:
        The candidate for the final right-hand side, or ABSENT.
    """
    node = candidate.node
    if candidate.kind is not CandidateKind.CHAINED_ASSIGNMENT or node is None:
        return candidate

    if candidate.hops >= cs.MAX_ASSIGNMENT_HOPS:
        logger.debug(
            ls.ASSIGNMENT_DEPTH_EXCEEDED.format(max_hops=cs.MAX_ASSIGNMENT_HOPS)
        )
        return ExportCandidate.absent()

    right = ExportCandidate.of(
        node.child_by_field_name(cs.FIELD_RIGHT), hops=candidate.hops + 1
    )
    if right.kind is CandidateKind.CHAINED_ASSIGNMENT:
        return unwind_assignment(right)
    return right
