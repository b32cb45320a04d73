from __future__ import annotations

from loguru import logger

from methods_extractor.core import constants as cs
from methods_extractor.core import logs as ls
from methods_extractor.data_models.models import ExportCandidate, SourceTree
from methods_extractor.data_models.types_defs import ASTNode

from ..utils import has_keyword_child, is_identifier_named, safe_decode_text


def _is_module_exports(node: ASTNode) -> bool:
    if node.type != cs.TS_MEMBER_EXPRESSION:
        return False
    object_node = node.child_by_field_name(cs.FIELD_OBJECT)
    property_node = node.child_by_field_name(cs.FIELD_PROPERTY)
    return (
        is_identifier_named(object_node, cs.JS_MODULE_KEYWORD)
        and property_node is not None
        and property_node.type == cs.TS_PROPERTY_IDENTIFIER
        and safe_decode_text(property_node) == cs.JS_EXPORTS_KEYWORD
    )


def find_commonjs_export(statement: ASTNode) -> ExportCandidate | None:
    """
    Returns the value assigned to `module.exports` or `exports`.

    Args:
        statement: A top-level statement.

    Returns:
        The right-hand side of the assignment, with the export hop consumed,
        or None when the statement is not a CommonJS export.
    """
    if statement.type != cs.TS_EXPRESSION_STATEMENT or not statement.named_children:
        return None

    expression = statement.named_children[0]
    if expression.type != cs.TS_ASSIGNMENT_EXPRESSION:
        return None

    left = expression.child_by_field_name(cs.FIELD_LEFT)
    right = expression.child_by_field_name(cs.FIELD_RIGHT)
    if left is None or right is None:
        return None

    if _is_module_exports(left):
        logger.debug(ls.LOCATED_COMMONJS_EXPORT.format(kind=right.type))
        return ExportCandidate.of(right, hops=1)

    if is_identifier_named(left, cs.JS_EXPORTS_KEYWORD):
        logger.debug(ls.LOCATED_EXPORTS_ASSIGNMENT.format(kind=right.type))
        return ExportCandidate.of(right, hops=1)

    return None


def export_assignment_value(statement: ASTNode) -> ASTNode | None:
    """
    Returns the expression of `export default <expr>` or `export = <expr>`.

    Args:
        statement: An `export_statement` node.

    Returns:
        The exported expression, or None for other export forms.
    """
    if value := statement.child_by_field_name(cs.FIELD_VALUE):
        return value

    after_equals = False
    for child in statement.children:
        if after_equals and child.is_named:
            return child
        if not child.is_named and child.type == cs.TS_EQUALS_TOKEN:
            after_equals = True
    return None


def find_esm_export(statement: ASTNode) -> ExportCandidate | None:
    """
    Returns the default export of an `export` statement.

    Only `export default` of an expression or a class declaration, and the
    TypeScript `export = <expr>` form, are entertained. Named exports and other
    default-exported declarations are ignored.

    Args:
        statement: A top-level statement.

    Returns:
        The class declaration, or the export statement itself as an
        export-assignment wrapper, or None.
    """
    if statement.type != cs.TS_EXPORT_STATEMENT:
        return None

    if not has_keyword_child(statement, cs.TS_DEFAULT_KEYWORD):
        if has_keyword_child(statement, cs.TS_EQUALS_TOKEN) and (
            export_assignment_value(statement) is not None
        ):
            logger.debug(ls.LOCATED_DEFAULT_EXPORT.format(kind=statement.type))
            return ExportCandidate.of(statement)
        return None

    if declaration := statement.child_by_field_name(cs.FIELD_DECLARATION):
        if declaration.type not in cs.TS_CLASS_DECLARATION_NODES:
            return None
        logger.debug(ls.LOCATED_DEFAULT_EXPORT.format(kind=declaration.type))
        return ExportCandidate.of(declaration)

    if export_assignment_value(statement) is None:
        return None

    logger.debug(ls.LOCATED_DEFAULT_EXPORT.format(kind=statement.type))
    return ExportCandidate.of(statement)


def locate_export(tree: SourceTree) -> ExportCandidate:
    """
    Finds the module's sole export among its top-level statements.

    The first statement matching either the CommonJS or the ESM form wins;
    later exports are ignored.

    Args:
        tree: The parsed module.

    Returns:
        The export candidate, or an ABSENT candidate.
    """
    for statement in tree.statements:
        candidate = find_commonjs_export(statement) or find_esm_export(statement)
        if candidate is not None:
            return candidate

    logger.debug(ls.EXPORT_NOT_FOUND)
    return ExportCandidate.absent()
