from __future__ import annotations

from collections.abc import Callable

from methods_extractor.core.constants import CandidateKind
from methods_extractor.data_models.models import ExportCandidate, SourceTree
from methods_extractor.parsers.js_ts import (
    locate_export,
    resolve_identifier,
    unwind_assignment,
)
from methods_extractor.parsers.utils import safe_decode_text

Parse = Callable[..., SourceTree]


class TestResolveIdentifier:
    def test_class_declaration(self, parse: Parse) -> None:
        tree = parse("class UserController { index () {} }")

        candidate = resolve_identifier(tree, "UserController")

        assert candidate.kind is CandidateKind.CLASS_LIKE
        assert candidate.node is not None
        assert candidate.node.type == "class_declaration"

    def test_variable_initializer(self, parse: Parse) -> None:
        tree = parse("const first = 1, controller = { index () {} }")

        candidate = resolve_identifier(tree, "controller")

        assert candidate.kind is CandidateKind.OBJECT_LITERAL

    def test_var_declaration(self, parse: Parse) -> None:
        tree = parse("var Controller = class { index () {} }")

        assert resolve_identifier(tree, "Controller").kind is CandidateKind.CLASS_LIKE

    def test_exported_declaration(self, parse: Parse) -> None:
        tree = parse("export class UserController {}")

        candidate = resolve_identifier(tree, "UserController")

        assert candidate.kind is CandidateKind.CLASS_LIKE

    def test_uninitialized_variable(self, parse: Parse) -> None:
        tree = parse("let controller")

        assert resolve_identifier(tree, "controller").is_absent

    def test_undefined_name(self, parse: Parse) -> None:
        tree = parse("class Other {}")

        assert resolve_identifier(tree, "UserController").is_absent

    def test_first_definition_wins(self, parse: Parse) -> None:
        tree = parse("var controller = {}\nclass controller {}")

        candidate = resolve_identifier(tree, "controller")

        assert candidate.kind is CandidateKind.OBJECT_LITERAL

    def test_resolution_is_shallow(self, parse: Parse) -> None:
        tree = parse("class B {}\nconst a = B\nconst b = a")

        candidate = resolve_identifier(tree, "b")

        assert candidate.kind is CandidateKind.IDENTIFIER
        assert safe_decode_text(candidate.node) == "a"

    def test_nested_declarations_are_not_scanned(self, parse: Parse) -> None:
        tree = parse("function wrap () {\n  class UserController {}\n}")

        assert resolve_identifier(tree, "UserController").is_absent


class TestUnwindAssignment:
    def test_single_hop_after_export(self, parse: Parse) -> None:
        candidate = locate_export(parse("module.exports = exports = Foo"))

        resolved = unwind_assignment(candidate)

        assert resolved.kind is CandidateKind.IDENTIFIER
        assert safe_decode_text(resolved.node) == "Foo"
        assert resolved.hops == 2

    def test_three_hops_resolve(self, parse: Parse) -> None:
        candidate = locate_export(parse("module.exports = a = b = class {}"))

        assert unwind_assignment(candidate).kind is CandidateKind.CLASS_LIKE

    def test_four_hops_are_absent(self, parse: Parse) -> None:
        source = "module.exports = exports = a = b = class {}"
        candidate = locate_export(parse(source))

        assert unwind_assignment(candidate).is_absent

    def test_initializer_chain_counts_from_zero(self, parse: Parse) -> None:
        tree = parse("let a, b, c\nconst x = a = b = c = {}")

        candidate = resolve_identifier(tree, "x")

        assert candidate.kind is CandidateKind.CHAINED_ASSIGNMENT
        assert unwind_assignment(candidate).kind is CandidateKind.OBJECT_LITERAL

    def test_non_chain_is_returned_unchanged(self) -> None:
        candidate = ExportCandidate.absent()

        assert unwind_assignment(candidate) is candidate
