from __future__ import annotations

from collections.abc import Callable

import pytest

from methods_extractor.core.constants import CandidateKind
from methods_extractor.data_models.models import SourceTree
from methods_extractor.parsers.js_ts import export_assignment_value, locate_export
from methods_extractor.parsers.utils import safe_decode_text

Parse = Callable[..., SourceTree]


class TestCommonJsExports:
    """module.exports and exports assignments."""

    def test_module_exports_identifier(self, parse: Parse) -> None:
        candidate = locate_export(parse("module.exports = UserController"))

        assert candidate.kind is CandidateKind.IDENTIFIER
        assert safe_decode_text(candidate.node) == "UserController"
        assert candidate.hops == 1

    def test_bare_exports_object(self, parse: Parse) -> None:
        candidate = locate_export(parse("exports = { index () {} }"))

        assert candidate.kind is CandidateKind.OBJECT_LITERAL

    def test_chained_assignment_is_returned_whole(self, parse: Parse) -> None:
        candidate = locate_export(parse("module.exports = exports = Foo"))

        assert candidate.kind is CandidateKind.CHAINED_ASSIGNMENT
        assert safe_decode_text(candidate.node) == "exports = Foo"

    def test_member_of_exports_is_not_an_export(self, parse: Parse) -> None:
        candidate = locate_export(parse("module.exports.index = function () {}"))

        assert candidate.is_absent

    def test_other_assignments_are_ignored(self, parse: Parse) -> None:
        candidate = locate_export(parse("let a\nthing.exports = {}\na = {}"))

        assert candidate.is_absent


class TestEsmExports:
    """export default and export = statements."""

    def test_default_class_declaration(self, parse: Parse) -> None:
        candidate = locate_export(parse("export default class Foo { index () {} }"))

        assert candidate.kind is CandidateKind.CLASS_LIKE

    def test_default_expression_is_wrapped(self, parse: Parse) -> None:
        candidate = locate_export(parse("export default { index () {} }"))

        assert candidate.kind is CandidateKind.EXPORT_ASSIGNMENT
        assert candidate.node is not None
        value = export_assignment_value(candidate.node)
        assert value is not None
        assert value.type == "object"

    def test_export_equals(self, parse: Parse) -> None:
        candidate = locate_export(parse("class Foo {}\nexport = Foo"))

        assert candidate.kind is CandidateKind.EXPORT_ASSIGNMENT
        assert candidate.node is not None
        assert safe_decode_text(export_assignment_value(candidate.node)) == "Foo"

    @pytest.mark.parametrize(
        "source",
        [
            "export class Foo {}",
            "export const foo = {}",
            "const foo = {}\nexport { foo }",
            "const foo = {}\nexport { foo as default }",
            "import foo from './foo'",
        ],
    )
    def test_non_matching_exports(self, parse: Parse, source: str) -> None:
        assert locate_export(parse(source)).is_absent

    def test_named_export_does_not_stop_the_scan(self, parse: Parse) -> None:
        source = "export const helpers = {}\nmodule.exports = {}"

        candidate = locate_export(parse(source))

        assert candidate.kind is CandidateKind.OBJECT_LITERAL


class TestFirstMatchWins:
    def test_commonjs_before_esm(self, parse: Parse) -> None:
        source = "module.exports = {}\nexport default class Foo {}"

        assert locate_export(parse(source)).kind is CandidateKind.OBJECT_LITERAL

    def test_esm_before_commonjs(self, parse: Parse) -> None:
        source = "export default class Foo {}\nmodule.exports = {}"

        assert locate_export(parse(source)).kind is CandidateKind.CLASS_LIKE

    def test_later_commonjs_exports_are_ignored(self, parse: Parse) -> None:
        source = "module.exports = First\nmodule.exports = {}"

        candidate = locate_export(parse(source))

        assert safe_decode_text(candidate.node) == "First"

    def test_module_without_exports(self, parse: Parse) -> None:
        assert locate_export(parse("const a = 1")).is_absent
