from __future__ import annotations

from collections.abc import Callable

from methods_extractor.core.constants import CandidateKind, OutputKind
from methods_extractor.data_models.models import ExportCandidate, SourceTree
from methods_extractor.parsers.js_ts import (
    describe_member,
    enumerate_methods,
    resolve_identifier,
)

Parse = Callable[..., SourceTree]


def _names(tree: SourceTree, name: str) -> list[str] | None:
    output = enumerate_methods(tree, resolve_identifier(tree, name))
    return None if output is None else [method.name for method in output.methods]


class TestDescribeMember:
    def _first_method(self, tree: SourceTree):
        class_node = tree.statements[0]
        body = class_node.child_by_field_name("body")
        assert body is not None
        return next(n for n in body.named_children if n.type == "method_definition")

    def test_private_method(self, parse: Parse) -> None:
        tree = parse("class A { private async run () {} }")

        member = describe_member(self._first_method(tree))

        assert member.name == "run"
        assert not member.is_public
        assert member.is_plain_method
        assert "async" in member.modifiers

    def test_getter(self, parse: Parse) -> None:
        tree = parse("class A { get size () { return 1 } }")

        member = describe_member(self._first_method(tree))

        assert member.name == "size"
        assert member.is_accessor
        assert not member.is_plain_method

    def test_method_named_get(self, parse: Parse) -> None:
        tree = parse("class A { get () {} }")

        member = describe_member(self._first_method(tree))

        assert member.name == "get"
        assert not member.is_accessor
        assert member.is_plain_method

    def test_constructor(self, parse: Parse) -> None:
        tree = parse("class A { constructor () {} }")

        member = describe_member(self._first_method(tree))

        assert member.is_constructor
        assert not member.is_plain_method

    def test_computed_name(self, parse: Parse) -> None:
        tree = parse("class A { ['run'] () {} }")

        member = describe_member(self._first_method(tree))

        assert member.name is None
        assert not member.has_simple_name


class TestClassMethods:
    def test_visibility_filter(self, parse: Parse) -> None:
        tree = parse(
            """
class A {
  public shown () {}
  private hidden () {}
  protected guarded () {}
  implicit () {}
}
"""
        )

        assert _names(tree, "A") == ["shown", "implicit"]

    def test_fields_and_accessors_are_skipped(self, parse: Parse) -> None:
        tree = parse(
            """
class A {
  count = 0
  handler = () => {}
  static instances: A[] = []
  constructor () {}
  get total () { return 0 }
  set total (value: number) {}
  run () {}
}
"""
        )

        assert _names(tree, "A") == ["run"]

    def test_static_and_generator_methods(self, parse: Parse) -> None:
        tree = parse("class A {\n  static make () {}\n  *items () {}\n}")

        assert _names(tree, "A") == ["make", "items"]

    def test_overload_signatures_are_skipped(self, parse: Parse) -> None:
        tree = parse(
            """
class A {
  find (id: number): void
  find (id: string): void
  find (id: any) {}
}
"""
        )

        assert _names(tree, "A") == ["find"]

    def test_empty_class(self, parse: Parse) -> None:
        tree = parse("class A {}")

        output = enumerate_methods(tree, resolve_identifier(tree, "A"))

        assert output is not None
        assert output.kind is OutputKind.CLASS
        assert output.methods == ()

    def test_line_numbers_follow_declarations(self, parse: Parse) -> None:
        tree = parse("class A {\n  first () {}\n\n\n  second () {}\n}")

        output = enumerate_methods(tree, resolve_identifier(tree, "A"))

        assert output is not None
        assert [(m.name, m.lineno) for m in output.methods] == [
            ("first", 2),
            ("second", 5),
        ]


class TestObjectLiteralMethods:
    def test_only_shorthand_methods(self, parse: Parse) -> None:
        tree = parse(
            """
const o = {
  index () {},
  async store () {},
  value: 1,
  arrow: () => {},
  classic: function () {},
  get size () { return 1 },
  ['computed'] () {},
  shorthand,
}
"""
        )

        assert _names(tree, "o") == ["index", "store"]

    def test_kind_is_object(self, parse: Parse) -> None:
        tree = parse("const o = { index () {} }")

        output = enumerate_methods(tree, resolve_identifier(tree, "o"))

        assert output is not None
        assert output.kind is OutputKind.OBJECT


class TestUnsupportedTargets:
    def test_function(self, parse: Parse) -> None:
        tree = parse("const f = function () {}")

        assert enumerate_methods(tree, resolve_identifier(tree, "f")) is None

    def test_array(self, parse: Parse) -> None:
        tree = parse("const a = [1, 2]")

        assert enumerate_methods(tree, resolve_identifier(tree, "a")) is None

    def test_absent(self, parse: Parse) -> None:
        tree = parse("const a = 1")

        assert enumerate_methods(tree, ExportCandidate.absent()) is None

    def test_identifier(self, parse: Parse) -> None:
        tree = parse("class B {}\nconst a = B")

        candidate = resolve_identifier(tree, "a")

        assert candidate.kind is CandidateKind.IDENTIFIER
        assert enumerate_methods(tree, candidate) is None
