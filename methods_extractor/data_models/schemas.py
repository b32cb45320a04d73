"""
This module defines the Pydantic models returned to callers of the extractor.

They are the only externally visible output: a list of method records and the
kind of the exported value they belong to. Pydantic validates the `lineno`
invariant and provides the JSON-friendly dump used by the command line.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from methods_extractor.core.constants import OutputKind

from .types_defs import ExtractorOutputDict, MethodRecordDict


class MethodRecord(BaseModel):
    """
    A public method of the exported value.

    Attributes:
        name (str): The method name.
        lineno (int): The 1-based line the method declaration starts on.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    lineno: int = Field(ge=1)

    def to_dict(self) -> MethodRecordDict:
        return MethodRecordDict(name=self.name, lineno=self.lineno)


class ExtractorOutput(BaseModel):
    """
    Methods of a module's exported class or object literal.

    Attributes:
        kind (OutputKind): `class` for class declarations and expressions,
            `object` for object literals.
        methods (tuple[MethodRecord, ...]): Members in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    kind: OutputKind
    methods: tuple[MethodRecord, ...] = ()

    def to_dict(self) -> ExtractorOutputDict:
        return ExtractorOutputDict(
            kind=self.kind.value,
            methods=[method.to_dict() for method in self.methods],
        )
