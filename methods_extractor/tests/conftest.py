from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from methods_extractor.data_models.models import ExtractorOptions, SourceTree
from methods_extractor.data_models.schemas import ExtractorOutput
from methods_extractor.data_models.types_defs import ExtractorOutputDict
from methods_extractor.extractor import Extractor
from methods_extractor.infrastructure.parser_loader import parse_source

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def fixture_cases() -> list[Path]:
    """Directories holding a `source.ts` and its expected `output.json`."""
    return sorted(path for path in FIXTURES_DIR.iterdir() if path.is_dir())


def as_dict(output: ExtractorOutput | None) -> ExtractorOutputDict | None:
    return output.to_dict() if output is not None else None


@pytest.fixture
def extractor() -> Extractor:
    return Extractor()


@pytest.fixture
def parse() -> Callable[..., SourceTree]:
    """Parses trimmed source text the way the extractor does."""

    def _parse(source: str, filename: str = "anonymous") -> SourceTree:
        return parse_source(source.strip(), ExtractorOptions(filename=filename))

    return _parse
