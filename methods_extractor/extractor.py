"""
Extracts the public methods of a JavaScript or TypeScript module's export.

- Only default exports and CommonJS `module.exports` / `exports` are entertained.
- Only top-level classes and object literals are entertained.
- Named exports are not supported.
"""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from methods_extractor.core import logs as ls
from methods_extractor.core.config import normalize_options, settings
from methods_extractor.core.constants import CandidateKind, SupportedLanguage
from methods_extractor.data_models.models import (
    ExportCandidate,
    ExtractorOptions,
    SourceTree,
)
from methods_extractor.data_models.schemas import ExtractorOutput
from methods_extractor.infrastructure import exceptions as ex
from methods_extractor.infrastructure.language_spec import (
    get_language_spec_for_filename,
)
from methods_extractor.infrastructure.parser_loader import parse_source
from methods_extractor.parsers.cache_manager import CacheManager
from methods_extractor.parsers.js_ts import (
    enumerate_methods,
    export_assignment_value,
    locate_export,
    resolve_identifier,
    unwind_assignment,
)
from methods_extractor.parsers.utils import safe_decode_text

type CacheKey = tuple[SupportedLanguage, str]
type OptionsArg = ExtractorOptions | Mapping[str, object] | None


def resolve_export(tree: SourceTree) -> ExportCandidate:
    """
    Narrows the module's export down to the value whose methods are listed.

    Each step works on the current candidate only: unwrap `export default`,
    follow an assignment chain, resolve a bare identifier once, then follow
    a chain assigned to that identifier.

    Args:
        tree (SourceTree): The parsed module.

    Returns:
        ExportCandidate: The final candidate, possibly ABSENT.
    """
    candidate = locate_export(tree)

    node = candidate.node
    if candidate.kind is CandidateKind.EXPORT_ASSIGNMENT and node is not None:
        candidate = ExportCandidate.of(export_assignment_value(node), candidate.hops)

    if candidate.kind is CandidateKind.CHAINED_ASSIGNMENT:
        candidate = unwind_assignment(candidate)

    if candidate.kind is CandidateKind.IDENTIFIER and candidate.node is not None:
        name = safe_decode_text(candidate.node) or ""
        candidate = resolve_identifier(tree, name)

    if candidate.kind is CandidateKind.CHAINED_ASSIGNMENT:
        candidate = unwind_assignment(candidate)

    return candidate


def extract_from_tree(tree: SourceTree) -> ExtractorOutput | None:
    """Runs export resolution and method enumeration on a parsed module."""
    candidate = resolve_export(tree)
    if candidate.is_absent:
        return None
    return enumerate_methods(tree, candidate)


class Extractor:
    """
    Exposes the API to extract methods from a TypeScript or JavaScript module.

    Results, including the absence of a result, are cached by grammar and
    trimmed source text.

    Attributes:
        cache (CacheManager): The least-recently-used result cache.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self.cache: CacheManager[CacheKey, ExtractorOutput | None] = CacheManager(
            max_entries=max_entries or settings.CACHE_MAX_ENTRIES
        )

    def extract(
        self, source: str, options: OptionsArg = None
    ) -> ExtractorOutput | None:
        """
        Returns the methods of the module's exported class or object literal.

        Args:
            source (str): The module source text.
            options: `ExtractorOptions`, a mapping of `filename` and
                `script_target` (or `scriptTarget`), or None for defaults.

        Returns:
            ExtractorOutput | None: The methods, or None when the source cannot
            be parsed or exports neither a class nor an object literal.
        """
        source = source.strip()
        normalized = normalize_options(options)
        key: CacheKey = (
            get_language_spec_for_filename(normalized.filename).language,
            source,
        )

        hit, cached = self.cache.lookup(key)
        if hit:
            logger.debug(ls.CACHE_HIT.format(size=self.cache.size()))
            return cached

        try:
            tree = parse_source(source, normalized)
        except ex.SourceParseError as e:
            logger.debug(ls.PARSE_FAILED.format(filename=e.filename, error=e))
            self.cache.set(key, None)
            return None

        output = extract_from_tree(tree)
        self.cache.set(key, output)
        return output


_default_extractor: Extractor | None = None


def get_default_extractor() -> Extractor:
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = Extractor()
    return _default_extractor


def extract(source: str, options: OptionsArg = None) -> ExtractorOutput | None:
    """Extracts methods with the shared, cached default `Extractor`."""
    return get_default_extractor().extract(source, options)
