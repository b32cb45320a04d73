import importlib
from functools import cache

from loguru import logger
from tree_sitter import Language, Node, Parser

from methods_extractor.core import constants as cs
from methods_extractor.core import logs as ls
from methods_extractor.data_models.models import (
    ExtractorOptions,
    LanguageSpec,
    SourceTree,
)
from methods_extractor.data_models.types_defs import LanguageLoader

from . import exceptions as ex
from .language_spec import LANGUAGE_SPECS, get_language_spec_for_filename


def _try_import_language(module_path: str, attr_name: str) -> LanguageLoader:
    """Tries to import a language loader from an installed grammar package.

    Args:
        module_path (str): The Python module path (e.g., 'tree_sitter_typescript').
        attr_name (str): The attribute name for the language loader function.

    Returns:
        LanguageLoader: The language loader function, or None if it fails.
    """
    try:
        module = importlib.import_module(module_path)
        loader: LanguageLoader = getattr(module, attr_name)
        return loader
    except (ImportError, AttributeError) as e:
        logger.debug(
            ls.GRAMMAR_IMPORT_FAILED.format(
                module=module_path, attr=attr_name, error=e
            )
        )
        return None


@cache
def load_language(lang_name: cs.SupportedLanguage) -> Language:
    """Loads and memoizes the tree-sitter Language for a supported grammar.

    Args:
        lang_name (cs.SupportedLanguage): The grammar to load.

    Raises:
        GrammarUnavailableError: If the grammar package is not installed.

    Returns:
        Language: The loaded tree-sitter language.
    """
    spec = LANGUAGE_SPECS[lang_name]
    lang_lib = _try_import_language(spec.module_path, spec.attr_name)
    if lang_lib is None:
        raise ex.GrammarUnavailableError(
            ex.GRAMMAR_UNAVAILABLE.format(lang=lang_name, module=spec.module_path)
        )

    lang_obj = lang_lib()
    language = lang_obj if isinstance(lang_obj, Language) else Language(lang_obj)
    logger.debug(ls.GRAMMAR_LOADED.format(lang=lang_name))
    return language


def create_parser(spec: LanguageSpec) -> Parser:
    return Parser(load_language(spec.language))


def _first_error_node(root: Node) -> Node | None:
    stack: list[Node] = [root]

    while stack:
        current = stack.pop()
        if current.is_error or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))

    return None


def parse_source(source: str, options: ExtractorOptions) -> SourceTree:
    """Parses module source into a `SourceTree`.

    tree-sitter recovers from syntax errors instead of failing, so a tree
    containing error or missing nodes is reported as a parse failure here.

    Args:
        source (str): The module source text.
        options (ExtractorOptions): Normalized extraction options.

    Raises:
        SourceParseError: If the parser fails or the source has syntax errors.
        GrammarUnavailableError: If the selected grammar is not installed.

    Returns:
        SourceTree: The parsed module.
    """
    spec = get_language_spec_for_filename(options.filename)
    try:
        encoded = source.encode(cs.ENCODING_UTF8)
    except UnicodeEncodeError as e:
        raise ex.SourceParseError(
            ex.SOURCE_NOT_ENCODABLE.format(filename=options.filename, error=e),
            options.filename,
        ) from e

    logger.debug(
        ls.PARSING_SOURCE.format(
            filename=options.filename,
            lang=spec.language,
            target=options.script_target,
            size=len(encoded),
        )
    )

    parser = create_parser(spec)
    try:
        tree = parser.parse(encoded)
    except (ValueError, TypeError) as e:
        raise ex.SourceParseError(
            ex.PARSER_FAILED.format(filename=options.filename, error=e),
            options.filename,
        ) from e

    if tree.root_node.has_error:
        error_node = _first_error_node(tree.root_node)
        line = error_node.start_point[0] + 1 if error_node is not None else 1
        raise ex.SourceParseError(
            ex.SOURCE_HAS_ERRORS.format(filename=options.filename, line=line),
            options.filename,
        )

    return SourceTree(
        tree=tree,
        source=encoded,
        filename=options.filename,
        language=spec.language,
    )
