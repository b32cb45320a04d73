GRAMMAR_UNAVAILABLE = (
    "tree-sitter grammar for {lang} is not available, install the '{module}' package"
)
SOURCE_HAS_ERRORS = "syntax errors in {filename} starting at line {line}"
PARSER_FAILED = "tree-sitter failed to parse {filename}: {error}"
SOURCE_NOT_ENCODABLE = "{filename} cannot be encoded as UTF-8: {error}"
INVALID_SCRIPT_TARGET = "Unknown script target '{value}', expected one of: {choices}"
INVALID_OPTIONS = "Options must be an ExtractorOptions or a mapping, got {type}"
CLI_FILE_NOT_FOUND = "File not found: {path}"


class ExtractorError(Exception):
    """Base class of the errors raised by the extractor."""


class GrammarUnavailableError(ExtractorError):
    """Raised when a tree-sitter grammar package cannot be imported."""


class SourceParseError(ExtractorError):
    """Raised by the parser layer when the source cannot be parsed cleanly."""

    def __init__(self, message: str, filename: str) -> None:
        super().__init__(message)
        self.filename = filename
