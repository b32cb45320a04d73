from enum import StrEnum


class SupportedLanguage(StrEnum):
    JS = "javascript"
    TS = "typescript"
    TSX = "tsx"


class TreeSitterModule(StrEnum):
    JS = "tree_sitter_javascript"
    TS = "tree_sitter_typescript"


class ScriptTarget(StrEnum):
    ES3 = "ES3"
    ES5 = "ES5"
    ES2015 = "ES2015"
    ES2016 = "ES2016"
    ES2017 = "ES2017"
    ES2018 = "ES2018"
    ES2019 = "ES2019"
    ES2020 = "ES2020"
    ESNEXT = "ESNext"
    LATEST = "Latest"


class OutputKind(StrEnum):
    CLASS = "class"
    OBJECT = "object"


class CandidateKind(StrEnum):
    CLASS_LIKE = "class_like"
    OBJECT_LITERAL = "object_literal"
    IDENTIFIER = "identifier"
    CHAINED_ASSIGNMENT = "chained_assignment"
    EXPORT_ASSIGNMENT = "export_assignment"
    OTHER = "other"
    ABSENT = "absent"


QUERY_LANGUAGE = "language"
LANG_ATTR_TYPESCRIPT = "language_typescript"
LANG_ATTR_TSX = "language_tsx"

DEFAULT_FILENAME = "anonymous"
DEFAULT_SCRIPT_TARGET = ScriptTarget.ES2018
DEFAULT_CACHE_MAX_ENTRIES = 1000
DEFAULT_LOG_LEVEL = "INFO"
ENV_PREFIX = "METHODS_EXTRACTOR_"
ENCODING_UTF8 = "utf-8"

# JavaScript line terminators as UTF-8 bytes, U+2028 and U+2029 included
LINE_BREAK_PATTERN = rb"\r\n|[\n\r]|\xe2\x80[\xa8\xa9]"

MAX_ASSIGNMENT_HOPS = 3

JS_EXTENSIONS = frozenset({".js", ".mjs", ".cjs", ".jsx"})
TSX_EXTENSIONS = frozenset({".tsx"})

OPTION_FILENAME = "filename"
OPTION_SCRIPT_TARGET = "script_target"
OPTION_SCRIPT_TARGET_CAMEL = "scriptTarget"

# CommonJS export names
JS_MODULE_KEYWORD = "module"
JS_EXPORTS_KEYWORD = "exports"
JS_CONSTRUCTOR_NAME = "constructor"

# tree-sitter fields
FIELD_LEFT = "left"
FIELD_RIGHT = "right"
FIELD_OBJECT = "object"
FIELD_PROPERTY = "property"
FIELD_NAME = "name"
FIELD_VALUE = "value"
FIELD_BODY = "body"
FIELD_DECLARATION = "declaration"

# tree-sitter node types
TS_COMMENT = "comment"
TS_HASH_BANG_LINE = "hash_bang_line"
TS_EXPRESSION_STATEMENT = "expression_statement"
TS_ASSIGNMENT_EXPRESSION = "assignment_expression"
TS_MEMBER_EXPRESSION = "member_expression"
TS_IDENTIFIER = "identifier"
TS_PROPERTY_IDENTIFIER = "property_identifier"
TS_EXPORT_STATEMENT = "export_statement"
TS_CLASS_DECLARATION = "class_declaration"
TS_ABSTRACT_CLASS_DECLARATION = "abstract_class_declaration"
TS_CLASS = "class"
TS_OBJECT = "object"
TS_LEXICAL_DECLARATION = "lexical_declaration"
TS_VARIABLE_DECLARATION = "variable_declaration"
TS_VARIABLE_DECLARATOR = "variable_declarator"
TS_METHOD_DEFINITION = "method_definition"
TS_ACCESSIBILITY_MODIFIER = "accessibility_modifier"
TS_DECORATOR = "decorator"

# anonymous tokens
TS_DEFAULT_KEYWORD = "default"
TS_EQUALS_TOKEN = "="
TS_GET_KEYWORD = "get"
TS_SET_KEYWORD = "set"

TS_NON_STATEMENT_NODES = frozenset({TS_COMMENT, TS_HASH_BANG_LINE})
TS_CLASS_DECLARATION_NODES = frozenset(
    {TS_CLASS_DECLARATION, TS_ABSTRACT_CLASS_DECLARATION}
)
TS_VARIABLE_STATEMENT_NODES = frozenset(
    {TS_LEXICAL_DECLARATION, TS_VARIABLE_DECLARATION}
)
TS_ACCESSOR_KEYWORDS = frozenset({TS_GET_KEYWORD, TS_SET_KEYWORD})
TS_NON_PUBLIC_MODIFIERS = frozenset({"private", "protected"})

# CLI
CLI_APP_NAME = "methods-extractor"
LOG_LEVEL_DEBUG = "DEBUG"
JSON_INDENT = 2
