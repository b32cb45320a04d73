GRAMMAR_LOADED = "Loaded tree-sitter grammar for {lang}"
GRAMMAR_IMPORT_FAILED = "Unable to import grammar {module}.{attr}: {error}"

PARSING_SOURCE = "Parsing {filename} as {lang} (target {target}, {size} bytes)"
PARSE_FAILED = "Unable to parse {filename}: {error}"

LOCATED_COMMONJS_EXPORT = "Located module.exports assignment to '{kind}'"
LOCATED_EXPORTS_ASSIGNMENT = "Located exports assignment to '{kind}'"
LOCATED_DEFAULT_EXPORT = "Located default export '{kind}'"
EXPORT_NOT_FOUND = "No default or CommonJS export found"

RESOLVED_IDENTIFIER = "Resolved identifier '{name}' to '{kind}'"
UNRESOLVED_IDENTIFIER = "Unable to resolve identifier '{name}'"
ASSIGNMENT_DEPTH_EXCEEDED = "Assignment chain exceeds {max_hops} hops"
UNSUPPORTED_EXPORT = "Exported value '{kind}' is neither a class nor an object"

EXTRACTED_METHODS = "Extracted {count} methods from exported {kind}"

CACHE_HIT = "Serving extraction from cache ({size} entries)"
CACHE_EVICTED = "Evicted least recently used entry, {size} entries remain"
CACHE_CLEARED = "Cleared {count} cached entries"

CLI_READING_FILE = "Reading {path}"
