APP_DESCRIPTION = (
    "Lists the public methods of the class or object literal exported by "
    "JavaScript and TypeScript modules."
)

HELP_PATHS = "Module files to inspect."
HELP_FILENAME = (
    "Parse every file under this name instead of its own, which also selects "
    "the grammar (.js, .ts, .tsx)."
)
HELP_TARGET = "Language version the sources target, e.g. ES2018 or ESNext."
HELP_VERBOSE = "Log debug messages to stderr."
