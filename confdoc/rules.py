"""
Fixed doc comment convention and documentation targets.

This file exists to make the convention explicit: one marker, one
terminator, one separator. Generated docs are diffed, so these values
are compiled in and not configurable.
"""

LINT_MARKER = " Lint: "
DOC_TERMINATOR = "."
LINT_SEPARATOR = ", "

# a newline plus one space is re-indented for nesting under a list item,
# unless the line already carries the nested indent
CONTINUATION = r"\n (?!   )"
NESTED_CONTINUATION = "\n    "
NESTED_INDENT = "    "

MALFORMED_DOC_SENTINEL = "[ERROR] MALFORMED DOC COMMENT"

LINT_INDEX_URL = "https://rust-lang.github.io/rust-clippy/master/index.html"
BOOK_CONFIGS_URL = "https://doc.rust-lang.org/clippy/lint_configuration.html"

BOOK_HEADER = (
    "# Lint Configuration Options\n"
    "\n"
    "The following list shows each configuration option, along with a description, "
    "its default value, an example and lints affected.\n"
    "\n"
    "---\n"
    "\n"
)
