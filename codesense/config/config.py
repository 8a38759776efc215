"""
Static configuration data for the codesense completion engine.
This includes the supported languages, result limits, ranking orders and the
keyword list offered by identifier completion. Per-language data tables live in
the sibling `*_completions` modules.
"""

SUPPORTED_LANGUAGES = ("javascript", "html", "css")

# File extensions mapped onto a language, used when a caller only knows a path.
LANGUAGE_EXTENSIONS = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
}

# --- Result limits ---

MAX_RESULTS_NO_PREFIX = 50
MAX_RESULTS_WITH_PREFIX = 30
MAX_IDENTIFIER_RESULTS = 50

# --- Identifier ranking ---
# Lower sorts first. `_`-prefixed variables are conventionally private and sink.

IDENTIFIER_SORT_ORDERS = {
    "variable": 0,
    "private_variable": 3,
    "constant": 0,
    "parameter": 0,
    "function": 1,
    "class": 2,
}
DEFAULT_SORT_ORDER = 4
KEYWORD_SORT_ORDER = 5

IDENTIFIER_KEYWORDS = [
    "async", "await", "break", "case", "catch", "class", "const",
    "continue", "debugger", "default", "delete", "do", "else",
    "export", "extends", "false", "finally", "for", "function",
    "if", "import", "in", "instanceof", "let", "new", "null",
    "return", "static", "super", "switch", "this", "throw",
    "true", "try", "typeof", "undefined", "var", "void",
    "while", "yield",
]
