# src/mdconcat/config.py

ACCEPTED_EXTENSIONS = frozenset({".md", ".markdown", ".mdx"})

# Directory names skipped at any depth (gitignore syntax, dir-only)
IGNORED_DIR_PATTERNS = [
    "node_modules/",
    ".git/",
    ".github/",
    ".next/",
    "dist/",
    "build/",
    ".cache/",
]

ENCODING = "utf-8"
BOM = "\ufeff"

PREAMBLE = "\n"
SEPARATOR = "\n"
