# src/mdconcat/core/ignore.py
from pathlib import Path
from typing import List, Optional
import pathspec
from mdconcat.config import IGNORED_DIR_PATTERNS

def load_ignore_spec(extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Builds a PathSpec from the fixed directory ignore set.
    Extra patterns are appended after the defaults.
    """
    lines = list(IGNORED_DIR_PATTERNS)
    if extra_patterns:
        lines.extend(extra_patterns)
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)

def is_dir_ignored(rel_dir: Path, spec: pathspec.PathSpec) -> bool:
    # Trailing slash so dir-only patterns ("dist/") apply
    return spec.match_file(rel_dir.as_posix() + "/")
