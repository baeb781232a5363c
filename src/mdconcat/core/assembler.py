# src/mdconcat/core/assembler.py
from typing import Iterable, Tuple

from mdconcat.config import PREAMBLE, SEPARATOR
from mdconcat.models import FileEntry

HEADING_MARKER = "# "

def has_top_level_heading(content: str) -> bool:
    return content.lstrip().startswith(HEADING_MARKER)

def render_entry(entry: FileEntry, content: str) -> str:
    """
    Renders one file: the separator, a synthetic '# <rel_path>' heading
    when the file has none, then the content with trailing whitespace
    trimmed and a single closing newline.
    """
    parts = [SEPARATOR]
    if not has_top_level_heading(content):
        parts.append(f"{HEADING_MARKER}{entry.rel_path}\n\n")
    parts.append(content.rstrip() + "\n")
    return "".join(parts)

def assemble(pairs: Iterable[Tuple[FileEntry, str]]) -> str:
    """Joins rendered entries in the given order behind the preamble."""
    rendered = [render_entry(entry, content) for entry, content in pairs]
    if not rendered:
        return ""
    return PREAMBLE + "".join(rendered)
