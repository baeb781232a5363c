# src/mdconcat/models.py
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class FileEntry:
    """A discovered Markdown file. rel_path always uses forward slashes."""
    path: Path
    rel_path: str

@dataclass(frozen=True)
class MergeResult:
    output_file: Path
    file_count: int
    token_count: int
