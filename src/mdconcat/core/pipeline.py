# src/mdconcat/core/pipeline.py
from pathlib import Path
from typing import Iterable, List, Tuple

from mdconcat.core.assembler import assemble
from mdconcat.core.ignore import load_ignore_spec
from mdconcat.core.normalize import read_normalized
from mdconcat.core.ordering import sort_entries
from mdconcat.core.scanner import MarkdownScanner
from mdconcat.core.writer import write_output
from mdconcat.models import FileEntry, MergeResult
from mdconcat.utils.tokenizer import estimate_tokens

class MergeError(Exception):
    """Base class for failures that abort a run."""

    def __init__(self, target: str, cause: Exception):
        super().__init__(f"{target}: {cause}")
        self.target = target
        self.cause = cause

class ScanError(MergeError):
    pass

class SourceReadError(MergeError):
    """A discovered file could not be read or decoded."""

    @property
    def rel_path(self) -> str:
        return self.target

class OutputWriteError(MergeError):
    pass

def collect_entries(root_dir: Path, exclude_files: Iterable[Path] = ()) -> List[FileEntry]:
    scanner = MarkdownScanner(root_dir, load_ignore_spec(), exclude_files=exclude_files)
    try:
        return sort_entries(scanner.scan())
    except OSError as e:
        raise ScanError(str(root_dir), e) from e

def read_entries(entries: Iterable[FileEntry]) -> List[Tuple[FileEntry, str]]:
    pairs = []
    for entry in entries:
        try:
            pairs.append((entry, read_normalized(entry.path)))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(entry.rel_path, e) from e
    return pairs

def concat_markdown(root_dir: Path, output_file: Path) -> MergeResult:
    """
    Runs the whole merge: scan, sort, read, assemble, write.

    The document is fully built in memory before the single write, so a
    failed read never leaves a truncated output behind. An empty tree
    still produces an (empty) output file.
    """
    entries = collect_entries(root_dir, exclude_files=[output_file])
    document = assemble(read_entries(entries))

    try:
        write_output(output_file, document)
    except OSError as e:
        raise OutputWriteError(str(output_file), e) from e

    return MergeResult(
        output_file=output_file,
        file_count=len(entries),
        token_count=estimate_tokens(document),
    )
