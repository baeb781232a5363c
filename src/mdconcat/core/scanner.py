# src/mdconcat/core/scanner.py
import os
from pathlib import Path
from typing import Iterable, Iterator, AbstractSet

import pathspec

from mdconcat.config import ACCEPTED_EXTENSIONS
from mdconcat.core.ignore import is_dir_ignored
from mdconcat.models import FileEntry

def _raise_walk_error(err: OSError):
    raise err

class MarkdownScanner:
    def __init__(
        self,
        root_dir: Path,
        ignore_spec: pathspec.PathSpec,
        extensions: AbstractSet[str] = ACCEPTED_EXTENSIONS,
        exclude_files: Iterable[Path] = (),
    ):
        self.root_dir = root_dir
        self.ignore_spec = ignore_spec
        self.extensions = {e.lower() for e in extensions}
        self.exclude_files = {Path(p) for p in exclude_files}

    def _is_accepted(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def scan(self) -> Iterator[FileEntry]:
        """
        Walks the tree depth-first, pruning ignored directories,
        and yields a FileEntry for every accepted Markdown file.

        Symlinked directories are not descended into (os.walk default);
        symlinked files and other non-regular files are skipped.
        Unreadable directories raise OSError.
        """
        for root, dirs, files in os.walk(self.root_dir, onerror=_raise_walk_error):
            root_path = Path(root)

            # Prune in place so os.walk never enters ignored subtrees
            for d in list(dirs):
                dir_rel_path = (root_path / d).relative_to(self.root_dir)
                if is_dir_ignored(dir_rel_path, self.ignore_spec):
                    dirs.remove(d)

            for f in files:
                file_abs_path = root_path / f
                if not self._is_accepted(file_abs_path):
                    continue
                # Regular files only: symlinks, FIFOs and sockets are skipped
                if file_abs_path.is_symlink() or not file_abs_path.is_file():
                    continue
                if file_abs_path in self.exclude_files:
                    continue

                rel_path = file_abs_path.relative_to(self.root_dir)
                yield FileEntry(path=file_abs_path, rel_path=rel_path.as_posix())
