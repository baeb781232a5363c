# src/mdconcat/core/ordering.py
from functools import lru_cache
from typing import Iterable, List, Tuple

import icu

from mdconcat.models import FileEntry

@lru_cache(maxsize=1)
def _collator() -> icu.Collator:
    """Root-locale collator at primary strength: case and accents compare equal."""
    collator = icu.Collator.createInstance(icu.Locale.getRoot())
    collator.setStrength(icu.Collator.PRIMARY)
    return collator

def sort_key(rel_path: str) -> Tuple[bytes, str]:
    # Raw path breaks ties so the order stays total
    return (_collator().getSortKey(rel_path), rel_path)

def sort_entries(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """Orders entries by relative path, independent of traversal order."""
    return sorted(entries, key=lambda e: sort_key(e.rel_path))
