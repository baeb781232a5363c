# src/mdconcat/core/normalize.py
from pathlib import Path

from mdconcat.config import BOM, ENCODING

def normalize_content(text: str) -> str:
    """Drops one leading BOM and turns CRLF into LF."""
    if not text:
        return ""
    if text.startswith(BOM):
        text = text[len(BOM):]
    return text.replace("\r\n", "\n")

def read_normalized(path: Path) -> str:
    # Decode the raw bytes: read_text() would also rewrite lone CRs
    raw = path.read_bytes().decode(ENCODING)
    return normalize_content(raw)
