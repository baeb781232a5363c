# src/mdconcat/core/writer.py
from pathlib import Path

from mdconcat.config import ENCODING

def write_output(output_file: Path, text: str) -> Path:
    """Creates missing parent directories and writes text in a single call."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps LF endings on every platform
    with open(output_file, "w", encoding=ENCODING, newline="") as f:
        f.write(text)
    return output_file
