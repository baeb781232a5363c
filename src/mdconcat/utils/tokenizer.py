# src/mdconcat/utils/tokenizer.py
from functools import lru_cache

import tiktoken

ENCODING_NAME = "cl100k_base"

@lru_cache(maxsize=1)
def _get_encoding():
    return tiktoken.get_encoding(ENCODING_NAME)

def estimate_tokens(text: str) -> int:
    """Estimates the token count of the merged document."""
    try:
        encoding = _get_encoding()
        return len(encoding.encode(text, disallowed_special=()))
    except Exception:
        # Encoding data unavailable (offline): rough chars-per-token estimate
        return len(text) // 4
