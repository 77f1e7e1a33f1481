"""Text canonicalization and sliding-window phrase generation."""

import re
from collections.abc import Iterator

# Anything that is not a letter, digit or whitespace (underscore included)
_PUNCTUATION = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase, replace punctuation with spaces and collapse whitespace."""
    text = _PUNCTUATION.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def extract_phrases(normalized_text: str) -> Iterator[str]:
    """Yield every 1-, 2- and 3-word window of already normalized text.

    Windows are interleaved per starting index (unigram, bigram, trigram)
    and duplicates are kept.
    """
    if not normalized_text:
        return
    words = normalized_text.split(" ")
    n = len(words)
    for i in range(n):
        yield words[i]
        if i < n - 1:
            yield f"{words[i]} {words[i+1]}"
        if i < n - 2:
            yield f"{words[i]} {words[i+1]} {words[i+2]}"
