import re
from typing import List
from .config import DEFAULT_ALPHABET


def normalize(text: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """
    Prepares raw text for frequency analysis and encoding.

    Lowercases the text, collapses whitespace runs (line breaks included) into
    single spaces and drops every character outside the alphabet and space.

    Parameters:
        text (str): Raw text.
        alphabet (str): Regex character class contents, e.g. "а-яё".

    Returns:
        str: Normalized text.
    """
    text = text.lower()
    text = re.sub(r"\s+", " ", text)
    return re.sub(f"[^{alphabet} ]", "", text)


def chunks(text: str, size: int) -> List[str]:
    # Fixed-width slices for display, the last one may be shorter
    if size < 1:
        raise ValueError("Chunk size must be at least 1.")
    return [text[i:i + size] for i in range(0, len(text), size)]
