from typing import List
from tqdm import trange
from .config import DEFAULT_MAX_CODE_LENGTH
from .types import Codeword


def is_delimiter_safe(value: str, separator: str) -> bool:
    """
    Checks that a codeword survives being framed by the separator.

    The framed message separator + value + separator is split on the separator,
    and the value is safe only if the second field comes back unchanged.

    Parameters:
        value (str): Candidate codeword.
        separator (str): Framing separator.

    Returns:
        bool: True if the codeword can be placed between separators.
    """
    if not separator:
        raise ValueError("Separator must not be empty.")
    if not value:
        # indistinguishable from the empty fields around separators
        return False

    fields = f"{separator}{value}{separator}".split(separator)
    return fields[1] == value


def binary_combinations(length: int) -> List[str]:
    # All binary strings of the given length in increasing numeral order
    return [bin(i)[2:].rjust(length, "0") for i in range(2 ** length)]


def generate_codewords(separator: str, max_length: int = DEFAULT_MAX_CODE_LENGTH,
                       verbose: bool = False) -> List[Codeword]:
    """
    Generates every delimiter-safe binary codeword up to max_length bits.

    Codewords are ordered by length, then by their value as a base-2 numeral,
    so the shortest codes come first.

    Parameters:
        separator (str): Framing separator the codewords must not break.
        max_length (int): Longest codeword length to enumerate.
        verbose (bool): Show progress over the enumerated lengths.

    Returns:
        list: Delimiter-safe codewords.
    """
    if not separator:
        raise ValueError("Separator must not be empty.")
    if max_length < 1:
        raise ValueError("Maximal codeword length must be at least 1.")

    codewords: List[Codeword] = []
    for length in trange(1, max_length + 1, desc="Codeword lengths", disable=not verbose):
        codewords.extend(code for code in binary_combinations(length) if is_delimiter_safe(code, separator))

    if verbose:
        print(f"Generated {len(codewords)} codewords for separator {separator!r} (up to {max_length} bits)")

    return codewords
