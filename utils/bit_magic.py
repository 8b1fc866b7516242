from typing import Dict, List, Mapping
import numpy as np
from .types import CompressionReport, FrequencyTable, Symbol, Codeword


def calculate_entropy(probabilities: List[float]) -> float:
    # Shannon entropy in bits per symbol
    return float(-sum(map(lambda p: p * np.log2(p), probabilities)))


def average_code_length(frequencies: FrequencyTable, code_by_symbol: Mapping[Symbol, Codeword]) -> float:
    # Expected payload bits per symbol, separators not included
    return float(sum(probability * len(code_by_symbol[symbol]) for symbol, probability in frequencies))


def average_framed_length(frequencies: FrequencyTable, code_by_symbol: Mapping[Symbol, Codeword],
                          separator: str) -> float:
    # Every codeword is followed by one separator in the framed output
    return average_code_length(frequencies, code_by_symbol) + len(separator)


def compression_ratio(original: str, encoded: str) -> CompressionReport:
    return CompressionReport(original_bits=len(original), encoded_bits=len(encoded))


def fixed_size_codes(count: int, size: int) -> List[Codeword]:
    return [bin(v)[2:].rjust(size, "0") for v in range(count)]


def code_length_histogram(code_by_symbol: Mapping[Symbol, Codeword]) -> Dict[int, int]:
    histogram: Dict[int, int] = {}
    for code in code_by_symbol.values():
        histogram[len(code)] = histogram.get(len(code), 0) + 1
    return dict(sorted(histogram.items()))


def fixed_code_width(count: int, minimal_width: int) -> int:
    # Bits needed to give count symbols distinct fixed-size codes, never below minimal_width
    return max(minimal_width, (count - 1).bit_length())
