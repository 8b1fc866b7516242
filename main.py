"""
Delimiter-framed binary coding of text

Builds a symbol-code table from the symbol frequencies of a sample text, then
encodes and decodes a message with it and reports the compression achieved
against a fixed 8-bit code, widened when the
alphabet has more than 256 symbols.

How to run:
  delimited-codes text.txt
  delimited-codes text.txt --manual
  delimited-codes text.txt --text "привет мир" --separator 110 --verbose
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional

from codec import BaselineCodec, SymbolCodec, build_codec
from reader import Reader
from utils.bit_magic import average_code_length, average_framed_length, calculate_entropy, code_length_histogram, \
    compression_ratio, fixed_code_width
from utils.codewords import generate_codewords
from utils.config import BASELINE_CODE_WIDTH, DEFAULT_ALPHABET, DEFAULT_CHUNK_SIZE, DEFAULT_MAX_CODE_LENGTH, \
    DEFAULT_SEPARATOR
from utils.errors import CodecError
from utils.frequency import analyze_frequencies
from utils.text import chunks, normalize
from utils.types import FrequencyTable


def alphabet_class(value: str) -> str:
    try:
        re.compile(f"[^{value} ]")
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid character class {value!r}: {e}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Delimiter-framed binary coding of text")
    ap.add_argument("sample", help="text file the symbol frequencies are taken from")
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--text", help="message to encode (default: the sample itself)")
    source.add_argument("--manual", action="store_true", help="read the message from standard input")
    ap.add_argument("--separator", default=DEFAULT_SEPARATOR, help=f"framing separator (default {DEFAULT_SEPARATOR})")
    ap.add_argument("--max-length", type=int, default=DEFAULT_MAX_CODE_LENGTH,
                    help=f"longest codeword in bits (default {DEFAULT_MAX_CODE_LENGTH})")
    ap.add_argument("--alphabet", type=alphabet_class, default=DEFAULT_ALPHABET,
                    help=f"regex character class of kept symbols (default {DEFAULT_ALPHABET})")
    ap.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE,
                    help=f"group size for printing encoded bits (default {DEFAULT_CHUNK_SIZE})")
    ap.add_argument("--verbose", action="store_true", help="print code statistics")
    return ap.parse_args(argv)


def print_frequencies(frequencies: FrequencyTable) -> None:
    print("Frequencies:")
    for symbol, probability in frequencies:
        print(f"{symbol} => {probability * 100:.2f}%")
    print()


def print_statistics(frequencies: FrequencyTable, codec: SymbolCodec) -> None:
    print("Code statistics:")
    print(f"- Entropy (bits per symbol): {calculate_entropy(frequencies.probabilities):.3f}")
    print(f"- Average code length (bits per symbol): {average_code_length(frequencies, codec.code_by_symbol):.3f}")
    print(f"- Average framed length (bits per symbol): "
          f"{average_framed_length(frequencies, codec.code_by_symbol, codec.separator):.3f}")
    for length, count in code_length_histogram(codec.code_by_symbol).items():
        print(f"- Codes of length {length}: {count}")
    print()


def run(args: argparse.Namespace) -> int:
    print("Separator:")
    print(args.separator)

    sample = normalize(Reader.read_from_file(args.sample), args.alphabet)
    frequencies = analyze_frequencies(sample)
    print_frequencies(frequencies)

    codewords = generate_codewords(args.separator, args.max_length, verbose=args.verbose)
    codec = build_codec(args.separator, frequencies.symbols, codewords)
    print("Symbol-code mappings:")
    for symbol, code in codec.code_by_symbol.items():
        print(f"{symbol} => {code}")
    print()

    if args.verbose:
        print_statistics(frequencies, codec)

    if args.manual:
        text = Reader.read_from_prompt("Input text:")
    elif args.text is not None:
        text = args.text
    else:
        text = sample
    text = normalize(text, args.alphabet)

    encoded = codec.encode(text)
    print("Encoded text:")
    print(" ".join(chunks(encoded, args.chunk_size)))
    decoded = codec.decode(encoded)
    print("Decoded text:")
    print(decoded)

    width = fixed_code_width(len(frequencies), BASELINE_CODE_WIDTH)
    baseline = BaselineCodec(frequencies.symbols, width).encode(text)
    report = compression_ratio(baseline, encoded)
    print()
    print(f"Original text length: {report.original_bits}")
    print(f"Encoded text length: {report.encoded_bits}")
    print(f"Compression: {report.ratio:.2f}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except (CodecError, FileNotFoundError, NotImplementedError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
