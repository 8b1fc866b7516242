from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple
from utils.types import Symbol, Codeword
from utils.codewords import generate_codewords, is_delimiter_safe
from utils.frequency import analyze_frequencies
from utils.config import DEFAULT_SEPARATOR, DEFAULT_MAX_CODE_LENGTH
from utils.errors import (CapacityError, DuplicateMappingError, UnsafeCodewordError, UnknownCodeError,
                          UnknownSymbolError)
from ..codec import Codec


class SymbolCodec(Codec):
    def __init__(self, separator: str, symbol_codes: Iterable[Tuple[Symbol, Codeword]]):
        """
        Initializes a codec that frames every codeword with a separator.

        Parameters:
            separator (str): Non-empty separator placed before and after each codeword.
            symbol_codes (iterable): (symbol, codeword) pairs, each symbol a single character.
        """
        if not separator:
            raise ValueError("Separator must not be empty.")
        self._separator = separator

        code_by_symbol: Dict[Symbol, Codeword] = {}
        symbol_by_code: Dict[Codeword, Symbol] = {}
        for symbol, code in symbol_codes:
            if len(symbol) != 1:
                raise ValueError(f"Symbol {symbol!r} must be a single character.")
            if symbol in code_by_symbol:
                raise DuplicateMappingError("symbol", symbol)
            if code in symbol_by_code:
                raise DuplicateMappingError("codeword", code)
            if not is_delimiter_safe(code, separator):
                raise UnsafeCodewordError(code, separator)

            code_by_symbol[symbol] = code
            symbol_by_code[code] = symbol

        self._code_by_symbol = MappingProxyType(code_by_symbol)
        self._symbol_by_code = MappingProxyType(symbol_by_code)

    @classmethod
    def from_text(cls, sample: str, separator: str = DEFAULT_SEPARATOR,
                  max_length: int = DEFAULT_MAX_CODE_LENGTH) -> 'SymbolCodec':
        # Whole pipeline: rank symbols of a normalized sample, then hand out the shortest codes first
        frequencies = analyze_frequencies(sample)
        codewords = generate_codewords(separator, max_length)
        return build_codec(separator, frequencies.symbols, codewords)

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def code_by_symbol(self) -> Mapping[Symbol, Codeword]:
        return self._code_by_symbol

    @property
    def symbol_by_code(self) -> Mapping[Codeword, Symbol]:
        return self._symbol_by_code

    def encode(self, text: str) -> str:
        """
        Encodes text as separator-framed codewords.

        Parameters:
            text (str): Text made of symbols known to the codec.

        Returns:
            str: The separator followed by codeword + separator for every symbol.
        """
        encoded_symbols = [self._separator]
        for position, symbol in enumerate(text):
            if symbol not in self._code_by_symbol:
                raise UnknownSymbolError(symbol, position)
            encoded_symbols.append(self._code_by_symbol[symbol])
            encoded_symbols.append(self._separator)

        return ''.join(encoded_symbols)

    def decode(self, encoded: str) -> str:
        """
        Decodes separator-framed codewords back into text.

        Parameters:
            encoded (str): Output of encode.

        Returns:
            str: Decoded text.
        """
        decoded_symbols = []
        for code in encoded.split(self._separator):
            # empty fields come from leading, trailing or adjacent separators
            if not code:
                continue
            if code not in self._symbol_by_code:
                raise UnknownCodeError(code)
            decoded_symbols.append(self._symbol_by_code[code])

        return ''.join(decoded_symbols)


def build_codec(separator: str, symbols_by_frequency: Sequence[Symbol],
                codewords: Sequence[Codeword]) -> SymbolCodec:
    """
    Pairs the i-th most frequent symbol with the i-th codeword.

    Parameters:
        separator (str): Separator the codewords were generated for.
        symbols_by_frequency (sequence): Symbols, most frequent first.
        codewords (sequence): Codewords, shortest first.

    Returns:
        SymbolCodec: Codec over all given symbols, surplus codewords stay unused.
    """
    if len(codewords) < len(symbols_by_frequency):
        raise CapacityError(len(symbols_by_frequency), len(codewords))

    symbol_codes: List[Tuple[Symbol, Codeword]] = list(zip(symbols_by_frequency, codewords))
    return SymbolCodec(separator, symbol_codes)
