from types import MappingProxyType
from typing import Mapping, Sequence
from utils.types import Symbol, Codeword
from utils.bit_magic import fixed_size_codes
from utils.config import BASELINE_CODE_WIDTH
from utils.errors import CapacityError, DuplicateMappingError, UnknownCodeError, UnknownSymbolError
from utils.text import chunks
from ..codec import Codec


class BaselineCodec(Codec):
    """Fixed-width code, the uncompressed reference for compression reports."""

    def __init__(self, symbols: Sequence[Symbol], width: int = BASELINE_CODE_WIDTH):
        if width < 1:
            raise ValueError("Code width must be at least 1.")
        if len(symbols) > 2 ** width:
            raise CapacityError(len(symbols), 2 ** width)
        if len(set(symbols)) != len(symbols):
            duplicate = next(s for i, s in enumerate(symbols) if s in symbols[:i])
            raise DuplicateMappingError("symbol", duplicate)

        self.width = width
        self._code_by_symbol = MappingProxyType(dict(zip(symbols, fixed_size_codes(len(symbols), width))))
        self._symbol_by_code = MappingProxyType({code: symbol for symbol, code in self._code_by_symbol.items()})

    @property
    def code_by_symbol(self) -> Mapping[Symbol, Codeword]:
        return self._code_by_symbol

    @property
    def symbol_by_code(self) -> Mapping[Codeword, Symbol]:
        return self._symbol_by_code

    def encode(self, text: str) -> str:
        encoded_symbols = []
        for position, symbol in enumerate(text):
            if symbol not in self._code_by_symbol:
                raise UnknownSymbolError(symbol, position)
            encoded_symbols.append(self._code_by_symbol[symbol])
        return ''.join(encoded_symbols)

    def decode(self, encoded: str) -> str:
        decoded_symbols = []
        for code in chunks(encoded, self.width):
            # a short trailing chunk is never a valid code
            if code not in self._symbol_by_code:
                raise UnknownCodeError(code)
            decoded_symbols.append(self._symbol_by_code[code])
        return ''.join(decoded_symbols)
