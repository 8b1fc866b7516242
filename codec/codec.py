from abc import ABC, abstractmethod
from typing import Mapping
from utils.types import Symbol, Codeword


class Codec(ABC):
    @property
    @abstractmethod
    def code_by_symbol(self) -> Mapping[Symbol, Codeword]:
        ...

    @property
    @abstractmethod
    def symbol_by_code(self) -> Mapping[Codeword, Symbol]:
        ...

    @abstractmethod
    def encode(self, text: str) -> str:
        ...

    @abstractmethod
    def decode(self, encoded: str) -> str:
        ...

    def __len__(self) -> int:
        return len(self.code_by_symbol)

    def __contains__(self, symbol: Symbol) -> bool:
        return symbol in self.code_by_symbol
