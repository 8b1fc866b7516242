from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple, TypeAlias

Symbol: TypeAlias = str
Codeword: TypeAlias = str


@dataclass(frozen=True)
class SymbolFrequency:
    symbol: Symbol
    count: int
    probability: float


@dataclass
class FrequencyTable:
    entries: List[SymbolFrequency] = field(default_factory=list)

    # Iteration yields (symbol, probability) pairs, most frequent first
    def __iter__(self) -> Iterator[Tuple[Symbol, float]]:
        return ((entry.symbol, entry.probability) for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> SymbolFrequency:
        return self.entries[index]

    def __contains__(self, symbol: Symbol) -> bool:
        return any(entry.symbol == symbol for entry in self.entries)

    @property
    def symbols(self) -> List[Symbol]:
        return [entry.symbol for entry in self.entries]

    @property
    def probabilities(self) -> List[float]:
        return [entry.probability for entry in self.entries]

    # Length of the text the table was built from
    @property
    def total(self) -> int:
        return sum(entry.count for entry in self.entries)

    def as_dict(self) -> Dict[Symbol, float]:
        return {entry.symbol: entry.probability for entry in self.entries}


@dataclass
class CompressionReport:
    original_bits: int
    encoded_bits: int

    @property
    def ratio(self) -> float:
        if self.encoded_bits == 0:
            return 0.0
        return self.original_bits / self.encoded_bits
