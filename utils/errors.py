class CodecError(Exception):
    pass


class ConstructionError(CodecError):
    pass


class CapacityError(ConstructionError):
    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"{required} symbols need codes, but only {available} codewords are available.")


class DuplicateMappingError(ConstructionError):
    def __init__(self, kind: str, value: str):
        self.kind = kind  # "symbol" or "codeword"
        self.value = value
        super().__init__(f"Duplicate {kind} {value!r} in symbol-code table.")


class UnsafeCodewordError(ConstructionError):
    def __init__(self, code: str, separator: str):
        self.code = code
        self.separator = separator
        super().__init__(f"Codeword {code!r} breaks framing with separator {separator!r}.")


class UnknownSymbolError(CodecError):
    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unknown symbol {symbol!r} at position {position}.")


class UnknownCodeError(CodecError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown code {code!r}.")
