# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for coding and decoding failures."""


class UnknownSymbolError(HuffmanError, KeyError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self):
        return f"symbol {self.symbol!r} has no code"


class MalformedCodeError(HuffmanError, ValueError):
    """Raised when a code map cannot describe a binary tree."""

    def __init__(self, symbol, reason):
        self.symbol = symbol
        super().__init__(f"code for {symbol!r} {reason}")


class MalformedDataError(HuffmanError, ValueError):
    def __init__(self, position, message=None):
        self.position = position
        super().__init__(message or f"no code path matches the bit at index {position}")


class TruncatedDataError(MalformedDataError):
    def __init__(self, position):
        super().__init__(position, f"encoded data ends mid-code at index {position}")
