# filename: huffman_service.py

import logging
from dataclasses import dataclass
from typing import List

from huffman_core import HuffmanLogic
from huffman_errors import MalformedDataError, TruncatedDataError, UnknownSymbolError
from huffman_tree import CodeMap, Leaf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HuffmanCoding:
    """A code map together with the data it encoded."""
    code: CodeMap
    data: List[bool]

    @property
    def bit_length(self):
        return len(self.data)


class HuffmanService:
    def __init__(self, logic=None):
        self.logic = logic if logic is not None else HuffmanLogic()

    def encode(self, data):
        if not data:
            return None
        tree = self.logic.build_tree(self.logic.frequency_table(data))
        code = self.logic.build_code(tree)
        return HuffmanCoding(code, self.encode_with(code, data))

    def encode_with(self, code, data):
        bits = []
        for symbol in data:
            try:
                bits.extend(code[symbol])
            except KeyError:
                raise UnknownSymbolError(symbol) from None
        logger.debug("encoded %d symbols into %d bits", len(data), len(bits))
        return bits

    def decode(self, code, data):
        """Walk the tree rebuilt from ``code`` one bit at a time.

        ``True`` steps right and ``False`` steps left; every leaf reached emits
        its symbol and the walk restarts at the root. Raises
        MalformedDataError on a step into a missing child and
        TruncatedDataError when ``data`` ends part way down a code.
        """
        root = self.logic.tree_from_code(code)
        result = []

        match root:
            case Leaf():
                # single-symbol codes are empty, so there is nothing to walk
                if data:
                    raise MalformedDataError(0, "a single-symbol code cannot consume bits")
                return result

        current = root
        for position, bit in enumerate(data):
            current = current.right if bit else current.left
            match current:
                case None:
                    raise MalformedDataError(position)
                case Leaf(symbol=symbol):
                    result.append(symbol)
                    current = root

        if current is not root:
            raise TruncatedDataError(len(data))
        logger.debug("decoded %d bits into %d symbols", len(data), len(result))
        return result

    def decode_text(self, code, data):
        return "".join(self.decode(code, data))


_service = HuffmanService()


def frequency_table(symbols):
    return _service.logic.frequency_table(symbols)


def build_tree(table):
    return _service.logic.build_tree(table)


def build_code(tree):
    return _service.logic.build_code(tree)


def encode(symbols):
    return _service.encode(symbols)


def decode(code, data):
    return _service.decode(code, data)
