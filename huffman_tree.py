# filename: huffman_tree.py

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    symbol: Hashable
    freq: int


@dataclass
class Branch:
    freq: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


Node = Union[Leaf, Branch]
CodeMap = Dict[Any, List[bool]]


def freq_of(node: Node) -> int:
    return node.freq


def traverse(node: Optional[Node], path: Tuple[bool, ...] = ()) -> CodeMap:
    """Collect the root-to-leaf path of every leaf below ``node``.

    ``False`` means the left child and ``True`` the right one. Each leaf gets
    its own list, so callers may mutate the returned codes freely.
    """
    codes = {}
    match node:
        case Leaf(symbol=symbol):
            codes[symbol] = list(path)
        case Branch(left=left, right=right):
            # children can be absent on a tree rebuilt from a partial code map
            if left is not None:
                codes.update(traverse(left, path + (False,)))
            if right is not None:
                codes.update(traverse(right, path + (True,)))
    return codes
