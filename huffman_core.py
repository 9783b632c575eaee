# filename: huffman_core.py

import logging
from collections import Counter

from huffman_errors import MalformedCodeError
from huffman_queue import PQueue
from huffman_tree import Branch, Leaf, freq_of, traverse

logger = logging.getLogger(__name__)


def _child(branch, bit):
    return branch.right if bit else branch.left


def _attach(branch, bit, node):
    if bit:
        branch.right = node
    else:
        branch.left = node


class HuffmanLogic:
    def frequency_table(self, data):
        # None rather than an empty Counter: no input, no table
        if not data:
            return None
        freqs = Counter(data)
        logger.debug("counted %d distinct symbols across %d", len(freqs), sum(freqs.values()))
        return freqs

    def build_tree(self, freqs):
        """Merge the two rarest nodes until a single tree remains.

        The node dequeued first becomes the left child, so a right child never
        has a lower frequency than its sibling. A table with one symbol yields
        a lone leaf.
        """
        if not freqs:
            return None

        queue = PQueue()
        for symbol, freq in freqs.items():
            queue.enqueue(Leaf(symbol, freq))

        for _ in range(len(freqs)):
            left = queue.dequeue()
            right = queue.dequeue()
            if right is None:
                queue.enqueue(left)
            else:
                queue.enqueue(Branch(freq_of(left) + freq_of(right), left, right))

        root = queue.dequeue()
        logger.debug("built tree over %d symbols, root frequency %d", len(freqs), freq_of(root))
        return root

    def build_code(self, tree):
        return traverse(tree)

    def tree_from_code(self, code):
        """Rebuild the shape of a tree from its code map.

        Frequencies are not recoverable from a code map, so every node is
        labelled 0. A map holding a single empty code rebuilds as a lone leaf.
        Raises MalformedCodeError when two codes claim the same position or
        one code runs through another's leaf.
        """
        if len(code) == 1:
            (symbol, path), = code.items()
            if not path:
                return Leaf(symbol, 0)

        root = Branch(0)
        for symbol, path in code.items():
            if not path:
                raise MalformedCodeError(symbol, "is empty but other symbols have codes")

            current = root
            for bit in path[:-1]:
                child = _child(current, bit)
                match child:
                    case None:
                        child = Branch(0)
                        _attach(current, bit, child)
                    case Leaf():
                        raise MalformedCodeError(symbol, "runs through the leaf of another symbol")
                current = child

            if _child(current, path[-1]) is not None:
                raise MalformedCodeError(symbol, "ends on a position already in use")
            _attach(current, path[-1], Leaf(symbol, 0))

        logger.debug("rebuilt tree for %d codes", len(code))
        return root
