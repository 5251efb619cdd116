"""
Static Huffman coding over bytes plus a PSEUDO_EOF terminator.

Frequent bytes get shorter codes. The tree travels with the data as a
preorder header, so a compressed stream can be decoded on its own.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional

from bitio import BITS_EXHAUSTED
from format import (ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF, SYMBOL_BITS,
                    HuffException, InternalConsistencyError,
                    MalformedHeaderError, TruncatedStreamError)


class HuffmanNode:
    def __init__(self, value: Optional[int] = None, weight: int = 0,
                 left: Optional['HuffmanNode'] = None,
                 right: Optional['HuffmanNode'] = None):
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"Leaf({self.value}, weight={self.weight})"
        return f"Node(weight={self.weight})"

    def same_shape(self, other: 'HuffmanNode') -> bool:
        """Structural equality: same shape and same leaf symbols, weights ignored."""
        if self.is_leaf or other.is_leaf:
            return self.is_leaf and other.is_leaf and self.value == other.value
        return self.left.same_shape(other.left) and self.right.same_shape(other.right)

    def leaves(self) -> List['HuffmanNode']:
        if self.is_leaf:
            return [self]
        return self.left.leaves() + self.right.leaves()


@dataclass(frozen=True)
class Code:
    value: int
    length: int

    def __str__(self):
        return format(self.value, f'0{self.length}b')

    def is_prefix_of(self, other: 'Code') -> bool:
        if self.length > other.length:
            return False
        return other.value >> (other.length - self.length) == self.value


def count_frequencies(bit_in) -> List[int]:
    counts = [0] * (ALPH_SIZE + 1)

    while True:
        word = bit_in.read_bits(BITS_PER_WORD)
        if word == BITS_EXHAUSTED:
            break
        counts[word] += 1

    counts[PSEUDO_EOF] = 1
    return counts


def build_tree(counts: List[int]) -> HuffmanNode:
    """
    Merges the two lightest nodes until one remains.

    Ties are broken by insertion order: leaves in ascending symbol order,
    then merged nodes in the order they were created.
    """
    sequence = itertools.count()
    heap = [(weight, next(sequence), HuffmanNode(value=symbol, weight=weight))
            for symbol, weight in enumerate(counts) if weight > 0]

    if not heap:
        raise HuffException("Cannot build a tree from an empty frequency table")

    if len(heap) == 1:
        filler = next(symbol for symbol in range(ALPH_SIZE + 1)
                      if symbol >= len(counts) or counts[symbol] == 0)
        heap.append((0, next(sequence), HuffmanNode(value=filler, weight=0)))

    heapq.heapify(heap)

    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)

        weight = left_weight + right_weight
        parent = HuffmanNode(weight=weight, left=left, right=right)
        heapq.heappush(heap, (weight, next(sequence), parent))

    return heap[0][2]


def make_codes(root: HuffmanNode) -> List[Optional[Code]]:
    codes: List[Optional[Code]] = [None] * (ALPH_SIZE + 1)

    def traverse(node: HuffmanNode, value: int, length: int):
        if node.is_leaf:
            codes[node.value] = Code(value, length)
            return

        traverse(node.left, value << 1, length + 1)
        traverse(node.right, (value << 1) | 1, length + 1)

    traverse(root, 0, 0)
    return codes


def weighted_path_length(counts: List[int], codes: List[Optional[Code]]) -> int:
    return sum(count * codes[symbol].length
               for symbol, count in enumerate(counts) if count > 0)


def write_header(root: HuffmanNode, out):
    if root.is_leaf:
        out.write_bits(1, 1)
        out.write_bits(SYMBOL_BITS, root.value)
        return

    out.write_bits(1, 0)
    write_header(root.left, out)
    write_header(root.right, out)


def read_header(bit_in) -> HuffmanNode:
    root = _read_node(bit_in, 0)

    if root.is_leaf:
        raise MalformedHeaderError("Tree header holds a single leaf and no internal nodes")

    return root


def _read_node(bit_in, depth: int) -> HuffmanNode:
    # a tree over ALPH_SIZE + 1 leaves is at most ALPH_SIZE levels deep
    if depth > ALPH_SIZE:
        raise MalformedHeaderError(f"Tree header nested deeper than {ALPH_SIZE} levels")

    bit = bit_in.read_bits(1)
    if bit == BITS_EXHAUSTED:
        raise MalformedHeaderError("Out of bits in reading tree header")

    if bit == 0:
        left = _read_node(bit_in, depth + 1)
        right = _read_node(bit_in, depth + 1)
        return HuffmanNode(weight=0, left=left, right=right)

    value = bit_in.read_bits(SYMBOL_BITS)
    if value == BITS_EXHAUSTED:
        raise MalformedHeaderError("Out of bits in reading leaf symbol")
    if value > PSEUDO_EOF:
        raise MalformedHeaderError(f"Leaf symbol out of range: {value}")

    return HuffmanNode(value=value, weight=0)


def write_compressed_bits(codes: List[Optional[Code]], bit_in, out):
    while True:
        word = bit_in.read_bits(BITS_PER_WORD)
        if word == BITS_EXHAUSTED:
            break

        code = codes[word]
        if code is None:
            raise InternalConsistencyError(f"No code for byte {word:#04x}")
        out.write_bits(code.length, code.value)

    code = codes[PSEUDO_EOF]
    if code is None:
        raise InternalConsistencyError("No code for PSEUDO_EOF")
    out.write_bits(code.length, code.value)


def read_compressed_bits(root: HuffmanNode, bit_in, out):
    current = root

    while True:
        bit = bit_in.read_bits(1)
        if bit == BITS_EXHAUSTED:
            raise TruncatedStreamError("Bad input, no PSEUDO_EOF")

        current = current.right if bit else current.left

        if current.is_leaf:
            if current.value == PSEUDO_EOF:
                return
            out.write_bits(BITS_PER_WORD, current.value)
            current = root
