"""
Defines the compressed file layout constants and the errors raised while
reading or writing it.

Layout of a compressed file (bit-exact):

    [32 bits]  HUFF_TREE magic marker
    [tree]     preorder tree: internal = '0' left right, leaf = '1' + 9-bit symbol
    [bits]     Huffman code of every input byte, in order
    [bits]     Huffman code of PSEUDO_EOF
    [pad]      zero bits up to the next byte boundary
"""

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE
SYMBOL_BITS = BITS_PER_WORD + 1
BITS_EXHAUSTED = -1

HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1


class HuffException(ValueError):
    """Base class for every failure of a compress or decompress run."""


class ReadExhaustedError(HuffException):
    pass


class MalformedHeaderError(ReadExhaustedError):
    pass


class BadFormatError(HuffException):
    pass


class TruncatedStreamError(HuffException):
    pass


class InternalConsistencyError(HuffException):
    pass


def write_magic(out):
    out.write_bits(BITS_PER_INT, HUFF_TREE)


def read_magic(bit_in):
    magic = bit_in.read_bits(BITS_PER_INT)

    if magic == HUFF_TREE:
        return magic

    if magic == BITS_EXHAUSTED:
        raise BadFormatError("Input too short to hold a magic number")
    if magic == HUFF_NUMBER:
        raise BadFormatError(
            f"Unsupported header: {magic:#010x} (count-table headers are not supported)")

    raise BadFormatError(f"Illegal header starts with {magic:#010x}")
