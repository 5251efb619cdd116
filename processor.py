"""
Compresses and decompresses whole streams and files.
"""

import io
import os

from bitio import BitInputStream, BitOutputStream
from format import HuffException, PSEUDO_EOF, read_magic, write_magic
from huffman import (build_tree, count_frequencies, make_codes, read_compressed_bits,
                     read_header, write_compressed_bits, write_header)


DEBUG_LOW = 1
DEBUG_HIGH = 4


class HuffProcessor:
    def __init__(self, debug: int = 0):
        self.debug = debug

    def compress(self, bit_in: BitInputStream, out: BitOutputStream) -> int:
        """
        Writes magic, tree header and coded data to ``out``, then closes it.

        ``bit_in`` is read twice (once for counts, once for codes), so it
        must support reset(). Returns the number of bits written.
        """
        counts = count_frequencies(bit_in)
        root = build_tree(counts)
        codes = make_codes(root)

        if self.debug >= DEBUG_HIGH:
            self._print_codes(counts, codes)

        write_magic(out)
        write_header(root, out)
        header_bits = out.bits_written

        bit_in.reset()
        write_compressed_bits(codes, bit_in, out)
        out.close()

        if self.debug >= DEBUG_LOW:
            print(f"Header: {header_bits} bits, data: {out.bits_written - header_bits} bits")
            print(f"Read {bit_in.bits_read} bits, wrote {out.bits_written} bits")

        return out.bits_written

    def decompress(self, bit_in: BitInputStream, out: BitOutputStream) -> int:
        read_magic(bit_in)
        root = read_header(bit_in)

        if self.debug >= DEBUG_HIGH:
            print(f"Tree has {len(root.leaves())} leaves")

        read_compressed_bits(root, bit_in, out)
        out.close()

        if self.debug >= DEBUG_LOW:
            print(f"Read {bit_in.bits_read} bits, wrote {out.bits_written} bits")

        return out.bits_written

    def compress_file(self, src: str, dst: str) -> int:
        return self._run_to_file(self.compress, src, dst)

    def decompress_file(self, src: str, dst: str) -> int:
        return self._run_to_file(self.decompress, src, dst)

    def _run_to_file(self, operation, src: str, dst: str) -> int:
        # opening dst for writing would truncate src before it is read
        if os.path.exists(dst) and os.path.samefile(src, dst):
            raise HuffException(f"Input and output are the same file: {dst}")

        with BitInputStream(open(src, 'rb')) as bit_in:
            try:
                with open(dst, 'wb') as sink:
                    return operation(bit_in, BitOutputStream(sink))
            except Exception:
                if os.path.exists(dst):
                    os.remove(dst)
                raise

    @staticmethod
    def _print_codes(counts, codes):
        print(f"{'Symbol':>8} {'Count':>10}  Code")
        print("-" * 40)
        for symbol, code in enumerate(codes):
            if code is None or counts[symbol] == 0:
                continue
            name = 'EOF' if symbol == PSEUDO_EOF else f'{symbol:#04x}'
            print(f"{name:>8} {counts[symbol]:>10}  {code}")


def compress_bytes(data: bytes, debug: int = 0) -> bytes:
    output = io.BytesIO()
    HuffProcessor(debug).compress(BitInputStream(data), BitOutputStream(output, close_sink=False))
    return output.getvalue()


def decompress_bytes(data: bytes, debug: int = 0) -> bytes:
    output = io.BytesIO()
    HuffProcessor(debug).decompress(BitInputStream(data), BitOutputStream(output, close_sink=False))
    return output.getvalue()
