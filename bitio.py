"""
Bit-granular streams over binary file objects.

Bits are packed MSB-first: the first bit written lands in the 0x80 position
of the first byte.
"""

import io
from typing import BinaryIO, Union

from format import BITS_EXHAUSTED, HuffException


class BitInputStream:
    def __init__(self, source: Union[BinaryIO, bytes, bytearray]):
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))

        self.stream = source
        self.start = self._tell()
        self.buffer = 0
        self.bit_count = 0
        self.bits_read = 0

    def _tell(self):
        try:
            return self.stream.tell()
        except (OSError, AttributeError):
            return None

    def read_bits(self, count: int) -> int:
        """
        Returns the next ``count`` bits as an unsigned int, or BITS_EXHAUSTED
        if fewer than ``count`` bits remain.
        """
        if count < 1:
            raise ValueError(f"Bit count must be positive: {count}")

        while self.bit_count < count:
            byte = self.stream.read(1)
            if not byte:
                return BITS_EXHAUSTED
            self.buffer = (self.buffer << 8) | byte[0]
            self.bit_count += 8

        self.bit_count -= count
        value = self.buffer >> self.bit_count
        self.buffer &= (1 << self.bit_count) - 1
        self.bits_read += count

        return value

    def reset(self):
        if self.start is None:
            raise HuffException("Input stream cannot be rewound")

        try:
            self.stream.seek(self.start)
        except (OSError, io.UnsupportedOperation) as e:
            raise HuffException(f"Input stream cannot be rewound: {e}")

        self.buffer = 0
        self.bit_count = 0
        self.bits_read = 0

    def close(self):
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class BitOutputStream:
    def __init__(self, sink: BinaryIO, close_sink: bool = True):
        self.stream = sink
        self.close_sink = close_sink
        self.rack = 0
        self.bit_count = 0
        self.bits_written = 0
        self.closed = False

    def write_bits(self, count: int, value: int):
        if count < 1:
            raise ValueError(f"Bit count must be positive: {count}")

        self.rack = (self.rack << count) | (value & ((1 << count) - 1))
        self.bit_count += count
        self.bits_written += count

        if self.bit_count >= 8:
            self._drain()

    def _drain(self):
        whole = self.bit_count // 8
        self.bit_count -= whole * 8
        self.stream.write((self.rack >> self.bit_count).to_bytes(whole, 'big'))
        self.rack &= (1 << self.bit_count) - 1

    def flush(self):
        if self.bit_count >= 8:
            self._drain()
        self.stream.flush()

    def close(self):
        if self.closed:
            return

        if self.bit_count % 8:
            padding = 8 - self.bit_count % 8
            self.rack <<= padding
            self.bit_count += padding

        self.flush()
        self.closed = True

        if self.close_sink:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
