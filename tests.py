import unittest
import tempfile
import os
import io
import sys
import heapq
import random
import shutil
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from bitio import BitInputStream, BitOutputStream, BITS_EXHAUSTED
from format import (PSEUDO_EOF, SYMBOL_BITS, HUFF_NUMBER, HuffException, BadFormatError,
                    MalformedHeaderError, ReadExhaustedError, TruncatedStreamError,
                    InternalConsistencyError, read_magic)
from huffman import (HuffmanNode, Code, count_frequencies, build_tree, make_codes,
                     weighted_path_length, write_header, read_header,
                     write_compressed_bits, read_compressed_bits)
from processor import HuffProcessor, DEBUG_LOW, DEBUG_HIGH, compress_bytes, decompress_bytes
from main import main, default_output


def counts_for(weights):
    counts = [0] * (PSEUDO_EOF + 1)
    for symbol, weight in weights.items():
        counts[symbol] = weight
    return counts


def tree_bits(root):
    output = io.BytesIO()
    out = BitOutputStream(output, close_sink=False)
    write_header(root, out)
    out.close()
    return output.getvalue()


def read_tree(compressed):
    bit_in = BitInputStream(compressed)
    read_magic(bit_in)
    return read_header(bit_in)


class TestBitStreams(unittest.TestCase):
    def test_pads_final_byte(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        out.write_bits(3, 0b101)
        out.close()
        self.assertEqual(output.getvalue(), b'\xa0')
        self.assertEqual(out.bits_written, 3)

    def test_writes_across_bytes(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        out.write_bits(4, 0x1)
        out.write_bits(12, 0x234)
        out.write_bits(32, 0xFACE8201)
        out.close()
        self.assertEqual(output.getvalue(), b'\x12\x34\xfa\xce\x82\x01')

    def test_write_keeps_low_bits_only(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        out.write_bits(8, 0x1FF)
        out.close()
        self.assertEqual(output.getvalue(), b'\xff')

    def test_rejects_zero_width(self):
        out = BitOutputStream(io.BytesIO())
        with self.assertRaises(ValueError):
            out.write_bits(0, 1)
        with self.assertRaises(ValueError):
            BitInputStream(b'\x00').read_bits(0)

    def test_closes_sink_by_default(self):
        output = io.BytesIO()
        with BitOutputStream(output) as out:
            out.write_bits(1, 1)
        self.assertTrue(output.closed)

    def test_read_bits(self):
        bit_in = BitInputStream(b'\x12\x34')
        self.assertEqual(bit_in.read_bits(4), 0x1)
        self.assertEqual(bit_in.read_bits(12), 0x234)
        self.assertEqual(bit_in.read_bits(1), BITS_EXHAUSTED)
        self.assertEqual(bit_in.bits_read, 16)

    def test_exhausted_when_too_few_bits(self):
        bit_in = BitInputStream(b'\xff')
        self.assertEqual(bit_in.read_bits(9), BITS_EXHAUSTED)

    def test_reset(self):
        bit_in = BitInputStream(b'hello')
        first = bit_in.read_bits(8)
        bit_in.read_bits(8)
        bit_in.reset()
        self.assertEqual(bit_in.bits_read, 0)
        self.assertEqual(bit_in.read_bits(8), first)

    def test_reset_returns_to_starting_position(self):
        stream = io.BytesIO(b'xyz')
        stream.seek(1)
        bit_in = BitInputStream(stream)
        self.assertEqual(bit_in.read_bits(8), ord('y'))
        bit_in.reset()
        self.assertEqual(bit_in.read_bits(8), ord('y'))

    def test_wide_write_and_read(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        out.write_bits(40, 0x0123456789)
        out.close()
        self.assertEqual(output.getvalue(), b'\x01\x23\x45\x67\x89')
        self.assertEqual(BitInputStream(output.getvalue()).read_bits(40), 0x0123456789)

    def test_input_closes_source(self):
        source = io.BytesIO(b'abc')
        with BitInputStream(source) as bit_in:
            self.assertEqual(bit_in.read_bits(8), ord('a'))
        self.assertTrue(source.closed)

    def test_reset_without_seek(self):
        class Unseekable:
            def __init__(self, data):
                self.data = data

            def read(self, size):
                chunk, self.data = self.data[:size], self.data[size:]
                return chunk

        bit_in = BitInputStream(Unseekable(b'abc'))
        with self.assertRaises(HuffException):
            bit_in.reset()


class TestFrequencyCounter(unittest.TestCase):
    def test_counts(self):
        counts = count_frequencies(BitInputStream(b'abca'))
        self.assertEqual(len(counts), PSEUDO_EOF + 1)
        self.assertEqual(counts[ord('a')], 2)
        self.assertEqual(counts[ord('b')], 1)
        self.assertEqual(counts[ord('c')], 1)
        self.assertEqual(counts[PSEUDO_EOF], 1)
        self.assertEqual(sum(counts), 5)

    def test_empty_input(self):
        counts = count_frequencies(BitInputStream(b''))
        self.assertEqual(counts[PSEUDO_EOF], 1)
        self.assertEqual(sum(counts), 1)

    def test_eof_count_is_forced(self):
        counts = count_frequencies(BitInputStream(bytes([0xFF]) * 50))
        self.assertEqual(counts[0xFF], 50)
        self.assertEqual(counts[PSEUDO_EOF], 1)


class TestTreeBuilder(unittest.TestCase):
    def test_optimal_weighted_path_length(self):
        weights = {ord('A'): 5, ord('B'): 9, ord('C'): 12, ord('D'): 13, PSEUDO_EOF: 1}
        counts = counts_for(weights)
        codes = make_codes(build_tree(counts))

        # every merge adds its weight once per level below it
        heap = list(weights.values())
        heapq.heapify(heap)
        expected = 0
        while len(heap) > 1:
            merged = heapq.heappop(heap) + heapq.heappop(heap)
            expected += merged
            heapq.heappush(heap, merged)

        self.assertEqual(expected, 86)
        self.assertEqual(weighted_path_length(counts, codes), expected)

    def test_root_weight_is_total(self):
        counts = count_frequencies(BitInputStream(b'mississippi'))
        root = build_tree(counts)
        self.assertEqual(root.weight, sum(counts))

    def test_leaves_are_nonzero_symbols(self):
        counts = count_frequencies(BitInputStream(b'mississippi'))
        root = build_tree(counts)
        values = sorted(leaf.value for leaf in root.leaves())
        self.assertEqual(values, [ord('i'), ord('m'), ord('p'), ord('s'), PSEUDO_EOF])

    def test_single_symbol_has_two_leaves(self):
        root = build_tree(counts_for({0x41: 1000, PSEUDO_EOF: 1}))
        self.assertFalse(root.is_leaf)
        self.assertEqual(sorted(leaf.value for leaf in root.leaves()), [0x41, PSEUDO_EOF])

    def test_eof_only_gets_filler_leaf(self):
        root = build_tree(counts_for({PSEUDO_EOF: 1}))
        self.assertFalse(root.is_leaf)
        self.assertEqual(sorted(leaf.value for leaf in root.leaves()), [0, PSEUDO_EOF])

    def test_filler_skips_present_symbols(self):
        root = build_tree(counts_for({0: 3}))
        self.assertEqual(sorted(leaf.value for leaf in root.leaves()), [0, 1])

    def test_empty_table(self):
        with self.assertRaises(HuffException):
            build_tree([0] * (PSEUDO_EOF + 1))

    def test_deterministic(self):
        counts = counts_for({ord(c): 2 for c in 'abcdefgh'})
        counts[PSEUDO_EOF] = 1
        self.assertTrue(build_tree(counts).same_shape(build_tree(counts)))


class TestCodes(unittest.TestCase):
    def test_prefix_free(self):
        data = bytes(range(256)) * 2 + b'hello world' * 20
        codes = [code for code in make_codes(build_tree(count_frequencies(BitInputStream(data))))
                 if code is not None]
        self.assertEqual(len(codes), 257)

        for i, a in enumerate(codes):
            self.assertGreater(a.length, 0)
            for b in codes[i + 1:]:
                self.assertFalse(a.is_prefix_of(b), f"{a} is a prefix of {b}")
                self.assertFalse(b.is_prefix_of(a), f"{b} is a prefix of {a}")

    def test_code_paths(self):
        root = HuffmanNode(left=HuffmanNode(value=97),
                           right=HuffmanNode(left=HuffmanNode(value=98),
                                             right=HuffmanNode(value=PSEUDO_EOF)))
        codes = make_codes(root)
        self.assertEqual(codes[97], Code(0, 1))
        self.assertEqual(codes[98], Code(0b10, 2))
        self.assertEqual(codes[PSEUDO_EOF], Code(0b11, 2))
        self.assertIsNone(codes[99])

    def test_code_text(self):
        self.assertEqual(str(Code(5, 4)), '0101')
        self.assertTrue(Code(1, 2).is_prefix_of(Code(0b011, 3)))
        self.assertFalse(Code(1, 2).is_prefix_of(Code(0b101, 3)))
        self.assertFalse(Code(0b011, 3).is_prefix_of(Code(1, 2)))


class TestHeaderCodec(unittest.TestCase):
    def test_round_trip(self):
        for data in (b'', b'A', b'abracadabra', bytes(range(256))):
            root = build_tree(count_frequencies(BitInputStream(data)))
            decoded = read_header(BitInputStream(tree_bits(root)))
            self.assertTrue(root.same_shape(decoded))

    def test_layout(self):
        root = HuffmanNode(left=HuffmanNode(value=0x41), right=HuffmanNode(value=PSEUDO_EOF))
        # 0 | 1 001000001 | 1 100000000 | pad
        self.assertEqual(tree_bits(root), bytes([0b01001000, 0b00111000, 0b00000000]))

    def test_truncated_header(self):
        with self.assertRaises(MalformedHeaderError):
            read_header(BitInputStream(b'\x00'))

    def test_truncated_leaf_symbol(self):
        # internal node, then a leaf flag with only 6 bits of its symbol
        with self.assertRaises(MalformedHeaderError):
            read_header(BitInputStream(b'\x40'))

    def test_malformed_is_read_exhausted(self):
        self.assertTrue(issubclass(MalformedHeaderError, ReadExhaustedError))

    def test_symbol_out_of_range(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        out.write_bits(1, 0)
        out.write_bits(1, 1)
        out.write_bits(SYMBOL_BITS, 300)
        out.close()
        with self.assertRaises(MalformedHeaderError):
            read_header(BitInputStream(output.getvalue()))

    def test_single_leaf_root(self):
        with self.assertRaises(MalformedHeaderError):
            read_header(BitInputStream(tree_bits(HuffmanNode(value=0x41))))

    def test_too_deep(self):
        with self.assertRaises(MalformedHeaderError):
            read_header(BitInputStream(b'\x00' * 40))


class TestLongCodes(unittest.TestCase):
    def setUp(self):
        # Fibonacci weights give the deepest possible tree
        weights = [1, 1]
        while len(weights) < PSEUDO_EOF + 1:
            weights.append(weights[-1] + weights[-2])
        self.root = build_tree(weights)
        self.codes = make_codes(self.root)

    def test_codes_exceed_word_size(self):
        longest = max(code.length for code in self.codes)
        self.assertGreater(longest, 32)
        self.assertEqual(longest, PSEUDO_EOF)
        self.assertEqual(self.codes[0].length, PSEUDO_EOF)
        self.assertEqual(self.codes[PSEUDO_EOF].length, 1)

    def test_header_round_trip(self):
        decoded = read_header(BitInputStream(tree_bits(self.root)))
        self.assertTrue(self.root.same_shape(decoded))

    def test_stream_round_trip(self):
        data = bytes([0, 1, 2, 0, 3, 1])
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        write_compressed_bits(self.codes, BitInputStream(data), out)
        out.close()

        decoded = io.BytesIO()
        tree = read_header(BitInputStream(tree_bits(self.root)))
        read_compressed_bits(tree, BitInputStream(output.getvalue()),
                             BitOutputStream(decoded, close_sink=False))
        self.assertEqual(decoded.getvalue(), data)


class TestStreamCodec(unittest.TestCase):
    def setUp(self):
        self.root = HuffmanNode(left=HuffmanNode(value=97),
                                right=HuffmanNode(left=HuffmanNode(value=98),
                                                  right=HuffmanNode(value=PSEUDO_EOF)))

    def test_encode(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        write_compressed_bits(make_codes(self.root), BitInputStream(b'abab'), out)
        out.close()
        # 0 10 0 10 11 -> 01001011
        self.assertEqual(output.getvalue(), bytes([0b01001011]))
        self.assertEqual(out.bits_written, 8)

    def test_decode(self):
        output = io.BytesIO()
        read_compressed_bits(self.root, BitInputStream(bytes([0b01001011])),
                             BitOutputStream(output, close_sink=False))
        self.assertEqual(output.getvalue(), b'abab')

    def test_decode_stops_at_eof(self):
        output = io.BytesIO()
        out = BitOutputStream(output, close_sink=False)
        # 11 is EOF, trailing bits are padding
        read_compressed_bits(self.root, BitInputStream(bytes([0b11000000])), out)
        out.close()
        self.assertEqual(output.getvalue(), b'')

    def test_missing_eof(self):
        out = BitOutputStream(io.BytesIO())
        with self.assertRaises(TruncatedStreamError):
            read_compressed_bits(self.root, BitInputStream(b'\x00'), out)

    def test_missing_code(self):
        out = BitOutputStream(io.BytesIO())
        with self.assertRaises(InternalConsistencyError):
            write_compressed_bits(make_codes(self.root), BitInputStream(b'abc'), out)


class TestHuffProcessor(unittest.TestCase):
    def assertRoundTrip(self, data):
        self.assertEqual(decompress_bytes(compress_bytes(data)), data)

    def test_round_trips(self):
        self.assertRoundTrip(b'')
        self.assertRoundTrip(b'A')
        self.assertRoundTrip(b'\x00')
        self.assertRoundTrip(b'\xff\x00')
        self.assertRoundTrip(b'The quick brown fox jumps over the lazy dog')
        self.assertRoundTrip(bytes(range(256)) * 4)

    def test_random_data(self):
        random.seed(42)
        data = bytes(random.randint(0, 255) for _ in range(10000))
        self.assertRoundTrip(data)

    def test_skewed_data(self):
        random.seed(7)
        data = bytes(random.choice(b'aaaaaaaabbbbccd\n') for _ in range(5000))
        compressed = compress_bytes(data)
        self.assertLess(len(compressed), len(data))
        self.assertEqual(decompress_bytes(compressed), data)

    def test_magic(self):
        self.assertEqual(compress_bytes(b'abc')[:4], b'\xfa\xce\x82\x01')

    def test_single_repeated_byte(self):
        data = b'\x41' * 1000
        compressed = compress_bytes(data)
        root = read_tree(compressed)
        self.assertEqual(sorted(leaf.value for leaf in root.leaves()), [0x41, PSEUDO_EOF])
        self.assertEqual(decompress_bytes(compressed), data)

    def test_empty_input(self):
        compressed = compress_bytes(b'')
        # 32 magic + 21 header + 1 EOF bit, padded
        self.assertEqual(len(compressed), 7)
        root = read_tree(compressed)
        self.assertIn(PSEUDO_EOF, [leaf.value for leaf in root.leaves()])
        self.assertEqual(decompress_bytes(compressed), b'')

    def test_bad_magic(self):
        with self.assertRaises(BadFormatError):
            decompress_bytes(b'\x00' * 8)

    def test_bad_magic_before_header(self):
        # valid tree bits after a wrong marker are never looked at
        compressed = compress_bytes(b'hello')
        with self.assertRaises(BadFormatError):
            decompress_bytes(b'\x00\x00\x00\x00' + compressed[4:])

    def test_count_header_magic(self):
        with self.assertRaises(BadFormatError) as ctx:
            decompress_bytes(HUFF_NUMBER.to_bytes(4, 'big') + b'\x00')
        self.assertIn('Unsupported', str(ctx.exception))

    def test_short_input(self):
        with self.assertRaises(BadFormatError):
            decompress_bytes(b'\xfa\xce')

    def test_truncated_stream(self):
        compressed = compress_bytes(b'hello world, hello huffman')
        with self.assertRaises(TruncatedStreamError):
            decompress_bytes(compressed[:-1])

    def test_truncated_header(self):
        compressed = compress_bytes(b'hello world')
        with self.assertRaises(MalformedHeaderError):
            decompress_bytes(compressed[:6])

    def test_bits_written(self):
        output = io.BytesIO()
        bits = HuffProcessor().compress(BitInputStream(b'abracadabra'),
                                        BitOutputStream(output, close_sink=False))
        size = len(output.getvalue())
        self.assertGreater(bits, (size - 1) * 8)
        self.assertLessEqual(bits, size * 8)

    def test_no_state_between_runs(self):
        processor = HuffProcessor()
        results = []
        for data in (b'first input', b'second', b'first input'):
            output = io.BytesIO()
            processor.compress(BitInputStream(data), BitOutputStream(output, close_sink=False))
            results.append(output.getvalue())
        self.assertEqual(results[0], results[2])

    def test_unrewindable_input(self):
        class Unseekable:
            def __init__(self, data):
                self.data = data

            def read(self, size):
                chunk, self.data = self.data[:size], self.data[size:]
                return chunk

        with self.assertRaises(HuffException):
            HuffProcessor().compress(BitInputStream(Unseekable(b'abc')),
                                     BitOutputStream(io.BytesIO()))

    def test_debug_output(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            compressed = compress_bytes(b'debug me', debug=DEBUG_LOW)
        self.assertIn('wrote', buffer.getvalue())
        self.assertNotIn('EOF', buffer.getvalue())

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            decompress_bytes(compressed, debug=DEBUG_HIGH)
            compress_bytes(b'debug me', debug=DEBUG_HIGH)
        self.assertIn('leaves', buffer.getvalue())
        self.assertIn('EOF', buffer.getvalue())

    def test_silent_by_default(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            decompress_bytes(compress_bytes(b'quiet'))
        self.assertEqual(buffer.getvalue(), '')


class TestFiles(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.processor = HuffProcessor()

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def path(self, name):
        return os.path.join(self.temp_dir, name)

    def test_compress_decompress_file(self):
        with open(self.path('test.txt'), 'wb') as f:
            f.write(b"Hello World! " * 100)

        bits = self.processor.compress_file(self.path('test.txt'), self.path('test.txt.hf'))
        self.assertLess(os.path.getsize(self.path('test.txt.hf')), 1300)
        self.assertEqual((bits + 7) // 8, os.path.getsize(self.path('test.txt.hf')))

        self.processor.decompress_file(self.path('test.txt.hf'), self.path('restored.txt'))

        with open(self.path('restored.txt'), 'rb') as f:
            self.assertEqual(f.read(), b"Hello World! " * 100)

    def test_empty_file(self):
        open(self.path('empty'), 'wb').close()
        self.processor.compress_file(self.path('empty'), self.path('empty.hf'))
        self.processor.decompress_file(self.path('empty.hf'), self.path('restored'))
        self.assertEqual(os.path.getsize(self.path('restored')), 0)

    def test_failed_run_removes_output(self):
        with open(self.path('garbage.hf'), 'wb') as f:
            f.write(b"not a compressed file")

        with self.assertRaises(BadFormatError):
            self.processor.decompress_file(self.path('garbage.hf'), self.path('out'))
        self.assertFalse(os.path.exists(self.path('out')))

    def test_truncated_file_removes_output(self):
        compressed = compress_bytes(b"some text that gets cut off " * 10)
        with open(self.path('cut.hf'), 'wb') as f:
            f.write(compressed[:-3])

        with self.assertRaises(TruncatedStreamError):
            self.processor.decompress_file(self.path('cut.hf'), self.path('out'))
        self.assertFalse(os.path.exists(self.path('out')))

    def test_same_input_and_output(self):
        data = b"data that must survive " * 6
        with open(self.path('f'), 'wb') as f:
            f.write(data)

        with self.assertRaises(HuffException):
            self.processor.compress_file(self.path('f'), self.path('f'))

        with open(self.path('f'), 'rb') as f:
            self.assertEqual(f.read(), data)

    def test_write_error_removes_output(self):
        class FailingProcessor(HuffProcessor):
            def compress(self, bit_in, out):
                out.write_bits(8, 0x41)
                out.flush()
                raise OSError("No space left on device")

        with open(self.path('in'), 'wb') as f:
            f.write(b"abc")

        with self.assertRaises(OSError):
            FailingProcessor().compress_file(self.path('in'), self.path('out'))
        self.assertFalse(os.path.exists(self.path('out')))

    def test_closes_input_file(self):
        with open(self.path('in'), 'wb') as f:
            f.write(b"abc")

        opened = []
        real_open = open

        def tracking_open(path, mode='r', *args, **kwargs):
            handle = real_open(path, mode, *args, **kwargs)
            opened.append(handle)
            return handle

        with mock.patch('builtins.open', tracking_open):
            self.processor.compress_file(self.path('in'), self.path('out'))

        self.assertEqual(len(opened), 2)
        self.assertTrue(all(handle.closed for handle in opened))


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.source = os.path.join(self.temp_dir, 'notes.txt')
        with open(self.source, 'wb') as f:
            f.write(b"Content of the notes file\n" * 50)

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def run_main(self, *argv):
        with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()) as err:
            status = main(list(argv))
        return status, err.getvalue()

    def test_round_trip(self):
        restored = os.path.join(self.temp_dir, 'restored.txt')

        status, _ = self.run_main('compress', self.source)
        self.assertEqual(status, 0)
        self.assertTrue(os.path.isfile(self.source + '.hf'))

        status, _ = self.run_main('decompress', self.source + '.hf', '-o', restored)
        self.assertEqual(status, 0)

        with open(self.source, 'rb') as f:
            original = f.read()
        with open(restored, 'rb') as f:
            self.assertEqual(f.read(), original)

    def test_bad_file(self):
        status, err = self.run_main('decompress', self.source)
        self.assertEqual(status, 1)
        self.assertIn('Error', err)
        self.assertFalse(os.path.exists(self.source + '.uhf'))

    def test_output_over_input(self):
        size = os.path.getsize(self.source)
        status, err = self.run_main('compress', self.source, '-o', self.source)
        self.assertEqual(status, 1)
        self.assertIn('same file', err)
        self.assertEqual(os.path.getsize(self.source), size)

    def test_missing_file(self):
        status, err = self.run_main('compress', os.path.join(self.temp_dir, 'missing'))
        self.assertEqual(status, 1)
        self.assertIn('Error', err)

    def test_no_command(self):
        status, _ = self.run_main()
        self.assertEqual(status, 0)

    def test_default_output(self):
        self.assertEqual(default_output('compress', 'a.txt'), 'a.txt.hf')
        self.assertEqual(default_output('decompress', 'a.txt.hf'), 'a.txt')
        self.assertEqual(default_output('decompress', 'a.bin'), 'a.bin.uhf')


def run_tests():
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    suite.addTests(loader.loadTestsFromTestCase(TestBitStreams))
    suite.addTests(loader.loadTestsFromTestCase(TestFrequencyCounter))
    suite.addTests(loader.loadTestsFromTestCase(TestTreeBuilder))
    suite.addTests(loader.loadTestsFromTestCase(TestCodes))
    suite.addTests(loader.loadTestsFromTestCase(TestHeaderCodec))
    suite.addTests(loader.loadTestsFromTestCase(TestStreamCodec))
    suite.addTests(loader.loadTestsFromTestCase(TestLongCodes))
    suite.addTests(loader.loadTestsFromTestCase(TestHuffProcessor))
    suite.addTests(loader.loadTestsFromTestCase(TestFiles))
    suite.addTests(loader.loadTestsFromTestCase(TestCommandLine))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
