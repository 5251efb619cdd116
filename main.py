"""
Command line for the Huffman compressor.
"""

import argparse
import os
import sys

from processor import HuffProcessor


HUFF_SUFFIX = '.hf'
UNHUFF_SUFFIX = '.uhf'


def default_output(command: str, path: str) -> str:
    if command == 'compress':
        return path + HUFF_SUFFIX
    if path.endswith(HUFF_SUFFIX):
        return path[:-len(HUFF_SUFFIX)]
    return path + UNHUFF_SUFFIX


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Static Huffman compressor',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py compress notes.txt
  python main.py decompress notes.txt.hf -o restored.txt
  python main.py --debug 4 compress notes.txt
        """
    )
    parser.add_argument('--debug', type=int, default=0,
                        help='Debug level (1 = bit counts, 4 = code table)')

    subparsers = parser.add_subparsers(dest='command', help='Command')

    compress_parser = subparsers.add_parser('compress', help='Compress a file')
    compress_parser.add_argument('file', help='File to compress')
    compress_parser.add_argument('-o', '--output', help=f'Output path (default: FILE{HUFF_SUFFIX})')

    decompress_parser = subparsers.add_parser('decompress', help='Decompress a file')
    decompress_parser.add_argument('file', help='File to decompress')
    decompress_parser.add_argument('-o', '--output', help='Output path')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    output = args.output or default_output(args.command, args.file)
    processor = HuffProcessor(debug=args.debug)

    try:
        if args.command == 'compress':
            processor.compress_file(args.file, output)
        else:
            processor.decompress_file(args.file, output)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    original_size = os.path.getsize(args.file)
    result_size = os.path.getsize(output)
    ratio = (result_size / original_size * 100) if original_size > 0 else 0
    print(f"{args.file} -> {output}: {original_size} -> {result_size} bytes ({ratio:.1f}%)")

    return 0


if __name__ == '__main__':
    sys.exit(main())
