"""
Name: basenc
Description: shared encode/decode driver for base32 and base64

Both tools read all input, then either encode it and wrap the result
into lines, or strip newlines (and, with -i, any other non-alphabet
byte) and decode it. They differ only in the codec functions and the
alphabet, which each tool passes in as a Codec.
"""

import sys
import argparse
import binascii

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_WRAP = 76


class Codec:
    def __init__(self, name, encode, decode, alphabet: bytes):
        self.name = name
        self.encode = encode
        self.decode = decode
        self.alphabet = frozenset(alphabet)


def wrap_lines(encoded: bytes, cols: int) -> bytes:
    """Breaks encoded output into COLS-wide lines; 0 means a single line."""
    if not encoded:
        return b''
    if cols == 0:
        return encoded + b'\n'
    lines = [encoded[i:i + cols] for i in range(0, len(encoded), cols)]
    return b'\n'.join(lines) + b'\n'


def encode_stream(codec, input_stream, output_stream, cols=DEFAULT_WRAP):
    output_stream.write(wrap_lines(codec.encode(input_stream.read()), cols))


def clean_input(codec, data: bytes, ignore_garbage=False) -> bytes:
    if ignore_garbage:
        return bytes(b for b in data if b in codec.alphabet)
    return data.replace(b'\r\n', b'').replace(b'\n', b'')


def decode_stream(codec, input_stream, output_stream, ignore_garbage=False):
    """
    Raises binascii.Error if the input is not valid for the codec.
    """
    data = clean_input(codec, input_stream.read(), ignore_garbage)
    output_stream.write(codec.decode(data))


def wrap_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid wrap size: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid wrap size: '{text}'")
    return value


def run(codec, version, argv=None):
    """Parses arguments and orchestrates the encoding/decoding process."""
    program_name = codec.name
    parser = argparse.ArgumentParser(
        prog=program_name,
        description=f"{program_name.capitalize()} encode or decode FILE, "
                    f"or standard input, to standard output.",
        usage="%(prog)s [-d] [-i] [-w COLS] [FILE]"
    )
    parser.add_argument('-d', '--decode', action='store_true', help='decode data')
    parser.add_argument('-i', '--ignore-garbage', action='store_true',
                        help='when decoding, ignore non-alphabet characters')
    parser.add_argument('-w', '--wrap', dest='cols', type=wrap_arg, default=DEFAULT_WRAP,
                        help='wrap encoded lines after COLS character (default 76); '
                             '0 disables line wrapping')
    parser.add_argument('--version', action='version', version=f'%(prog)s {version}')
    parser.add_argument('input_file', nargs='?', default='-',
                        help="Input file. Reads from stdin if not specified or if FILE is '-'.")

    args = parser.parse_args(argv)

    try:
        if args.input_file == '-':
            input_stream = sys.stdin.buffer
        else:
            input_stream = open(args.input_file, 'rb')
    except OSError as e:
        print(f"{program_name}: {args.input_file}: {e.strerror}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    output_stream = sys.stdout.buffer
    try:
        if args.decode:
            decode_stream(codec, input_stream, output_stream, args.ignore_garbage)
        else:
            encode_stream(codec, input_stream, output_stream, args.cols)
        output_stream.flush()
    except binascii.Error:
        print(f"{program_name}: invalid input", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    except OSError as e:
        print(f"{program_name}: {args.input_file}: {e.strerror}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    finally:
        if input_stream is not sys.stdin.buffer:
            input_stream.close()

    sys.exit(EXIT_SUCCESS)
