#!/usr/bin/env python3
"""
Name: wc
Description: line, word, character, and byte counter

Prints newline, word, and byte counts for each FILE, and a total line if
more than one FILE is specified. A word is a non-zero-length sequence of
characters delimited by white space. Counts are always printed in the
order: lines, words, characters, bytes, maximum line length.
"""

import sys
import os
import argparse

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

COUNT_ORDER = ('lines', 'words', 'chars', 'bytes', 'max_line')


def empty_counts():
    return dict.fromkeys(COUNT_ORDER, 0)


def decode_line(byte_line: bytes) -> str:
    try:
        return byte_line.decode('utf-8')
    except UnicodeDecodeError:
        # Every byte is valid latin-1, so this never fails.
        return byte_line.decode('latin-1')


def count_in_stream(stream):
    """
    Reads a binary stream to the end and returns a dictionary of counts.
    """
    counts = empty_counts()
    for byte_line in stream:
        counts['bytes'] += len(byte_line)
        if byte_line.endswith(b'\n'):
            counts['lines'] += 1

        line = decode_line(byte_line)
        counts['chars'] += len(line)
        counts['words'] += len(line.split())

        width = len(line.rstrip('\n').expandtabs(8))
        if width > counts['max_line']:
            counts['max_line'] = width
    return counts


def add_counts(total, counts):
    for key in COUNT_ORDER:
        if key == 'max_line':
            total[key] = max(total[key], counts[key])
        else:
            total[key] += counts[key]


def format_counts(counts, selected, filename=None):
    """
    Formats the selected counts into a single output line.
    """
    fields = [f"{counts[key]:>7}" for key in COUNT_ORDER if key in selected]
    line = " ".join(fields)
    if filename is not None:
        line += f" {filename}"
    return line


def selected_counts(args):
    selected = set()
    if args.lines: selected.add('lines')
    if args.words: selected.add('words')
    if args.chars: selected.add('chars')
    if args.bytes: selected.add('bytes')
    if args.max_line_length: selected.add('max_line')
    # Default is -lwc if no flags are specified.
    if not selected:
        selected = {'lines', 'words', 'bytes'}
    return selected


def main(argv=None):
    """Parses arguments and orchestrates the counting process."""
    parser = argparse.ArgumentParser(
        prog='wc',
        description="Print newline, word, and byte counts for each FILE.",
        usage="%(prog)s [-clmwL] [file ...]"
    )
    parser.add_argument('-c', '--bytes', action='store_true', help='print the byte counts')
    parser.add_argument('-m', '--chars', action='store_true', help='print the character counts')
    parser.add_argument('-l', '--lines', action='store_true', help='print the newline counts')
    parser.add_argument('-L', '--max-line-length', action='store_true',
                        help='print the maximum display width')
    parser.add_argument('-w', '--words', action='store_true', help='print the word counts')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('files', nargs='*', help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)
    program_name = 'wc'
    selected = selected_counts(args)

    if not args.files:
        print(format_counts(count_in_stream(sys.stdin.buffer), selected))
        sys.exit(EXIT_SUCCESS)

    total_counts = empty_counts()
    exit_status = EXIT_SUCCESS

    for filepath in args.files:
        try:
            if filepath == '-':
                file_counts = count_in_stream(sys.stdin.buffer)
            else:
                if os.path.isdir(filepath):
                    print(f"{program_name}: {filepath}: Is a directory", file=sys.stderr)
                    exit_status = EXIT_FAILURE
                    continue
                with open(filepath, 'rb') as f:
                    file_counts = count_in_stream(f)
        except OSError as e:
            print(f"{program_name}: {filepath}: {e.strerror}", file=sys.stderr)
            exit_status = EXIT_FAILURE
            continue

        print(format_counts(file_counts, selected, filepath))
        add_counts(total_counts, file_counts)

    if len(args.files) > 1:
        print(format_counts(total_counts, selected, "total"))

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
