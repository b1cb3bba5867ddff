#!/usr/bin/env python3
"""
Name: head
Description: print the first lines of a file

Prints the first 10 lines of each FILE to standard output. With more
than one FILE, each is preceded by a header giving the file name.
"""

import sys
import os
import errno
import argparse
import itertools
import re

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

STDIN_NAME = 'standard input'


def preprocess_argv(args_list: list) -> list:
    """
    Translates the historical '-NUMBER' syntax to the standard '-n NUMBER'.
    For example, '-20' becomes ['-n', '20'].
    """
    processed_args = []
    for arg in args_list:
        match = re.match(r'^-(\d+)$', arg)
        if match:
            processed_args.extend(['-n', match.group(1)])
        else:
            processed_args.append(arg)
    return processed_args


def count_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'")
    return value


def copy_lines(stream, output, count: int):
    for line in itertools.islice(stream, count):
        output.write(line)


def copy_bytes(stream, output, count: int):
    while count > 0:
        chunk = stream.read(min(count, 8192))
        if not chunk:
            break
        output.write(chunk)
        count -= len(chunk)


def main(argv=None):
    """Parses arguments and prints the first N lines of files or stdin."""
    program_name = 'head'
    exit_status = EXIT_SUCCESS

    if argv is None:
        argv = sys.argv[1:]
    args_to_parse = preprocess_argv(argv)

    parser = argparse.ArgumentParser(
        prog='head',
        description="Print the first lines of a file.",
        usage="%(prog)s [-n count | -c bytes] [-q | -v] [file ...]"
    )
    parser.add_argument('-n', '--lines', dest='count', type=count_arg, default=10,
                        help='The number of lines to print (default: 10).')
    parser.add_argument('-c', '--bytes', dest='bytes', type=count_arg, default=None,
                        help='Print the first BYTES bytes instead of lines.')
    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument('-q', '--quiet', '--silent', action='store_true',
                              help='Never print headers giving file names.')
    header_group.add_argument('-v', '--verbose', action='store_true',
                              help='Always print headers giving file names.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('files', nargs='*',
                        help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(args_to_parse)

    files = args.files or ['-']
    show_headers = args.verbose or (len(files) > 1 and not args.quiet)
    if args.bytes is not None:
        copy, count = copy_bytes, args.bytes
    else:
        copy, count = copy_lines, args.count

    output = sys.stdout.buffer
    needs_separator = False

    for name in files:
        display_name = STDIN_NAME if name == '-' else name
        try:
            if name == '-':
                stream = sys.stdin.buffer
            elif os.path.isdir(name):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), name)
            else:
                stream = open(name, 'rb')
        except OSError as e:
            output.flush()
            print(f"{program_name}: cannot open '{name}' for reading: {e.strerror}",
                  file=sys.stderr)
            exit_status = EXIT_FAILURE
            continue

        if show_headers:
            if needs_separator:
                output.write(b'\n')
            output.write(f"==> {display_name} <==\n".encode())
            needs_separator = True

        try:
            copy(stream, output, count)
        except OSError as e:
            output.flush()
            print(f"{program_name}: error reading '{name}': {e.strerror}", file=sys.stderr)
            exit_status = EXIT_FAILURE
        finally:
            if stream is not sys.stdin.buffer:
                stream.close()

    output.flush()
    sys.exit(exit_status)


if __name__ == "__main__":
    main()
