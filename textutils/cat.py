#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files
"""

import sys
import argparse

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

CHUNK_SIZE = 8192


def visible(text: str, show_tabs: bool) -> str:
    """
    Rewrites control and high-bit characters in ^X / M-X notation.
    Newlines pass through untouched; tabs only change under -t.
    """
    result = []
    for char in text:
        code = ord(char)
        if char == '\n':
            result.append(char)
        elif char == '\t':
            result.append('^I' if show_tabs else char)
        elif code >= 128:
            result.append('M-' + _caret(code & 0x7f))
        else:
            result.append(_caret(code))
    return "".join(result)


def _caret(code: int) -> str:
    if code == 127:
        return '^?'
    if code < 32:
        return f'^{chr(code + 64)}'
    return chr(code)


class LineFormatter:
    """Cooked-mode rendering. Numbering and squeezing span all input files."""

    def __init__(self, number=False, number_nonblank=False, squeeze=False,
                 show_ends=False, show_tabs=False, show_nonprinting=False):
        # -b overrides -n
        self.number = number and not number_nonblank
        self.number_nonblank = number_nonblank
        self.squeeze = squeeze
        self.show_ends = show_ends
        self.show_tabs = show_tabs
        # -e and -t imply -v
        self.show_nonprinting = show_nonprinting or show_ends or show_tabs
        self.line_number = 1
        self.was_empty = False

    def format(self, line: str):
        """Returns the rendered line, or None when -s drops it."""
        is_empty = line in ('\n', '')
        if self.squeeze:
            if is_empty and self.was_empty:
                return None
            self.was_empty = is_empty

        prefix = ""
        if self.number or (self.number_nonblank and not is_empty):
            prefix = f"{self.line_number:6d}\t"
            self.line_number += 1

        if self.show_ends and line.endswith('\n'):
            line = line[:-1] + '$\n'
        if self.show_nonprinting:
            line = visible(line, self.show_tabs)
        return prefix + line


def copy_raw(stream, output):
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        output.write(chunk)


def open_input(name):
    if name == '-':
        return sys.stdin.buffer
    return open(name, 'rb')


def main(argv=None):
    """Parses arguments and runs the cat logic."""
    parser = argparse.ArgumentParser(
        prog='cat',
        description="Concatenate and print files.",
        usage="%(prog)s [-benstuv] [file ...]"
    )
    parser.add_argument('-b', action='store_true', help='Number non-empty output lines.')
    parser.add_argument('-e', action='store_true', help='Display $ at end of each line (implies -v).')
    parser.add_argument('-n', action='store_true', help='Number all output lines.')
    parser.add_argument('-s', action='store_true', help='Squeeze multiple adjacent empty lines.')
    parser.add_argument('-t', action='store_true', help='Display TAB characters as ^I (implies -v).')
    parser.add_argument('-u', action='store_true', help='Unbuffered output (ignored).')
    parser.add_argument('-v', action='store_true', help='Display non-printing characters.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('files', nargs='*', help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)
    program_name = 'cat'

    cooked = any([args.b, args.e, args.n, args.s, args.t, args.v])
    formatter = LineFormatter(
        number=args.n, number_nonblank=args.b, squeeze=args.s,
        show_ends=args.e, show_tabs=args.t, show_nonprinting=args.v,
    )
    output = sys.stdout.buffer
    exit_status = EXIT_SUCCESS

    try:
        for name in args.files or ['-']:
            try:
                stream = open_input(name)
            except OSError as e:
                print(f"{program_name}: {name}: {e.strerror}", file=sys.stderr)
                exit_status = EXIT_FAILURE
                continue

            try:
                if not cooked:
                    copy_raw(stream, output)
                    continue
                for raw_line in stream:
                    # Latin-1 keeps every byte, so M- notation sees the high bit.
                    rendered = formatter.format(raw_line.decode('latin-1'))
                    if rendered is not None:
                        output.write(rendered.encode('latin-1'))
            except OSError as e:
                print(f"{program_name}: {name}: {e.strerror}", file=sys.stderr)
                exit_status = EXIT_FAILURE
            finally:
                if stream is not sys.stdin.buffer:
                    stream.close()
        output.flush()
    except BrokenPipeError:
        sys.stderr.close()

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
