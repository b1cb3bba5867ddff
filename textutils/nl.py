#!/usr/bin/env python3
"""
Name: nl
Description: line numbering filter

Reads text line by line and writes each line back preceded by a line
number. Input is divided into logical pages made of header, body and
footer sections. A line made only of the delimiter repeated three, two
or one times starts a header, body or footer section. Each section has
its own numbering style.
"""

import sys
import argparse
import fileinput
from enum import Enum

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_DELIMITER = '\\:'


class InputError(Exception):
    pass


class Section(Enum):
    HEADER = 3
    BODY = 2
    FOOTER = 1


class NumberingStyle(Enum):
    """Which lines of a section get a number."""
    ALL = 'a'
    NON_EMPTY = 't'
    NONE = 'n'
    # Reserved: matching lines against a basic regular expression.
    REGEX = 'p'

    @classmethod
    def parse(cls, style_str):
        """
        Converts a STYLE argument into a member. Used as an argparse type,
        so bad values surface as usage errors before any input is read.
        """
        if style_str.startswith('p'):
            raise argparse.ArgumentTypeError("BRE search is not yet implemented.")
        for style in (cls.ALL, cls.NON_EMPTY, cls.NONE):
            if style_str == style.value:
                return style
        raise argparse.ArgumentTypeError(
            f"Unknown STYLE \"{style_str}\", must be one of a, t, n, pBRE."
        )


class FormatSpec(Enum):
    LEFT = 'ln'
    RIGHT = 'rn'
    RIGHT_ZERO = 'rz'

    def renderer(self, width: int):
        """Returns a function rendering a line number into `width` columns."""
        if self is FormatSpec.LEFT:
            return lambda number: f"{number:<{width}}"
        if self is FormatSpec.RIGHT_ZERO:
            return lambda number: f"{number:0>{width}}"
        return lambda number: f"{number:>{width}}"


def parse_delimiter(text: str) -> str:
    """A lone character keeps ':' as its second character."""
    if not text:
        raise argparse.ArgumentTypeError("must not be empty")
    if len(text) > 2:
        raise argparse.ArgumentTypeError("At most 2 characters.")
    if len(text) == 1:
        return text + ':'
    return text


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: '{text}'")
    return value


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: '{text}'")
    return value


class NLConfig:
    """Settings for one run of the filter. Not modified once built."""

    def __init__(self, header_style=NumberingStyle.NONE,
                 body_style=NumberingStyle.NON_EMPTY,
                 footer_style=NumberingStyle.NONE,
                 delimiter=DEFAULT_DELIMITER, increment=1, join_blank_lines=1,
                 number_format=FormatSpec.RIGHT, separator='\t', start=1,
                 width=6, no_renumber=False):
        self.styles = {
            Section.HEADER: header_style,
            Section.BODY: body_style,
            Section.FOOTER: footer_style,
        }
        self.delimiter = delimiter
        self.increment = increment
        self.join_blank_lines = join_blank_lines
        self.number_format = number_format
        self.separator = separator
        self.start = start
        self.width = width
        self.no_renumber = no_renumber

        self.render_number = number_format.renderer(width)
        # Exact-match lookup for delimiter lines.
        self.delimiter_lines = {
            delimiter * section.value: section for section in Section
        }

    @classmethod
    def from_args(cls, args):
        return cls(
            header_style=args.header_style,
            body_style=args.body_style,
            footer_style=args.footer_style,
            delimiter=args.delimiter,
            increment=args.increment,
            join_blank_lines=args.join_blank_lines,
            number_format=args.number_format,
            separator=args.separator,
            start=args.start,
            width=args.width,
            no_renumber=args.no_renumber,
        )

    def style_for(self, section):
        return self.styles[section]

    def blank_field(self) -> str:
        """Padding used in place of a number: as wide as number plus separator."""
        return ' ' * (self.width + len(self.separator))


class RunState:
    """The filter's position: active section, next number, pending empty lines."""

    __slots__ = ('section', 'line_no', 'empties')

    def __init__(self, section, line_no, empties=0):
        self.section = section
        self.line_no = line_no
        self.empties = empties

    @classmethod
    def initial(cls, config):
        return cls(Section.BODY, config.start)

    def replace(self, **changes):
        fields = {name: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return RunState(**fields)

    def __eq__(self, other):
        if not isinstance(other, RunState):
            return NotImplemented
        return (self.section, self.line_no, self.empties) == \
            (other.section, other.line_no, other.empties)

    def __repr__(self):
        return (f"RunState(section={self.section.name}, "
                f"line_no={self.line_no}, empties={self.empties})")


def step(config, state, line):
    """
    Feeds one input line (newline already stripped) through the filter.

    Returns the new state and the text to print for the line. The state
    passed in is left untouched.
    """
    section = config.delimiter_lines.get(line)
    if section is not None:
        line_no = state.line_no if config.no_renumber else config.start
        return state.replace(section=section, line_no=line_no), ''

    style = config.style_for(state.section)

    if style is NumberingStyle.NONE:
        return state, config.blank_field() + line

    if not line:
        empties = state.empties + 1
        if empties < config.join_blank_lines:
            return state.replace(empties=empties), line
        if style is NumberingStyle.ALL:
            numbered = config.render_number(state.line_no) + config.separator
            new_state = state.replace(
                line_no=state.line_no + config.increment, empties=0
            )
            return new_state, numbered + line
        return state.replace(empties=0), config.blank_field() + line

    numbered = config.render_number(state.line_no) + config.separator + line
    return state.replace(line_no=state.line_no + config.increment, empties=0), numbered


def number_lines(config, lines, state=None):
    """Yields the rendered form of every line read from `lines`."""
    if state is None:
        state = RunState.initial(config)
    for line in lines:
        if line.endswith('\n'):
            line = line[:-1]
        state, output = step(config, state, line)
        yield output


def build_parser():
    parser = argparse.ArgumentParser(
        prog='nl',
        description="Write each FILE to standard output, with line numbers added.",
        usage="%(prog)s [-b STYLE] [-d CC] [-f STYLE] [-h STYLE] [-i NUM] [-l NUM] "
              "[-n FORMAT] [-p] [-s STRING] [-v NUM] [-w NUM] [FILE ...]",
        epilog="STYLE is one of: a (all lines), t (nonempty lines), n (no lines), "
               "pBRE (lines matching BRE, not supported). "
               "FORMAT is one of: ln (left justified), rn (right justified), "
               "rz (right justified, leading zeroes).",
        add_help=False,
    )
    # -h selects the header style, so help is only available as --help.
    parser.add_argument('--help', action='help', help='show this help message and exit')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('-b', '--body-numbering', dest='body_style', metavar='STYLE',
                        type=NumberingStyle.parse, default=NumberingStyle.NON_EMPTY,
                        help="use STYLE for numbering body lines (default: t)")
    parser.add_argument('-d', '--section-delimiter', dest='delimiter', metavar='CC',
                        type=parse_delimiter, default=DEFAULT_DELIMITER,
                        help="use CC for logical page delimiters; a missing second "
                             "character implies ':' (default: \\:)")
    parser.add_argument('-f', '--footer-numbering', dest='footer_style', metavar='STYLE',
                        type=NumberingStyle.parse, default=NumberingStyle.NONE,
                        help="use STYLE for numbering footer lines (default: n)")
    parser.add_argument('-h', '--header-numbering', dest='header_style', metavar='STYLE',
                        type=NumberingStyle.parse, default=NumberingStyle.NONE,
                        help="use STYLE for numbering header lines (default: n)")
    parser.add_argument('-i', '--line-increment', dest='increment', metavar='NUM',
                        type=positive_int, default=1,
                        help="line number increment at each line (default: 1)")
    parser.add_argument('-l', '--join-blank-lines', dest='join_blank_lines', metavar='NUM',
                        type=positive_int, default=1,
                        help="group of NUM empty lines counted as one (default: 1)")
    parser.add_argument('-n', '--number-format', dest='number_format', metavar='FORMAT',
                        type=FormatSpec, choices=list(FormatSpec), default=FormatSpec.RIGHT,
                        help="insert line numbers according to FORMAT (default: rn)")
    parser.add_argument('-p', '--no-renumber', dest='no_renumber', action='store_true',
                        help="do not reset line numbers for each section")
    parser.add_argument('-s', '--number-separator', dest='separator', metavar='STRING',
                        default='\t', help="add STRING after a line number (default: TAB)")
    parser.add_argument('-v', '--starting-line-number', dest='start', metavar='NUM',
                        type=non_negative_int, default=1,
                        help="first line number for each section (default: 1)")
    parser.add_argument('-w', '--number-width', dest='width', metavar='NUM',
                        type=positive_int, default=6,
                        help="use NUM columns for line numbers (default: 6)")
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="Input files. Reads standard input if none are given or FILE is '-'.")
    return parser


def decode_lines(stream):
    """
    Decodes raw lines from a binary `fileinput` stream as UTF-8. Only a
    newline ends a line, so a carriage return stays part of the text.
    """
    for raw in stream:
        try:
            yield raw.decode('utf-8')
        except UnicodeDecodeError:
            raise InputError(f"{stream.filename()}: invalid UTF-8")


def main(argv=None):
    """Parses arguments and runs the numbering filter over the inputs."""
    program_name = 'nl'
    args = build_parser().parse_args(argv)
    config = NLConfig.from_args(args)

    # Section and counter carry over from one file to the next.
    try:
        with fileinput.input(files=args.files or ('-',), mode='rb') as f:
            for output in number_lines(config, decode_lines(f)):
                print(output)
        sys.stdout.flush()
    except BrokenPipeError:
        sys.stderr.close()
        sys.exit(EXIT_FAILURE)
    except OSError as e:
        sys.stdout.flush()
        print(f"{program_name}: {e.filename}: {e.strerror}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    except InputError as e:
        sys.stdout.flush()
        print(f"{program_name}: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
