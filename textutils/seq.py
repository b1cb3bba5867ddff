#!/usr/bin/env python3
"""
Name: seq
Description: print a numeric sequence

Usage: seq [-f format] [-s string] [-w] [first [increment]] last

Prints numbers from FIRST to LAST, in steps of INCREMENT. An omitted
FIRST or INCREMENT defaults to 1, even when LAST is smaller than FIRST.
The sequence ends when the next number would pass LAST.
"""

import sys
import re
from decimal import Decimal

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

NUMBER_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


class SeqError(Exception):
    pass


def parse_number(num_str: str) -> Decimal:
    """
    Validates an operand and returns it as an exact Decimal, so steps
    like 0.1 add up without float drift.
    """
    if not NUMBER_RE.match(num_str):
        raise SeqError(f"invalid floating point argument: '{num_str}'")
    return Decimal(num_str)


def fraction_digits(number: Decimal) -> int:
    exponent = number.as_tuple().exponent
    return max(0, -exponent)


def sequence(first: Decimal, increment: Decimal, last: Decimal):
    """Yields FIRST + i*INCREMENT for as long as it does not pass LAST."""
    if increment == 0:
        raise SeqError(f"invalid Zero increment value: '{increment}'")
    i = 0
    while True:
        value = first + i * increment
        if (increment > 0 and value > last) or (increment < 0 and value < last):
            return
        yield value
        i += 1


def make_formatter(operands, format_str=None, equal_width=False):
    """
    Picks how each number is printed. Without -f, numbers get as many
    fraction digits as the most precise operand.
    """
    if format_str is not None:
        return lambda value: format_str % float(value)

    precision = max(fraction_digits(n) for n in operands)
    if not equal_width:
        return lambda value: f"{value:.{precision}f}"

    first, last = operands[0], operands[-1]
    width = max(len(f"{first:.{precision}f}"), len(f"{last:.{precision}f}"))
    return lambda value: f"{value:0{width}.{precision}f}"


def parse_args(args):
    """
    Splits ARGS into options and numeric operands. Done by hand so that
    negative numbers are not mistaken for options.
    """
    options = {'format': None, 'separator': '\n', 'equal_width': False}
    args = list(args)
    while args and args[0].startswith('-') and len(args[0]) > 1:
        if re.match(r'^-\.?\d', args[0]):
            break
        opt = args.pop(0)
        if opt == '--':
            break
        elif opt in ('-s', '--separator'):
            if not args:
                raise SeqError("option requires an argument -- 's'")
            options['separator'] = args.pop(0)
        elif opt.startswith('--separator='):
            options['separator'] = opt.split('=', 1)[1]
        elif opt in ('-f', '--format'):
            if not args:
                raise SeqError("option requires an argument -- 'f'")
            options['format'] = args.pop(0)
        elif opt.startswith('--format='):
            options['format'] = opt.split('=', 1)[1]
        elif opt in ('-w', '--equal-width'):
            options['equal_width'] = True
        elif opt in ('-h', '--help'):
            options['help'] = True
            return options, []
        elif opt in ('-V', '--version'):
            options['version'] = True
            return options, []
        else:
            raise SeqError(f"unexpected option: '{opt}'")

    if options['format'] is not None and options['equal_width']:
        raise SeqError("format string may not be specified when printing equal width strings")

    if len(args) == 0:
        raise SeqError("missing operand")
    if len(args) > 3:
        raise SeqError(f"extra operand '{args[3]}'")

    numbers = [parse_number(a) for a in args]
    if len(numbers) == 1:
        operands = [Decimal(1), Decimal(1), numbers[0]]
    elif len(numbers) == 2:
        operands = [numbers[0], Decimal(1), numbers[1]]
    else:
        operands = numbers
    return options, operands


def usage():
    return "usage: seq [-f format] [-s string] [-w] [first [increment]] last"


def main(argv=None):
    """Parses arguments and prints the numeric sequence."""
    program_name = 'seq'
    if argv is None:
        argv = sys.argv[1:]

    try:
        options, operands = parse_args(argv)
        if options.get('help'):
            print(usage())
            print(__doc__.split('\n\n', 2)[2].strip())
            sys.exit(EXIT_SUCCESS)
        if options.get('version'):
            print(f"{program_name} {__version__}")
            sys.exit(EXIT_SUCCESS)

        first, increment, last = operands
        render = make_formatter(operands, options['format'], options['equal_width'])
        items = [render(value) for value in sequence(first, increment, last)]
    except SeqError as e:
        print(f"{program_name}: {e}", file=sys.stderr)
        print(usage(), file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    except (TypeError, ValueError):
        # The format string does not fit a floating point value.
        print(f"{program_name}: invalid format string '{options['format']}'", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    try:
        if items:
            sys.stdout.write(options['separator'].join(items) + '\n')
        sys.stdout.flush()
    except BrokenPipeError:
        sys.stderr.close()
        sys.exit(EXIT_FAILURE)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
