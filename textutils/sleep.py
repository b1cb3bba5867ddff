#!/usr/bin/env python3
"""
Name: sleep
Description: suspend execution for an interval of time

Pauses for the sum of all NUMBER[SUFFIX] operands. NUMBER may be a
fraction; SUFFIX is 's' for seconds (the default), 'm' for minutes,
'h' for hours or 'd' for days.
"""
import sys
import re
import time

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

__version__ = "0.1.0"

UNIT_SECONDS = {
    's': 1,
    'm': 60,
    'h': 60 * 60,
    'd': 24 * 60 * 60,
}

INTERVAL_RE = re.compile(r'^(\d+\.?\d*|\.\d+)([smhd]?)$')


def parse_interval(interval: str) -> float:
    """Converts one operand like '1.5m' into seconds."""
    match = INTERVAL_RE.match(interval)
    if not match:
        raise ValueError(f"invalid time interval '{interval}'")
    number, unit = match.groups()
    return float(number) * UNIT_SECONDS[unit or 's']


def total_seconds(intervals) -> float:
    if not intervals:
        raise ValueError("missing operand")
    return sum(parse_interval(i) for i in intervals)


def usage(program_name):
    """Prints a usage message to stderr and exits with failure."""
    print(f"usage: {program_name} NUMBER[SUFFIX]...", file=sys.stderr)
    sys.exit(EXIT_FAILURE)


def main(argv=None):
    """Validates arguments and sleeps for the specified duration."""
    program_name = 'sleep'
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == '--':
        argv = argv[1:]
    elif argv and argv[0] in ('-h', '--help'):
        print(f"usage: {program_name} NUMBER[SUFFIX]...")
        print(__doc__.split('\n\n', 1)[1].strip())
        sys.exit(EXIT_SUCCESS)
    elif argv and argv[0] in ('-V', '--version'):
        print(f"{program_name} {__version__}")
        sys.exit(EXIT_SUCCESS)

    try:
        seconds = total_seconds(argv)
    except ValueError as e:
        print(f"{program_name}: {e}", file=sys.stderr)
        usage(program_name)

    try:
        time.sleep(seconds)
    except KeyboardInterrupt:
        sys.exit(EXIT_FAILURE)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
