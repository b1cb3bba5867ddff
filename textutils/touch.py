#!/usr/bin/env python3
"""
Name: touch
Description: change access and modification times of files
"""

import sys
import os
import argparse
import time
from datetime import datetime

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

NS_PER_SECOND = 1_000_000_000


def parse_timestamp(time_str: str, now=None) -> int:
    """
    Parses the [[CC]YY]MMDDhhmm[.SS] timestamp format and returns it as
    nanoseconds since the epoch, in local time.
    """
    if now is None:
        now = datetime.now()
    main_part, _, seconds_part = time_str.partition('.')
    if not main_part.isdigit() or (seconds_part and not seconds_part.isdigit()) \
            or len(seconds_part) not in (0, 2):
        raise ValueError(f"invalid date format '{time_str}'")

    if len(main_part) == 12:
        year = int(main_part[:4])
        main_part = main_part[4:]
    elif len(main_part) == 10:
        year = int(main_part[:2])
        # POSIX: 69-99 are 1969-1999, 00-68 are 2000-2068.
        year += 2000 if year < 69 else 1900
        main_part = main_part[2:]
    elif len(main_part) == 8:
        year = now.year
    else:
        raise ValueError(f"invalid date format '{time_str}'")

    month, day, hour, minute = (int(main_part[i:i + 2]) for i in range(0, 8, 2))
    seconds = int(seconds_part) if seconds_part else 0
    try:
        stamp = datetime(year, month, day, hour, minute, seconds).timestamp()
    except ValueError:
        raise ValueError(f"invalid date format '{time_str}'")
    return int(stamp) * NS_PER_SECOND


def touch_file(path, atime, mtime, access_only=False, modification_only=False,
               create=True):
    """
    Creates PATH if needed, then applies the requested times, given in
    nanoseconds. Returns False when PATH is missing and creation is disabled.
    """
    if not os.path.lexists(path):
        if not create:
            return False
        with open(path, 'a'):
            pass

    current = os.stat(path)
    # Neither -a nor -m given means both times change.
    change_atime = access_only or not modification_only
    change_mtime = modification_only or not access_only
    os.utime(path, ns=(
        atime if change_atime else current.st_atime_ns,
        mtime if change_mtime else current.st_mtime_ns,
    ))
    return True


def main(argv=None):
    """Parses arguments and runs the touch logic."""
    parser = argparse.ArgumentParser(
        prog='touch',
        description="Change file access and modification times.",
        usage="%(prog)s [-acm] [-r file] [-t [[CC]YY]MMDDhhmm[.SS]] file..."
    )
    parser.add_argument('-a', action='store_true', help='Change only the access time.')
    parser.add_argument('-c', '--no-create', action='store_true', help="Do not create any files.")
    parser.add_argument('-m', action='store_true', help='Change only the modification time.')
    parser.add_argument('-f', action='store_true', help='Ignored (for compatibility).')

    time_group = parser.add_mutually_exclusive_group()
    time_group.add_argument('-r', '--reference', help="Use this file's times instead of the current time.")
    time_group.add_argument('-t', dest='stamp', help='Use [[CC]YY]MMDDhhmm[.SS] instead of the current time.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('files', nargs='+', help='One or more files to touch.')

    args = parser.parse_args(argv)
    program_name = 'touch'
    exit_status = EXIT_SUCCESS

    try:
        if args.reference:
            stats = os.stat(args.reference)
            atime, mtime = stats.st_atime_ns, stats.st_mtime_ns
        elif args.stamp:
            atime = mtime = parse_timestamp(args.stamp)
        else:
            atime = mtime = time.time_ns()
    except ValueError as e:
        print(f"{program_name}: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    except OSError as e:
        print(f"{program_name}: failed to get attributes of '{args.reference}': {e.strerror}",
              file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    for filepath in args.files:
        try:
            touch_file(filepath, atime, mtime, access_only=args.a,
                       modification_only=args.m, create=not args.no_create)
        except OSError as e:
            print(f"{program_name}: cannot touch '{filepath}': {e.strerror}", file=sys.stderr)
            exit_status = EXIT_FAILURE

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
