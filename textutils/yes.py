#!/usr/bin/env python3
"""
Name: yes
Description: print out a string till doomsday

Repeatedly prints a string to standard output until it is terminated.
The arguments are joined with spaces to form the string; with no
arguments the string is 'y'.
"""

import sys

__version__ = "0.1.0"

EXIT_SUCCESS = 0

BATCH_SIZE = 8192


def build_batch(args) -> bytes:
    """One write's worth of repeated lines, at least BATCH_SIZE bytes."""
    line = ((" ".join(args) if args else "y") + "\n").encode()
    repeat = max(1, BATCH_SIZE // len(line))
    return line * repeat


def main(argv=None):
    """Determines the string and prints it in an infinite loop."""
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] == '--':
        argv = argv[1:]

    batch = build_batch(argv)
    output = sys.stdout.buffer
    try:
        while True:
            output.write(batch)
    except KeyboardInterrupt:
        sys.exit(EXIT_SUCCESS)
    except BrokenPipeError:
        # The reader went away (e.g. `yes | head`); that is the normal end.
        sys.stderr.close()
        sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
