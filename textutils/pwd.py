#!/usr/bin/env python3
"""
Name: pwd
Description: working directory name

Prints the pathname of the current working directory. By default the
logical path from $PWD is printed when it still names the current
directory (-L). The -P option resolves all symbolic links.
"""

import os
import sys
import argparse

__version__ = "0.1.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def get_physical_pwd():
    """The current directory with every symlink resolved."""
    return os.path.realpath(os.getcwd())


def get_logical_pwd(environ=None):
    """
    Returns $PWD when it is an absolute path without '.' or '..'
    components that names the current directory, otherwise the
    physical path.
    """
    if environ is None:
        environ = os.environ
    pwd_env = environ.get('PWD')
    if pwd_env and os.path.isabs(pwd_env):
        parts = pwd_env.split('/')
        if '.' not in parts and '..' not in parts:
            try:
                if os.path.samefile(pwd_env, '.'):
                    return pwd_env
            except OSError:
                pass
    return get_physical_pwd()


def main(argv=None):
    """Parses arguments and prints the current working directory."""
    parser = argparse.ArgumentParser(
        prog='pwd',
        description="Print the full filename of the current working directory.",
        usage="%(prog)s [-L|-P]",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '-L', '--logical',
        action='store_true',
        help='print the value of $PWD if it names the current working directory (default)'
    )
    group.add_argument(
        '-P', '--physical',
        action='store_true',
        help='print the physical directory, without any symbolic links'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    try:
        path = get_physical_pwd() if args.physical else get_logical_pwd()
    except OSError as e:
        # The directory was removed or its permissions changed.
        print(f"pwd: error retrieving current directory: {e.strerror}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    print(path)
    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
