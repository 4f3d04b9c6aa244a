""" Implementation of the command line interface.

"""

import sys

from .utils.loggerutils import die

from . import cliparser
from .dispatcher import dispatch

__all__ = "main",

def main(argv=None) -> int:
    parser = cliparser.build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        # No subcommand was specified.
        parser.print_help()
        die(None)

    dispatch(args)

    return 0


if __name__ == "__main__":
    try:
        status = main()
    except Exception as err:
        # Error handler of last resort.
        print(f"ERROR: {err!r}", file=sys.stderr)
        print("shutting down due to fatal error", file=sys.stderr)
        raise  # print stack trace
    else:
        raise SystemExit(status)

# vim: sw=4 et
