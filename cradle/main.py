"""Runs cradle programs from a file or stdin, or in command-line mode. Also uses error handling context manager. Called
from the cradle console script.
"""

import argparse
import logging
import sys

from cradle.lang.error import ErrorHandler
from cradle.lang.session import Session
from cradle.lang.shell import Shell


def main(argv=None):
    """Runs cradle interpreter. Called from cradle console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="cradle")
        parser.add_argument("file", help="file to interpret and run, '-' for stdin (if empty, goes to command-line "
                                         "mode)", nargs="?")
        parser.add_argument("-v", "--verbose", help="log each statement", action="store_true")
        parser.add_argument("--trace", help="echo every value stored in a variable", action="store_true")
        args = parser.parse_args(argv)

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        if args.file is not None:
            Session(error_handler, args.file, trace=args.trace).run()

        elif not sys.stdin.isatty():
            Session(error_handler, Session.STDIN, trace=args.trace).run()

        else:
            error_handler.fatal = False
            Shell(Session(error_handler, Session.SH_FILE, trace=args.trace)).cmdloop()


if __name__ == "__main__":
    main()
