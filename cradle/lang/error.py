"""Error handling for the cradle language. Every syntax or runtime fault is a GenericException subclass, and none of
them are recoverable: they propagate straight through the recursive descent routines up to ErrorHandler, which reports
them and decides whether the process ends. If another type of error makes it all the way to ErrorHandler, it is
assumed to be an internal issue.
"""

import logging
import sys

from termcolor import colored

logger = logging.getLogger(__name__)


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a cradle error. parts are substituted into msg and
    bolded; source/start/line_num locate the lookahead that caused the error.
    """

    def __init__(self, msg, parts=(), source="", start=0, end=-1, line_num=None, diagnosis=True, internal=False):
        if isinstance(parts, str):
            parts = [parts]

        super().__init__(msg.format(*parts))
        self.msg = msg.format(*(colored(part, attrs=["bold"]) for part in parts))  # color offending snippets

        self.source = source
        self.start = start
        self.end = end if end != -1 else start + 1  # needed for error display
        self.line_num = line_num

        self.diagnosis = diagnosis
        self.internal = internal


class UnexpectedEndOfInput(GenericException):
    """The input stream ran out while another character was required."""

    def __init__(self, **kwargs):
        super().__init__("unexpected end of input", **kwargs)


class Expected(GenericException):
    """The lookahead did not satisfy what the grammar required."""

    def __init__(self, what, **kwargs):
        self.what = what
        super().__init__("'{}' expected", what, **kwargs)


class ExpectedToken(Expected):

    def __init__(self, token, **kwargs):
        self.token = token
        super().__init__(token, **kwargs)


class ExpectedName(Expected):

    def __init__(self, **kwargs):
        super().__init__("Name", **kwargs)


class ExpectedInteger(Expected):

    def __init__(self, **kwargs):
        super().__init__("Integer", **kwargs)


class ArithmeticFault(GenericException):
    """Integer division by zero."""

    def __init__(self, **kwargs):
        super().__init__("division by zero", **kwargs)


class ErrorHandler:
    """Context manager that reports cradle errors to stderr and, if fatal, terminates the process."""
    ERROR = "red"

    def __init__(self, fatal=True, path=None):
        self.fatal = fatal
        self.path = path  # file being run, used as message prefix

    @staticmethod
    def diagnose(error):
        """Returns the offending source line with the lookahead highlighted and marked with a caret."""
        source = error.source.rstrip("\r\n")
        start = min(error.start, len(source))
        end = max(min(error.end, len(source)), start)

        diagnosis = "  " + source[:start]
        diagnosis += colored(source[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += source[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * max(end - start - 1, 0), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Reports error, which must be a GenericException. Exits with status 1 if self.fatal."""
        error_msg = ""
        if self.path and error.line_num is not None:
            error_msg += colored(f"{self.path}:{error.line_num}:{error.start + 1}: ", attrs=["bold"])

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=sys.stderr)

        if not error.internal and error.source.strip() and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=sys.stderr)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("expression nested too deeply"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            logger.debug("aborting on %s", exc_type.__name__)
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
