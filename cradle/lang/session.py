"""Session control for the cradle language. Runs a whole program from a file or stdin, or single lines handed over by
the command-line shell, against one symbol table.
"""

import io
import logging
import sys

from cradle.lang.error import GenericException
from cradle.lang.symbols import SymbolTable
from cradle.lang.translator import Translator

logger = logging.getLogger(__name__)


class Session:
    """Governs a cradle session, with control over the lifetime of the symbol table."""
    SH_FILE = "<in>"  # command-line interpreter filename
    STDIN = "-"

    def __init__(self, error_handler, path, out=None, trace=False):
        self.error_handler = error_handler
        self.error_handler.path = path  # used for error messages

        self.path = path
        self.out = out if out is not None else sys.stdout
        self.trace = trace

        self.table = SymbolTable()  # outlives every translator created by this session

    def run(self):
        """Runs the program at self.path to the end of its input. Any error propagates to the error handler."""
        if self.path == Session.SH_FILE:
            raise GenericException("'{}' is a reserved filename", Session.SH_FILE, diagnosis=False)

        if self.path == Session.STDIN:
            logger.debug("running program from stdin")
            self._translator(sys.stdin.buffer).program()
            return

        try:
            with open(self.path, "rb") as file:
                source = file.read()
        except OSError:
            raise GenericException("'{}' could not be opened", self.path, diagnosis=False)

        if not source:
            logger.debug("'%s' is empty", self.path)
            return
        if not source.endswith((b"\n", b"\r")):
            source += b"\n"  # last statement still needs its line ending

        logger.debug("running '%s' (%d bytes)", self.path, len(source))
        self._translator(io.BytesIO(source)).program()

    def execute(self, line):
        """Runs one line of source (command-line mode). Variables persist between calls."""
        line = line.rstrip("\r\n")
        if not line:
            return
        self._translator(io.BytesIO(line.encode() + b"\n")).program()

    def _translator(self, stream):
        return Translator(stream, self.table, self.out, self.trace)
