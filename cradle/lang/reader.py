"""Single character lookahead over a byte stream. This is the only object that ever reads from the input."""

from cradle.lang.error import UnexpectedEndOfInput


class LookaheadReader:
    """Holds exactly one buffered character of input. Construction primes the lookahead, so look is valid from the
    moment the reader exists until the stream runs dry.
    """

    def __init__(self, stream):
        self.stream = stream
        self.exhausted = False

        self._look = None
        self.line = ""     # current line read so far, lookahead included
        self.line_num = 1

        self.read()  # reads the first char of input

    @property
    def look(self):
        """The current lookahead character. Raises UnexpectedEndOfInput once the stream is exhausted."""
        if self.exhausted:
            raise self._end_of_input()
        return self._look

    @property
    def col(self):
        """0-based column of the lookahead within self.line."""
        return max(len(self.line) - 1, 0)

    def read(self):
        """Advances to the next character of input."""
        byte = self.stream.read(1)
        if not byte:
            self.exhausted = True
            raise self._end_of_input()

        if self._look == "\n":
            self.line_num += 1
            self.line = ""

        self._look = chr(byte[0])
        self.line += self._look

    def _end_of_input(self):
        return UnexpectedEndOfInput(source=self.line, start=len(self.line), line_num=self.line_num)
