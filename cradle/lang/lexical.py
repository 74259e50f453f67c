"""Lexical helpers for the cradle language. There are no tokens: the scanner classifies and consumes the reader's
lookahead one character at a time, on demand of the grammar routines in translator.py.

```
<name>    ::= <letter>           ; exactly one letter, case-insensitive (stored uppercased)
<number>  ::= <digit> <digit>*   ; unsigned, base 10
<addop>   ::= "+" | "-"
<newline> ::= "\\r\\n" | "\\n" | "\\r"
```
"""

from string import ascii_letters, digits

from cradle.lang.error import ExpectedInteger, ExpectedName, ExpectedToken
from cradle.lang.reader import LookaheadReader


def is_addop(c):
    return c == "+" or c == "-"


class Scanner:
    """Wraps a LookaheadReader with the lexical helpers shared by every grammar routine."""

    def __init__(self, stream):
        self.reader = LookaheadReader(stream)

    @property
    def look(self):
        return self.reader.look

    def read(self):
        self.reader.read()

    def where(self):
        """Location of the lookahead, as keyword arguments for a GenericException."""
        return {"source": self.reader.line, "start": self.reader.col, "line_num": self.reader.line_num}

    def match(self, c):
        """Consumes c if it is the lookahead. Otherwise raises ExpectedToken, consuming nothing."""
        if self.look != c:
            raise ExpectedToken(c, **self.where())
        self.read()

    def get_name(self):
        """Consumes a single letter and returns it uppercased."""
        name = self.look
        if name not in ascii_letters:
            raise ExpectedName(**self.where())
        self.read()
        return name.upper()

    def get_num(self):
        """Consumes a run of digits and returns its value."""
        if self.look not in digits:
            raise ExpectedInteger(**self.where())

        value = 0
        while self.look in digits:
            value = 10 * value + int(self.look)
            self.read()

        return value

    def newline(self):
        """Recognizes and skips over a line ending, if there is one."""
        if self.look == "\r":
            self.read()
            if self.look == "\n":
                self.read()
        elif self.look == "\n":
            self.read()
