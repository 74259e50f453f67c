"""Fused parser/evaluator for the cradle language. Each routine below recognizes one nonterminal and computes its value
in the same pass: there is no syntax tree, and recognition is evaluation.

```
<factor>      ::= "(" <expression> ")" | <name> | <number>
<term>        ::= <factor> { ("*" | "/") <factor> }
<expression>  ::= [ <addop> ] <term> { <addop> <term> }   ; leading addop applies to an implicit 0
<assignment>  ::= <name> "=" <expression>
<input_stmt>  ::= "?" <name>                              ; skips one char, stores the byte value of the next
<output_stmt> ::= "!" <name>
<statement>   ::= <input_stmt> | <output_stmt> | <assignment> | ""
<program>     ::= { <statement> <newline> }
```

See lexical.py for <name>, <number>, <addop> and <newline>.
"""

import logging
import sys
from string import ascii_letters

from cradle.lang.error import ArithmeticFault, GenericException, UnexpectedEndOfInput
from cradle.lang.lexical import Scanner, is_addop
from cradle.lang.output import emit, emitln
from cradle.lang.symbols import SymbolTable

logger = logging.getLogger(__name__)


def divide(dividend, divisor):
    """Integer division truncating toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


class Translator(Scanner):
    """Interpreter state (lookahead + symbol table) plus the grammar routines that drive it. table can be shared
    between translators so that variables outlive a single input stream.
    """

    def __init__(self, stream, table=None, out=None, trace=False):
        super().__init__(stream)
        self.table = table if table is not None else SymbolTable()
        self.out = out if out is not None else sys.stdout
        self.trace = trace  # echo every stored value with emitln

    def var(self, name):
        return self.table[name]

    def set_var(self, name, value):
        self.table[name] = value

    def factor(self):
        if self.look == "(":
            self.match("(")
            value = self.expression()
            self.match(")")
        elif self.look in ascii_letters:
            value = self.var(self.get_name())
        else:
            value = self.get_num()

        return value

    def term(self):
        value = self.factor()
        while self.look in ("*", "/"):
            if self.look == "*":
                self.match("*")
                value *= self.factor()
            else:
                self.match("/")
                where = self.where()
                try:
                    value = divide(value, self.factor())
                except ZeroDivisionError:
                    raise ArithmeticFault(**where) from None

        return value

    def expression(self):
        if is_addop(self.look):
            value = 0
        else:
            value = self.term()

        while is_addop(self.look):
            if self.look == "+":
                self.match("+")
                value += self.term()
            elif self.look == "-":
                self.match("-")
                value -= self.term()
            else:
                raise GenericException("'{}' is not an addop", self.look, internal=True)

        return value

    def assignment(self):
        name = self.get_name()
        self.match("=")
        value = self.expression()
        self.set_var(name, value)

        logger.debug("%s = %d", name, value)
        if self.trace:
            emitln(f"{name} = {value}", self.out)

    def input_stmt(self):
        """Stores the raw byte value of the character after the one following the name. Two characters are consumed
        around the captured one.
        """
        self.match("?")
        name = self.get_name()

        self.read()
        value = ord(self.look)

        self.set_var(name, value)
        self.read()

        logger.debug("%s <- %d", name, value)
        if self.trace:
            emit(f"{name} = ", self.out)
            print(value, file=self.out)

    def output_stmt(self):
        self.match("!")
        name = self.get_name()
        print(self.var(name), file=self.out)

    def statement(self):
        if self.look == "?":
            self.input_stmt()
        elif self.look == "!":
            self.output_stmt()
        elif self.look not in ("\r", "\n"):
            self.assignment()

    def program(self):
        """Runs statements until the input ends right after a statement's line ending."""
        while True:
            self.statement()
            try:
                self.newline()
            except UnexpectedEndOfInput:
                logger.debug("end of program at line %d", self.reader.line_num)
                return
