"""
stackcat Core - Base class with fundamental infrastructure
- Exception classes (re-exported from errors)
- Cell arithmetic helpers
- Tokenizer and literal classifier
- Operation descriptors and dispatch
"""

import re
import sys
from collections import namedtuple

from .errors import (ConcatException, StackOverflow, StackUnderflow,
                     DivisionByZero, UnknownCommand)
from .stack import BoundedStack, DEFAULT_CAPACITY


CELL_BITS = 32
CELL_MAX = (1 << (CELL_BITS - 1)) - 1

DELIMITERS = ' \t\n'

_LITERAL_RE = re.compile(r'[+-]?[0-9]+')
_CHUNK = 9


Operation = namedtuple('Operation', 'name arity results func effect guard')


def to_cell(value):
    """Wrap an integer to a signed 32-bit cell (two's complement)"""
    value &= (1 << CELL_BITS) - 1
    if value > CELL_MAX:
        value -= 1 << CELL_BITS
    return value


def tokenize(line):
    """Split a line on runs of space, tab and newline"""
    tokens = []
    i = 0
    n = len(line)

    while i < n:
        if line[i] in DELIMITERS:
            i += 1
            continue

        start = i
        while i < n and line[i] not in DELIMITERS:
            i += 1
        tokens.append(line[start:i])

    return tokens


def is_integer_literal(token):
    """Optional sign followed by one or more decimal digits"""
    return _LITERAL_RE.fullmatch(token) is not None


def parse_literal(token):
    """Convert an integer literal token to its cell value

    Digits are folded in chunks modulo 2**CELL_BITS, so literals of any
    length convert without building a big integer.
    """
    if not is_integer_literal(token):
        raise ValueError(f"not an integer literal: {token!r}")

    sign = -1 if token[0] == '-' else 1
    digits = token.lstrip('+-')
    mask = (1 << CELL_BITS) - 1
    value = 0
    for i in range(0, len(digits), _CHUNK):
        chunk = digits[i:i + _CHUNK]
        value = (value * 10 ** len(chunk) + int(chunk, 10)) & mask
    return to_cell(sign * value)


class ConcatBase:
    """Base mixin providing the stack, the word table and dispatch"""

    def __init__(self, capacity=DEFAULT_CAPACITY, out=None):
        self.stack = BoundedStack(capacity)
        self.words = {}
        self.out = out if out is not None else sys.stdout

    def _define(self, name, arity, results, func, effect, guard=None):
        self.words[name] = Operation(name, arity, results, func, effect, guard)

    def _lookup_word(self, name):
        """Look up a word, raising UnknownCommand when it is not defined"""
        op = self.words.get(name)
        if op is None:
            raise UnknownCommand(name)
        return op

    def _dispatch(self, token):
        """Check an operation's contract, then run it"""
        op = self._lookup_word(token)
        size = len(self.stack)

        if size < op.arity:
            raise StackUnderflow(op.name, op.arity, size)
        if size - op.arity + op.results > self.stack.capacity:
            raise StackOverflow(op.name)
        if op.guard is not None:
            op.guard()

        op.func()

    def _execute_token(self, token):
        if is_integer_literal(token):
            self.stack.push(parse_literal(token))
        else:
            self._dispatch(token)

    def execute(self, line):
        """Execute one line, raising the first ConcatException met"""
        for token in tokenize(line):
            self._execute_token(token)
        return self

    def execute_line(self, line):
        """Execute one line; return None on success or the error that stopped it"""
        try:
            self.execute(line)
        except ConcatException as e:
            return e
        return None

    def _emit(self, text):
        print(text, file=self.out)
