"""
stackcat Arithmetic - Integer operations on 32-bit cells
"""

from .core import DivisionByZero, to_cell


def truncate_div(a, b):
    """Integer quotient rounded toward zero (C semantics, not floor)"""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


class ConcatArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self._define('+', 2, 1, self._plus, '( a b -- a+b )')
        self._define('-', 2, 1, self._minus, '( a b -- a-b )')
        self._define('*', 2, 1, self._mult, '( a b -- a*b )')
        self._define('/', 2, 1, self._div, '( a b -- a/b )',
                     guard=self._check_divisor)

    def _plus(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(to_cell(a + b))

    def _minus(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(to_cell(a - b))

    def _mult(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(to_cell(a * b))

    def _check_divisor(self):
        if self.stack.peek() == 0:
            raise DivisionByZero('/')

    def _div(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(to_cell(truncate_div(a, b)))
