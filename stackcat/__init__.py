"""
stackcat - Stack-machine interpreter for a small concatenative language
Modular package implementation

Usage:
    from stackcat import new_session
    session = new_session()
    session.execute("3 4 + print")
"""

from .stack import BoundedStack, DEFAULT_CAPACITY, render_stack
from .errors import (ConcatException, StackOverflow, StackUnderflow,
                     DivisionByZero, UnknownCommand)
from .core import (Operation, ConcatBase, tokenize, is_integer_literal,
                   parse_literal)
from .arithmetic import ConcatArithmetic
from .stack_ops import ConcatStack
from .repl import (Concat, ConcatREPL, InteractiveConcat, new_session,
                   run_file, print_help)

__all__ = ['BoundedStack', 'render_stack', 'DEFAULT_CAPACITY',
           'ConcatException', 'StackOverflow', 'StackUnderflow',
           'DivisionByZero', 'UnknownCommand', 'Operation',
           'tokenize', 'is_integer_literal', 'parse_literal',
           'Concat', 'InteractiveConcat', 'new_session', 'run_file',
           'print_help']
__version__ = '1.0.0'
