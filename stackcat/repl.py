"""
stackcat REPL - Session object, interactive loop and batch file runner
"""

import sys

from .core import ConcatBase, to_cell
from .arithmetic import ConcatArithmetic
from .stack import DEFAULT_CAPACITY, render_stack
from .stack_ops import ConcatStack


BANNER = "=== Concatenative Interpreter ==="

HELP_TEXT = """\
Concatenative Interpreter - available commands:

Numbers:    <number>       Push a number onto the stack
Arithmetic: + - * /        Binary operations
Stack:      dup            Duplicate the top element
            drop           Remove the top element
            swap           Swap the top two elements
            over           Copy the second element to the top
            rot            Rotate the top three elements
I/O:        print          Print and remove the top element
            .s             Show the stack
            clear          Empty the stack

Examples:
  5 dup * print          -> 25
  3 4 + 2 * print        -> 14
  10 20 swap - print     -> 10"""

META_EXIT = ('exit', 'quit')


def print_help(out=None):
    """Prints the command summary"""
    print(HELP_TEXT, file=out if out is not None else sys.stdout)


class Concat(ConcatBase, ConcatArithmetic, ConcatStack):
    """Complete interpreter session combining all mixins"""

    def __init__(self, capacity=DEFAULT_CAPACITY, out=None):
        super().__init__(capacity, out)
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_arithmetic_words()
        self._register_stack_words()

    def __repr__(self):
        return f"<Concat {render_stack(self.stack)}>"


def new_session(capacity=DEFAULT_CAPACITY, out=None):
    """Create a new interpreter session with its own stack"""
    return Concat(capacity, out)


def run_file(session, path, keep_going=False, err=None):
    """Execute a source file line by line; returns a process exit code

    Lines starting with '#' and blank lines are skipped, every other line
    is echoed as '> line' before it runs. The first failing line stops the
    run unless keep_going is set.
    """
    err = err if err is not None else sys.stderr
    out = session.out

    try:
        f = open(path, 'r', encoding='utf-8', errors='replace')
    except OSError:
        print(f"Error: cannot open file '{path}'", file=err)
        return 1

    failed = False
    with f:
        print(f"Running file: {path}", file=out)
        print(file=out)

        for line in f:
            if line.startswith('#') or not line.strip():
                continue

            echo = line.rstrip('\n')
            print(f"> {echo}", file=out)
            error = session.execute_line(line)
            if error is not None:
                print(f"Error: {error}", file=err)
                failed = True
                if not keep_going:
                    return 1

    print(file=out)
    print(f"Final stack: {render_stack(session.stack)}", file=out)
    return 1 if failed else 0


class ConcatREPL:
    """Mixin providing REPL functionality"""

    def _readline_input(self, prompt):
        """Alternative input using sys.stdin.readline for compatibility"""
        self.out.write(prompt)
        self.out.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError()
        return line.rstrip('\n\r')

    def repl(self, readline_mode=False, get_input=None, err=None):
        """Start interactive REPL

        Args:
            readline_mode: If True, use sys.stdin.readline instead of input().
            get_input: Callable taking the prompt and returning one line,
                       raising EOFError at end of input. Overrides readline_mode.
            err: Stream for error reports (default sys.stderr).
        """
        err = err if err is not None else sys.stderr

        if get_input is None:
            get_input = self._readline_input if readline_mode else input

        print("Interactive mode (type 'help' for commands)", file=self.out)
        print(file=self.out)

        while True:
            try:
                try:
                    line = get_input("> ")
                except EOFError:
                    print(file=self.out)
                    break

                line_stripped = line.strip()

                if line_stripped == 'help':
                    print_help(self.out)
                    continue

                if line_stripped in META_EXIT:
                    break

                error = self.execute_line(line)
                if error is not None:
                    print(f"Error: {error}", file=err)

            except KeyboardInterrupt:
                print("\n(Ctrl+C) Type 'exit' to quit", file=self.out)

        print("Goodbye!", file=self.out)
        return self


class InteractiveConcat(Concat, ConcatREPL):
    """Complete interactive session with REPL support"""

    def push(self, *values):
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"cells are integers, got {v!r}")
            self.stack.push(to_cell(v))
        return self

    def pop(self):
        return self.stack.pop()

    def peek(self):
        return self.stack.peek()
