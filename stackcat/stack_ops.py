"""
stackcat Stack Operations - Stack manipulation and output words
"""

from .stack import render_stack


class ConcatStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self._define('dup', 1, 2, self._dup, '( a -- a a )')
        self._define('drop', 1, 0, self._drop, '( a -- )')
        self._define('swap', 2, 2, self._swap, '( a b -- b a )')
        self._define('over', 2, 3, self._over, '( a b -- a b a )')
        self._define('rot', 3, 3, self._rot, '( a b c -- b c a )')

        self._define('print', 1, 0, self._print, '( a -- )')
        self._define('.s', 0, 0, self._dot_s, '( -- )')
        self._define('clear', 0, 0, self._clear_stack, '( ... -- )')

    def _dup(self):
        self.stack.push(self.stack.peek())

    def _drop(self):
        self.stack.pop()

    def _swap(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(b)
        self.stack.push(a)

    def _over(self):
        b = self.stack.pop()
        a = self.stack.peek()
        self.stack.push(b)
        self.stack.push(a)

    def _rot(self):
        c = self.stack.pop()
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(b)
        self.stack.push(c)
        self.stack.push(a)

    def _print(self):
        self._emit(str(self.stack.pop()))

    def _dot_s(self):
        self._emit(render_stack(self.stack))

    def _clear_stack(self):
        self.stack.clear()
