import io
import unittest

from stackcat import new_session
from stackcat.core import (DivisionByZero, StackOverflow, StackUnderflow,
                           UnknownCommand, to_cell)


class TestLineExecutor(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.session = new_session(out=self.out)

    def lines(self):
        return self.out.getvalue().splitlines()

    def test_square(self):
        self.session.execute("5 dup * print")
        self.assertEqual(self.lines(), ['25'])
        self.assertTrue(self.session.stack.is_empty())

    def test_add_then_multiply(self):
        self.session.execute("3 4 + 2 * print")
        self.assertEqual(self.lines(), ['14'])
        self.assertTrue(self.session.stack.is_empty())

    def test_swap_subtract(self):
        self.session.execute("10 20 swap - print")
        self.assertEqual(self.lines(), ['10'])
        self.assertTrue(self.session.stack.is_empty())

    def test_rot_then_print_three(self):
        self.session.execute("1 2 3 rot print print print")
        self.assertEqual(self.lines(), ['1', '3', '2'])

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZero):
            self.session.execute("5 0 /")
        self.assertEqual(self.session.stack.snapshot(), [5, 0])

    def test_unknown_command(self):
        with self.assertRaises(UnknownCommand) as ctx:
            self.session.execute("foo")
        self.assertEqual(ctx.exception.token, 'foo')
        self.assertIn('foo', str(ctx.exception))

    def test_blank_lines_are_no_ops(self):
        for line in ("", "   ", "\t\n", "\n"):
            self.assertIsNone(self.session.execute_line(line))
        self.assertTrue(self.session.stack.is_empty())
        self.assertEqual(self.out.getvalue(), "")

    def test_signed_literals(self):
        self.session.execute("-3 +4 + print")
        self.assertEqual(self.lines(), ['1'])

    def test_fail_fast_stops_rest_of_line(self):
        with self.assertRaises(UnknownCommand):
            self.session.execute("1 2 bogus 3 print")
        self.assertEqual(self.session.stack.snapshot(), [1, 2])
        self.assertEqual(self.out.getvalue(), "")

    def test_earlier_tokens_are_not_rolled_back(self):
        with self.assertRaises(StackUnderflow):
            self.session.execute("7 print +")
        self.assertEqual(self.lines(), ['7'])

    def test_stack_persists_across_lines(self):
        self.session.execute("3")
        self.session.execute("4 +")
        self.session.execute("print")
        self.assertEqual(self.lines(), ['7'])

    def test_execute_line_returns_error_instead_of_raising(self):
        error = self.session.execute_line("1 0 /")
        self.assertIsInstance(error, DivisionByZero)
        self.assertEqual(error.kind, 'DivisionByZero')
        self.assertEqual(error.detail, 'division by zero')
        self.assertIsNone(self.session.execute_line("drop drop"))

    def test_very_long_literal_is_pushed_as_a_cell(self):
        self.assertIsNone(self.session.execute_line("1" * 5000 + " .s"))
        value = to_cell((10 ** 5000 - 1) // 9)
        self.assertEqual(self.session.stack.snapshot(), [value])
        self.assertEqual(self.lines(), [f"Stack: [ {value} ]"])

    def test_literal_push_overflow(self):
        session = new_session(capacity=2, out=self.out)
        error = session.execute_line("1 2 3 4")
        self.assertIsInstance(error, StackOverflow)
        self.assertEqual(session.stack.snapshot(), [1, 2])

    def test_sessions_do_not_share_stacks(self):
        other = new_session(out=self.out)
        self.session.execute("1 2")
        self.assertTrue(other.stack.is_empty())


if __name__ == '__main__':
    unittest.main()
