"""
stackcat Errors - Exceptions raised while executing a line
"""


class ConcatException(Exception):
    """Base class for every error raised while executing a line"""
    kind = 'ConcatError'

    def __init__(self, detail):
        self.detail = detail
        super().__init__(detail)


class StackOverflow(ConcatException):
    kind = 'StackOverflow'

    def __init__(self, operation='push'):
        self.operation = operation
        super().__init__(f"stack overflow in '{operation}'")


class StackUnderflow(ConcatException):
    kind = 'StackUnderflow'

    def __init__(self, operation='pop', required=1, available=0):
        self.operation = operation
        self.required = required
        self.available = available
        super().__init__(
            f"stack underflow in '{operation}' "
            f"(needs {required}, has {available})")


class DivisionByZero(ConcatException):
    kind = 'DivisionByZero'

    def __init__(self, operation='/'):
        self.operation = operation
        super().__init__("division by zero")


class UnknownCommand(ConcatException):
    kind = 'UnknownCommand'

    def __init__(self, token):
        self.token = token
        super().__init__(f"unknown command '{token}'")
