"""Host-level exceptions for Lispy.

Language-level failures (division by zero, bad arity, unbound symbols...) are
Error *values* and never raised. The classes below only cross the boundary
between Lispy and the Python code embedding it.
"""


class LispyError(Exception):
    """ Base class for all Lispy host errors"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, position: int = 0, source: str = ""):
        super().__init__(message)
        self.message = message
        self.position = position
        self.source = source

    def __str__(self):
        return f"<stdin>:1:{self.position + 1}: error: {self.message}"


class LispyInvalidSymbol(LispyError):
    """ Raised when a non-symbol is used as a binding name"""


class LispyConfigError(LispyError):
    """ Raised when a configuration value cannot be parsed"""


class LispyRecursionError(LispyError):
    """ Raised when a value is nested deeper than the host stack allows"""

    def __str__(self):
        return f"<stdin>:1:1: error: {self.args[0]}"
