from __future__ import annotations


class OreError(Exception):
    """ Base class for all orelang errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message


class OreSyntaxError(OreError):
    """ Raised when the source text does not parse into a tree"""

    def __init__(self, detail: str | None = None):
        message = "Syntax error."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.detail = detail


class UnknownOperator(OreError):
    """ Raised when the leading token of a form is not a known operator"""

    def __init__(self, name: str):
        super().__init__(f"Unknown operator '{name}'.")
        self.name = name


class ArgumentCountIncorrect(OreError):
    """ Raised when a form's element count does not match the operator's arity"""

    def __init__(self, operator: str | None = None, expected: int | None = None, actual: int | None = None):
        super().__init__("Argument count incorrect.")
        self.operator = operator
        self.expected = expected
        self.actual = actual


class VariableNotFound(OreError):
    """ Raised when a variable is read before it is set"""

    def __init__(self, name: str):
        super().__init__(f"Variable not found '{name}'.")
        self.name = name


class IterationLimitExceeded(OreError):
    """ Raised when a while loop runs past the configured iteration cap"""

    def __init__(self, limit: int):
        super().__init__(f"Iteration limit exceeded ({limit}).")
        self.limit = limit


class NestingTooDeep(OreError):
    """ Raised when a program nests deeper than the Python stack allows"""

    def __init__(self):
        super().__init__("Nesting too deep.")


class InvariantViolation(AssertionError):
    """ Raised when an internal precondition does not hold.

    Not part of the language's error taxonomy: the command line never reports
    it as ``error: ...``, it aborts the run with a traceback.
    """
