"""Error types raised while reducing, evaluating or compiling SIMPLE programs."""


class SimpleError(Exception):
    """Base exception for SIMPLE runtime errors.

    Carries a short kind `name` and a human readable `message`, rendered
    as ``name: message``.
    """
    name = 'SimpleError'

    def __init__(self, message: str):
        super().__init__(f"{self.name}: {message}")
        self.message = message


class UnboundVariable(SimpleError):
    """A variable was looked up in an environment that has no binding for it."""
    name = 'UnboundVariable'

    def __init__(self, variable: str):
        super().__init__(f'undefined variable {variable}')
        self.variable = variable


class TypeMismatch(SimpleError):
    """An operator or condition received a value of the wrong kind."""
    name = 'TypeMismatch'


class PreconditionViolation(SimpleError):
    """A terminal node was asked to take another step."""
    name = 'PreconditionViolation'
