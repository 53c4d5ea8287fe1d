"""Exception hierarchy for Eden.

Everything a caller of the reader or evaluator can see derives from EdenError.
The REPL catches EdenError, reports it and keeps the current environment.
"""


class EdenError(Exception):
    """ Base class for all Eden errors"""
    pass


class EdenSyntaxError(EdenError):
    """ Raised when source text cannot be read"""


class EdenIncompleteInput(EdenSyntaxError):
    """ Raised when source text ends inside a list or string"""


class EdenRuntimeError(EdenError):
    """ Base class for errors raised while evaluating"""


class EdenInvalidSymbol(EdenRuntimeError):
    """ Raised when a non-symbol is used as a binding name"""


class EdenUnboundSymbol(EdenRuntimeError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Unbound variable: {name}")
        self.name = str(name)


class EdenUnboundAssignment(EdenUnboundSymbol):
    """ Raised when set! targets a symbol no frame binds"""

    def __init__(self, name):
        super().__init__(name, f"Cannot set! unbound variable: {name}")


class EdenArityError(EdenRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class EdenTypeError(EdenRuntimeError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class EdenNotCallable(EdenTypeError):
    """ Raised when the head of an application is not a procedure"""


class EdenUnrecognizedForm(EdenRuntimeError):
    """ Raised when a list expression matches no form"""


class EdenDivisionByZero(EdenRuntimeError):
    """ Raised by / quotient mod remainder on a zero divisor"""


class EdenOverflowError(EdenRuntimeError):
    """ Raised when an integer result leaves the signed 64-bit range"""


class EdenLoadError(EdenRuntimeError):
    """ Raised when a source file cannot be resolved, read or parsed"""
