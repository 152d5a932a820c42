
class SchemerError(Exception):
    """ Base class for all Schemer errors"""
    pass

class SchemerSyntaxError(SchemerError):
    """ Raised for a malformed token stream or a special form with the wrong shape"""

class SchemerUnboundVariable(SchemerError):
    """ Raised when a symbol is looked up or set before it is bound"""

class SchemerArityError(SchemerError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SchemerTypeError(SchemerError):
    """ Raised when an operation is applied to a value of the wrong shape"""

class SchemerZeroDivisionError(SchemerError):
    """ Raised when `/` is asked to divide by zero"""
