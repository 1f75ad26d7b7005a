class MalError(Exception):
    """ Base class for all mal errors"""
    pass

class MalSyntaxError(MalError):
    """ Raised when source text cannot be read"""

class MalUnexpectedEOF(MalSyntaxError):
    """ Raised when the input ends inside a list or a string"""

class MalEmptyInput(MalSyntaxError):
    """ Raised when there is no form to read"""

class MalUnboundSymbol(MalError):
    """ Raised when a symbol is not bound in any enclosing scope"""

class MalNotCallable(MalError):
    """ Raised when the head of an application is not a function"""

class MalIOError(MalError):
    """ Raised when a file cannot be read"""

class MalTypeError(MalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MalArityError(MalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MalRecursionError(MalError):
    """ Raised when evaluation or reading nests deeper than the host stack allows"""
