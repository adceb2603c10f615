

class YascmError(Exception):
    """ Base class for all yascm errors"""
    pass

class YascmSyntaxError(YascmError):
    """ Raised when the reader meets a malformed or undelimited literal"""

class YascmUnboundSymbol(YascmError):
    """ Raised when a symbol is assigned or looked up before it is bound"""

class YascmTypeError(YascmError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class YascmInvalidSymbol(YascmTypeError):
    """ Raised when a non-symbol is used where a variable name is required"""

class YascmArityError(YascmError):
    """ Raised when the number of arguments passed to a form or procedure is incorrect"""

class YascmNotCallable(YascmError):
    """ Raised when a non-procedure is applied"""
