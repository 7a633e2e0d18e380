class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass


class SchemeSyntaxError(SchemeError):
    """ Raised when the source text cannot be tokenized or parsed"""

    def __init__(self, detail: str):
        super().__init__(f"Parse error: {detail}")
        self.detail = detail


class SchemeInvalidSymbol(SchemeError):
    """ Raised when a non-symbol is used as a binding name"""


class SchemeEvaluationError(SchemeError):
    """ Raised when a well-formed tree cannot be evaluated"""


class SchemeUnboundSymbol(SchemeEvaluationError):
    """ Raised when a symbol is used before it is bound"""


class SchemeArityError(SchemeEvaluationError):
    """ Raised when a special form or call has the wrong number of elements"""


class SchemeFormError(SchemeEvaluationError):
    """ Raised when a special form is malformed"""


class SchemeTypeError(SchemeEvaluationError):
    """ Raised when a value has the wrong type for the operation"""


class SchemeOverflowError(SchemeEvaluationError):
    """ Raised when an integer result leaves the signed 64-bit range"""


class SchemeZeroDivisionError(SchemeEvaluationError):
    """ Raised on integer division by zero"""
