class FexlError(Exception):
    """ Base class for all fexl errors"""
    prefix = ""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}{self.message}"


class FexlTypeError(FexlError):
    """ Raised on an operand type mismatch, applying a non-callable, or unquoting a non-quote"""
    prefix = "Type error: "


class FexlSyntaxError(FexlError):
    """ Raised on arity violations and malformed special-form shapes"""
    prefix = "Syntax error: "


class FexlStackEmpty(FexlError):
    """ Raised when the scope stack would lose its base frame"""

    def __init__(self, message: str = "Stack underflowed."):
        super().__init__(message)


class FexlVariableNotFound(FexlError):
    """ Raised when an identifier is not bound in any frame"""

    def __init__(self, name: str):
        super().__init__(f"Variable {name} is not in scope.")
        self.name = name


class FexlRuntimeError(FexlError):
    """ Catch-all for failures during evaluation (division by zero, overflow, depth)"""
    prefix = "Runtime error: "


class FexlParseError(FexlSyntaxError):
    """ Raised by the reader on malformed source"""
    prefix = "Parse error: "


class FexlIncompleteInput(FexlParseError):
    """ Raised by the reader when the source ends before a node is complete"""
