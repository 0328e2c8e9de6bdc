from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    # LexicalError
    UNEXPECTED_CHARACTER = 'Unexpected character'
    INVALID_NUMBER = 'Invalid number'

    # ParserError
    UNEXPECTED_TOKEN = 'Unexpected token'
    NESTING_TOO_DEEP = 'Nesting too deep'

    # runtime
    UNBOUND_VARIABLE = 'Unbound variable'
    INPUT_EXHAUSTED = 'Input exhausted'

    # InternalError
    UNEXPECTED_AST_NODE = 'Unexpected ast node'
    UNKNOWN_OPERATOR = 'Unknown operator'

    # InputFormatError
    INVALID_INPUT_VALUE = 'Invalid input value'


class InterpreterError(Exception):
    def __init__(self, error_code: ErrorCode, message: str = '', location=None):
        self.error_code: ErrorCode = error_code
        self.message: str = message
        self.location = location
        # 在message前添加异常类名
        super().__init__(f'{self.__class__.__name__}: {error_code.value}: {message}')

    @property
    def lineno(self) -> Optional[int]:
        return self.location.lineno if self.location is not None else None

    @property
    def column(self) -> Optional[int]:
        return self.location.column if self.location is not None else None


class LexicalError(InterpreterError):
    pass


class ParserError(InterpreterError):
    pass


class UnboundVariableError(InterpreterError):
    def __init__(self, name: str, location=None):
        self.name: str = name
        super().__init__(ErrorCode.UNBOUND_VARIABLE, f"'{name}' is referenced before assignment", location)


class InputExhaustedError(InterpreterError):
    def __init__(self, identifier: str, consumed: int, location=None):
        self.identifier: str = identifier
        self.consumed: int = consumed
        super().__init__(ErrorCode.INPUT_EXHAUSTED,
                         f"no value left for input({identifier}), {consumed} value(s) already consumed",
                         location)


class InternalError(InterpreterError):
    pass


class InputFormatError(InterpreterError):
    def __init__(self, text: str, lineno: int):
        self.text: str = text
        self.line: int = lineno
        super().__init__(ErrorCode.INVALID_INPUT_VALUE, f'{text!r} on line {lineno} is not an integer')
