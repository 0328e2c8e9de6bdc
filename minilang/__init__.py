from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, parse
from .interpreter import Interpreter, interpret, run
from .dump import dump_ast, dump_tokens
from .exceptions import (
    ErrorCode, InterpreterError, LexicalError, ParserError,
    UnboundVariableError, InputExhaustedError, InternalError, InputFormatError,
)
