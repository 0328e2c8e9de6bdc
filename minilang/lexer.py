from enum import Enum
from typing import List, Optional

from .exceptions import LexicalError, ErrorCode

INT_MAX = 2 ** 31 - 1


class Location:
    def __init__(self, lineno: int, column: int, offset: int):
        self.lineno = lineno
        self.column = column
        self.offset = offset

    def __repr__(self):
        return f'{self.lineno}:{self.column}'

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return (self.lineno, self.column, self.offset) == (other.lineno, other.column, other.offset)


class TokenType(Enum):
    # reserved word
    PRINT = 'print'
    INPUT = 'input'
    IF = 'if'
    THEN = 'then'
    ENDIF = 'endif'

    # symbols
    ASSIGN = '='
    SEMI = ';'
    LPAREN = '('
    RPAREN = ')'

    # operators, the lexeme is kept in Token.value
    COMPARE_OP = 'COMPARE_OP'
    CALCULATE_OP = 'CALCULATE_OP'

    # other
    NUMBER = 'NUMBER'
    ID = 'ID'
    EOF = 'EOF'

    @classmethod
    def reserved_word(cls):
        return {
            token_type.value: token_type
            for token_type in (cls.PRINT, cls.INPUT, cls.IF, cls.THEN, cls.ENDIF)
        }


SINGLE_CHARACTER_SYMBOLS = {
    ';': TokenType.SEMI,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '+': TokenType.CALCULATE_OP,
    '-': TokenType.CALCULATE_OP,
    '*': TokenType.CALCULATE_OP,
    '>': TokenType.COMPARE_OP,
    '<': TokenType.COMPARE_OP,
}

DOUBLE_CHARACTER_SYMBOLS = {
    '==': TokenType.COMPARE_OP,
    '!=': TokenType.COMPARE_OP,
    '>=': TokenType.COMPARE_OP,
    '<=': TokenType.COMPARE_OP,
}


def is_letter(char: Optional[str]) -> bool:
    return char is not None and char.isascii() and char.isalpha()


def is_digit(char: Optional[str]) -> bool:
    return char is not None and char.isascii() and char.isdigit()


class Token:
    def __init__(self, token_type: TokenType, value: str, start: Location, end: Location):
        self.type = token_type
        self.value = value
        self.start = start
        self.end = end

    def __repr__(self):
        return f'Token({self.type}, {repr(self.value)}, ' \
               f'position={self.start.lineno}:{self.start.column} to {self.end.lineno}:{self.end.column})'


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.current_char = self.text[0] if self.text else None
        self.next_char = self.text[1] if len(self.text) > 1 else None
        self.lineno = 1
        self.column = 1

    def location(self):
        return Location(self.lineno, self.column, self.position)

    def advance_position(self):
        if self.current_char == '\n':
            self.lineno += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        self.current_char = self.text[self.position] if self.position < len(self.text) else None
        self.next_char = self.text[self.position + 1] if self.position + 1 < len(self.text) else None

    def error(self, error_code: ErrorCode, message: str, location: Location = None):
        if location is None:
            location = self.location()
        raise LexicalError(error_code=error_code,
                           message=f'{message} line: {location.lineno} column: {location.column}',
                           location=location)

    def get_next_token(self) -> Token:
        while self.current_char is not None:
            start = self.location()
            if self.current_char.isspace():
                # 跳过空白
                while self.current_char is not None and self.current_char.isspace():
                    self.advance_position()
                continue
            elif is_digit(self.current_char):
                # 数字
                value = ''
                while is_digit(self.current_char) or self.current_char == '.':
                    value += self.current_char
                    self.advance_position()
                if '.' in value:
                    self.error(ErrorCode.INVALID_NUMBER, f"'{value}' is not an integer literal", start)
                if int(value) > INT_MAX:
                    self.error(ErrorCode.INVALID_NUMBER, f"'{value}' does not fit in 32 bits", start)
                return Token(TokenType.NUMBER, value, start, self.location())
            elif is_letter(self.current_char):
                # 关键字或ID
                value = ''
                while is_letter(self.current_char) or is_digit(self.current_char):
                    value += self.current_char
                    self.advance_position()
                token_type = TokenType.reserved_word().get(value, TokenType.ID)
                return Token(token_type, value, start, self.location())
            else:
                # 符号
                if self.next_char is not None:
                    value = self.current_char + self.next_char
                    token_type = DOUBLE_CHARACTER_SYMBOLS.get(value)
                    if token_type is not None:
                        self.advance_position()
                        self.advance_position()
                        return Token(token_type, value, start, self.location())
                value = self.current_char
                if value == '=':
                    self.advance_position()
                    return Token(TokenType.ASSIGN, value, start, self.location())
                token_type = SINGLE_CHARACTER_SYMBOLS.get(value)
                if token_type is None:
                    self.error(ErrorCode.UNEXPECTED_CHARACTER, f'Lexer error on {value!r}', start)
                self.advance_position()
                return Token(token_type, value, start, self.location())

        location = self.location()
        return Token(TokenType.EOF, '', location, location)

    def tokenize(self) -> List[Token]:
        tokens = [self.get_next_token()]
        while tokens[-1].type != TokenType.EOF:
            tokens.append(self.get_next_token())
        return tokens


def tokenize(source: str) -> List[Token]:
    return Lexer(source).tokenize()
