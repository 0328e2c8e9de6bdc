import logging
from typing import List, Optional

from .exceptions import ParserError, ErrorCode
from .lexer import Token, TokenType
from .nodes import (
    Program, Statement, Expression,
    AssignStatement, PrintStatement, InputStatement, IfStatement,
    BinaryOperation, Identifier, NumberLiteral,
)

logger = logging.getLogger(__name__)

# 二元运算符没有优先级，全部从左到右结合
binary_operator_types = (TokenType.COMPARE_OP, TokenType.CALCULATE_OP)

# 括号和 if 的最大嵌套层数
MAX_NESTING_DEPTH = 200


class Parser:
    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ParserError(error_code=ErrorCode.UNEXPECTED_TOKEN,
                              message='Token stream must end with EOF')
        self.tokens: List[Token] = tokens
        self.position: int = 0
        self.previous_token: Optional[Token] = None
        self.current_token: Token = self.tokens[0]
        self.depth: int = 0

    def enter_nesting(self):
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            token = self.current_token
            raise ParserError(
                error_code=ErrorCode.NESTING_TOO_DEEP,
                message=f'More than {MAX_NESTING_DEPTH} nested levels '
                        f'line: {token.start.lineno} column: {token.start.column}',
                location=token.start,
            )

    def error(self, expect: str, token: Token = None):
        if token is None:
            token = self.current_token
        given = 'end of file' if token.type == TokenType.EOF else repr(token.value)
        raise ParserError(
            error_code=ErrorCode.UNEXPECTED_TOKEN,
            message=f'Expect {expect}, but {given} was given '
                    f'line: {token.start.lineno} column: {token.start.column}',
            location=token.start,
        )

    def advance_token(self):
        self.previous_token = self.current_token
        if self.current_token.type != TokenType.EOF:
            self.position += 1
            self.current_token = self.tokens[self.position]

    def consume(self, token_type: TokenType) -> Token:
        if self.current_token.type != token_type:
            self.error(expect=token_type.value)
        token = self.current_token
        self.advance_token()
        return token

    def parse(self) -> Program:
        ast = Program()
        while self.current_token.type != TokenType.EOF:
            ast.body.append(self.parse_statement())
        if ast.body:
            ast.start, ast.end = ast.body[0].start, ast.body[-1].end
        logger.debug('parsed %d top-level statement(s)', len(ast.body))
        return ast

    def parse_statement(self) -> Statement:
        if self.current_token.type == TokenType.IF:
            return self.parse_if_statement()
        ast_node = self.parse_simple_statement()
        self.consume(TokenType.SEMI)
        ast_node.end = self.previous_token.end
        return ast_node

    def parse_if_statement(self) -> IfStatement:
        self.enter_nesting()
        ast_node = IfStatement(start=self.consume(TokenType.IF).start)
        ast_node.condition = self.parse_expression()
        self.consume(TokenType.THEN)
        while self.current_token.type != TokenType.ENDIF:
            if self.current_token.type == TokenType.EOF:
                self.error(expect=TokenType.ENDIF.value)
            ast_node.then_body.append(self.parse_statement())
        self.consume(TokenType.ENDIF)
        self.consume(TokenType.SEMI)
        self.depth -= 1
        ast_node.end = self.previous_token.end
        return ast_node

    def parse_simple_statement(self) -> Statement:
        if self.current_token.type == TokenType.ID:
            return self.parse_assign_statement()
        elif self.current_token.type == TokenType.PRINT:
            return self.parse_print_statement()
        elif self.current_token.type == TokenType.INPUT:
            return self.parse_input_statement()
        self.error(expect='statement')

    def parse_assign_statement(self) -> AssignStatement:
        token = self.consume(TokenType.ID)
        self.consume(TokenType.ASSIGN)
        return AssignStatement(token.value, self.parse_expression(),
                               start=token.start, end=self.previous_token.end)

    def parse_print_statement(self) -> PrintStatement:
        start = self.consume(TokenType.PRINT).start
        self.consume(TokenType.LPAREN)
        expression = self.parse_expression()
        self.consume(TokenType.RPAREN)
        return PrintStatement(expression, start=start, end=self.previous_token.end)

    def parse_input_statement(self) -> InputStatement:
        start = self.consume(TokenType.INPUT).start
        self.consume(TokenType.LPAREN)
        identifier = self.consume(TokenType.ID).value
        self.consume(TokenType.RPAREN)
        return InputStatement(identifier, start=start, end=self.previous_token.end)

    def parse_expression(self) -> Expression:
        start = self.current_token.start
        left = self.parse_primary()
        while self.current_token.type in binary_operator_types:
            operator = self.current_token.value
            self.advance_token()
            right = self.parse_primary()
            left = BinaryOperation(operator, left, right, start=start, end=self.previous_token.end)
        return left

    def parse_primary(self) -> Expression:
        token = self.current_token
        if token.type == TokenType.ID:
            self.advance_token()
            return Identifier(token.value, start=token.start, end=token.end)
        elif token.type == TokenType.NUMBER:
            self.advance_token()
            return NumberLiteral(token.value, start=token.start, end=token.end)
        elif token.type == TokenType.LPAREN:
            # 括号
            self.enter_nesting()
            self.advance_token()
            ast_node = self.parse_expression()
            self.consume(TokenType.RPAREN)
            self.depth -= 1
            return ast_node
        self.error(expect='expression')


def parse(tokens: List[Token]) -> Program:
    return Parser(tokens).parse()
