from typing import List, Union

from .lexer import Location


class ASTNode:
    def __init__(self, start: Location = None, end: Location = None):
        self.start: Location = start
        self.end: Location = end


class NumberLiteral(ASTNode):
    def __init__(self, text: str = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.text: str = text

    def __repr__(self):
        return self.text


class Identifier(ASTNode):
    def __init__(self, name: str = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.name: str = name

    def __repr__(self):
        return self.name


class BinaryOperation(ASTNode):
    def __init__(self, operator: str = None, left: 'Expression' = None, right: 'Expression' = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.operator: str = operator
        self.left: Expression = left
        self.right: Expression = right

    def __repr__(self):
        return f'({self.left!r}{self.operator}{self.right!r})'


Expression = Union[NumberLiteral, Identifier, BinaryOperation]


class AssignStatement(ASTNode):
    def __init__(self, identifier: str = None, expression: Expression = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.identifier: str = identifier
        self.expression: Expression = expression

    def __repr__(self):
        return f'{self.identifier}={self.expression!r};'


class PrintStatement(ASTNode):
    def __init__(self, expression: Expression = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.expression: Expression = expression

    def __repr__(self):
        return f'print({self.expression!r});'


class InputStatement(ASTNode):
    def __init__(self, identifier: str = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.identifier: str = identifier

    def __repr__(self):
        return f'input({self.identifier});'


class IfStatement(ASTNode):
    def __init__(self, condition: Expression = None, then_body: List['Statement'] = None,
                 start: Location = None, end: Location = None):
        super().__init__(start=start, end=end)
        self.condition: Expression = condition
        if then_body is None:
            then_body = list()
        self.then_body: List[Statement] = then_body

    def __repr__(self):
        return f'if {self.condition!r} then ' + ''.join(map(repr, self.then_body)) + 'endif;'


Statement = Union[AssignStatement, PrintStatement, InputStatement, IfStatement]


class Program(ASTNode):
    def __init__(self, body: List[Statement] = None):
        super().__init__(start=None, end=None)
        if body is None:
            body = list()
        self.body: List[Statement] = body

    def __repr__(self):
        return ''.join(map(repr, self.body))
