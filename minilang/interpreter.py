import logging
from typing import Callable, Dict, Iterable, List, Optional

from .exceptions import (
    ErrorCode, InternalError, UnboundVariableError, InputExhaustedError,
)
from .lexer import tokenize
from .nodes import (
    Program, Statement, Expression,
    AssignStatement, PrintStatement, InputStatement, IfStatement,
    BinaryOperation, Identifier, NumberLiteral,
)
from .parser import parse

logger = logging.getLogger(__name__)


def wrap_int32(value: int) -> int:
    # 32 位有符号整数回绕
    return (value + 2 ** 31) % 2 ** 32 - 2 ** 31


CALCULATE_OPERATORS: Dict[str, Callable[[int, int], int]] = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
}
COMPARE_OPERATORS: Dict[str, Callable[[int, int], bool]] = {
    '>': lambda a, b: a > b,
    '<': lambda a, b: a < b,
    '==': lambda a, b: a == b,
    '!=': lambda a, b: a != b,
    '>=': lambda a, b: a >= b,
    '<=': lambda a, b: a <= b,
}


def print_output(value: int):
    print(value)


class Interpreter:
    def __init__(self,
                 program: Program,
                 inputs: Iterable[int] = (),
                 output: Optional[Callable[[int], None]] = None):
        self.program: Program = program
        self.inputs: List[int] = list(inputs)
        self.input_index: int = 0
        self.variables: Dict[str, int] = dict()
        self.output: Callable[[int], None] = output if output is not None else print_output
        self.printed: List[int] = list()

    def interpret(self) -> List[int]:
        self.execute_block(self.program.body)
        logger.debug('printed %d value(s), consumed %d of %d input(s)',
                     len(self.printed), self.input_index, len(self.inputs))
        return self.printed

    def execute_block(self, statements: List[Statement]):
        for statement in statements:
            self.execute(statement)

    def execute(self, statement: Statement):
        if isinstance(statement, AssignStatement):
            self.variables[statement.identifier] = self.evaluate(statement.expression)
        elif isinstance(statement, PrintStatement):
            value = self.evaluate(statement.expression)
            self.printed.append(value)
            self.output(value)
        elif isinstance(statement, InputStatement):
            if self.input_index >= len(self.inputs):
                raise InputExhaustedError(statement.identifier, self.input_index, statement.start)
            self.variables[statement.identifier] = wrap_int32(self.inputs[self.input_index])
            self.input_index += 1
        elif isinstance(statement, IfStatement):
            if self.evaluate(statement.condition) != 0:
                self.execute_block(statement.then_body)
        else:
            raise InternalError(ErrorCode.UNEXPECTED_AST_NODE, f'Unexpected statement {statement!r}')

    @staticmethod
    def apply_operator(node: BinaryOperation, left: int, right: int) -> int:
        if node.operator in CALCULATE_OPERATORS:
            return wrap_int32(CALCULATE_OPERATORS[node.operator](left, right))
        elif node.operator in COMPARE_OPERATORS:
            return 1 if COMPARE_OPERATORS[node.operator](left, right) else 0
        raise InternalError(ErrorCode.UNKNOWN_OPERATOR,
                            f'Unexpected binary operator {node.operator!r}', node.start)

    def evaluate(self, expression: Expression) -> int:
        if isinstance(expression, BinaryOperation):
            # 沿左脊迭代求值
            chain = []
            while isinstance(expression, BinaryOperation):
                chain.append(expression)
                expression = expression.left
            value = self.evaluate(expression)
            for node in reversed(chain):
                value = self.apply_operator(node, value, self.evaluate(node.right))
            return value
        elif isinstance(expression, Identifier):
            try:
                return self.variables[expression.name]
            except KeyError:
                raise UnboundVariableError(expression.name, expression.start) from None
        elif isinstance(expression, NumberLiteral):
            return int(expression.text)
        raise InternalError(ErrorCode.UNEXPECTED_AST_NODE, f'Unexpected expression {expression!r}')


def interpret(program: Program,
              inputs: Iterable[int] = (),
              output: Optional[Callable[[int], None]] = None) -> List[int]:
    return Interpreter(program, inputs, output).interpret()


def run(source: str,
        inputs: Iterable[int] = (),
        output: Optional[Callable[[int], None]] = None) -> List[int]:
    tokens = tokenize(source)
    logger.debug('tokenized %d token(s)', len(tokens))
    return interpret(parse(tokens), inputs, output)
