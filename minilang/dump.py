from typing import Dict, List, Union

from .exceptions import ErrorCode, InternalError
from .lexer import Token
from .nodes import (
    ASTNode, Program,
    AssignStatement, PrintStatement, InputStatement, IfStatement,
    BinaryOperation, Identifier, NumberLiteral,
)


def dump_tokens(tokens: List[Token]) -> List[List[str]]:
    return list(map(lambda x: [x.type.name, x.value], tokens))


def dump_ast(node: ASTNode) -> Dict[str, Union[str, list, dict]]:
    if isinstance(node, Program):
        return {'type': 'Program', 'body': list(map(dump_ast, node.body))}
    elif isinstance(node, AssignStatement):
        return {'type': 'AssignStatement', 'identifier': node.identifier, 'expression': dump_ast(node.expression)}
    elif isinstance(node, PrintStatement):
        return {'type': 'PrintStatement', 'expression': dump_ast(node.expression)}
    elif isinstance(node, InputStatement):
        return {'type': 'InputStatement', 'identifier': node.identifier}
    elif isinstance(node, IfStatement):
        return {
            'type': 'IfStatement',
            'condition': dump_ast(node.condition),
            'then_body': list(map(dump_ast, node.then_body)),
        }
    elif isinstance(node, BinaryOperation):
        return {
            'type': 'BinaryOperation',
            'operator': node.operator,
            'left': dump_ast(node.left),
            'right': dump_ast(node.right),
        }
    elif isinstance(node, Identifier):
        return {'type': 'Identifier', 'name': node.name}
    elif isinstance(node, NumberLiteral):
        return {'type': 'NumberLiteral', 'text': node.text}
    raise InternalError(ErrorCode.UNEXPECTED_AST_NODE, f'Unexpected ast node {type(node).__name__}')
