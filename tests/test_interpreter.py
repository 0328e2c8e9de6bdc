import itertools

import pytest

from minilang.exceptions import (
    ErrorCode, InputExhaustedError, InternalError, UnboundVariableError,
)
from minilang.interpreter import Interpreter, interpret, run, wrap_int32
from minilang.lexer import tokenize
from minilang.nodes import BinaryOperation, NumberLiteral, Program, PrintStatement
from minilang.parser import parse


def collect(source, inputs=()):
    printed = []
    run(source, inputs, printed.append)
    return printed


def test_assign_then_print():
    assert collect('x = 3 + 4; print(x);') == [7]


def test_no_precedence():
    assert collect('print(2 + 3 * 4);') == [20]
    assert collect('print(2 + (3 * 4));') == [14]


def test_conditional_taken():
    assert collect('x = 5; if x > 3 then print(1); endif; print(2);') == [1, 2]


def test_conditional_not_taken():
    assert collect('x = 2; if x > 3 then print(1); endif; print(2);') == [2]


def test_conditional_any_non_zero_is_true():
    assert collect('if 0 - 7 then print(1); endif;') == [1]
    assert collect('if 3 - 3 then print(1); endif;') == []


def test_untaken_branch_is_not_evaluated():
    assert collect('if 0 then print(y); input(z); endif; print(5);') == [5]


def test_nested_conditionals():
    source = 'input(a); if a > 0 then print(1); if a > 10 then print(2); endif; print(3); endif;'
    assert collect(source, [5]) == [1, 3]
    assert collect(source, [50]) == [1, 2, 3]
    assert collect(source, [0]) == []


def test_input_order():
    assert collect('input(a); input(b); print(a - b);', [10, 3]) == [7]


def test_input_exhausted():
    with pytest.raises(InputExhaustedError) as exc_info:
        collect('input(a); input(b); print(a - b);', [10])
    assert exc_info.value.error_code == ErrorCode.INPUT_EXHAUSTED
    assert exc_info.value.identifier == 'b'
    assert exc_info.value.consumed == 1


def test_extra_inputs_are_ignored():
    interpreter = Interpreter(parse(tokenize('input(a); print(a);')), [4, 5, 6], lambda value: None)
    assert interpreter.interpret() == [4]
    assert interpreter.input_index == 1


def test_unbound_variable():
    with pytest.raises(UnboundVariableError) as exc_info:
        collect('print(y);')
    assert exc_info.value.name == 'y'
    assert exc_info.value.error_code == ErrorCode.UNBOUND_VARIABLE
    assert (exc_info.value.lineno, exc_info.value.column) == (1, 7)


def test_self_reference_before_binding_is_unbound():
    with pytest.raises(UnboundVariableError):
        collect('x = x + 1;')


def test_output_before_failure_is_kept():
    printed = []
    with pytest.raises(UnboundVariableError):
        run('print(1); print(2); print(nope); print(3);', (), printed.append)
    assert printed == [1, 2]


def test_reassignment_overwrites():
    assert collect('x = 1; x = x + 1; x = x * 10; print(x);') == [20]


def test_variables_and_cursor_are_per_run():
    program = parse(tokenize('input(a); print(a);'))
    first = Interpreter(program, [1], lambda value: None)
    second = Interpreter(program, [2], lambda value: None)
    assert first.interpret() == [1]
    assert second.interpret() == [2]
    assert first.variables == {'a': 1}
    assert second.variables == {'a': 2}


def test_deterministic_without_inputs():
    source = 'a = 3; b = a * a - 1; if b >= 8 then print(b); endif; print(b == 8);'
    assert collect(source) == collect(source) == [8, 1]


def test_interpret_function_returns_printed_values():
    printed = []
    assert interpret(parse(tokenize('print(1); print(2);')), (), printed.append) == [1, 2]
    assert printed == [1, 2]


def test_default_output_is_stdout(capsys):
    run('print(42); print(0 - 1);')
    assert capsys.readouterr().out == '42\n-1\n'


@pytest.mark.parametrize('operator, expected', [
    ('==', lambda a, b: a == b),
    ('!=', lambda a, b: a != b),
    ('>', lambda a, b: a > b),
    ('<', lambda a, b: a < b),
    ('>=', lambda a, b: a >= b),
    ('<=', lambda a, b: a <= b),
])
def test_comparisons_yield_zero_or_one(operator, expected):
    samples = [-3, 0, 1, 7]
    for a, b in itertools.product(samples, repeat=2):
        result = collect(f'input(a); input(b); print(a {operator} b);', [a, b])
        assert result == [1 if expected(a, b) else 0]


def test_arithmetic_wraps_to_32_bits():
    assert collect('print(2147483647 + 1);') == [-2147483648]
    assert collect('print(0 - 2147483647 - 2);') == [2147483647]
    assert collect('print(65536 * 65536);') == [0]


def test_input_values_wrap_to_32_bits():
    assert collect('input(a); print(a);', [2 ** 32 + 5]) == [5]


def test_wrap_int32():
    assert wrap_int32(0) == 0
    assert wrap_int32(-1) == -1
    assert wrap_int32(2 ** 31) == -2 ** 31
    assert wrap_int32(-2 ** 31 - 1) == 2 ** 31 - 1


def test_unknown_operator_is_internal_error():
    program = Program([PrintStatement(BinaryOperation('/', NumberLiteral('4'), NumberLiteral('2')))])
    with pytest.raises(InternalError) as exc_info:
        interpret(program, (), lambda value: None)
    assert exc_info.value.error_code == ErrorCode.UNKNOWN_OPERATOR


def test_unknown_node_is_internal_error():
    with pytest.raises(InternalError) as exc_info:
        interpret(Program([NumberLiteral('1')]), (), lambda value: None)
    assert exc_info.value.error_code == ErrorCode.UNEXPECTED_AST_NODE
    with pytest.raises(InternalError):
        interpret(Program([PrintStatement(None)]), (), lambda value: None)


def test_program_tree_is_not_mutated():
    program = parse(tokenize('x = 1; if x then x = x + 1; endif; print(x);'))
    before = repr(program)
    interpret(program, (), lambda value: None)
    assert repr(program) == before


def test_long_flat_expression():
    assert collect('print(' + ' + '.join(['1'] * 1500) + ');') == [1500]
    assert collect('print(2000' + ' - 1' * 1500 + ');') == [500]


def test_long_flat_expression_keeps_left_to_right_order():
    # ((((1+1)*2)+1)*2)... 不按优先级
    assert collect('print(1' + ' + 1 * 2' * 20 + ');') == [3 * 2 ** 20 - 2]


def test_long_expression_with_comparison_in_condition():
    source = 'input(a); if a' + ' + 1' * 1200 + ' > 1200 then print(1); endif;'
    assert collect(source, [1]) == [1]
    assert collect(source, [0]) == []


def test_right_nested_parentheses():
    assert collect('print(' + '1 + (' * 150 + '1' + ')' * 150 + ');') == [151]
