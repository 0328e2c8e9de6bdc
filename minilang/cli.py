import argparse
import json
import logging
import sys
from typing import List, Optional

from .dump import dump_ast, dump_tokens
from .exceptions import InterpreterError
from .interpreter import Interpreter
from .lexer import tokenize
from .loader import read_inputs, read_source
from .parser import parse

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = 'test.code'
DEFAULT_INPUT = 'test.input'


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='minilang',
        description='Run a minilang program: lexer -> parser -> tree-walking interpreter.',
    )
    parser.add_argument('source', nargs='?', default=DEFAULT_SOURCE,
                        help=f'program file (default: {DEFAULT_SOURCE})')
    parser.add_argument('-i', '--input', default=None,
                        help=f'input values, one integer per line (default: {DEFAULT_INPUT} if present)')
    dump_group = parser.add_mutually_exclusive_group()
    dump_group.add_argument('--tokens', action='store_true', help='print the token stream as JSON and exit')
    dump_group.add_argument('--ast', action='store_true', help='print the syntax tree as JSON and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        source = read_source(args.source)
        if args.input is None:
            inputs = read_inputs(DEFAULT_INPUT, missing_ok=True)
        else:
            inputs = read_inputs(args.input)
    except OSError as e:
        print(f'error: cannot open {e.filename!r}: {e.strerror}', file=sys.stderr)
        return 1
    except InterpreterError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    try:
        tokens = tokenize(source)
        if args.tokens:
            print(json.dumps(dump_tokens(tokens), indent=2))
            return 0
        program = parse(tokens)
        if args.ast:
            print(json.dumps(dump_ast(program), indent=2))
            return 0
        logger.debug('running %s with %d input value(s)', args.source, len(inputs))
        Interpreter(program, inputs).interpret()
    except InterpreterError as e:
        sys.stdout.flush()
        print(f'error: {e}', file=sys.stderr)
        return 1
    return 0
