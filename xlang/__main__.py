"""CLI entry point for the xlang interpreter.

Usage:
    python -m xlang [-v|-vv|-vvv] <program_file>
    python -m xlang --tokens <program_file>
    python -m xlang --emit-ast <program_file>
    python -m xlang [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --tokens      Print the token stream of the given file, one token per line
  --emit-ast    Parse the given file and emit an AST JSON file next to it
  --ast         Execute a previously emitted AST JSON file

The value of the program's last statement is printed to stdout, the
execution time to stderr. Debug information is written to `debug.txt` in
the current directory when verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from .ast_json import program_from_obj, program_to_obj
from .errors import ScriptError
from .interpreter import Interpreter, parse_program
from .lexer import lex
from .types import to_string


def read_source(path: str) -> str:
    program_file = Path(path)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def execute(statements: List[Any], debug_level: int) -> None:
    interpreter = Interpreter(statements, debug_level=debug_level)
    result = interpreter.run()
    print(to_string(result))
    print(f"Execution time: {interpreter.elapsed_ms:.3f}ms", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog='xlang', description="xlang language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--tokens', metavar='SOURCE_FILE', help='print the token stream of the given file')
    group.add_argument('--emit-ast', metavar='SOURCE_FILE', help='emit AST JSON for the given file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='xlang program file to execute')
    args = parser.parse_args(argv)

    try:
        if args.tokens:
            for token in lex(read_source(args.tokens)):
                print(repr(token))
            return

        if args.emit_ast:
            program_file = Path(args.emit_ast)
            statements = parse_program(read_source(args.emit_ast))
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            with open(ast_path, 'r', encoding='utf-8') as f:
                statements = program_from_obj(json.load(f))
            execute(statements, args.v)
            return

        if not args.program:
            parser.error('missing program file; or use --tokens/--emit-ast/--ast')
        execute(parse_program(read_source(args.program)), args.v)
    except ScriptError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
