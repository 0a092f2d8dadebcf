"""CLI entry point for the Plinth interpreter.

Usage:
    python -m plinth [-v|-vv|-vvv] [--legacy-operators] <program_file>
    python -m plinth [-v...] --emit-ast <program_file>
    python -m plinth [-v...] --ast <ast_json_file>
    python -m plinth                      (interactive session)

Options:
  -v                  Increase debug verbosity (can be repeated)
  --emit-ast          Parse the given .plinth file and emit an AST JSON file
  --ast               Execute a previously emitted AST JSON file
  --legacy-operators  Swap <= and >= and evaluate xor as or (legacy results)

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Level 3 also traces the parser.
"""

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .interpreter import parse_program, Interpreter
from .ast_json import ast_to_obj, ast_from_obj
from .errors import ParseError, PlinthError
from .types import UndefinedVal, to_string


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parser_trace(interpreter: Interpreter):
    return interpreter.debug if interpreter.debug_level >= 3 else None


def run_repl(interpreter: Interpreter, stdin=None) -> None:
    """Read-eval-print loop over one persistent interpreter.

    Errors are reported and the session continues; bindings made before
    the error stay in place.
    """
    stdin = stdin or sys.stdin
    interactive = stdin.isatty()
    if interactive:
        print(f"Plinth {__version__} - Type 'exit' or Ctrl+D to quit")
    while True:
        if interactive:
            print('>>> ', end='', flush=True)
        line = stdin.readline()
        if not line:
            if interactive:
                print()
            break
        if line.strip() == 'exit':
            break
        if not line.strip():
            continue
        try:
            result = interpreter.run(parse_program(line, debug=parser_trace(interpreter)))
        except ParseError as e:
            print(f"Parse error: {e}")
            continue
        except PlinthError as e:
            print(f"Runtime error: {e.err}")
            continue
        if not isinstance(result, UndefinedVal):
            print(to_string(result))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='plinth', description="Plinth language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--legacy-operators', action='store_true',
                        help='swap <= and >= and treat xor as or, for legacy results')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PLINTH_FILE', help='emit AST JSON for the given .plinth file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Plinth program file (.plinth) to execute')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            ast_program = parse_program(source)
        except ParseError as e:
            print(f"Parse error: {e}", file=sys.stderr)
            sys.exit(1)
        obj = ast_to_obj(ast_program)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(debug_level=args.v, legacy_operators=args.legacy_operators)
    try:
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            with open(ast_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            ast_program = ast_from_obj(data)
        elif args.program:
            source = read_source(Path(args.program))
            try:
                ast_program = parse_program(source, debug=parser_trace(interpreter))
            except ParseError as e:
                print(f"Parse error: {e}", file=sys.stderr)
                sys.exit(1)
        else:
            run_repl(interpreter)
            return

        try:
            interpreter.run(ast_program)
        except PlinthError as e:
            print(f"Runtime error: {e.err}", file=sys.stderr)
            sys.exit(1)
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
