"""Parser and interpreter for the Plinth language.

This module holds the Plinth front end and evaluator: a
recursive-descent parser that turns the token list produced by
`plinth.lexer.tokenize` into an AST, and a tree-walking interpreter
that runs the statements of a program against a flat environment.

Expressions have a single precedence level and group to the right:
`20 - 3 - 2` is `20 - (3 - 2)`. Parenthesize to get any other grouping.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from .ast import (
    Program, ConstBinding, BuiltinCall, EmptyStmt,
    BinaryOp, UnaryOp, Literal, Ident, Node
)
from .builtin_function import BuiltinFunction
from .environment import Environment
from .errors import (
    ParseError, PlinthError, TypeMismatch, UnknownMethod, DivisionByZero,
)
from .lexer import Token, tokenize
from .types import (
    UNDEFINED, fits_i32, wrap_i32, trunc_div, trunc_mod, to_string, type_name,
)

###############################################################################
# Parser implementation
###############################################################################

BINARY_OPS = {
    'PLUS': '+',
    'MINUS': '-',
    'ASTERISK': '*',
    'SLASH': '/',
    'PERCENT': '%',
    'EQ': '==',
    'NE': '!=',
    'GT': '>',
    'LT': '<',
    'GE': '>=',
    'LE': '<=',
    'AND': 'and',
    'OR': 'or',
    'XOR': 'xor',
}

UNARY_OPS = {
    'MINUS': '-',
    'PLUS': '+',
    'NOT': 'not',
}

STATEMENT_END = ('EOL', 'EOF')


class Parser:
    """Recursive-descent parser with a two-token window.

    `current` is the token being examined and `peek` the one after it.
    `parse_primary` leaves `current` on the last token of the primary
    and its caller advances past it. `parse_expression`, `parse_binding`
    and `parse_print` leave `current` on the first token after what they
    parsed, which is where the statement terminator is checked.
    """
    def __init__(self, tokens: List[Token], debug: Optional[Callable[[str], None]] = None):
        self.tokens = iter(tokens)
        self.debug = debug
        self.eof = Token('EOF', '')
        self.current = self.pull()
        self.peek = self.pull()

    def trace(self, msg: str):
        if self.debug is not None:
            self.debug(msg)

    def pull(self) -> Token:
        token = next(self.tokens, None)
        if token is None:
            # keep yielding the terminal token once the list is exhausted
            return self.eof
        if token.kind == 'EOF':
            self.eof = token
        return token

    def advance(self):
        self.current = self.peek
        self.peek = self.pull()
        self.trace(f"advance: {self.current.kind} {self.current.text!r}")

    def parse_program(self) -> Program:
        statements: List[Node] = []
        while self.current.kind != 'EOF':
            stmt = self.parse_statement()
            statements.append(stmt)
            if self.current.kind not in STATEMENT_END:
                raise ParseError(self.current)
            self.advance()
        return Program(statements)

    def parse_statement(self) -> Node:
        token = self.current
        self.trace(f"statement at {token.line}:{token.column}")
        if token.kind == 'CONST':
            self.advance()
            return self.parse_binding()
        # rebinding without the keyword
        if token.kind == 'IDENT' and self.peek.kind == 'ASSIGN':
            return self.parse_binding()
        if token.kind == 'PRINT':
            return self.parse_print()
        # blank line or an unrecognized start; the caller checks the terminator
        return EmptyStmt()

    def parse_binding(self) -> ConstBinding:
        name_token = self.current
        if name_token.kind != 'IDENT':
            raise ParseError(name_token, 'identifier')
        if self.peek.kind != 'ASSIGN':
            raise ParseError(self.peek, "'='")
        self.advance()
        self.advance()
        expr = self.parse_expression()
        if self.current.kind not in STATEMENT_END:
            raise ParseError(self.current)
        return ConstBinding(name_token.text, expr)

    def parse_print(self) -> BuiltinCall:
        self.advance()
        args = [self.parse_expression()]
        while self.current.kind == 'COMMA':
            self.advance()
            args.append(self.parse_expression())
        return BuiltinCall('print', args)

    def parse_expression(self) -> Node:
        left = self.parse_primary()
        self.advance()
        op = BINARY_OPS.get(self.current.kind)
        if op is None:
            return left
        self.advance()
        right = self.parse_expression()
        return BinaryOp(op, left, right)

    def parse_primary(self) -> Node:
        token = self.current
        if token.kind == 'IDENT':
            return Ident(token.text)
        if token.kind == 'INT':
            return Literal(self.parse_integer(token), 'Integer')
        if token.kind in ('TRUE', 'FALSE'):
            return Literal(token.kind == 'TRUE', 'Boolean')
        if token.kind == 'LPAREN':
            self.advance()
            expr = self.parse_expression()
            if self.current.kind != 'RPAREN':
                raise ParseError(self.current, "')'")
            return expr
        if token.kind in UNARY_OPS:
            self.advance()
            return UnaryOp(UNARY_OPS[token.kind], self.parse_primary())
        raise ParseError(token)

    def parse_integer(self, token: Token) -> int:
        # The tokenizer only hands out INT tokens that fit in 32 bits;
        # anything else here is a broken token stream, not bad syntax.
        value = int(token.text)
        if not fits_i32(value):
            raise ValueError(f"integer literal {token.text} out of 32-bit range")
        return value


def parse_program(source: str, debug: Optional[Callable[[str], None]] = None) -> Program:
    """Parse the given source code into a Program AST."""
    parser = Parser(tokenize(source), debug=debug)
    return parser.parse_program()


###############################################################################
# Interpreter implementation
###############################################################################


class Interpreter:
    """Core interpreter that executes Plinth AST.

    One interpreter owns one environment, so consecutive `run` calls
    see each other's bindings (the REPL relies on this) while separate
    interpreters never share state.

    With `legacy_operators` set, `<=` and `>=` are swapped, `xor`
    behaves like `or`, and a binary operator applied to the wrong pair of
    matching types reports its `TypeMismatch` the legacy way round, for
    programs that depend on those legacy results.
    """
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 legacy_operators: bool = False):
        self.global_env = Environment()
        self.builtins: Dict[str, BuiltinFunction] = {}
        self.debug_level = debug_level
        self.legacy_operators = legacy_operators
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.load_builtins()

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + "\n")
                self.debug_fp.flush()

    def close(self):
        # tracing stops for good once the debug file is closed
        self.debug_level = 0
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def load_builtins(self):
        def std_print(args: Iterator[Any]) -> Any:
            for value in args:
                print(to_string(value), flush=True)
            return UNDEFINED

        self.builtins['print'] = BuiltinFunction('print', std_print)

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> Any:
        if env is None:
            env = self.global_env
        result = UNDEFINED
        for stmt in program.body:
            result = self.execute(stmt, env)
            if self.debug_level >= 1:
                self.debug(f"{type(stmt).__name__} -> {to_string(result)}")
        return result

    def execute(self, node: Node, env: Environment) -> Any:
        if isinstance(node, ConstBinding):
            value = self.evaluate(node.expr, env)
            env.set(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"bind {node.name}: {type_name(value)} = {to_string(value)}")
            return value
        if isinstance(node, BuiltinCall):
            builtin = self.builtins.get(node.name)
            if builtin is None:
                raise PlinthError(UnknownMethod(node.name))
            args = (self.evaluate(arg, env) for arg in node.args)
            return builtin.fn(args)
        if isinstance(node, EmptyStmt):
            return UNDEFINED
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Node, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Ident):
            value = env.get(node.name)
            if self.debug_level >= 2:
                self.debug(f"lookup {node.name}: {'unbound' if value is None else to_string(value)}")
            return UNDEFINED if value is None else value
        if isinstance(node, UnaryOp):
            operand = self.evaluate(node.operand, env)
            return self.apply_unary_op(node.op, operand)
        if isinstance(node, BinaryOp):
            # both sides are evaluated, left first; no short-circuit
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_unary_op(self, op: str, operand: Any) -> Any:
        if op in ('-', '+'):
            if type_name(operand) != 'Integer':
                raise PlinthError(TypeMismatch('Integer', type_name(operand)))
            return wrap_i32(-operand) if op == '-' else operand
        if op == 'not':
            if type_name(operand) != 'Boolean':
                raise PlinthError(TypeMismatch('Boolean', type_name(operand)))
            return not operand
        raise NotImplementedError(f"unknown unary operator {op}")

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        left_type = type_name(a)
        right_type = type_name(b)
        if left_type == 'Integer' and right_type == 'Integer':
            return self.apply_integer_op(op, a, b)
        if left_type == 'Boolean' and right_type == 'Boolean':
            return self.apply_boolean_op(op, a, b)
        raise PlinthError(TypeMismatch(left_type, right_type))

    def apply_integer_op(self, op: str, a: int, b: int) -> Any:
        if op == '+':
            return wrap_i32(a + b)
        if op == '-':
            return wrap_i32(a - b)
        if op == '*':
            return wrap_i32(a * b)
        if op in ('/', '%'):
            if b == 0:
                raise PlinthError(DivisionByZero(op))
            if op == '/':
                return wrap_i32(trunc_div(a, b))
            return trunc_mod(a, b)
        if op == '==':
            return a == b
        if op == '!=':
            return a != b
        if op == '>':
            return a > b
        if op == '<':
            return a < b
        if op == '<=':
            return a >= b if self.legacy_operators else a <= b
        if op == '>=':
            return a <= b if self.legacy_operators else a >= b
        if op in ('and', 'or', 'xor'):
            if self.legacy_operators:
                raise PlinthError(TypeMismatch('Integer', 'Boolean'))
            raise PlinthError(TypeMismatch('Boolean', 'Integer'))
        raise NotImplementedError(f"unknown binary operator {op}")

    def apply_boolean_op(self, op: str, a: bool, b: bool) -> bool:
        if op == 'and':
            return a and b
        if op == 'or':
            return a or b
        if op == 'xor':
            return (a or b) if self.legacy_operators else a != b
        if op in BINARY_OPS.values():
            if self.legacy_operators:
                raise PlinthError(TypeMismatch('Boolean', 'Integer'))
            raise PlinthError(TypeMismatch('Integer', 'Boolean'))
        raise NotImplementedError(f"unknown binary operator {op}")


def run_program(source: str, debug_level: int = 0, legacy_operators: bool = False) -> Any:
    """Convenience function to parse and run a Plinth program from a source string.

    Returns the value of the last statement.
    """
    ast_program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level, legacy_operators=legacy_operators)
    try:
        return interpreter.run(ast_program)
    finally:
        interpreter.close()
