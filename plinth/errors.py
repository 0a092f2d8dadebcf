from dataclasses import dataclass
from typing import Optional, Union

from plinth.lexer import Token


@dataclass(frozen=True)
class TypeMismatch:
    """An operator was applied to operands of the wrong runtime type."""
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"TypeMismatch: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class UnknownMethod:
    name: str

    def __str__(self) -> str:
        return f"UnknownMethod: {self.name}"


@dataclass(frozen=True)
class DivisionByZero:
    operator: str

    def __str__(self) -> str:
        return f"DivisionByZero: integer {'division' if self.operator == '/' else 'modulo'} by zero"


RuntimeErrorVal = Union[TypeMismatch, UnknownMethod, DivisionByZero]


class PlinthError(Exception):
    """Exception type used to propagate Plinth runtime errors."""
    def __init__(self, err: RuntimeErrorVal):
        super().__init__(f"PlinthError: {err}")
        self.err = err


class ParseError(Exception):
    """Malformed syntax. Carries the token the parser could not accept."""
    def __init__(self, token: Token, expected: Optional[str] = None):
        where = f"{token.line}:{token.column}"
        if token.kind == 'EOF':
            got = 'end of input'
        elif token.kind == 'EOL':
            got = 'end of line'
        else:
            got = f"{token.kind} {token.text!r}"
        if expected:
            message = f"expected {expected} at {where}, got {got}"
        else:
            message = f"unexpected token {got} at {where}"
        super().__init__(message)
        self.token = token
        self.expected = expected
