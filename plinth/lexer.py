"""Tokenizer for the Plinth language.

The token set is declared as a Lark grammar and split by Lark's basic
lexer. The grammar's only rule accepts any sequence of lexemes; it
exists so that every terminal is kept when the grammar is compiled. The
parser proper is the hand-written recursive-descent `Parser` in
`plinth.interpreter`, which reads the list returned by `tokenize`.

Newlines are significant (each statement occupies one line) and are
emitted as `EOL` tokens. Inline whitespace and `#` comments are dropped.
Keywords are told apart from identifiers by Lark itself. Characters
that no terminal accepts become `ILLEGAL` tokens so that the parser can
report them with a position instead of the lexer aborting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from lark import Lark

from .types import fits_i32


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.line}:{self.column})"


PLINTH_TOKENS = r"""
    start: _lexeme*
    _lexeme: CONST | PRINT | TRUE | FALSE | AND | OR | XOR | NOT
           | IDENT | INT
           | EQ | NE | GE | LE | GT | LT | ASSIGN
           | PLUS | MINUS | ASTERISK | SLASH | PERCENT
           | LPAREN | RPAREN | COMMA
           | EOL | ILLEGAL

    // Keywords
    CONST: "const"
    PRINT: "print"
    TRUE: "true"
    FALSE: "false"
    AND: "and"
    OR: "or"
    XOR: "xor"
    NOT: "not"

    IDENT: /[A-Za-z_][A-Za-z0-9_]*/
    INT: /[0-9]+/

    // Operators and punctuation
    EQ: "=="
    NE: "!="
    GE: ">="
    LE: "<="
    GT: ">"
    LT: "<"
    ASSIGN: "="
    PLUS: "+"
    MINUS: "-"
    ASTERISK: "*"
    SLASH: "/"
    PERCENT: "%"
    LPAREN: "("
    RPAREN: ")"
    COMMA: ","

    EOL: /\n/
    // Anything outside the characters used above (any Unicode whitespace
    // other than WS and EOL included), plus a lone "!"
    ILLEGAL: /[^ \t\f\v\r\nA-Za-z0-9_+\-*\/%=<>(),#]/

    WS: /[ \t\f\v\r]+/
    %ignore WS
    COMMENT: /#[^\n]*/
    %ignore COMMENT
"""


PLINTH_LEXER = Lark(
    PLINTH_TOKENS,
    parser='lalr',
    lexer='basic',
)


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens ending with one `EOF`.

    Integer literals that do not fit a signed 32-bit integer are
    reported as `ILLEGAL`, so every `INT` token handed to the parser is
    guaranteed to convert cleanly.
    """
    tokens: List[Token] = []
    for lexeme in PLINTH_LEXER.lex(source):
        kind = lexeme.type
        if kind == 'INT' and not fits_i32(int(lexeme.value)):
            kind = 'ILLEGAL'
        tokens.append(Token(kind, str(lexeme.value), lexeme.line, lexeme.column))
    line = source.count('\n') + 1
    column = len(source) - source.rfind('\n')
    tokens.append(Token('EOF', '', line, column))
    return tokens
