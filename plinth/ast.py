"""Abstract Syntax Tree (AST) definitions for the Plinth language.

The AST classes defined in this module represent the syntactic structure
of parsed Plinth programs. A program is a flat list of one-line
statements; expressions are trees in which every node owns its
children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Any


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    body: List[Node] = field(default_factory=list)


# Statements

@dataclass
class ConstBinding(Node):
    """`const name = expr` or a later `name = expr`; both rebind freely."""
    name: str
    expr: Node


@dataclass
class BuiltinCall(Node):
    name: str
    args: List[Node]


@dataclass
class EmptyStmt(Node):
    pass


# Expressions

@dataclass
class BinaryOp(Node):
    op: str
    left: Node
    right: Node


@dataclass
class UnaryOp(Node):
    op: str
    operand: Node


@dataclass
class Literal(Node):
    value: Any
    literal_type: str  # 'Integer' or 'Boolean'


@dataclass
class Ident(Node):
    name: str
