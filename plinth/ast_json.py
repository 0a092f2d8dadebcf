"""JSON serialization/deserialization for the Plinth AST.

This module converts between Plinth AST dataclasses and plain Python
dict/list structures suitable for JSON encoding, so that a parsed
program can be stored with `--emit-ast` and executed later with `--ast`.
"""

from __future__ import annotations

from typing import Any

from .ast import (
    Program,
    ConstBinding,
    BuiltinCall,
    EmptyStmt,
    BinaryOp,
    UnaryOp,
    Literal,
    Ident,
)


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None:
        return None
    if isinstance(node, (int, str, bool)):
        return node

    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, ConstBinding):
        return {"type": "ConstBinding", "name": node.name, "expr": ast_to_obj(node.expr)}
    if isinstance(node, BuiltinCall):
        return {"type": "BuiltinCall", "name": node.name, "args": [ast_to_obj(a) for a in node.args]}
    if isinstance(node, EmptyStmt):
        return {"type": "EmptyStmt"}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value, "literal_type": node.literal_type}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None or isinstance(obj, (int, str, bool)):
        return obj
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "ConstBinding":
        return ConstBinding(name=obj["name"], expr=ast_from_obj(obj["expr"]))
    if t == "BuiltinCall":
        return BuiltinCall(name=obj["name"], args=[ast_from_obj(a) for a in obj["args"]])
    if t == "EmptyStmt":
        return EmptyStmt()
    if t == "BinaryOp":
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "UnaryOp":
        return UnaryOp(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "Literal":
        literal_type = obj["literal_type"]
        value = obj["value"]
        # JSON has no separate bool/int check; keep the declared type honest
        if literal_type == "Boolean":
            value = bool(value)
        elif literal_type == "Integer":
            value = int(value)
        else:
            raise ValueError(f"Unknown literal type: {literal_type}")
        return Literal(value=value, literal_type=literal_type)
    if t == "Ident":
        return Ident(name=obj["name"])

    raise ValueError(f"Unknown AST node type: {t}")
