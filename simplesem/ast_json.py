"""JSON serialization/deserialization for SIMPLE ASTs and environments.

This module converts between SIMPLE AST dataclasses and plain Python
dict structures suitable for JSON encoding. It is the ingestion path for
programs produced by an external parser, and the external form used to
seed or inspect environments.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Node,
    Number,
    Boolean,
    Add,
    Multiply,
    LessThan,
    Variable,
    DoNothing,
    Assign,
    If,
    Sequence,
    While,
)
from .environment import Environment


def ast_to_obj(node: Node) -> Dict[str, Any]:
    if isinstance(node, Number):
        return {"type": "Number", "value": node.value}
    if isinstance(node, Boolean):
        return {"type": "Boolean", "value": node.value}
    if isinstance(node, (Add, Multiply, LessThan)):
        return {"type": type(node).__name__, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": node.name}
    if isinstance(node, DoNothing):
        return {"type": "DoNothing"}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": node.name, "expression": ast_to_obj(node.expression)}
    if isinstance(node, If):
        return {
            "type": "If",
            "condition": ast_to_obj(node.condition),
            "consequence": ast_to_obj(node.consequence),
            "alternative": ast_to_obj(node.alternative),
        }
    if isinstance(node, Sequence):
        return {"type": "Sequence", "first": ast_to_obj(node.first), "second": ast_to_obj(node.second)}
    if isinstance(node, While):
        return {"type": "While", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


_BINARY = {"Add": Add, "Multiply": Multiply, "LessThan": LessThan}


def ast_from_obj(obj: Any) -> Node:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Number":
        return Number(obj["value"])
    if t == "Boolean":
        return Boolean(obj["value"])
    if t in _BINARY:
        return _BINARY[t](left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "Variable":
        return Variable(name=obj["name"])
    if t == "DoNothing":
        return DoNothing()
    if t == "Assign":
        return Assign(name=obj["name"], expression=ast_from_obj(obj["expression"]))
    if t == "If":
        return If(
            condition=ast_from_obj(obj["condition"]),
            consequence=ast_from_obj(obj["consequence"]),
            alternative=ast_from_obj(obj["alternative"]),
        )
    if t == "Sequence":
        return Sequence(first=ast_from_obj(obj["first"]), second=ast_from_obj(obj["second"]))
    if t == "While":
        return While(condition=ast_from_obj(obj["condition"]), body=ast_from_obj(obj["body"]))

    raise ValueError(f"Unknown AST node type: {t}")


def env_to_obj(env: Environment) -> Dict[str, Any]:
    return env.to_python()


def env_from_obj(obj: Any) -> Environment:
    if not isinstance(obj, dict):
        raise TypeError("Invalid environment object")
    return Environment.from_python(obj)
