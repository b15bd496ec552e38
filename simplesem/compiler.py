"""Denotational semantics for SIMPLE.

`compile_node` translates a node once into a Python closure over an
environment: ``Environment -> Value`` for expressions and
``Environment -> Environment`` for statements. The closure only calls
the closures of its children, so it can be applied to any number of
environments without looking at the AST again.

`to_python` produces the same denotation as Python source text (a
lambda expression), and `load_python` turns that text back into a
callable.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from .ast import (
    Node, Number, Boolean, BinaryExpression, Variable,
    DoNothing, Assign, If, Sequence, While,
)
from .environment import Environment
from .types import BINARY_OPERATORS, add, multiply, less_than, choose_branch, is_true

Closure = Callable[[Environment], Any]


def loop(condition: Closure, body: Closure, env: Environment) -> Environment:
    """Thread `env` through `body` for as long as `condition` holds."""
    while is_true(condition(env)):
        env = body(env)
    return env


def compile_node(node: Node) -> Closure:
    """Compile `node` into a closure over an environment."""
    if isinstance(node, (Number, Boolean)):
        return lambda env: node
    if isinstance(node, BinaryExpression):
        operator = BINARY_OPERATORS.get(type(node))
        if operator is None:
            raise NotImplementedError(f"compile: unexpected node type {type(node)}")
        left = compile_node(node.left)
        right = compile_node(node.right)
        return lambda env: operator(left(env), right(env))
    if isinstance(node, Variable):
        name = node.name
        return lambda env: env.lookup(name)
    if isinstance(node, DoNothing):
        return lambda env: env
    if isinstance(node, Assign):
        name = node.name
        expression = compile_node(node.expression)
        return lambda env: env.extend(name, expression(env))
    if isinstance(node, If):
        condition = compile_node(node.condition)
        consequence = compile_node(node.consequence)
        alternative = compile_node(node.alternative)
        return lambda env: choose_branch(condition(env), consequence, alternative)(env)
    if isinstance(node, Sequence):
        first = compile_node(node.first)
        second = compile_node(node.second)
        return lambda env: second(first(env))
    if isinstance(node, While):
        condition = compile_node(node.condition)
        body = compile_node(node.body)
        return lambda env: loop(condition, body, env)
    raise NotImplementedError(f"compile: unexpected node type {type(node)}")


###############################################################################
# Python source denotation
###############################################################################

_OPERATOR_NAMES: Dict[type, str] = {op_type: fn.__name__ for op_type, fn in BINARY_OPERATORS.items()}


def to_python(node: Node) -> str:
    """Render `node` as the source of an equivalent Python lambda."""
    if isinstance(node, Number):
        return f"lambda e: Number({node.value!r})"
    if isinstance(node, Boolean):
        return f"lambda e: Boolean({node.value!r})"
    if isinstance(node, BinaryExpression):
        name = _OPERATOR_NAMES.get(type(node))
        if name is None:
            raise NotImplementedError(f"to_python: unexpected node type {type(node)}")
        return f"lambda e: {name}(({to_python(node.left)})(e), ({to_python(node.right)})(e))"
    if isinstance(node, Variable):
        return f"lambda e: e.lookup({node.name!r})"
    if isinstance(node, DoNothing):
        return "lambda e: e"
    if isinstance(node, Assign):
        return f"lambda e: e.extend({node.name!r}, ({to_python(node.expression)})(e))"
    if isinstance(node, If):
        return (f"lambda e: choose_branch(({to_python(node.condition)})(e),"
                f" ({to_python(node.consequence)}),"
                f" ({to_python(node.alternative)}))(e)")
    if isinstance(node, Sequence):
        return f"lambda e: ({to_python(node.second)})(({to_python(node.first)})(e))"
    if isinstance(node, While):
        return f"lambda e: loop(({to_python(node.condition)}), ({to_python(node.body)}), e)"
    raise NotImplementedError(f"to_python: unexpected node type {type(node)}")


def load_python(source: str) -> Closure:
    """Evaluate source produced by `to_python` into a callable."""
    namespace = {
        '__builtins__': {},
        'Number': Number,
        'Boolean': Boolean,
        'add': add,
        'multiply': multiply,
        'less_than': less_than,
        'choose_branch': choose_branch,
        'loop': loop,
    }
    return eval(source, namespace)
