"""Small-step reduction for SIMPLE.

Each call performs exactly one rewrite on the leftmost-innermost redex.
Expressions reduce to a new expression under an unchanged environment;
statements reduce to a new ``(statement, environment)`` pair. Looping
is never done here: `While` unrolls once and the caller keeps stepping.
"""

from __future__ import annotations

from typing import Tuple

from .ast import (
    Node, Expression, Statement, BinaryExpression, Variable,
    DoNothing, Assign, If, Sequence, While,
)
from .debug import DebugOutput
from .environment import Environment
from .errors import PreconditionViolation
from .types import BINARY_OPERATORS, choose_branch


class Reducer(DebugOutput):
    """Applies one small-step rewrite per call."""

    def reduce(self, node: Node, env: Environment):
        """Reduce an expression to an expression, or a statement to a pair."""
        if isinstance(node, Statement):
            return self.reduce_statement(node, env)
        if isinstance(node, Expression):
            return self.reduce_expression(node, env)
        raise NotImplementedError(f"reduce: unexpected node type {type(node)}")

    def reduce_expression(self, node: Expression, env: Environment) -> Expression:
        if not node.reducible:
            raise PreconditionViolation(f'{type(node).__name__} {node} is already a value')
        if isinstance(node, BinaryExpression):
            if node.left.reducible:
                result = type(node)(self.reduce_expression(node.left, env), node.right)
            elif node.right.reducible:
                result = type(node)(node.left, self.reduce_expression(node.right, env))
            else:
                operator = BINARY_OPERATORS.get(type(node))
                if operator is None:
                    raise NotImplementedError(f"reduce: unexpected node type {type(node)}")
                result = operator(node.left, node.right)
                self.debug(f"reduce {type(node).__name__}: {node} => {result}", 2)
            return result
        if isinstance(node, Variable):
            result = env.lookup(node.name)
            self.debug(f"reduce Variable: {node} => {result}", 2)
            return result
        raise NotImplementedError(f"reduce: unexpected node type {type(node)}")

    def reduce_statement(self, node: Statement, env: Environment) -> Tuple[Statement, Environment]:
        if not node.reducible:
            raise PreconditionViolation(f'{node} cannot be reduced any further')
        if isinstance(node, Assign):
            if node.expression.reducible:
                return Assign(node.name, self.reduce_expression(node.expression, env)), env
            extended = env.extend(node.name, node.expression)
            self.debug(f"reduce Assign: {node} => do-nothing, {extended}", 2)
            return DoNothing(), extended
        if isinstance(node, If):
            if node.condition.reducible:
                return If(self.reduce_expression(node.condition, env), node.consequence, node.alternative), env
            chosen = choose_branch(node.condition, node.consequence, node.alternative)
            self.debug(f"if condition {node.condition} -> {chosen}", 3)
            self.debug(f"reduce If: {node} => {chosen}", 2)
            return chosen, env
        if isinstance(node, Sequence):
            if node.first == DoNothing():
                self.debug(f"reduce Sequence: {node} => {node.second}", 2)
                return node.second, env
            first, reduced_env = self.reduce_statement(node.first, env)
            return Sequence(first, node.second), reduced_env
        if isinstance(node, While):
            unrolled = If(node.condition, Sequence(node.body, node), DoNothing())
            self.debug(f"reduce While: {node} => {unrolled}", 2)
            return unrolled, env
        raise NotImplementedError(f"reduce: unexpected node type {type(node)}")


_default_reducer = Reducer()


def reduce(node: Node, env: Environment):
    """Perform one small-step rewrite of `node` under `env`."""
    return _default_reducer.reduce(node, env)
