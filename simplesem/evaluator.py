"""Big-step evaluation for SIMPLE.

Expressions evaluate directly to a value and statements to the final
environment, without building any intermediate AST.
"""

from __future__ import annotations

from typing import Union

from .ast import (
    Node, Expression, Statement, Number, Boolean, BinaryExpression, Variable,
    DoNothing, Assign, If, Sequence, While,
)
from .debug import DebugOutput
from .environment import Environment
from .types import BINARY_OPERATORS, Value, choose_branch, is_true


class Evaluator(DebugOutput):
    """Recursive evaluator over the AST."""

    def evaluate(self, node: Node, env: Environment) -> Union[Value, Environment]:
        if isinstance(node, Statement):
            return self.execute(node, env)
        if isinstance(node, Expression):
            return self.evaluate_expression(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def evaluate_expression(self, node: Expression, env: Environment) -> Value:
        if isinstance(node, (Number, Boolean)):
            return node
        if isinstance(node, BinaryExpression):
            operator = BINARY_OPERATORS.get(type(node))
            if operator is None:
                raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")
            left = self.evaluate_expression(node.left, env)
            right = self.evaluate_expression(node.right, env)
            return operator(left, right)
        if isinstance(node, Variable):
            return env.lookup(node.name)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def execute(self, node: Statement, env: Environment) -> Environment:
        self.debug(f"execute {node}, {env}", 2)
        if isinstance(node, DoNothing):
            return env
        if isinstance(node, Assign):
            return env.extend(node.name, self.evaluate_expression(node.expression, env))
        if isinstance(node, If):
            cond = self.evaluate_expression(node.condition, env)
            if self.debug_level >= 3:
                self.debug(f"if condition {cond}", 3)
            return self.execute(choose_branch(cond, node.consequence, node.alternative), env)
        if isinstance(node, Sequence):
            return self.execute(node.second, self.execute(node.first, env))
        if isinstance(node, While):
            # Iterating is the same as re-evaluating this node under the
            # body's environment, without growing the Python stack.
            while True:
                cond = self.evaluate_expression(node.condition, env)
                if self.debug_level >= 3:
                    self.debug(f"while condition {cond}", 3)
                if not is_true(cond):
                    return env
                env = self.execute(node.body, env)
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")


def evaluate(node: Node, env: Environment) -> Union[Value, Environment]:
    """Evaluate an expression to a value or a statement to an environment."""
    return Evaluator().evaluate(node, env)
