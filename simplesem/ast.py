"""Abstract Syntax Tree (AST) definitions for the SIMPLE language.

SIMPLE has two closed families of nodes: expressions, which reduce to a
literal value, and statements, which reduce to `DoNothing` while
updating an environment. Nodes are frozen dataclasses, so they compare
structurally and are never mutated; every reduction step builds new
nodes.

`str(node)` renders the SIMPLE surface form of a node, e.g.
``x = x + 1``. `repr(node)` wraps the same text in guillemets so that
nodes are easy to pick out in trace output and assertion diffs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .errors import TypeMismatch


def _expect(owner: str, field: str, value: Any, kind: type) -> None:
    if not isinstance(value, kind):
        raise TypeMismatch(f'{owner}.{field} must be {kind.__name__}, got {type(value).__name__}')


@dataclass(frozen=True, repr=False)
class Node:
    """Base class for all AST nodes."""
    reducible: ClassVar[bool] = True

    def __repr__(self) -> str:
        return f"«{self}»"


@dataclass(frozen=True, repr=False)
class Expression(Node):
    pass


@dataclass(frozen=True, repr=False)
class Statement(Node):
    pass


###############################################################################
# Expressions
###############################################################################

@dataclass(frozen=True, repr=False)
class Number(Expression):
    value: int
    reducible: ClassVar[bool] = False

    def __post_init__(self):
        # bool is an int subclass but belongs to Boolean
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeMismatch(f'Number.value must be int, got {type(self.value).__name__}')

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, repr=False)
class Boolean(Expression):
    value: bool
    reducible: ClassVar[bool] = False

    def __post_init__(self):
        _expect('Boolean', 'value', self.value, bool)

    def __str__(self) -> str:
        return 'true' if self.value else 'false'


@dataclass(frozen=True, repr=False)
class BinaryExpression(Expression):
    """Shared shape of `Add`, `Multiply` and `LessThan`."""
    left: Expression
    right: Expression
    operator: ClassVar[str] = '?'

    def __post_init__(self):
        _expect(type(self).__name__, 'left', self.left, Expression)
        _expect(type(self).__name__, 'right', self.right, Expression)

    def __str__(self) -> str:
        return f"{self.left} {self.operator} {self.right}"


@dataclass(frozen=True, repr=False)
class Add(BinaryExpression):
    operator: ClassVar[str] = '+'


@dataclass(frozen=True, repr=False)
class Multiply(BinaryExpression):
    operator: ClassVar[str] = '*'


@dataclass(frozen=True, repr=False)
class LessThan(BinaryExpression):
    operator: ClassVar[str] = '<'


@dataclass(frozen=True, repr=False)
class Variable(Expression):
    name: str

    def __post_init__(self):
        _expect('Variable', 'name', self.name, str)

    def __str__(self) -> str:
        return self.name


###############################################################################
# Statements
###############################################################################

@dataclass(frozen=True, repr=False)
class DoNothing(Statement):
    reducible: ClassVar[bool] = False

    def __str__(self) -> str:
        return 'do-nothing'


@dataclass(frozen=True, repr=False)
class Assign(Statement):
    name: str
    expression: Expression

    def __post_init__(self):
        _expect('Assign', 'name', self.name, str)
        _expect('Assign', 'expression', self.expression, Expression)

    def __str__(self) -> str:
        return f"{self.name} = {self.expression}"


@dataclass(frozen=True, repr=False)
class If(Statement):
    condition: Expression
    consequence: Statement
    alternative: Statement

    def __post_init__(self):
        _expect('If', 'condition', self.condition, Expression)
        _expect('If', 'consequence', self.consequence, Statement)
        _expect('If', 'alternative', self.alternative, Statement)

    def __str__(self) -> str:
        return f"if ({self.condition}) {{ {self.consequence} }} else {{ {self.alternative} }}"


@dataclass(frozen=True, repr=False)
class Sequence(Statement):
    first: Statement
    second: Statement

    def __post_init__(self):
        _expect('Sequence', 'first', self.first, Statement)
        _expect('Sequence', 'second', self.second, Statement)

    def __str__(self) -> str:
        return f"{self.first}; {self.second}"


@dataclass(frozen=True, repr=False)
class While(Statement):
    condition: Expression
    body: Statement

    def __post_init__(self):
        _expect('While', 'condition', self.condition, Expression)
        _expect('While', 'body', self.body, Statement)

    def __str__(self) -> str:
        return f"while ({self.condition}) {{ {self.body} }}"
