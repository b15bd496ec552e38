"""Value helpers for SIMPLE.

Values are the two literal expression kinds, `Number` and `Boolean`.
This module converts between them and plain Python values and defines
the primitive operators shared by the reducer, the evaluator and the
compiler, so that every strategy applies exactly the same type rules.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Union

from .ast import Add, Boolean, Expression, LessThan, Multiply, Number, Statement
from .errors import TypeMismatch

Value = Union[Number, Boolean]

TRUE = Boolean(True)
FALSE = Boolean(False)


def is_value(node: Any) -> bool:
    return isinstance(node, (Number, Boolean))


def type_name(node: Any) -> str:
    if isinstance(node, (Expression, Statement)):
        return type(node).__name__
    return f'python {type(node).__name__}'


def check_value(node: Any) -> Value:
    """Return `node` if it may be stored in an environment, else raise."""
    if not is_value(node):
        raise TypeMismatch(f'expected Number or Boolean, got {type_name(node)}')
    return node


def value_from_python(value: Any) -> Value:
    """Convert a Python ``int`` or ``bool`` into the matching literal."""
    if is_value(value):
        return value
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Number(value)
    raise TypeMismatch(f'cannot convert {type(value).__name__} to a SIMPLE value')


def value_to_python(value: Value) -> Union[int, bool]:
    return check_value(value).value


def _numbers(op: str, left: Any, right: Any) -> None:
    if not (isinstance(left, Number) and isinstance(right, Number)):
        raise TypeMismatch(f'unsupported {op} for {type_name(left)} and {type_name(right)}')


def add(left: Value, right: Value) -> Number:
    _numbers('+', left, right)
    return Number(left.value + right.value)


def multiply(left: Value, right: Value) -> Number:
    _numbers('*', left, right)
    return Number(left.value * right.value)


def less_than(left: Value, right: Value) -> Boolean:
    _numbers('<', left, right)
    return Boolean(left.value < right.value)


def choose_branch(condition: Value, consequence: Any, alternative: Any) -> Any:
    """Pick `consequence` for ``true`` and `alternative` for ``false``.

    Compared by value against the two boolean literals; any other value
    is a type mismatch.
    """
    if condition == TRUE:
        return consequence
    if condition == FALSE:
        return alternative
    raise TypeMismatch(f'condition must be Boolean, got {type_name(condition)} {condition}')


def is_true(condition: Value) -> bool:
    return choose_branch(condition, True, False)


# Operator applied once both operands of a binary node are values.
BINARY_OPERATORS: Dict[type, Callable[[Value, Value], Value]] = {
    Add: add,
    Multiply: multiply,
    LessThan: less_than,
}
