# SIMPLE semantics package
# Small-step, big-step and denotational interpreters for the SIMPLE language.
from typing import Optional

from .ast import (
    Node, Expression, Statement,
    Number, Boolean, Add, Multiply, LessThan, Variable,
    DoNothing, Assign, If, Sequence, While,
)
from .environment import Environment
from .errors import SimpleError, UnboundVariable, TypeMismatch, PreconditionViolation
from .reducer import Reducer, reduce
from .evaluator import Evaluator, evaluate
from .compiler import compile_node, to_python, load_python
from .machine import Machine
from .ast_json import ast_to_obj, ast_from_obj, env_to_obj, env_from_obj


def run_program(statement: Statement, environment: Optional[Environment] = None, debug_level: int = 0) -> Environment:
    """Drive `statement` to its fixpoint on a machine and return the final environment."""
    with Machine(statement, environment, debug_level=debug_level) as machine:
        machine.run()
        return machine.environment


def evaluate_program(statement: Statement, environment: Optional[Environment] = None) -> Environment:
    """Evaluate `statement` big-step and return the final environment."""
    return evaluate(statement, environment if environment is not None else Environment())


def compile_program(statement: Statement, environment: Optional[Environment] = None) -> Environment:
    """Compile `statement` to a closure and apply it to `environment`."""
    return compile_node(statement)(environment if environment is not None else Environment())


__all__ = [
    'Node', 'Expression', 'Statement',
    'Number', 'Boolean', 'Add', 'Multiply', 'LessThan', 'Variable',
    'DoNothing', 'Assign', 'If', 'Sequence', 'While',
    'Environment',
    'SimpleError', 'UnboundVariable', 'TypeMismatch', 'PreconditionViolation',
    'Reducer', 'reduce',
    'Evaluator', 'evaluate',
    'compile_node', 'to_python', 'load_python',
    'Machine',
    'ast_to_obj', 'ast_from_obj', 'env_to_obj', 'env_from_obj',
    'run_program', 'evaluate_program', 'compile_program',
]
