"""The SIMPLE virtual machine.

A `Machine` holds the current ``(statement, environment)`` configuration
and advances it one small-step reduction at a time until the statement
is `DoNothing`. A program that never reaches `DoNothing` makes `run`
loop forever; callers that need a bound should iterate `states()` and
stop when they like.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Tuple

from .ast import Statement
from .debug import DebugOutput
from .environment import Environment
from .errors import PreconditionViolation
from .reducer import Reducer

Observer = Callable[[Statement, Environment], None]


class Machine(DebugOutput):
    """Drives small-step reduction of a statement to its fixpoint."""
    def __init__(self, statement: Statement, environment: Optional[Environment] = None,
                 debug_level: int = 0, debug_file: Optional[str] = None):
        super().__init__(debug_level, debug_file)
        self.statement = statement
        self.environment = environment if environment is not None else Environment()
        self.steps = 0
        self.reducer = Reducer(parent=self)

    @property
    def reducible(self) -> bool:
        return self.statement.reducible

    def step(self):
        if not self.reducible:
            raise PreconditionViolation(f'machine already halted at {self.statement}')
        self.statement, self.environment = self.reducer.reduce_statement(self.statement, self.environment)
        self.steps += 1

    def states(self) -> Iterator[Tuple[Statement, Environment]]:
        """Yield the current state, then the state after every step."""
        yield self.statement, self.environment
        while self.reducible:
            self.step()
            yield self.statement, self.environment

    def run(self, observer: Optional[Observer] = None) -> List[Tuple[str, str]]:
        """Reduce until halted; return the rendering of every state visited."""
        trace: List[Tuple[str, str]] = []
        for statement, environment in self.states():
            trace.append((str(statement), str(environment)))
            self.debug(f"{statement}, {environment}")
            if observer is not None:
                observer(statement, environment)
        return trace
