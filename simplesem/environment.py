from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

from .errors import UnboundVariable
from .types import Value, check_value, value_from_python, value_to_python


class Environment:
    """Immutable mapping from variable names to SIMPLE values.

    `extend` copies the bindings into a new environment, so any
    environment a caller (or an older machine state) still holds keeps
    seeing the bindings it was created with.
    """
    def __init__(self, bindings: Optional[Mapping[str, Value]] = None):
        self._bindings: Dict[str, Value] = {}
        for name, value in (bindings or {}).items():
            self._bindings[name] = check_value(value)

    @classmethod
    def from_python(cls, values: Optional[Mapping[str, Any]] = None) -> 'Environment':
        """Build an environment from plain ``int``/``bool`` values."""
        return cls({name: value_from_python(v) for name, v in (values or {}).items()})

    @property
    def bindings(self) -> Dict[str, Value]:
        return dict(self._bindings)

    def lookup(self, name: str) -> Value:
        if name in self._bindings:
            return self._bindings[name]
        raise UnboundVariable(name)

    def extend(self, name: str, value: Value) -> 'Environment':
        new_bindings = self._bindings.copy()
        new_bindings[name] = check_value(value)
        return Environment(new_bindings)

    def to_python(self) -> Dict[str, Any]:
        return {name: value_to_python(v) for name, v in self._bindings.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._bindings == other._bindings

    def __hash__(self) -> int:
        return hash(frozenset(self._bindings.items()))

    def __str__(self) -> str:
        inner = ", ".join(f"{name}: {value}" for name, value in self._bindings.items())
        return "{" + inner + "}"

    def __repr__(self) -> str:
        return f"Environment({self})"
