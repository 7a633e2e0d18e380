"""Runtime environment for minischeme.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Several child scopes may share one outer
scope; Python reference counting keeps a scope alive while any child or
caller still holds it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minischeme import LispValue
from minischeme.errors import SchemeInvalidSymbol, SchemeUnboundSymbol
from minischeme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, parent: Environment) -> Environment:
        """Create an empty scope whose outer scope is `parent` (shared, not copied)."""
        return cls(outer=parent)

    def set(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope.

        Outer scopes are never modified, so binding a name that an outer scope
        already holds shadows it locally.

        Raises SchemeInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SchemeInvalidSymbol(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in this scope."""
        for k, v in mapping.items():
            self.set(k, v)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        """Value bound to `name` in the nearest scope, or `default` when unbound."""
        env = self.find(name)
        if env is None:
            return default
        return env.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SchemeUnboundSymbol if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SchemeUnboundSymbol(f"Unbound symbol {name}")
        return env.vars[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def chain(self) -> Iterator[Environment]:
        """Iterate over this scope and then each outer scope."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        frames = []
        for env in self.chain():
            with StringIO() as buffer:
                env._write_vars(buffer)
                frames.append(buffer.getvalue())
        return f"<Environment chain: {' -> '.join(frames)}>"
