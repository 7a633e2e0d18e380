"""Procedure values created by the ``lambda`` special form."""

from __future__ import annotations

from io import StringIO

from minischeme import SExpression
from minischeme.types.symbol import Symbol


class Lambda:
    """A procedure with formal parameters and a single body expression.

    ``body`` holds the *elements* of the body expression, unwrapped one level
    from the parsed list; ``body_form()`` rebuilds the list for evaluation.
    No definition-time environment is captured: each call chains its
    activation record to the caller's environment.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: list[Symbol], body: list[SExpression]):
        self.formals: list[Symbol] = list(formals)
        self.body: list[SExpression] = list(body)

    @property
    def arity(self) -> int:
        return len(self.formals)

    def body_form(self) -> list[SExpression]:
        """A fresh list expression to evaluate for one call."""
        return list(self.body)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("lambda (")
            buffer.write(", ".join(str(f) for f in self.formals))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.formals!r}, {self.body!r})"
