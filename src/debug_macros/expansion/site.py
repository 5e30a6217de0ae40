"""
Call Site Handles
=================

A CallSite wraps the expression statement the host located for a macro
call. The expander reads the call's arguments through it during
collection and writes the expansion back through replace_with() during
the apply phase; nothing else mutates the host tree.
"""

from typing import Optional

from debug_macros.errors import SourceLocation
from debug_macros.expansion.ast import Expression, ExpressionStatement, NodeKind


class CallSite:
    """
    Handle on a located macro call statement.

    Attributes:
        statement: The ExpressionStatement containing the macro call
    """

    def __init__(self, statement: ExpressionStatement):
        if statement.expression is None or statement.expression.kind is not NodeKind.CALL_EXPRESSION:
            raise TypeError("CallSite requires an expression statement wrapping a call")
        self.statement = statement
        self._call = statement.expression

    @property
    def arguments(self) -> list[Expression]:
        """Arguments of the original macro call, as parsed by the host."""
        return self._call.arguments

    @property
    def location(self) -> Optional[SourceLocation]:
        return self._call.location or self.statement.location

    @property
    def replaced(self) -> bool:
        """True once replace_with() has been called."""
        return self.statement.expression is not self._call

    def replace_with(self, expression: Expression) -> None:
        """Replace the statement's expression with a new one."""
        self.statement.expression = expression

    def __repr__(self) -> str:
        loc = f"@{self.location}" if self.location else ""
        return f"CallSite{loc}"
