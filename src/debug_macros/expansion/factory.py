"""
Node Factory
============

Tree-construction capability used by the expander to fabricate nodes.

The expander never instantiates node classes directly; it goes through a
factory object so that a host with its own tree representation can pass
an adapter exposing the same methods. NodeFactory is the implementation
for the tree model in debug_macros.expansion.ast.
"""

from typing import Optional, Sequence, Union

from debug_macros.expansion.ast import (
    CallExpression,
    Expression,
    Identifier,
    LogicalExpression,
    LogicalOperator,
    MemberExpression,
    Node,
    NodeKind,
    NumericLiteral,
    ParenthesizedExpression,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)


class NodeFactory:
    """
    Builds nodes of the debug_macros expression tree.

    Example:
        >>> t = NodeFactory()
        >>> call = t.call_expression(
        ...     t.member_expression(t.identifier("console"), t.identifier("warn")),
        ...     [t.string_literal("careful")],
        ... )
    """

    def string_literal(self, value: str) -> StringLiteral:
        return StringLiteral(value=value)

    def numeric_literal(self, value: Union[int, float]) -> NumericLiteral:
        return NumericLiteral(value=value)

    def identifier(self, name: str) -> Identifier:
        return Identifier(name=name)

    def member_expression(self, obj: Expression, prop: Identifier) -> MemberExpression:
        return MemberExpression(object=obj, property=prop)

    def call_expression(self, callee: Expression, arguments: Sequence[Expression]) -> CallExpression:
        return CallExpression(callee=callee, arguments=list(arguments))

    def logical_expression(self, operator: str, left: Expression, right: Expression) -> LogicalExpression:
        """
        Build a logical expression.

        Args:
            operator: "&&" or "||"
            left: Left operand
            right: Right operand
        """
        return LogicalExpression(operator=LogicalOperator(operator), left=left, right=right)

    def parenthesized_expression(self, expression: Expression) -> ParenthesizedExpression:
        return ParenthesizedExpression(expression=expression)

    def variable_declarator(self, id: Identifier, init: Optional[Expression] = None) -> VariableDeclarator:
        return VariableDeclarator(id=id, init=init)

    def variable_declaration(self, kind: str, declarations: Sequence[VariableDeclarator]) -> VariableDeclaration:
        return VariableDeclaration(declaration_kind=kind, declarations=list(declarations))

    def is_identifier(self, node: Node) -> bool:
        """Return True if node is a bare identifier reference."""
        return node is not None and node.kind is NodeKind.IDENTIFIER
