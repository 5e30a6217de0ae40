"""
Expression Tree Definitions
===========================

This module defines the minimal syntax tree the macro expander reads and
produces. It models only the node shapes that appear in macro call sites
and in the expansions written back over them; parsing is the host's job.

Node Hierarchy
--------------
Node (base)
├── Expressions
│   ├── StringLiteral - string constant
│   ├── NumericLiteral - integer or float constant
│   ├── BooleanLiteral - true / false
│   ├── Identifier - bare name reference
│   ├── MemberExpression - object.property
│   ├── CallExpression - callee(arguments)
│   ├── LogicalExpression - left && right, left || right
│   ├── ParenthesizedExpression - ( expression )
│   └── ObjectExpression - { key: value, ... }
├── ObjectProperty - key/value pair inside an ObjectExpression
├── Statements
│   ├── ExpressionStatement - expression followed by semicolon
│   └── VariableDeclaration - const/let/var with declarators
├── VariableDeclarator - binding = initializer
└── ImportSpecifier - { imported as local } inside an import

Design Notes
------------
- Every node class carries a NodeKind tag. Code that needs to know what a
  node is compares tags rather than probing attributes.
- Each node may store the source location the host parsed it from; the
  location does not participate in equality.
- Nodes are plain mutable dataclasses. Only ExpressionStatement.expression
  is ever rewritten, and only by CallSite.replace_with().
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Optional, Union

from debug_macros.errors import SourceLocation


# =============================================================================
# Node Tags
# =============================================================================

class NodeKind(Enum):
    """Tag identifying the concrete shape of a node."""
    STRING_LITERAL = auto()
    NUMERIC_LITERAL = auto()
    BOOLEAN_LITERAL = auto()
    IDENTIFIER = auto()
    MEMBER_EXPRESSION = auto()
    CALL_EXPRESSION = auto()
    LOGICAL_EXPRESSION = auto()
    PARENTHESIZED_EXPRESSION = auto()
    OBJECT_EXPRESSION = auto()
    OBJECT_PROPERTY = auto()
    EXPRESSION_STATEMENT = auto()
    VARIABLE_DECLARATION = auto()
    VARIABLE_DECLARATOR = auto()
    IMPORT_SPECIFIER = auto()


class LogicalOperator(Enum):
    """Short-circuit logical operators."""
    AND = "&&"
    OR = "||"


# =============================================================================
# Base Classes
# =============================================================================

@dataclass
class Node:
    """
    Base class for all tree nodes.

    Attributes:
        location: Source location where this node appears (optional)
    """
    kind: ClassVar[NodeKind]

    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass
class Expression(Node):
    """Base class for nodes that evaluate to a value."""
    pass


@dataclass
class Statement(Node):
    """Base class for statement nodes."""
    pass


# =============================================================================
# Literal and Name Expressions
# =============================================================================

@dataclass
class StringLiteral(Expression):
    """String constant, e.g. 'message'."""
    kind: ClassVar[NodeKind] = NodeKind.STRING_LITERAL

    value: str = ""


@dataclass
class NumericLiteral(Expression):
    """Numeric constant, e.g. 1 or 0."""
    kind: ClassVar[NodeKind] = NodeKind.NUMERIC_LITERAL

    value: Union[int, float] = 0


@dataclass
class BooleanLiteral(Expression):
    """Boolean constant (true or false)."""
    kind: ClassVar[NodeKind] = NodeKind.BOOLEAN_LITERAL

    value: bool = False


@dataclass
class Identifier(Expression):
    """
    Bare name reference.

    Attributes:
        name: The referenced name
    """
    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER

    name: str = ""


# =============================================================================
# Compound Expressions
# =============================================================================

@dataclass
class MemberExpression(Expression):
    """
    Property access (object.property).

    Attributes:
        object: The expression being accessed
        property: The accessed property name
    """
    kind: ClassVar[NodeKind] = NodeKind.MEMBER_EXPRESSION

    object: Expression = None
    property: Identifier = None


@dataclass
class CallExpression(Expression):
    """
    Function call expression.

    Attributes:
        callee: The called expression (Identifier or MemberExpression)
        arguments: Argument expressions in call order
    """
    kind: ClassVar[NodeKind] = NodeKind.CALL_EXPRESSION

    callee: Expression = None
    arguments: list[Expression] = field(default_factory=list)


@dataclass
class LogicalExpression(Expression):
    """
    Short-circuit logical expression (left op right).

    Attributes:
        operator: The logical operator
        left: Left operand, evaluated first
        right: Right operand, evaluated only if needed
    """
    kind: ClassVar[NodeKind] = NodeKind.LOGICAL_EXPRESSION

    operator: LogicalOperator = LogicalOperator.AND
    left: Expression = None
    right: Expression = None


@dataclass
class ParenthesizedExpression(Expression):
    """Expression wrapped in grouping parentheses."""
    kind: ClassVar[NodeKind] = NodeKind.PARENTHESIZED_EXPRESSION

    expression: Expression = None


@dataclass
class ObjectProperty(Node):
    """
    Key/value pair inside an object expression.

    Attributes:
        key: Property name (Identifier or StringLiteral)
        value: Property value expression
    """
    kind: ClassVar[NodeKind] = NodeKind.OBJECT_PROPERTY

    key: Union[Identifier, StringLiteral] = None
    value: Expression = None

    @property
    def key_name(self) -> str:
        """The property name regardless of whether the key is quoted."""
        if self.key.kind is NodeKind.IDENTIFIER:
            return self.key.name
        return self.key.value


@dataclass
class ObjectExpression(Expression):
    """Object literal, e.g. { id: 'x', until: '2.0' }."""
    kind: ClassVar[NodeKind] = NodeKind.OBJECT_EXPRESSION

    properties: list[ObjectProperty] = field(default_factory=list)


# =============================================================================
# Statements and Declarations
# =============================================================================

@dataclass
class ExpressionStatement(Statement):
    """
    Expression used as a statement.

    Every macro call site is an ExpressionStatement whose expression is a
    CallExpression; expansion replaces that expression in place.
    """
    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION_STATEMENT

    expression: Expression = None


@dataclass
class VariableDeclarator(Node):
    """
    Single binding inside a variable declaration.

    Attributes:
        id: The bound name
        init: The initializer expression
    """
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATOR

    id: Identifier = None
    init: Optional[Expression] = None


@dataclass
class VariableDeclaration(Statement):
    """
    Variable declaration statement (const NAME = value;).

    Attributes:
        declaration_kind: "const", "let" or "var"
        declarations: The declarators in source order
    """
    kind: ClassVar[NodeKind] = NodeKind.VARIABLE_DECLARATION

    declaration_kind: str = "const"
    declarations: list[VariableDeclarator] = field(default_factory=list)


@dataclass
class ImportSpecifier(Node):
    """
    Named import inside an import declaration.

    Attributes:
        imported: The name exported by the source module
        local: The local binding (defaults to the imported name)
    """
    kind: ClassVar[NodeKind] = NodeKind.IMPORT_SPECIFIER

    imported: Identifier = None
    local: Optional[Identifier] = None
