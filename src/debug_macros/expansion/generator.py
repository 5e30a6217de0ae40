"""
Source Rendering
================

Prints expression-tree nodes back out as JavaScript source text. Used by
the command-line tool and handy in tests:

    >>> render(builder.debug_flag("DEBUG", 1))
    'const DEBUG = 1;'
    >>> render(site.statement)
    '(DEBUG && console.warn("careful"));'

The output is not pretty-printed; parentheses appear only where the tree
holds a ParenthesizedExpression, plus around a nested logical expression on
the right-hand side where omitting them would change the grouping.
"""

import json

from debug_macros.expansion.ast import Node, NodeKind


def render(node: Node) -> str:
    """Convert a node to its source representation."""
    if node is None:
        return ""

    kind = node.kind
    if kind is NodeKind.STRING_LITERAL:
        return json.dumps(node.value)
    if kind is NodeKind.NUMERIC_LITERAL:
        return str(node.value)
    if kind is NodeKind.BOOLEAN_LITERAL:
        return "true" if node.value else "false"
    if kind is NodeKind.IDENTIFIER:
        return node.name
    if kind is NodeKind.MEMBER_EXPRESSION:
        return f"{render(node.object)}.{render(node.property)}"
    if kind is NodeKind.CALL_EXPRESSION:
        args = ", ".join(render(a) for a in node.arguments)
        return f"{render(node.callee)}({args})"
    if kind is NodeKind.LOGICAL_EXPRESSION:
        right = render(node.right)
        # && and || are left-associative; a nested right operand needs grouping
        if node.right.kind is NodeKind.LOGICAL_EXPRESSION:
            right = f"({right})"
        return f"{render(node.left)} {node.operator.value} {right}"
    if kind is NodeKind.PARENTHESIZED_EXPRESSION:
        return f"({render(node.expression)})"
    if kind is NodeKind.OBJECT_EXPRESSION:
        if not node.properties:
            return "{}"
        props = ", ".join(render(p) for p in node.properties)
        return f"{{ {props} }}"
    if kind is NodeKind.OBJECT_PROPERTY:
        return f"{render(node.key)}: {render(node.value)}"
    if kind is NodeKind.EXPRESSION_STATEMENT:
        return f"{render(node.expression)};"
    if kind is NodeKind.VARIABLE_DECLARATOR:
        if node.init is None:
            return render(node.id)
        return f"{render(node.id)} = {render(node.init)}"
    if kind is NodeKind.VARIABLE_DECLARATION:
        decls = ", ".join(render(d) for d in node.declarations)
        return f"{node.declaration_kind} {decls};"
    if kind is NodeKind.IMPORT_SPECIFIER:
        if node.local is None or node.local.name == node.imported.name:
            return render(node.imported)
        return f"{render(node.imported)} as {render(node.local)}"
    return f"<{type(node).__name__}>"
