"""
Debug Macro Expansion
=====================

This package implements the expansion core: recognizing assert / warn /
deprecate call sites, choosing the call form they expand to, building the
debug-flag gated && chains, and emitting flag constants.

Pipeline
--------
    located call sites -> MacroBuilder (collect) -> ExpansionPlans
    ExpansionPlans + flag binding -> expand_macros (apply) -> rewritten tree

Modules
-------
- ast: tagged expression tree node types
- factory: tree-construction capability (NodeFactory)
- site: CallSite handles over located macro calls
- helpers: HelperConfiguration and HelperResolver
- deprecation: deprecation meta reading and message formatting
- chain: ExpansionPlan, realize(), PendingExpansionQueue
- constants: ConstantEmitter for debug and feature flags
- builder: MacroBuilder, the collect/apply driver
- generator: render() back to source text
"""

from debug_macros.expansion.ast import (
    Node,
    NodeKind,
    Expression,
    Statement,
    StringLiteral,
    NumericLiteral,
    BooleanLiteral,
    Identifier,
    MemberExpression,
    CallExpression,
    LogicalExpression,
    LogicalOperator,
    ParenthesizedExpression,
    ObjectExpression,
    ObjectProperty,
    ExpressionStatement,
    VariableDeclaration,
    VariableDeclarator,
    ImportSpecifier,
)
from debug_macros.expansion.factory import NodeFactory
from debug_macros.expansion.site import CallSite
from debug_macros.expansion.helpers import HelperConfiguration, HelperResolver
from debug_macros.expansion.deprecation import (
    DeprecationMeta,
    read_deprecation_meta,
    format_deprecation_message,
)
from debug_macros.expansion.chain import (
    ExpansionPlan,
    PendingExpansion,
    PendingExpansionQueue,
    build_chain,
    realize,
)
from debug_macros.expansion.constants import ConstantEmitter
from debug_macros.expansion.builder import AssertGuardPolicy, MacroBuilder
from debug_macros.expansion.generator import render

__all__ = [
    # Tree
    "Node",
    "NodeKind",
    "Expression",
    "Statement",
    "StringLiteral",
    "NumericLiteral",
    "BooleanLiteral",
    "Identifier",
    "MemberExpression",
    "CallExpression",
    "LogicalExpression",
    "LogicalOperator",
    "ParenthesizedExpression",
    "ObjectExpression",
    "ObjectProperty",
    "ExpressionStatement",
    "VariableDeclaration",
    "VariableDeclarator",
    "ImportSpecifier",
    # Construction
    "NodeFactory",
    "CallSite",
    # Expansion
    "HelperConfiguration",
    "HelperResolver",
    "DeprecationMeta",
    "read_deprecation_meta",
    "format_deprecation_message",
    "ExpansionPlan",
    "PendingExpansion",
    "PendingExpansionQueue",
    "build_chain",
    "realize",
    "ConstantEmitter",
    "AssertGuardPolicy",
    "MacroBuilder",
    "render",
]
