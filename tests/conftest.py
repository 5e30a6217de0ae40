"""
Debug Macros - Test Configuration
=================================

Shared fixtures for the expander tests:
- t: a NodeFactory
- make_site: builds a CallSite for a macro call from argument nodes
- options_file: writes a JSON options document to a temp file
"""

import json

import pytest

from debug_macros.expansion.ast import (
    CallExpression,
    ExpressionStatement,
    Identifier,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
)
from debug_macros.expansion.factory import NodeFactory
from debug_macros.expansion.site import CallSite


@pytest.fixture
def t() -> NodeFactory:
    """Fixture: node factory."""
    return NodeFactory()


@pytest.fixture
def make_site():
    """
    Fixture: factory for macro call sites.

    Usage:
        site = make_site("warn", StringLiteral(value="careful"))
    """
    def _make(name, *args, location=None):
        call = CallExpression(callee=Identifier(name=name), arguments=list(args), location=location)
        return CallSite(ExpressionStatement(expression=call, location=location))
    return _make


@pytest.fixture
def meta():
    """
    Fixture: builds a deprecate() meta object from keyword arguments.

    Usage:
        meta(id="old-api", until="3.0")
    """
    def _meta(**fields):
        return ObjectExpression(properties=[
            ObjectProperty(key=Identifier(name=key), value=StringLiteral(value=value))
            for key, value in fields.items()
        ])
    return _meta


@pytest.fixture
def options_file(tmp_path):
    """Fixture: writes an options document and returns its path."""
    def _write(data, name="options.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path
    return _write
