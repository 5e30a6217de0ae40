"""
Tests for Helper Resolution
===========================

These tests verify that HelperResolver picks the right call target for
every macro kind under each of the three helper configurations, and that
HelperConfiguration is built correctly from the raw option.
"""

import pytest

from debug_macros.errors import OptionsError
from debug_macros.expansion.ast import NodeKind, StringLiteral
from debug_macros.expansion.generator import render
from debug_macros.expansion.helpers import HelperConfiguration, HelperResolver


# =============================================================================
# HelperConfiguration
# =============================================================================

class TestHelperConfiguration:
    """Tests for HelperConfiguration.from_option()."""

    def test_absent_disables_helpers(self):
        """None and False should select the console primitives."""
        assert HelperConfiguration.from_option(None) == HelperConfiguration(enabled=False)
        assert HelperConfiguration.from_option(False) == HelperConfiguration(enabled=False)

    def test_true_enables_local_helpers(self):
        """True and {} should enable helpers without a namespace."""
        assert HelperConfiguration.from_option(True) == HelperConfiguration(enabled=True)
        assert HelperConfiguration.from_option({}) == HelperConfiguration(enabled=True)

    def test_global_namespace(self):
        """A "global" entry should be carried through as the namespace."""
        config = HelperConfiguration.from_option({"global": "Ember"})
        assert config.enabled
        assert config.global_namespace == "Ember"

    def test_invalid_option_type(self):
        """Non-boolean, non-object options should be rejected."""
        with pytest.raises(OptionsError, match="externalizeHelpers"):
            HelperConfiguration.from_option("Ember")

    def test_empty_global_rejected(self):
        """An empty namespace string should be rejected."""
        with pytest.raises(OptionsError):
            HelperConfiguration.from_option({"global": ""})


# =============================================================================
# Dispatch Table
# =============================================================================

CASES = [
    # (option, kind, expected callee)
    (None, "assert", "console.assert"),
    (None, "warn", "console.warn"),
    (None, "deprecate", "console.warn"),
    (True, "assert", "assert"),
    (True, "warn", "warn"),
    (True, "deprecate", "deprecate"),
    ({"global": "Ember"}, "assert", "Ember.assert"),
    ({"global": "Ember"}, "warn", "Ember.warn"),
    ({"global": "Ember"}, "deprecate", "Ember.deprecate"),
]


class TestHelperResolver:
    """Tests for HelperResolver.resolve()."""

    @pytest.mark.parametrize("option,kind,callee", CASES)
    def test_dispatch_table(self, t, option, kind, callee):
        """Every kind/configuration pair should target the expected callee."""
        resolver = HelperResolver(t, HelperConfiguration.from_option(option))
        call = resolver.resolve(kind, [StringLiteral(value="m")])

        assert call.kind is NodeKind.CALL_EXPRESSION
        assert render(call.callee) == callee

    def test_primitive_callee_shape(self, t):
        """Primitive calls should be member expressions on console."""
        call = HelperResolver(t, HelperConfiguration()).resolve("assert", [])
        assert call.callee.kind is NodeKind.MEMBER_EXPRESSION
        assert call.callee.object.name == "console"
        assert call.callee.property.name == "assert"

    def test_local_helper_callee_shape(self, t):
        """Local helpers should be called through a bare identifier."""
        call = HelperResolver(t, HelperConfiguration(enabled=True)).resolve("warn", [])
        assert call.callee.kind is NodeKind.IDENTIFIER
        assert call.callee.name == "warn"

    def test_arguments_preserved(self, t):
        """Arguments should be passed through in order."""
        args = [t.identifier("ready"), t.string_literal("not ready")]
        call = HelperResolver(t, HelperConfiguration()).resolve("assert", args)
        assert call.arguments == args
