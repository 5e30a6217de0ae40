"""
Helper Resolution
=================

Decides which call form a macro expands to. There are three targets:

    console.assert(...)     built-in diagnostic primitive (helpers disabled)
    assert(...)             locally scoped helper function
    Ember.assert(...)       helper reached through a global namespace

The choice is fixed per compilation unit by HelperConfiguration, which is
built from the "externalizeHelpers" option:

    externalizeHelpers: absent/false     -> console.<kind>
    externalizeHelpers: true or {}       -> <kind>
    externalizeHelpers: {global: "NS"}   -> NS.<kind>

The deprecate macro is the only asymmetric case: its primitive form uses
console.warn, while both helper forms call a helper named "deprecate".
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from debug_macros.errors import OptionsError
from debug_macros.expansion.ast import CallExpression, Expression

# Runtime object holding the built-in diagnostic primitives
CONSOLE_OBJECT = "console"

# Primitive member used when a macro has no same-named console method
PRIMITIVE_MEMBERS = {
    "assert": "assert",
    "warn": "warn",
    "deprecate": "warn",
}


@dataclass(frozen=True)
class HelperConfiguration:
    """
    How diagnostic calls are emitted for one compilation unit.

    Attributes:
        enabled: True when external helpers replace the console primitives
        global_namespace: Identifier the helpers hang off, if any
    """
    enabled: bool = False
    global_namespace: Optional[str] = None

    @classmethod
    def from_option(cls, value: Any) -> "HelperConfiguration":
        """
        Build a configuration from the raw externalizeHelpers option.

        Raises:
            OptionsError: If the option is not a bool, None, or mapping, or
                the "global" entry is not a non-empty string
        """
        if value is None or value is False:
            return cls()
        if value is True:
            return cls(enabled=True)
        if isinstance(value, HelperConfiguration):
            return value
        if not isinstance(value, dict):
            raise OptionsError(
                f"externalizeHelpers must be a boolean or an object, got {type(value).__name__}"
            )

        namespace = value.get("global")
        if namespace is not None and (not isinstance(namespace, str) or not namespace):
            raise OptionsError(
                "externalizeHelpers.global must be a non-empty string",
                hint="use e.g. {\"global\": \"Ember\"} or omit the key for local helpers",
            )
        return cls(enabled=True, global_namespace=namespace)


class HelperResolver:
    """
    Dispatch table from macro kind to terminal call expression.

    The resolver has no error conditions; argument shape is validated by
    the host before a site is handed over.

    Example:
        >>> resolver = HelperResolver(NodeFactory(), HelperConfiguration())
        >>> call = resolver.resolve("warn", [t.string_literal("hi")])
        >>> render(call)
        'console.warn("hi")'
    """

    def __init__(self, factory, config: HelperConfiguration):
        self.t = factory
        self.config = config

    def resolve(self, kind: str, args: Sequence[Expression]) -> CallExpression:
        """
        Produce the terminal call for a macro.

        Args:
            kind: "assert", "warn" or "deprecate"
            args: Arguments of the emitted call

        Returns:
            CallExpression targeting the primitive, bare helper, or
            namespaced helper
        """
        if not self.config.enabled:
            return self._console_call(PRIMITIVE_MEMBERS[kind], args)
        if self.config.global_namespace:
            return self._namespaced_helper_call(kind, args, self.config.global_namespace)
        return self._helper_call(kind, args)

    def _namespaced_helper_call(self, name: str, args, namespace: str) -> CallExpression:
        t = self.t
        return t.call_expression(t.member_expression(t.identifier(namespace), t.identifier(name)), args)

    def _helper_call(self, name: str, args) -> CallExpression:
        t = self.t
        return t.call_expression(t.identifier(name), args)

    def _console_call(self, member: str, args) -> CallExpression:
        t = self.t
        return t.call_expression(t.member_expression(t.identifier(CONSOLE_OBJECT), t.identifier(member)), args)
