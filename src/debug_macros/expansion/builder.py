"""
Macro Builder
=============

This module provides the main interface of the expander. A MacroBuilder is
scoped to one compilation unit and drives the two-phase expansion:

    Collect: assert_macro() / warn() / deprecate()   (once per call site)
    Apply:   expand_macros(binding_name)             (once per unit)

Expansions
----------
assert($PREDICATE, $MESSAGE) expands into

    (DEBUG && $PREDICATE && console.assert($PREDICATE, $MESSAGE));

warn($MESSAGE) expands into

    (DEBUG && console.warn($MESSAGE));

deprecate($MESSAGE, $PREDICATE, { id, until, url }) expands into

    (DEBUG && $PREDICATE && console.warn('DEPRECATED [$ID]: $MESSAGE. Will be removed in $UNTIL. See $URL for more information.'));

With external helpers enabled, console.assert / console.warn become
assert / warn / deprecate, or $GLOBAL_NS.assert / .warn / .deprecate when
a global namespace is configured.

Usage
-----
>>> builder = MacroBuilder(NodeFactory(), {"global": "Ember"})
>>> for site in located_sites:
...     builder.recognize(site_name, site)
>>> builder.expand_macros("DEBUG")
"""

import logging
from enum import Enum
from typing import Any

from debug_macros.expansion.ast import Expression, VariableDeclaration
from debug_macros.expansion.chain import PendingExpansionQueue, build_chain, realize
from debug_macros.expansion.constants import ConstantEmitter
from debug_macros.expansion.deprecation import format_deprecation_message, read_deprecation_meta
from debug_macros.expansion.factory import NodeFactory
from debug_macros.expansion.helpers import HelperConfiguration, HelperResolver
from debug_macros.expansion.site import CallSite

# Logger for this module
logger = logging.getLogger(__name__)


class AssertGuardPolicy(Enum):
    """
    Which assert() arguments are repeated as guards ahead of the call.

    IDENTIFIERS: every bare identifier argument, in argument order
    PREDICATE: the predicate only, and only if it is a bare identifier
    NONE: no extra guards; assert() expands like warn()
    """
    IDENTIFIERS = "identifiers"
    PREDICATE = "predicate"
    NONE = "none"


class MacroBuilder:
    """
    Expands debug macros for one compilation unit.

    Attributes:
        t: Node factory used to fabricate expansion nodes
        helpers: The helper configuration in force
        assert_guards: Guard selection policy for assert()
        expressions: Queue of collected, not yet applied expansions
    """

    def __init__(
        self,
        factory=None,
        externalize_helpers: Any = None,
        assert_guards: AssertGuardPolicy = AssertGuardPolicy.IDENTIFIERS,
    ):
        """
        Initialize the builder.

        Args:
            factory: Tree-construction capability (defaults to NodeFactory)
            externalize_helpers: False/None for console primitives, True or
                a mapping (optionally with "global") for external helpers
            assert_guards: Which assert() arguments become guards
        """
        self.t = factory or NodeFactory()
        self.helpers = HelperConfiguration.from_option(externalize_helpers)
        self.assert_guards = AssertGuardPolicy(assert_guards)
        self.expressions = PendingExpansionQueue()
        self._resolver = HelperResolver(self.t, self.helpers)
        self._constants = ConstantEmitter(self.t)

    # =========================================================================
    # Collection Phase
    # =========================================================================

    def recognize(self, name: str, site: CallSite) -> None:
        """Dispatch a located call to the macro of the given name."""
        handler = {
            "assert": self.assert_macro,
            "warn": self.warn,
            "deprecate": self.deprecate,
        }.get(name)
        if handler is None:
            raise ValueError(f"'{name}' is not a debug macro")
        handler(site)

    def assert_macro(self, site: CallSite) -> None:
        """Collect an assert($PREDICATE, $MESSAGE) call."""
        args = site.arguments
        call = self._resolver.resolve("assert", args)
        self._push(site, self._assert_guards(args), call, "assert")

    def warn(self, site: CallSite) -> None:
        """Collect a warn($MESSAGE) call."""
        call = self._resolver.resolve("warn", site.arguments)
        self._push(site, [], call, "warn")

    def deprecate(self, site: CallSite) -> None:
        """
        Collect a deprecate($MESSAGE, $PREDICATE, $META) call.

        Raises:
            MissingMetadataError: If $META lacks "id" or "until"; nothing is
                queued for the site in that case
        """
        message, predicate, meta_expression = site.arguments[:3]

        meta = read_deprecation_meta(meta_expression)
        meta.validate(location=site.location)

        deprecation_message = format_deprecation_message(message, meta, self.t)
        call = self._resolver.resolve("deprecate", [deprecation_message])
        self._push(site, [predicate], call, "deprecate")

    def _push(self, site: CallSite, guards: list[Expression], call: Expression, macro: str) -> None:
        self.expressions.push(site, build_chain(guards, call))
        logger.debug(f"Queued {macro} at {site} with {len(guards)} guard(s)")

    def _assert_guards(self, args: list[Expression]) -> list[Expression]:
        if self.assert_guards is AssertGuardPolicy.NONE:
            return []
        if self.assert_guards is AssertGuardPolicy.PREDICATE:
            return [arg for arg in args[:1] if self.t.is_identifier(arg)]
        return [arg for arg in args if self.t.is_identifier(arg)]

    # =========================================================================
    # Constants
    # =========================================================================

    def debug_flag(self, name, value: int) -> VariableDeclaration:
        """Produce `const <name> = <value>;`."""
        return self._constants.debug_flag(name, value)

    def flag_constants(self, specifiers, flag_table, source: str) -> list[VariableDeclaration]:
        """Produce `const` declarations for every imported flag."""
        return self._constants.flag_constants(specifiers, flag_table, source)

    # =========================================================================
    # Apply Phase
    # =========================================================================

    def expand_macros(self, binding: str) -> int:
        """
        Perform the actual expansion of every collected macro.

        Each site's call is replaced with a parenthesized && chain gated by
        binding. Sites are rewritten in collection order. Calling this again
        without collecting new sites does nothing.

        Args:
            binding: Name the debug flag is bound to in this unit

        Returns:
            Number of sites expanded
        """
        count = 0
        for entry in self.expressions.drain():
            logical = realize(entry.plan, binding, self.t)
            entry.site.replace_with(self.t.parenthesized_expression(logical))
            count += 1

        if count:
            logger.info(f"Expanded {count} debug macro(s) gated by {binding}")
        return count

    @property
    def pending(self) -> int:
        """Number of collected sites awaiting expansion."""
        return len(self.expressions)
