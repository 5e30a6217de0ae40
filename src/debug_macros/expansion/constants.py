"""
Flag Constant Emission
======================

Produces the `const` declarations that replace flag imports:

    import { DEBUG } from '@ember/env-flags';
    import { FEATURE_A, FEATURE_B } from '@ember/features';

becomes

    const DEBUG = 1;
    const FEATURE_A = 0;
    const FEATURE_B = 1;

Downstream minifiers then treat the flags as constants and drop the dead
branches they guard.
"""

import logging
from typing import Mapping, Sequence, Union

from debug_macros.errors import UnsupportedFlagError
from debug_macros.expansion.ast import Identifier, ImportSpecifier, NodeKind, VariableDeclaration

# Logger for this module
logger = logging.getLogger(__name__)


class ConstantEmitter:
    """
    Builds constant declarations for debug and feature flags.

    Attributes:
        t: Node factory used to build declarations
    """

    def __init__(self, factory):
        self.t = factory

    def debug_flag(self, name: Union[str, Identifier], value: int) -> VariableDeclaration:
        """
        Produce `const <name> = <value>;`.

        Args:
            name: Binding name (string or Identifier)
            value: Integer value of the flag
        """
        t = self.t
        if isinstance(name, str):
            name = t.identifier(name)
        logger.debug(f"Emitting debug flag {name.name} = {value}")
        return self._create_constant(name, t.numeric_literal(value))

    def flag_constants(
        self,
        specifiers: Sequence[Union[ImportSpecifier, str]],
        flag_table: Mapping[str, int],
        source_label: str,
    ) -> list[VariableDeclaration]:
        """
        Produce one constant per imported flag.

        Every specifier is checked before anything is built, so a single
        unsupported name yields no declarations at all.

        Args:
            specifiers: Import specifiers (or imported names) in source order
            flag_table: Supported flag names mapped to their values
            source_label: Module the specifiers were imported from

        Returns:
            Declarations in specifier order

        Raises:
            UnsupportedFlagError: For the first name missing from flag_table
        """
        names = [self._imported_name(specifier) for specifier in specifiers]

        for name in names:
            if name not in flag_table:
                raise UnsupportedFlagError(name, source_label, known_flags=sorted(flag_table))

        t = self.t
        declarations = [
            self._create_constant(t.identifier(name), t.numeric_literal(flag_table[name]))
            for name in names
        ]
        logger.debug(f"Emitted {len(declarations)} flag constants from {source_label}")
        return declarations

    def _create_constant(self, left: Identifier, right) -> VariableDeclaration:
        t = self.t
        return t.variable_declaration("const", [t.variable_declarator(left, right)])

    @staticmethod
    def _imported_name(specifier: Union[ImportSpecifier, str]) -> str:
        if isinstance(specifier, str):
            return specifier
        if specifier.kind is NodeKind.IMPORT_SPECIFIER:
            return specifier.imported.name
        raise TypeError(f"expected an import specifier, got {type(specifier).__name__}")
