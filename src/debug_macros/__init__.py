"""
Debug Macros - Compile-Time Diagnostic Macro Expander
=====================================================

This package rewrites diagnostic calls into expressions gated by a
compile-time debug flag, so production builds can set the flag to 0 and
let a minifier strip the diagnostics as dead code:

    assert(ready, 'not ready');
        -> (DEBUG && ready && console.assert(ready, 'not ready'));

    deprecate('old api', usingOldApi, { id: 'old-api', until: '3.0' });
        -> (DEBUG && usingOldApi && console.warn('DEPRECATED [old-api]: old api. Will be removed in 3.0.'));

It also replaces flag imports with constant declarations:

    import { DEBUG } from 'env-flags';   ->   const DEBUG = 1;

Main Components
---------------
- **expansion**: the expander core (MacroBuilder and its collaborators)
- **options**: plugin-style options (helpers, flag sources)
- **cli**: the `debug-macros` command-line tool

Quick Start
-----------
    >>> from debug_macros import MacroBuilder, CallSite, render
    >>> builder = MacroBuilder(externalize_helpers={"global": "Ember"})
    >>> builder.warn(site)
    >>> builder.expand_macros("DEBUG")
    >>> render(site.statement)
    '(DEBUG && Ember.warn("careful"));'
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from debug_macros.errors import (
    DebugMacrosError,
    SourceLocation,
    MacroError,
    MissingMetadataError,
    FlagError,
    UnsupportedFlagError,
    OptionsError,
)
from debug_macros.expansion import (
    AssertGuardPolicy,
    CallSite,
    ConstantEmitter,
    DeprecationMeta,
    ExpansionPlan,
    HelperConfiguration,
    HelperResolver,
    MacroBuilder,
    NodeFactory,
    PendingExpansionQueue,
    build_chain,
    realize,
    render,
)
from debug_macros.options import FlagSource, MacroOptions, load_options

__all__ = [
    "__version__",
    # Errors
    "DebugMacrosError",
    "SourceLocation",
    "MacroError",
    "MissingMetadataError",
    "FlagError",
    "UnsupportedFlagError",
    "OptionsError",
    # Expansion
    "AssertGuardPolicy",
    "CallSite",
    "ConstantEmitter",
    "DeprecationMeta",
    "ExpansionPlan",
    "HelperConfiguration",
    "HelperResolver",
    "MacroBuilder",
    "NodeFactory",
    "PendingExpansionQueue",
    "build_chain",
    "realize",
    "render",
    # Options
    "FlagSource",
    "MacroOptions",
    "load_options",
]
