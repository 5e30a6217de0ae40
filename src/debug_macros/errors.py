"""
Debug Macros Error Hierarchy
============================

This module defines the exception hierarchy for the debug macro expander.
All exceptions inherit from DebugMacrosError, allowing callers to catch all
expansion-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
DebugMacrosError (base)
├── MacroError (malformed macro usage at a call site)
│   └── MissingMetadataError - deprecate() meta lacks "id" or "until"
├── FlagError (flag constant emission)
│   └── UnsupportedFlagError - imported name is not a configured flag
└── OptionsError - invalid expander options

Design Philosophy
-----------------
Both macro and flag errors are programmer-authoring mistakes: they are
raised immediately at collection time and abort the build. Each exception
captures source location information (filename, line, column) when the
host supplies it, so the rendered message points at the offending call.

Error messages follow this format:
    filename:line:column: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class DebugMacrosError(Exception):
    """
    Base exception for all debug macro errors.

    Provides common formatting for error messages including source
    location tracking and optional hint messages:

        try:
            builder.deprecate(site)
        except DebugMacrosError as e:
            print(f"Error: {e}")

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            app.js:12:3: error: deprecate's meta information requires an "id" field
            hint: add id: '<unique-id>' to the third argument of deprecate()
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Locations are supplied by the host that parsed the source; the
    expander only carries them through to diagnostics.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Macro Errors
# =============================================================================

class MacroError(DebugMacrosError):
    """
    Malformed usage of a debug macro.

    Attributes:
        macro: Name of the macro being expanded (assert, warn, deprecate)
    """

    def __init__(
        self,
        macro: str,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.macro = macro
        super().__init__(message, location=location, hint=hint)


class MissingMetadataError(MacroError):
    """
    A deprecate() call is missing a required meta field.

    The third argument of deprecate() must carry both "id" and "until".
    This is raised before anything is queued for the offending site.

    Example:
        deprecate('old api', false, { until: '3.0' });  // Error: no id
    """

    def __init__(
        self,
        field: str,
        macro: str = "deprecate",
        location: Optional[SourceLocation] = None,
    ):
        self.field = field
        super().__init__(
            macro,
            f"{macro}'s meta information requires an \"{field}\" field.",
            location=location,
            hint=f"add {field}: '...' to the meta object passed to {macro}()",
        )


# =============================================================================
# Flag Errors
# =============================================================================

class FlagError(DebugMacrosError):
    """Base exception for flag constant emission errors."""
    pass


class UnsupportedFlagError(FlagError):
    """
    An imported name is not present in the configured flag table.

    Raised for the first offending specifier; the import statement it
    belongs to produces no declarations at all.

    Attributes:
        flag: The imported name that was not found
        source: The module the name was imported from
        known_flags: Flags configured for that source (for the hint)
    """

    def __init__(
        self,
        flag: str,
        source: str,
        location: Optional[SourceLocation] = None,
        known_flags: Optional[list[str]] = None,
    ):
        self.flag = flag
        self.source = source
        self.known_flags = known_flags or []

        hint = None
        if self.known_flags:
            names = ", ".join(f"'{name}'" for name in self.known_flags[:5])
            hint = f"supported flags from {source}: {names}"

        super().__init__(
            f"Imported {flag} from {source} which is not a supported flag.",
            location=location,
            hint=hint,
        )


# =============================================================================
# Configuration Errors
# =============================================================================

class OptionsError(DebugMacrosError):
    """
    Invalid expander options.

    Raised when an options document has the wrong shape, for example a
    flag value that is not an integer or a feature without a source.
    """
    pass
