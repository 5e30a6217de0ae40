"""
Debug Macros Command-Line Interface
===================================

This package provides the `debug-macros` command-line tool, a Click-based
application with subcommands for expanding single macro calls, emitting
flag constants, and formatting deprecation messages.
"""

__all__ = ["debugmacros"]
