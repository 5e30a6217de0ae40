"""
debug-macros - Debug Macro Expander Command-Line Interface
==========================================================

This module implements a command-line front end for the macro expander.
It is mainly useful for checking what a given configuration produces
without running a full build.

Commands
--------
- **expand**: Expand a single assert / warn / deprecate call
- **flags**: Emit the constants replacing a flag import
- **deprecation**: Format a deprecation message

Usage Examples
--------------
Expand a warning with default options:
    $ debug-macros expand warn '"careful"'
    (DEBUG && console.warn("careful"));

Expand an assertion using helpers from options.json:
    $ debug-macros expand -c options.json assert ready '"not ready"'

Emit feature flag constants:
    $ debug-macros flags options.json @ember/features FEATURE_A FEATURE_B

Format a deprecation message:
    $ debug-macros deprecation "old api" --id old-api --until 3.0
"""

import json
import logging
import re
from pathlib import Path
from typing import Optional

import click

from debug_macros import __version__
from debug_macros.cli.errors import handle_cli_exception
from debug_macros.expansion.ast import (
    BooleanLiteral,
    CallExpression,
    Expression,
    ExpressionStatement,
    Identifier,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
)
from debug_macros.expansion.deprecation import DeprecationMeta, deprecation_text
from debug_macros.expansion.generator import render
from debug_macros.expansion.site import CallSite
from debug_macros.options import DEBUG_FLAG, MacroOptions, load_options

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


# =============================================================================
# Macro Argument Parameter Type
# =============================================================================

class MacroArgument(click.ParamType):
    """
    Click parameter type for a macro call argument.

    Accepts a JSON literal ("text", 1, true, {"id": "x"}) or a bare
    identifier (ready, this_is_fine).
    """
    name = "argument"

    def convert(self, value, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> Expression:
        """Convert command-line text to an expression node."""
        if not isinstance(value, str):
            return value

        if IDENTIFIER_PATTERN.match(value) and value not in ("true", "false", "null"):
            return Identifier(name=value)

        try:
            data = json.loads(value)
        except json.JSONDecodeError:
            self.fail(f"'{value}' is neither a JSON literal nor an identifier", param, ctx)

        node = _literal_node(data)
        if node is None:
            self.fail(f"unsupported argument value '{value}'", param, ctx)
        return node


def _literal_node(data) -> Optional[Expression]:
    if isinstance(data, bool):
        return BooleanLiteral(value=data)
    if isinstance(data, (int, float)):
        return NumericLiteral(value=data)
    if isinstance(data, str):
        return StringLiteral(value=data)
    if isinstance(data, dict):
        props = []
        for key, value in data.items():
            node = _literal_node(value)
            if node is None:
                return None
            props.append(ObjectProperty(key=Identifier(name=key), value=node))
        return ObjectExpression(properties=props)
    return None


MACRO_ARGUMENT = MacroArgument()


def _read_options(path: Optional[Path]) -> MacroOptions:
    if path is None:
        return MacroOptions()
    return load_options(path)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.version_option(__version__, "--version", "-V", prog_name="debug-macros")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """
    Debug macro expander.

    Rewrites assert / warn / deprecate calls into debug-flag gated
    expressions and emits constants for compile-time flags.

    \b
    Commands:
      expand       Expand a single macro call
      flags        Emit constants for imported flags
      deprecation  Format a deprecation message
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# Expand Command
# =============================================================================

@main.command("expand")
@click.argument("macro", type=click.Choice(["assert", "warn", "deprecate"]))
@click.argument("arguments", nargs=-1, type=MACRO_ARGUMENT)
@click.option(
    "-c", "--options", "options_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON options file (default: console primitives, DEBUG flag)",
)
@click.option(
    "-b", "--binding",
    default=DEBUG_FLAG,
    show_default=True,
    help="Name the debug flag is bound to",
)
@click.pass_context
def expand(
    ctx: click.Context,
    macro: str,
    arguments: tuple[Expression, ...],
    options_file: Optional[Path],
    binding: str,
) -> None:
    """
    Expand a single macro call and print the result.

    MACRO is assert, warn or deprecate. ARGUMENTS are the call's arguments,
    each a JSON literal or a bare identifier.

    \b
    Examples:
      debug-macros expand warn '"careful"'
      debug-macros expand assert ready '"not ready"'
      debug-macros expand deprecate '"old"' false '{"id": "x", "until": "2.0"}'
    """
    verbose = ctx.obj.get("verbose", False)
    expected = {"assert": 2, "warn": 1, "deprecate": 3}[macro]

    try:
        if len(arguments) != expected:
            raise click.BadParameter(
                f"{macro} takes {expected} argument(s), got {len(arguments)}"
            )
        if macro == "deprecate" and not isinstance(arguments[2], ObjectExpression):
            raise click.BadParameter("deprecate's third argument must be an object")

        options = _read_options(options_file)
        builder = options.create_builder()

        statement = ExpressionStatement(
            expression=CallExpression(callee=Identifier(name=macro), arguments=list(arguments))
        )
        site = CallSite(statement)
        builder.recognize(macro, site)
        builder.expand_macros(binding)

        click.echo(render(site.statement))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Expansion")


# =============================================================================
# Flags Command
# =============================================================================

@main.command("flags")
@click.argument(
    "options_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument("source")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def flags(ctx: click.Context, options_file: Path, source: str, names: tuple[str, ...]) -> None:
    """
    Emit the constants replacing `import { NAMES } from 'SOURCE'`.

    SOURCE must be the env flags source or one of the feature sources
    configured in OPTIONS_FILE.

    \b
    Example:
      debug-macros flags options.json @ember/features FEATURE_A FEATURE_B
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        options = load_options(options_file)
        flag_table = options.flag_table_for(source)
        if flag_table is None:
            raise click.BadParameter(f"'{source}' is not a configured flag source")

        builder = options.create_builder()
        for declaration in builder.flag_constants(list(names), flag_table, source):
            click.echo(render(declaration))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Flags")


# =============================================================================
# Deprecation Command
# =============================================================================

@main.command("deprecation")
@click.argument("message")
@click.option("--id", "deprecation_id", required=True, help="Unique deprecation id")
@click.option("--until", required=True, help="Version the API is removed in")
@click.option("--url", default=None, help="Page with upgrade instructions")
@click.pass_context
def deprecation(
    ctx: click.Context,
    message: str,
    deprecation_id: str,
    until: str,
    url: Optional[str],
) -> None:
    """
    Print the formatted deprecation message for MESSAGE.

    \b
    Example:
      debug-macros deprecation "old api" --id old-api --until 3.0
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        meta = DeprecationMeta(id=deprecation_id, until=until, url=url)
        meta.validate()
        click.echo(deprecation_text(message, meta))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Deprecation")


if __name__ == "__main__":
    main()
