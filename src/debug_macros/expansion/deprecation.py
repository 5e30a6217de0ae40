"""
Deprecation Messages
====================

Reads the meta object passed as the third argument of deprecate() and
formats the single string the expansion logs:

    DEPRECATED [<id>]: <message>. Will be removed in <until>.

followed by " See <url> for more information." when a url is given.
"""

from dataclasses import dataclass
from typing import Optional

from debug_macros.errors import MissingMetadataError, SourceLocation
from debug_macros.expansion.ast import NodeKind, ObjectExpression, StringLiteral

# Meta fields a deprecate() call must always carry
REQUIRED_FIELDS = ("id", "until")


@dataclass(frozen=True)
class DeprecationMeta:
    """
    Metadata accompanying a deprecate() call.

    Attributes:
        id: Unique deprecation identifier (required)
        until: Version in which the deprecated API is removed (required)
        url: Page with upgrade instructions (optional)
    """
    id: Optional[str] = None
    until: Optional[str] = None
    url: Optional[str] = None

    def validate(self, location: Optional[SourceLocation] = None) -> None:
        """
        Check that the required fields are present.

        Raises:
            MissingMetadataError: For the first required field that is missing
        """
        for name in REQUIRED_FIELDS:
            if not getattr(self, name):
                raise MissingMetadataError(name, location=location)


def read_deprecation_meta(meta_expression: ObjectExpression) -> DeprecationMeta:
    """
    Read id/until/url off an object expression.

    Only literal values are understood; keys other than id, until and url
    are ignored. The result is not validated.
    """
    values = {}
    for prop in meta_expression.properties:
        name = prop.key_name
        if name in ("id", "until", "url"):
            values[name] = _literal_text(prop.value)
    return DeprecationMeta(**values)


def _literal_text(node) -> Optional[str]:
    if node is None:
        return None
    if node.kind is NodeKind.STRING_LITERAL:
        return node.value
    if node.kind is NodeKind.NUMERIC_LITERAL:
        # 0 counts as absent, like an empty string
        return str(node.value) if node.value else None
    return None


def deprecation_text(message: str, meta: DeprecationMeta) -> str:
    """Return the formatted deprecation message as plain text."""
    text = f"DEPRECATED [{meta.id}]: {message}. Will be removed in {meta.until}."
    if meta.url:
        text += f" See {meta.url} for more information."
    return text


def format_deprecation_message(message: StringLiteral, meta: DeprecationMeta, factory) -> StringLiteral:
    """
    Build the string literal logged by an expanded deprecate() call.

    Assumes meta has already been validated.
    """
    return factory.string_literal(deprecation_text(message.value, meta))
