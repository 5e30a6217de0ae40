"""
Tests for Deprecation Messages
==============================

Covers reading the deprecate() meta object, validating the required
fields, and the exact text of the formatted message.
"""

import pytest

from debug_macros.errors import MissingMetadataError, SourceLocation
from debug_macros.expansion.ast import (
    Identifier,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
)
from debug_macros.expansion.deprecation import (
    DeprecationMeta,
    deprecation_text,
    format_deprecation_message,
    read_deprecation_meta,
)


class TestFormatting:
    """Tests for the formatted deprecation text."""

    def test_without_url(self, t):
        """No url should mean no trailing "See ..." clause."""
        meta = DeprecationMeta(id="X", until="2.0")
        literal = format_deprecation_message(StringLiteral(value="old"), meta, t)
        assert literal.value == "DEPRECATED [X]: old. Will be removed in 2.0."

    def test_with_url(self, t):
        """A url should append the "See ..." clause."""
        meta = DeprecationMeta(id="X", until="2.0", url="http://e")
        literal = format_deprecation_message(StringLiteral(value="old"), meta, t)
        assert literal.value == (
            "DEPRECATED [X]: old. Will be removed in 2.0. See http://e for more information."
        )

    def test_plain_text_helper(self):
        """deprecation_text should match the literal's value."""
        meta = DeprecationMeta(id="a", until="1")
        assert deprecation_text("gone", meta) == "DEPRECATED [a]: gone. Will be removed in 1."


class TestReadMeta:
    """Tests for read_deprecation_meta()."""

    def test_reads_all_fields(self, meta):
        """id, until and url should all be read."""
        result = read_deprecation_meta(meta(id="old-api", until="3.0", url="http://x"))
        assert result == DeprecationMeta(id="old-api", until="3.0", url="http://x")

    def test_ignores_unknown_keys(self, meta):
        """Extra keys should not affect the result."""
        result = read_deprecation_meta(meta(id="a", until="1", since="0.5"))
        assert result == DeprecationMeta(id="a", until="1")

    def test_quoted_keys_and_numbers(self):
        """String keys and numeric values should be understood."""
        expr = ObjectExpression(properties=[
            ObjectProperty(key=StringLiteral(value="id"), value=StringLiteral(value="a")),
            ObjectProperty(key=Identifier(name="until"), value=NumericLiteral(value=3)),
        ])
        assert read_deprecation_meta(expr) == DeprecationMeta(id="a", until="3")

    def test_zero_reads_as_missing(self):
        """A numeric 0 should read as absent, like an empty string."""
        expr = ObjectExpression(properties=[
            ObjectProperty(key=Identifier(name="id"), value=StringLiteral(value="a")),
            ObjectProperty(key=Identifier(name="until"), value=NumericLiteral(value=0)),
        ])
        assert read_deprecation_meta(expr).until is None


class TestValidation:
    """Tests for DeprecationMeta.validate()."""

    def test_valid(self):
        """Both required fields present should pass."""
        DeprecationMeta(id="a", until="1").validate()

    def test_missing_id(self):
        """Missing id should raise, naming the field."""
        with pytest.raises(MissingMetadataError) as exc_info:
            DeprecationMeta(until="1").validate()
        assert exc_info.value.field == "id"
        assert exc_info.value.macro == "deprecate"
        assert 'requires an "id" field' in str(exc_info.value)

    def test_missing_until(self):
        """Missing until should raise, naming the field."""
        with pytest.raises(MissingMetadataError) as exc_info:
            DeprecationMeta(id="a").validate()
        assert exc_info.value.field == "until"

    def test_location_in_message(self):
        """The source location should prefix the message."""
        loc = SourceLocation("app.js", 12, 3)
        with pytest.raises(MissingMetadataError, match=r"^app\.js:12:3: error:"):
            DeprecationMeta(id="a").validate(location=loc)

    @pytest.mark.parametrize("field,value", [
        ("id", StringLiteral(value="")),
        ("until", StringLiteral(value="")),
        ("until", NumericLiteral(value=0)),
    ])
    def test_falsy_literal_is_missing(self, field, value):
        """Empty strings and 0 should fail validation for required fields."""
        props = {"id": StringLiteral(value="a"), "until": StringLiteral(value="1")}
        props[field] = value
        expr = ObjectExpression(properties=[
            ObjectProperty(key=Identifier(name=name), value=node) for name, node in props.items()
        ])
        with pytest.raises(MissingMetadataError) as exc_info:
            read_deprecation_meta(expr).validate()
        assert exc_info.value.field == field
