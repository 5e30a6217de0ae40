"""
Tests for the debug-macros CLI
==============================
"""

from click.testing import CliRunner

from debug_macros.cli.debugmacros import main
from debug_macros.cli.errors import ExitCode


OPTIONS = {
    "externalizeHelpers": {"global": "Ember"},
    "envFlags": {"source": "@ember/env-flags", "flags": {"DEBUG": 1}},
    "features": [{"source": "@ember/features", "flags": {"FEATURE_A": 1, "FEATURE_B": 0}}],
}


class TestCLIBasics:
    """Help and version output."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Debug macro expander" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestExpandCommand:
    """Tests for `debug-macros expand`."""

    def test_warn_default_options(self):
        runner = CliRunner()
        result = runner.invoke(main, ["expand", "warn", '"careful"'])
        assert result.exit_code == 0
        assert result.output.strip() == '(DEBUG && console.warn("careful"));'

    def test_assert_with_options(self, options_file):
        runner = CliRunner()
        result = runner.invoke(
            main, ["expand", "-c", str(options_file(OPTIONS)), "assert", "ready", '"not ready"'],
        )
        assert result.exit_code == 0
        assert result.output.strip() == '(DEBUG && ready && Ember.assert(ready, "not ready"));'

    def test_custom_binding(self):
        runner = CliRunner()
        result = runner.invoke(main, ["expand", "-b", "_DEBUG", "warn", "msg"])
        assert result.output.strip() == "(_DEBUG && console.warn(msg));"

    def test_deprecate(self):
        runner = CliRunner()
        result = runner.invoke(
            main, ["expand", "deprecate", '"old"', "false", '{"id": "X", "until": "2.0"}'],
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            '(DEBUG && false && console.warn("DEPRECATED [X]: old. Will be removed in 2.0."));'
        )

    def test_deprecate_missing_meta(self):
        runner = CliRunner()
        result = runner.invoke(main, ["expand", "deprecate", '"old"', "false", '{"id": "X"}'])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert 'requires an "until" field' in result.output

    def test_wrong_argument_count(self):
        runner = CliRunner()
        result = runner.invoke(main, ["expand", "warn"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "warn takes 1 argument(s)" in result.output

    def test_unparseable_argument(self):
        runner = CliRunner()
        result = runner.invoke(main, ["expand", "warn", "not an identifier"])
        assert result.exit_code != 0


class TestFlagsCommand:
    """Tests for `debug-macros flags`."""

    def test_feature_flags(self, options_file):
        runner = CliRunner()
        result = runner.invoke(
            main, ["flags", str(options_file(OPTIONS)), "@ember/features", "FEATURE_A", "FEATURE_B"],
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["const FEATURE_A = 1;", "const FEATURE_B = 0;"]

    def test_env_flags(self, options_file):
        runner = CliRunner()
        result = runner.invoke(main, ["flags", str(options_file(OPTIONS)), "@ember/env-flags", "DEBUG"])
        assert result.output.strip() == "const DEBUG = 1;"

    def test_unsupported_flag(self, options_file):
        runner = CliRunner()
        result = runner.invoke(
            main, ["flags", str(options_file(OPTIONS)), "@ember/features", "FEATURE_A", "FEATURE_C"],
        )
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "Imported FEATURE_C from @ember/features which is not a supported flag." in result.output
        assert "const FEATURE_A" not in result.output

    def test_unknown_source(self, options_file):
        runner = CliRunner()
        result = runner.invoke(main, ["flags", str(options_file(OPTIONS)), "lodash", "X"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_invalid_options(self, options_file):
        runner = CliRunner()
        result = runner.invoke(main, ["flags", str(options_file({"features": 3})), "f", "X"])
        assert result.exit_code == ExitCode.BUILD_ERROR


class TestDeprecationCommand:
    """Tests for `debug-macros deprecation`."""

    def test_message(self):
        runner = CliRunner()
        result = runner.invoke(
            main, ["deprecation", "old", "--id", "X", "--until", "2.0", "--url", "http://e"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            "DEPRECATED [X]: old. Will be removed in 2.0. See http://e for more information."
        )

    def test_requires_id(self):
        runner = CliRunner()
        result = runner.invoke(main, ["deprecation", "old", "--until", "2.0"])
        assert result.exit_code == 2

    def test_empty_id(self):
        """An empty id should be rejected as missing metadata."""
        runner = CliRunner()
        result = runner.invoke(main, ["deprecation", "old", "--id", "", "--until", "2.0"])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert 'requires an "id" field' in result.output

    def test_empty_until(self):
        runner = CliRunner()
        result = runner.invoke(main, ["deprecation", "old", "--id", "X", "--until", ""])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert 'requires an "until" field' in result.output
