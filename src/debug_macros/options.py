"""
Expander Options
================

Options are supplied once per build as a plugin-style document:

    {
      "externalizeHelpers": {"global": "Ember"},
      "debugTools": {"source": "@ember/debug-tools", "assertGuards": "identifiers"},
      "envFlags": {"source": "@ember/env-flags", "flags": {"DEBUG": 1}},
      "features": [
        {"name": "ember", "source": "@ember/features", "flags": {"FEATURE_A": 0}}
      ]
    }

Every key is optional. MacroOptions.from_dict() validates the document and
load_options() reads it from a JSON file.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from debug_macros.errors import OptionsError
from debug_macros.expansion.builder import AssertGuardPolicy, MacroBuilder
from debug_macros.expansion.helpers import HelperConfiguration

logger = logging.getLogger(__name__)

# Module debug macros are imported from when debugTools.source is not given
DEFAULT_DEBUG_TOOLS_SOURCE = "debug-tools"

# Module env flags are imported from when envFlags.source is not given
DEFAULT_ENV_FLAGS_SOURCE = "env-flags"

# Name of the env flag that gates the expanded macros
DEBUG_FLAG = "DEBUG"


@dataclass(frozen=True)
class FlagSource:
    """
    A module whose named imports are compile-time flags.

    Attributes:
        source: Import source, e.g. "@ember/features"
        flags: Supported flag names mapped to their integer values
        name: Optional label for the flag group
    """
    source: str
    flags: Mapping[str, int] = field(default_factory=dict)
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> "FlagSource":
        if not isinstance(data, dict):
            raise OptionsError(f"{where} must be an object")

        source = data.get("source")
        if not isinstance(source, str) or not source:
            raise OptionsError(f"{where}.source must be a non-empty string")

        flags = data.get("flags", {})
        if not isinstance(flags, dict):
            raise OptionsError(f"{where}.flags must be an object")
        for flag, value in flags.items():
            # bool is an int subclass but is not a valid flag value
            if isinstance(value, bool) or not isinstance(value, int):
                raise OptionsError(
                    f"{where}.flags.{flag} must be an integer, got {value!r}",
                    hint="use 1 for enabled and 0 for disabled",
                )

        return cls(source=source, flags=dict(flags), name=data.get("name"))


@dataclass
class MacroOptions:
    """
    Expander configuration for one build.

    Attributes:
        externalize_helpers: How diagnostic calls are emitted
        debug_tools_source: Module the debug macros are imported from
        assert_guards: Which assert() arguments become guards
        env_flags: Flag source holding DEBUG
        features: Additional feature flag sources
    """
    externalize_helpers: HelperConfiguration = field(default_factory=HelperConfiguration)
    debug_tools_source: str = DEFAULT_DEBUG_TOOLS_SOURCE
    assert_guards: AssertGuardPolicy = AssertGuardPolicy.IDENTIFIERS
    env_flags: FlagSource = None
    features: list[FlagSource] = field(default_factory=list)

    def __post_init__(self):
        if self.env_flags is None:
            self.env_flags = FlagSource(DEFAULT_ENV_FLAGS_SOURCE, {DEBUG_FLAG: 1})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MacroOptions":
        """
        Build options from a plugin-style options document.

        Raises:
            OptionsError: If any section has the wrong shape
        """
        if not isinstance(data, dict):
            raise OptionsError("options must be an object")

        helpers = HelperConfiguration.from_option(data.get("externalizeHelpers"))

        debug_tools = data.get("debugTools", {})
        if not isinstance(debug_tools, dict):
            raise OptionsError("debugTools must be an object")
        debug_tools_source = debug_tools.get("source", DEFAULT_DEBUG_TOOLS_SOURCE)
        if not isinstance(debug_tools_source, str) or not debug_tools_source:
            raise OptionsError("debugTools.source must be a non-empty string")
        try:
            assert_guards = AssertGuardPolicy(debug_tools.get("assertGuards", "identifiers"))
        except ValueError:
            choices = ", ".join(p.value for p in AssertGuardPolicy)
            raise OptionsError(
                f"debugTools.assertGuards must be one of: {choices}",
            ) from None

        env_flags = None
        if "envFlags" in data:
            env_flags = FlagSource.from_dict(data["envFlags"], "envFlags")

        features = data.get("features", [])
        if isinstance(features, dict):
            features = [features]
        if not isinstance(features, list):
            raise OptionsError("features must be an object or a list of objects")

        return cls(
            externalize_helpers=helpers,
            debug_tools_source=debug_tools_source,
            assert_guards=assert_guards,
            env_flags=env_flags,
            features=[
                FlagSource.from_dict(item, f"features[{i}]") for i, item in enumerate(features)
            ],
        )

    def flag_table_for(self, source: str) -> Optional[Mapping[str, int]]:
        """Return the flag table for an import source, or None if not a flag source."""
        if source == self.env_flags.source:
            return self.env_flags.flags
        for feature in self.features:
            if feature.source == source:
                return feature.flags
        return None

    def debug_flag_value(self) -> int:
        """Value the DEBUG env flag is compiled to (1 unless configured)."""
        return self.env_flags.flags.get(DEBUG_FLAG, 1)

    def create_builder(self, factory=None) -> MacroBuilder:
        """Create a MacroBuilder configured by these options."""
        return MacroBuilder(factory, self.externalize_helpers, assert_guards=self.assert_guards)


def load_options(path: Union[str, Path]) -> MacroOptions:
    """
    Read options from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        OptionsError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise OptionsError(f"{path}: invalid JSON: {e.msg} (line {e.lineno})") from e

    options = MacroOptions.from_dict(data)
    logger.debug(f"Loaded options from {path}: {len(options.features)} feature source(s)")
    return options
