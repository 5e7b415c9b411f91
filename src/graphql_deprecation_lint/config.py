"""Options of the ``require-deprecation-date`` rule.

Options follow the host's rule-options convention: an optional list holding
at most one mapping. The only recognized key is ``argumentName``.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

import yaml

from .config_paths import get_rule_options_path
from .errors import ConfigFileNotFoundError, InvalidConfigFormatError, InvalidRuleOptionsError
from .logging import LogEvent, log_debug, log_error

DEFAULT_ARGUMENT_NAME = "deletionDate"

OPTIONS_SCHEMA = {
    "type": "array",
    "maxItems": 1,
    "items": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "argumentName": {
                "type": "string",
            },
        },
    },
}

_ALLOWED_KEYS = frozenset({"argumentName"})


class RuleConfig:
    """Configuration for the deprecation date rule."""

    def __init__(self, argument_name: str = DEFAULT_ARGUMENT_NAME) -> None:
        """Initialize rule configuration.

        Args:
            argument_name: Name of the ``@deprecated`` argument holding the
                deletion date. An empty name means the default.
        """
        if not isinstance(argument_name, str):
            raise InvalidRuleOptionsError(
                f"argumentName must be a string, got {type(argument_name).__name__}"
            )
        self.argument_name = argument_name or DEFAULT_ARGUMENT_NAME

    def __repr__(self) -> str:
        return f"RuleConfig(argument_name={self.argument_name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleConfig):
            return NotImplemented
        return self.argument_name == other.argument_name

    @classmethod
    def from_options(cls, options: Optional[Sequence[Any]] = None) -> "RuleConfig":
        """Build a configuration from host-style rule options.

        Args:
            options: ``None``, ``[]`` or ``[{"argumentName": "..."}]``

        Returns:
            A new RuleConfig instance

        Raises:
            InvalidRuleOptionsError: If the options do not match the schema
        """
        if options is None:
            return cls()
        if isinstance(options, (str, bytes)) or not isinstance(options, Sequence):
            raise InvalidRuleOptionsError(
                f"Rule options must be a list, got {type(options).__name__}"
            )
        if len(options) > 1:
            raise InvalidRuleOptionsError(
                f"Rule options accept at most one item, got {len(options)}"
            )
        if not options:
            return cls()

        item = options[0]
        if not isinstance(item, Mapping):
            raise InvalidRuleOptionsError(
                f"Rule options item must be an object, got {type(item).__name__}"
            )
        unknown = sorted(str(key) for key in item if key not in _ALLOWED_KEYS)
        if unknown:
            raise InvalidRuleOptionsError(
                f"Unknown rule option(s): {', '.join(unknown)}. "
                f"Allowed: {', '.join(sorted(_ALLOWED_KEYS))}"
            )
        return cls(argument_name=item.get("argumentName", DEFAULT_ARGUMENT_NAME))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "RuleConfig":
        """Load a configuration from a YAML file.

        The document is either the options list or a single options mapping.

        Args:
            path: Path to the YAML file

        Returns:
            A new RuleConfig instance

        Raises:
            ConfigFileNotFoundError: If the file does not exist
            InvalidConfigFormatError: If the file is not valid YAML or has
                the wrong top-level type
            InvalidRuleOptionsError: If the options do not match the schema
        """
        path_str = str(path)
        try:
            with open(path_str, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigFileNotFoundError(f"Options file not found: {path_str}", path=path_str) from e
        except yaml.YAMLError as e:
            log_error(LogEvent.CONFIGURATION, "Failed to parse options file", path=path_str, error=str(e))
            raise InvalidConfigFormatError(f"Invalid YAML in {path_str}: {e}", path=path_str) from e

        if data is None:
            return cls()
        if isinstance(data, Mapping):
            data = [data]
        if not isinstance(data, list):
            raise InvalidConfigFormatError(
                f"Options file {path_str} must contain a list or a mapping, got {type(data).__name__}",
                path=path_str,
            )

        try:
            return cls.from_options(data)
        except InvalidRuleOptionsError as e:
            e.path = path_str
            raise


def load_rule_config(path: Optional[Union[str, Path]] = None) -> RuleConfig:
    """Load the rule configuration from the resolved options file.

    Args:
        path: Explicit options file; when omitted the environment variable
            and user config directory are consulted

    Returns:
        The loaded configuration, or defaults when no file is found
    """
    resolved = str(path) if path is not None else get_rule_options_path()
    if resolved is None:
        log_debug(LogEvent.CONFIGURATION, "No options file found, using defaults")
        return RuleConfig()

    config = RuleConfig.from_yaml(resolved)
    log_debug(LogEvent.CONFIGURATION, "Loaded rule options", path=resolved, argument_name=config.argument_name)
    return config
