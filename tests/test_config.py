"""Tests for rule options."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from graphql_deprecation_lint.config import DEFAULT_ARGUMENT_NAME, RuleConfig, load_rule_config
from graphql_deprecation_lint.config_paths import ENV_CONFIG_PATH
from graphql_deprecation_lint.errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidConfigFormatError,
    InvalidRuleOptionsError,
)


class TestRuleConfig:
    """Tests for RuleConfig construction."""

    def test_defaults(self) -> None:
        """The default argument name is deletionDate."""
        assert RuleConfig().argument_name == DEFAULT_ARGUMENT_NAME == "deletionDate"

    @pytest.mark.parametrize("options", [None, [], [{}], ({},)])
    def test_from_options_defaults(self, options: object) -> None:
        """Missing or empty options fall back to defaults."""
        assert RuleConfig.from_options(options) == RuleConfig()  # type: ignore[arg-type]

    def test_from_options_custom(self) -> None:
        """argumentName renames the inspected argument."""
        config = RuleConfig.from_options([{"argumentName": "removeAt"}])
        assert config.argument_name == "removeAt"
        assert repr(config) == "RuleConfig(argument_name='removeAt')"

    def test_empty_argument_name(self) -> None:
        """An empty name means the default."""
        assert RuleConfig.from_options([{"argumentName": ""}]).argument_name == "deletionDate"

    @pytest.mark.parametrize(
        "options,fragment",
        [
            ({"argumentName": "x"}, "must be a list"),
            ("deletionDate", "must be a list"),
            ([{"argumentName": "a"}, {"argumentName": "b"}], "at most one item"),
            (["removeAt"], "must be an object"),
            ([{"argumentName": 3}], "must be a string"),
            ([{"argumentName": None}], "must be a string"),
            ([{"argumentName": "a", "format": "DD/MM/YYYY"}], "Unknown rule option(s): format"),
        ],
    )
    def test_from_options_invalid(self, options: object, fragment: str) -> None:
        """Options outside the schema are rejected with a clear message."""
        with pytest.raises(InvalidRuleOptionsError) as exc_info:
            RuleConfig.from_options(options)  # type: ignore[arg-type]
        assert fragment in exc_info.value.message
        assert isinstance(exc_info.value, ConfigurationError)


class TestFromYaml:
    """Tests for RuleConfig.from_yaml."""

    def test_list_document(self, tmp_path: Path) -> None:
        """A YAML list is read as host-style options."""
        path = tmp_path / "options.yml"
        path.write_text("- argumentName: removeAt\n")
        assert RuleConfig.from_yaml(path).argument_name == "removeAt"

    def test_mapping_document(self, tmp_path: Path) -> None:
        """A single mapping is accepted as shorthand."""
        path = tmp_path / "options.yml"
        path.write_text("argumentName: sunset\n")
        assert RuleConfig.from_yaml(str(path)).argument_name == "sunset"

    def test_empty_document(self, tmp_path: Path) -> None:
        """An empty file means defaults."""
        path = tmp_path / "options.yml"
        path.write_text("")
        assert RuleConfig.from_yaml(path) == RuleConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file names its path."""
        path = tmp_path / "missing.yml"
        with pytest.raises(ConfigFileNotFoundError) as exc_info:
            RuleConfig.from_yaml(path)
        assert exc_info.value.path == str(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparseable YAML is a format error."""
        path = tmp_path / "options.yml"
        path.write_text("argumentName: [unclosed\n")
        with pytest.raises(InvalidConfigFormatError) as exc_info:
            RuleConfig.from_yaml(path)
        assert exc_info.value.path == str(path)

    def test_wrong_top_level_type(self, tmp_path: Path) -> None:
        """A scalar document is a format error."""
        path = tmp_path / "options.yml"
        path.write_text("deletionDate\n")
        with pytest.raises(InvalidConfigFormatError) as exc_info:
            RuleConfig.from_yaml(path)
        assert exc_info.value.expected_type == "list"

    def test_invalid_options_carry_path(self, tmp_path: Path) -> None:
        """Schema errors from a file point at that file."""
        path = tmp_path / "options.yml"
        path.write_text("argumentName: 12\n")
        with pytest.raises(InvalidRuleOptionsError) as exc_info:
            RuleConfig.from_yaml(path)
        assert exc_info.value.path == str(path)


class TestLoadRuleConfig:
    """Tests for load_rule_config."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """An explicit path wins over everything else."""
        path = tmp_path / "options.yml"
        path.write_text("- argumentName: explicit\n")
        assert load_rule_config(path).argument_name == "explicit"

    def test_env_path(self, tmp_path: Path) -> None:
        """The environment variable is consulted when no path is given."""
        path = tmp_path / "options.yml"
        path.write_text("- argumentName: fromEnv\n")
        with patch.dict(os.environ, {ENV_CONFIG_PATH: str(path)}):
            assert load_rule_config().argument_name == "fromEnv"

    def test_no_file_uses_defaults(self) -> None:
        """Without any file the defaults apply."""
        with patch("graphql_deprecation_lint.config.get_rule_options_path", return_value=None):
            assert load_rule_config() == RuleConfig()
