"""Deprecation lifecycle lint rule for GraphQL schemas.

This package provides the ``require-deprecation-date`` rule. It requires a
deletion date on every ``@deprecated`` directive, validates the date, and
suggests removing members whose deletion date has passed.
"""

# Version of the package
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("graphql-deprecation-lint")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0"

# Import main components for easier access
from .config import DEFAULT_ARGUMENT_NAME, RuleConfig, load_rule_config
from .deletion_date import DeletionDate, is_valid_deletion_date
from .diagnostics import Diagnostic, MessageId, Suggestion, format_message
from .dispatch import RuleDispatcher, Selector
from .errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    DeletionDateError,
    DeletionDateFormatError,
    DeprecationLintError,
    InvalidConfigFormatError,
    InvalidDeletionDateError,
    InvalidRuleOptionsError,
    MissingParentError,
    RuleContractError,
    UnknownValueNodeError,
)
from .labels import get_node_name
from .rule import MESSAGES, RequireDeprecationDateRule
from .values import value_from_node

# Define public API
__all__ = [
    # Rule
    "RequireDeprecationDateRule",
    "MESSAGES",
    "RuleConfig",
    "DEFAULT_ARGUMENT_NAME",
    "load_rule_config",
    # Building blocks
    "DeletionDate",
    "is_valid_deletion_date",
    "value_from_node",
    "get_node_name",
    # Output
    "Diagnostic",
    "MessageId",
    "Suggestion",
    "format_message",
    # Dispatch
    "RuleDispatcher",
    "Selector",
    # Errors
    "DeprecationLintError",
    "ConfigurationError",
    "ConfigFileNotFoundError",
    "InvalidConfigFormatError",
    "InvalidRuleOptionsError",
    "DeletionDateError",
    "DeletionDateFormatError",
    "InvalidDeletionDateError",
    "RuleContractError",
    "UnknownValueNodeError",
    "MissingParentError",
]
