"""Error types for the deprecation lint rule.

This module defines the error types used by the rule for configuration
problems, deletion date validation, and AST contract violations.
"""

from typing import Optional


class DeprecationLintError(Exception):
    """Base class for all errors raised by this package.

    This is the parent class for all package-specific exceptions.
    """

    pass


class ConfigurationError(DeprecationLintError):
    """Base class for configuration-related errors.

    This is raised for errors related to loading, parsing, or validating
    the rule options.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            path: Optional path to the configuration file that caused the error
        """
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when an explicitly requested options file does not exist.

    Examples:
        >>> try:
        ...     RuleConfig.from_yaml("/missing/options.yml")
        ... except ConfigFileNotFoundError as e:
        ...     print(f"Config file not found: {e.path}")
    """

    pass


class InvalidConfigFormatError(ConfigurationError):
    """Raised when an options file cannot be parsed or has the wrong shape.

    Examples:
        >>> try:
        ...     RuleConfig.from_yaml("broken.yml")
        ... except InvalidConfigFormatError as e:
        ...     print(f"Invalid config format: {e}")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected_type: str = "list",
    ) -> None:
        """Initialize invalid format error.

        Args:
            message: Error message
            path: Optional path to the configuration file
            expected_type: Expected type of the configuration document
        """
        super().__init__(message, path)
        self.expected_type = expected_type


class InvalidRuleOptionsError(ConfigurationError):
    """Raised when rule options do not match the options schema.

    Examples:
        >>> try:
        ...     RuleConfig.from_options([{"argumentName": 42}])
        ... except InvalidRuleOptionsError as e:
        ...     print(f"Bad options: {e.message}")
    """

    pass


class DeletionDateError(DeprecationLintError):
    """Base class for deletion date validation errors.

    The rule turns these into diagnostics; they never reach the host.
    """

    def __init__(self, message: str, raw: object) -> None:
        """Initialize deletion date error.

        Args:
            message: Error message
            raw: The value that failed validation, as written in the schema
        """
        super().__init__(message)
        self.message = message
        self.raw = raw


class DeletionDateFormatError(DeletionDateError):
    """Raised when a deletion date matches none of the accepted layouts.

    Examples:
        >>> try:
        ...     DeletionDate.parse("25-12-2022")
        ... except DeletionDateFormatError as e:
        ...     print(f"Unrecognized layout: {e.raw}")
    """

    pass


class InvalidDeletionDateError(DeletionDateError):
    """Raised when a deletion date has a valid layout but is not a real date.

    Examples:
        >>> try:
        ...     DeletionDate.parse("31/02/2022")
        ... except InvalidDeletionDateError as e:
        ...     print(f"Not a calendar date: {e.raw}")
    """

    pass


class RuleContractError(DeprecationLintError):
    """Raised when the AST handed to the rule breaks the node contract.

    A well-formed AST from the host parser never triggers this.
    """

    pass


class UnknownValueNodeError(RuleContractError):
    """Raised when a value node has a kind the extractor does not know."""

    def __init__(self, message: str, node: object) -> None:
        """Initialize unknown value node error.

        Args:
            message: Error message
            node: The offending node
        """
        super().__init__(message)
        self.message = message
        self.node = node


class MissingParentError(RuleContractError):
    """Raised when a directive is not attached to any member definition."""

    pass
