"""Diagnostic records handed to the host engine.

Diagnostics stay structured: a message id plus placeholder data. Rendering
the final text is left to the host, ``format_message`` is provided for hosts
that use the same ``{{ name }}`` template syntax.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .nodes import SourceRange

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class MessageId(str, Enum):
    """Identifiers of the rule's messages."""

    REQUIRE_DATE = "MESSAGE_REQUIRE_DATE"
    INVALID_FORMAT = "MESSAGE_INVALID_FORMAT"
    INVALID_DATE = "MESSAGE_INVALID_DATE"
    CAN_BE_REMOVED = "MESSAGE_CAN_BE_REMOVED"


@dataclass(frozen=True)
class Suggestion:
    """A suggested, not automatically applied, deletion of source text."""

    desc: str
    delete_range: SourceRange

    def apply(self, source: str) -> str:
        """Return ``source`` with the suggested range removed.

        Args:
            source: The full source text the range refers to

        Returns:
            The edited text

        Raises:
            ValueError: If the range lies outside ``source``
        """
        if self.delete_range.end > len(source):
            raise ValueError(
                f"Range {self.delete_range.start}-{self.delete_range.end} is outside "
                f"source of length {len(source)}"
            )
        return source[: self.delete_range.start] + source[self.delete_range.end :]


@dataclass(frozen=True)
class Diagnostic:
    """One rule violation.

    Attributes:
        message_id: Which message of the catalog applies
        anchor: Source range the report points at
        data: Placeholder values for the message template
        suggestion: Optional suggested edit
    """

    message_id: MessageId
    anchor: SourceRange
    data: Mapping[str, str] = field(default_factory=dict, hash=False)
    suggestion: Optional[Suggestion] = None

    def __post_init__(self) -> None:
        """Make the placeholder mapping read-only."""
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def format(self, messages: Mapping[str, str]) -> str:
        """Render the diagnostic with a message catalog.

        Args:
            messages: Catalog mapping message ids to templates

        Returns:
            The rendered message
        """
        return format_message(messages[self.message_id.value], self.data)


def format_message(template: str, data: Mapping[str, str]) -> str:
    """Substitute ``{{ name }}`` placeholders in ``template``.

    Args:
        template: Message template
        data: Placeholder values

    Returns:
        The rendered message

    Raises:
        KeyError: If the template names a placeholder missing from ``data``
    """

    def _replace(match: "re.Match[str]") -> str:
        return str(data[match.group(1)])

    return _PLACEHOLDER_RE.sub(_replace, template)
