"""The ``require-deprecation-date`` rule.

Requires a deletion date on every ``@deprecated`` directive and suggests
removing members whose deletion date has passed.

Typical usage:

    rule = RequireDeprecationDateRule.from_options([{"argumentName": "deletionDate"}])
    diagnostic = rule.check(directive)
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Sequence

from .config import OPTIONS_SCHEMA, RuleConfig
from .deletion_date import DeletionDate
from .diagnostics import Diagnostic, MessageId, Suggestion
from .dispatch import Selector
from .errors import DeletionDateFormatError, InvalidDeletionDateError, MissingParentError
from .labels import get_node_name
from .logging import LogEvent, log_debug
from .nodes import Directive, MemberDefinition
from .values import value_from_node

RULE_ID = "require-deprecation-date"

MESSAGES: Dict[str, str] = {
    MessageId.REQUIRE_DATE.value: 'Directive "@deprecated" must have a deletion date for {{ nodeName }}',
    MessageId.INVALID_FORMAT.value: (
        'Deletion date must be in format "DD/MM/YYYY" or "YYYY-MM-DD" for {{ nodeName }}'
    ),
    MessageId.INVALID_DATE.value: 'Invalid "{{ deletionDate }}" deletion date for {{ nodeName }}',
    MessageId.CAN_BE_REMOVED.value: "{{ nodeName }} can be removed",
}

META: Dict[str, Any] = {
    "type": "suggestion",
    "has_suggestions": True,
    "docs": {
        "category": "Schema",
        "description": (
            "Require deletion date on `@deprecated` directive. "
            "Suggest removing deprecated things after deprecated date."
        ),
        "examples": [
            {
                "title": "Incorrect",
                "code": "type User {\n  firstname: String @deprecated\n  firstName: String\n}\n",
            },
            {
                "title": "Incorrect",
                "code": (
                    "type User {\n"
                    "  firstname: String @deprecated(reason: \"Use 'firstName' instead\")\n"
                    "  firstName: String\n"
                    "}\n"
                ),
            },
            {
                "title": "Correct",
                "code": (
                    "type User {\n"
                    "  firstname: String\n"
                    "    @deprecated(reason: \"Use 'firstName' instead\", deletionDate: \"25/12/2022\")\n"
                    "  firstName: String\n"
                    "}\n"
                ),
            },
        ],
    },
    "messages": MESSAGES,
    "schema": OPTIONS_SCHEMA,
}

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(timezone.utc)


class RequireDeprecationDateRule:
    """Validates the deletion date of ``@deprecated`` directives.

    Each evaluation produces at most one diagnostic, in this order of
    precedence: missing date, unrecognized layout, impossible calendar date,
    date already passed. A valid future date produces nothing.
    """

    id = RULE_ID
    meta = META
    selector = Selector.parse("Directive[name.value=deprecated]")

    def __init__(self, config: Optional[RuleConfig] = None, clock: Optional[Clock] = None) -> None:
        """Initialize the rule.

        Args:
            config: Rule configuration, defaults when omitted
            clock: Returns the current timezone-aware instant
        """
        self.config = config or RuleConfig()
        self.clock = clock or utc_now

    @classmethod
    def from_options(
        cls, options: Optional[Sequence[Any]] = None, clock: Optional[Clock] = None
    ) -> "RequireDeprecationDateRule":
        """Create the rule from host-style options."""
        return cls(RuleConfig.from_options(options), clock=clock)

    def create(self) -> Dict[Selector, Callable[..., Optional[Diagnostic]]]:
        """Return the listener table a host registers."""
        return {self.selector: self.check}

    def check(self, directive: Directive, now: Optional[datetime] = None) -> Optional[Diagnostic]:
        """Evaluate one ``@deprecated`` directive application.

        Args:
            directive: The directive to check
            now: Current instant; sampled from the clock when omitted

        Returns:
            The diagnostic to report, or None if the directive is fine

        Raises:
            MissingParentError: If the directive is not attached to a member
        """
        parent = directive.parent
        if parent is None:
            raise MissingParentError(f"Directive @{directive.name.value} has no parent member")
        node_name = get_node_name(parent)

        argument = directive.get_argument(self.config.argument_name)
        if argument is None:
            log_debug(LogEvent.RULE_EVALUATION, "Missing deletion date", node=node_name)
            return Diagnostic(
                message_id=MessageId.REQUIRE_DATE,
                anchor=directive.name.loc,
                data={"nodeName": node_name},
            )

        raw = value_from_node(argument.value)
        try:
            deletion_date = DeletionDate.parse(raw)
        except DeletionDateFormatError:
            log_debug(LogEvent.RULE_EVALUATION, "Unrecognized deletion date layout", node=node_name, raw=raw)
            return Diagnostic(
                message_id=MessageId.INVALID_FORMAT,
                anchor=argument.value.loc,
                data={"nodeName": node_name},
            )
        except InvalidDeletionDateError:
            log_debug(LogEvent.RULE_EVALUATION, "Deletion date is not a real date", node=node_name, raw=raw)
            return Diagnostic(
                message_id=MessageId.INVALID_DATE,
                anchor=argument.value.loc,
                data={"deletionDate": raw, "nodeName": node_name},
            )

        if now is None:
            now = self.clock()
        if not deletion_date.is_past(now):
            log_debug(
                LogEvent.RULE_EVALUATION,
                "Deletion date not reached",
                node=node_name,
                deletion_date=deletion_date.isoformat(),
            )
            return None

        log_debug(
            LogEvent.RULE_EVALUATION,
            "Deletion date passed",
            node=node_name,
            deletion_date=deletion_date.isoformat(),
        )
        return self._can_be_removed(parent, node_name)

    def _can_be_removed(self, parent: MemberDefinition, node_name: str) -> Diagnostic:
        return Diagnostic(
            message_id=MessageId.CAN_BE_REMOVED,
            anchor=parent.name.loc,
            data={"nodeName": node_name},
            suggestion=Suggestion(
                desc=f"Remove `{parent.name.value}`",
                delete_range=parent.loc,
            ),
        )
