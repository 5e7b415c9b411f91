"""Minimal selector-based dispatch of rule listeners over a schema document.

A host engine normally does this; the dispatcher here is the smallest host
that honors the same contract, which keeps the rule usable on its own.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from .diagnostics import Diagnostic
from .logging import LogEvent, log_debug
from .nodes import Document, node_kind

_SELECTOR_RE = re.compile(r"^(?P<kind>\w+)(?:\[(?P<field>\w+(?:\.\w+)*)=(?P<value>[^\]]+)\])?$")

Listener = Callable[..., Optional[Diagnostic]]


@dataclass(frozen=True)
class Selector:
    """Node predicate: a kind tag plus an optional attribute equality test."""

    kind: str
    field: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "Selector":
        """Parse a selector such as ``Directive[name.value=deprecated]``.

        Raises:
            ValueError: If the text is not a supported selector
        """
        match = _SELECTOR_RE.match(text.strip())
        if not match:
            raise ValueError(f"Unsupported selector: {text!r}")
        return cls(kind=match.group("kind"), field=match.group("field"), value=match.group("value"))

    def matches(self, node: Any) -> bool:
        """Check whether ``node`` satisfies this selector."""
        if node_kind(node) != self.kind:
            return False
        if self.field is None:
            return True

        current = node
        for attr in self.field.split("."):
            if not hasattr(current, attr):
                return False
            current = getattr(current, attr)
        return bool(current == self.value)

    def __str__(self) -> str:
        if self.field is None:
            return self.kind
        return f"{self.kind}[{self.field}={self.value}]"


class Rule(Protocol):
    """What the dispatcher needs from a rule."""

    id: str

    def create(self) -> Dict[Selector, Listener]: ...


class RuleDispatcher:
    """Routes document nodes to rule listeners through a kind-keyed table."""

    def __init__(self, rules: Iterable[Rule]) -> None:
        """Initialize the dispatcher.

        Args:
            rules: Rules whose listeners should be registered
        """
        self._table: Dict[str, List[Tuple[str, Selector, Listener]]] = {}
        for rule in rules:
            for selector, listener in rule.create().items():
                self._table.setdefault(selector.kind, []).append((rule.id, selector, listener))

    @property
    def kinds(self) -> List[str]:
        """Node kinds with at least one registered listener."""
        return sorted(self._table)

    def lint(self, document: Document, now: Optional[datetime] = None) -> List[Tuple[str, Diagnostic]]:
        """Run every registered listener over ``document`` in source order.

        Args:
            document: The schema document
            now: Current instant shared by all evaluations of this run; each
                rule samples its own clock when omitted

        Returns:
            ``(rule id, diagnostic)`` pairs in traversal order
        """
        results: List[Tuple[str, Diagnostic]] = []
        visited = 0
        for node in document.walk():
            entries = self._table.get(node_kind(node))
            if not entries:
                continue
            for rule_id, selector, listener in entries:
                if not selector.matches(node):
                    continue
                visited += 1
                diagnostic = listener(node, now)
                if diagnostic is not None:
                    results.append((rule_id, diagnostic))

        log_debug(LogEvent.DISPATCH, "Linted document", evaluations=visited, diagnostics=len(results))
        return results
