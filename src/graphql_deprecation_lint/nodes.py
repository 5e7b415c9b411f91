"""Schema AST nodes consumed by the rule.

A host parser builds these from SDL source text. The rule only reads them.
Each node exposes a ``kind`` tag matching the GraphQL AST kind names, which
is what selectors and the dispatch table key on.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class SourceRange:
    """Character offsets into the original source text, ``end`` exclusive."""

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate the range is well ordered."""
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid source range: start={self.start}, end={self.end}")


@dataclass(frozen=True)
class Name:
    """A name token."""

    value: str
    loc: SourceRange
    kind: str = field(default="Name", init=False)


@dataclass(frozen=True)
class StringValue:
    """A string literal; ``value`` holds the already unescaped text."""

    value: str
    loc: SourceRange
    block: bool = False
    kind: str = field(default="StringValue", init=False)


@dataclass(frozen=True)
class IntValue:
    """An integer literal, kept as written."""

    value: str
    loc: SourceRange
    kind: str = field(default="IntValue", init=False)


@dataclass(frozen=True)
class FloatValue:
    """A float literal, kept as written."""

    value: str
    loc: SourceRange
    kind: str = field(default="FloatValue", init=False)


@dataclass(frozen=True)
class BooleanValue:
    value: bool
    loc: SourceRange
    kind: str = field(default="BooleanValue", init=False)


@dataclass(frozen=True)
class NullValue:
    loc: SourceRange
    kind: str = field(default="NullValue", init=False)


@dataclass(frozen=True)
class EnumValue:
    value: str
    loc: SourceRange
    kind: str = field(default="EnumValue", init=False)


@dataclass(frozen=True)
class ListValue:
    values: Tuple["ValueNode", ...]
    loc: SourceRange
    kind: str = field(default="ListValue", init=False)


@dataclass(frozen=True)
class ObjectField:
    name: Name
    value: "ValueNode"
    loc: SourceRange
    kind: str = field(default="ObjectField", init=False)


@dataclass(frozen=True)
class ObjectValue:
    fields: Tuple[ObjectField, ...]
    loc: SourceRange
    kind: str = field(default="ObjectValue", init=False)


ValueNode = Union[
    StringValue,
    IntValue,
    FloatValue,
    BooleanValue,
    NullValue,
    EnumValue,
    ListValue,
    ObjectValue,
]


@dataclass(frozen=True)
class Argument:
    """A named argument of a directive application."""

    name: Name
    value: ValueNode
    loc: SourceRange
    kind: str = field(default="Argument", init=False)


@dataclass(eq=False)
class Directive:
    """A directive application such as ``@deprecated(reason: "...")``.

    ``parent`` points back at the member the directive is attached to. It is
    assigned by ``MemberDefinition`` on construction and not owned by the
    directive.
    """

    name: Name
    arguments: Tuple[Argument, ...]
    loc: SourceRange
    parent: Optional["MemberDefinition"] = field(default=None, repr=False)
    kind: str = field(default="Directive", init=False)

    def get_argument(self, name: str) -> Optional[Argument]:
        """Return the first argument called ``name``, if any."""
        return next((arg for arg in self.arguments if arg.name.value == name), None)


class MemberKind(str, Enum):
    """Kinds of schema members a directive can be attached to."""

    OBJECT_TYPE = "ObjectTypeDefinition"
    INTERFACE_TYPE = "InterfaceTypeDefinition"
    INPUT_OBJECT_TYPE = "InputObjectTypeDefinition"
    ENUM_TYPE = "EnumTypeDefinition"
    SCALAR_TYPE = "ScalarTypeDefinition"
    UNION_TYPE = "UnionTypeDefinition"
    FIELD = "FieldDefinition"
    ARGUMENT = "ArgumentDefinition"
    INPUT_VALUE = "InputValueDefinition"
    ENUM_VALUE = "EnumValueDefinition"


@dataclass(eq=False)
class MemberDefinition:
    """A schema member: a type, field, argument, input value or enum value.

    Attributes:
        kind: What sort of member this is
        name: The member's name token
        loc: Range covering the whole definition, attached directives included
        container: Dotted name of the enclosing definition ("" at top level)
        directives: Directives applied to this member
        members: Nested definitions (fields of a type, arguments of a field)
    """

    kind: MemberKind
    name: Name
    loc: SourceRange
    container: str = ""
    directives: Sequence[Directive] = ()
    members: Sequence["MemberDefinition"] = ()

    def __post_init__(self) -> None:
        """Freeze child sequences and link directives back to this member."""
        self.directives = tuple(self.directives)
        self.members = tuple(self.members)
        for directive in self.directives:
            directive.parent = self

    @property
    def path(self) -> str:
        """Dotted name of this member including its container."""
        if self.container:
            return f"{self.container}.{self.name.value}"
        return self.name.value


@dataclass(eq=False)
class Document:
    """Top-level schema document."""

    definitions: List[MemberDefinition] = field(default_factory=list)
    kind: str = field(default="Document", init=False)

    def walk(self) -> Iterator[Union[MemberDefinition, Directive]]:
        """Yield members and their directives in pre-order (source order).

        A member is yielded before its directives, which come before its
        nested members.
        """
        stack: List[MemberDefinition] = list(reversed(self.definitions))
        while stack:
            member = stack.pop()
            yield member
            yield from member.directives
            stack.extend(reversed(member.members))


def node_kind(node: object) -> str:
    """Return the plain string kind tag of any node."""
    kind = getattr(node, "kind")
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)
