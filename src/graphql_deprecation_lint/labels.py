"""Human readable labels for schema members, used in diagnostic messages."""

from .nodes import MemberDefinition, MemberKind

DISPLAY_KIND_NAMES = {
    MemberKind.OBJECT_TYPE: "type",
    MemberKind.INTERFACE_TYPE: "interface",
    MemberKind.INPUT_OBJECT_TYPE: "input",
    MemberKind.ENUM_TYPE: "enum",
    MemberKind.SCALAR_TYPE: "scalar",
    MemberKind.UNION_TYPE: "union",
    MemberKind.FIELD: "field",
    MemberKind.ARGUMENT: "argument",
    MemberKind.INPUT_VALUE: "input value",
    MemberKind.ENUM_VALUE: "enum value",
}


def get_node_name(member: MemberDefinition) -> str:
    """Describe a member by kind and dotted path, e.g. ``field `User.firstname```."""
    display = DISPLAY_KIND_NAMES.get(member.kind, str(member.kind.value))
    return f"{display} `{member.path}`"
