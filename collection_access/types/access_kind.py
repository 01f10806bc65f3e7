from enum import Enum
from typing import Tuple, Union


class AccessKind(Enum):
    """
    The five ways in which a collection can be accessed.

    Each member carries:
        label: The lower-case name of the operation (also accepted wherever
            a kind is expected, e.g. as a key of template overrides).
        letter: A one-letter code used when rendering cache keys as text.
        pluralize: Whether accessor names for this kind use the plural form
            of the collection name (`get_values`) or the singular form
            (`add_value`).
    """

    ADD = ("add", "a", False)
    GET = ("get", "g", True)
    HAS = ("has", "h", False)
    REMOVE = ("remove", "r", False)
    SET = ("set", "s", True)

    def __init__(self, label: str, letter: str, pluralize: bool):
        self.label = label
        self.letter = letter
        self.pluralize = pluralize

    def __repr__(self):
        return f"AccessKind.{self.name}"

    @classmethod
    def coerce(cls, kind: Union["AccessKind", str]) -> "AccessKind":
        if isinstance(kind, AccessKind):
            return kind
        if isinstance(kind, str):
            for member in cls:
                if kind.lower() in (member.label, member.name.lower()):
                    return member
        raise ValueError(
            f"Unknown access kind `{kind!r}`; expected one of: {', '.join(m.label for m in cls)}."
        )


# Method name templates. `{name}` is replaced with the snake_case form of the
# collection name, and `{Name}` with its capitalized form.
DEFAULT_TEMPLATES = {
    AccessKind.ADD: ("add_{name}", "assign_{name}"),
    AccessKind.GET: ("get_{name}",),
    AccessKind.HAS: ("has_{name}", "contains_{name}"),
    AccessKind.REMOVE: ("remove_{name}", "unassign_{name}"),
    AccessKind.SET: ("set_{name}", "replace_{name}"),
}

CAMEL_CASE_TEMPLATES = {
    AccessKind.ADD: ("add{Name}", "assign{Name}"),
    AccessKind.GET: ("get{Name}",),
    AccessKind.HAS: ("has{Name}", "contains{Name}"),
    AccessKind.REMOVE: ("remove{Name}", "unassign{Name}"),
    AccessKind.SET: ("set{Name}", "replace{Name}"),
}

Templates = Tuple[str, ...]
