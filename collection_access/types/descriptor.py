import dataclasses
from typing import NamedTuple, Optional

from .access_kind import AccessKind


class CollectionKey(NamedTuple):
    """
    The key under which the resolution of an accessor is cached.

    Keys compare equal only when the access kind, the class object and the
    collection name all agree, so subclasses never share entries with their
    parents (or with unrelated classes that happen to share a name).
    """

    kind: AccessKind
    cls: type
    collection: str

    def __str__(self):
        # Textual form for stores that require string keys. Unlike the tuple
        # itself this can collide for classes sharing a qualified name.
        return f"{self.kind.letter};{self.cls.__module__}.{self.cls.__qualname__}<{self.collection}>"


@dataclasses.dataclass(frozen=True)
class AccessorDescriptor:
    """
    The resolved decision of how to reach a collection on instances of a class.

    Both paths are always recorded; consumers prefer the property path when it
    is present.

    Attributes:
        method_name: The name of the accessor method to invoke, if any.
        is_property: Whether the collection is a public field of the class.
        is_dynamic: Whether `method_name` was selected by dynamic fallback
            without verifying that the class declares it.
    """

    method_name: Optional[str] = None
    is_property: bool = False
    is_dynamic: bool = False

    @property
    def is_accessible(self) -> bool:
        return self.is_property or self.method_name is not None
