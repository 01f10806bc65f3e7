import functools
import inspect
import sys
import types
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence

from cached_property import cached_property
from typing_extensions import Protocol, runtime_checkable


class ClassLevel(NamedTuple):
    """
    The members declared by one class in a hierarchy.

    Attributes:
        cls: The class at this level.
        methods: A mapping from declared method names to whether they are public.
        fields: A mapping from declared field names to whether they are public.
        parent: The class of the next (less derived) level, or `None` if this
            is the root of the described hierarchy.
    """

    cls: type
    methods: Mapping[str, bool]
    fields: Mapping[str, bool]
    parent: Optional[type] = None


@runtime_checkable
class ClassIntrospector(Protocol):
    """
    Describes class hierarchies to the accessor resolver.
    """

    def hierarchy(self, cls: type) -> Sequence[ClassLevel]:
        """
        Return the levels of `cls`'s hierarchy, most-derived first.
        """
        ...  # pragma: no cover


def is_public_name(name: str) -> bool:
    return not name.startswith("_")


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def get_own_annotations(cls: type) -> Mapping[str, Any]:
    """
    Get the annotations declared directly by `cls` (not its ancestors), without
    evaluating them.
    """
    if sys.version_info >= (3, 14):  # pragma: no cover
        import annotationlib  # pylint: disable=import-outside-toplevel

        return annotationlib.get_annotations(cls, format=annotationlib.Format.FORWARDREF)
    if sys.version_info >= (3, 10):
        return inspect.get_annotations(cls)
    return cls.__dict__.get("__annotations__", {})  # pragma: no cover


def _link(levels: List[ClassLevel]) -> List[ClassLevel]:
    return [
        level._replace(parent=levels[i + 1].cls if i + 1 < len(levels) else None)
        for i, level in enumerate(levels)
    ]


FIELD_DESCRIPTORS = (
    property,
    cached_property,
    functools.cached_property,
    types.MemberDescriptorType,
    types.GetSetDescriptorType,
)


class ReflectionIntrospector:
    """
    Describes classes using Python's own reflection.

    The hierarchy is the class's method resolution order, excluding `object`.
    At each level the names in the class `__dict__` are classified:

    - functions, static methods, class methods and other callables are
      methods;
    - properties (including cached properties), `__slots__` members and
      other non-callable class attributes are fields, as are names that are
      only annotated (e.g. dataclass fields without defaults).

    Names with a leading underscore are non-public, and dunder names are
    ignored entirely. Note that attributes only ever assigned in `__init__`
    are invisible at the class level; declare them with an annotation.
    """

    def hierarchy(self, cls: type) -> List[ClassLevel]:
        return _link(
            [self.describe(level) for level in inspect.getmro(cls) if level is not object]
        )

    @staticmethod
    def describe(cls: type) -> ClassLevel:
        methods: Dict[str, bool] = {}
        fields: Dict[str, bool] = {}

        for name in get_own_annotations(cls):
            if not _is_dunder(name):
                fields[name] = is_public_name(name)

        for name, value in vars(cls).items():
            if _is_dunder(name):
                continue
            if isinstance(value, FIELD_DESCRIPTORS):
                fields[name] = is_public_name(name)
            elif isinstance(value, (staticmethod, classmethod)) or callable(value):
                methods[name] = is_public_name(name)
                fields.pop(name, None)
            else:
                fields[name] = is_public_name(name)

        return ClassLevel(cls=cls, methods=methods, fields=fields)


class RegistryIntrospector:
    """
    Describes classes from explicitly registered visibility tables, for types
    whose members cannot (or should not) be discovered by reflection.

    Classes in a hierarchy that have not been registered are skipped.

    Example:
        >>> introspector = RegistryIntrospector()
        >>> introspector.register(Basket, methods={"add_item": True}, fields={"items": False})
    """

    def __init__(self):
        self.registry: Dict[type, ClassLevel] = {}

    def register(
        self,
        cls: type,
        *,
        methods: Any = (),
        fields: Any = (),
    ) -> type:
        """
        Register the members declared by `cls`.

        Args:
            cls: The class being described.
            methods: Either a mapping of method names to public flags, or an
                iterable of names (visibility then follows the leading
                underscore convention).
            fields: As for `methods`, but for fields.

        Returns:
            `cls`, so that this can be used via `functools.partial` as a
            class decorator.
        """
        self.registry[cls] = ClassLevel(
            cls=cls,
            methods=self._as_table(methods),
            fields=self._as_table(fields),
        )
        return cls

    @staticmethod
    def _as_table(names: Any) -> Dict[str, bool]:
        if isinstance(names, Mapping):
            return {name: bool(public) for name, public in names.items()}
        return {name: is_public_name(name) for name in names}

    def hierarchy(self, cls: type) -> List[ClassLevel]:
        return _link(
            [self.registry[level] for level in inspect.getmro(cls) if level in self.registry]
        )

    def __contains__(self, cls: type) -> bool:
        return cls in self.registry
