import logging
import numbers
import types
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Mapping as MappingType, Optional, Union

from lazy_object_proxy import Proxy

from .errors import InvalidSourceError
from .resolution import AccessorResolver, ResolutionCache
from .sources import CollectionSource, DynamicInvoker, MappingSource, ObjectSource
from .types import AccessKind
from .utils.introspection import ClassIntrospector
from .utils.naming import Inflector

logger = logging.getLogger(__name__)

# Values that cannot hold a named collection. Read-only mappings are included
# because no collection within them could be created or replaced.
INVALID_SOURCE_TYPES = (
    type(None),
    bool,
    numbers.Number,
    str,
    bytes,
    bytearray,
    memoryview,
    list,
    tuple,
    set,
    frozenset,
    range,
    type,
    types.ModuleType,
)


class CollectionAccessor:
    """
    A uniform API for adding to, reading, checking, removing from and replacing
    a named collection, whether it is held by a mapping or an object instance.

    Mappings are accessed natively: the collection is the (mutable sequence or
    mapping) value stored under the collection name, and is mutated in place.
    Objects are accessed through a public field named after the collection, or
    failing that, through conventionally named accessor methods; for example,
    for a collection named "values":

        add: `add_value(value)` or `assign_value(value)`
        get: `get_values(*args)`
        has: `has_value(value)` or `contains_value(value)`
        remove: `remove_value(value)` or `unassign_value(value)`
        set: `set_values(values)` or `replace_values(values)`

    How a collection is reached on a class is resolved once per operation,
    class and collection, and memoized if a cache store is provided.

    Examples:
        >>> accessor = CollectionAccessor()
        >>> source = {}
        >>> accessor.add(source, "values", 123)
        >>> source
        {'values': [123]}
        >>> accessor.has(source, "values", "123")
        False

    Args:
        cache_store: An optional store (with `get` and `put` methods, or a
            plain mutable mapping) in which to memoize accessor resolutions.
            If not provided, accessors are resolved on every operation.
        strict: Whether to raise `CollectionNotExistError` when a mapping
            does not have the collection, rather than creating it.
        dynamic_fallback: Whether objects without a declared accessor should
            be assumed to dispatch the preferred accessor name dynamically
            (e.g. via `__getattr__`).
        templates: Overrides for the accessor method name templates, by access
            kind (see `DEFAULT_TEMPLATES` and `CAMEL_CASE_TEMPLATES`).
        inflector: The strategy used to singularize/pluralize accessor names
            (by default backed by `inflect`).
        introspector: The strategy used to describe class hierarchies (by
            default, Python reflection).
        dynamic_invoker: Binds method names selected by dynamic fallback.
    """

    def __init__(
        self,
        cache_store: Any = None,
        strict: bool = False,
        dynamic_fallback: bool = False,
        templates: Optional[MappingType[Union[AccessKind, str], Iterable[str]]] = None,
        *,
        inflector: Optional[Inflector] = None,
        introspector: Optional[ClassIntrospector] = None,
        dynamic_invoker: Optional[DynamicInvoker] = None,
    ):
        self.strict = strict
        self.dynamic_invoker = dynamic_invoker
        self.resolver = AccessorResolver(
            templates=templates,
            inflector=inflector,
            introspector=introspector,
            cache=ResolutionCache(cache_store),
            dynamic_fallback=dynamic_fallback,
        )

    @property
    def dynamic_fallback(self) -> bool:
        return self.resolver.dynamic_fallback

    def add(self, source: Any, collection: str, value: Any) -> None:
        """
        Add `value` to the collection.
        """
        self.get_source(source, collection).add(value)

    def get(self, source: Any, collection: str, *args: Any) -> Any:
        """
        Return the collection. For objects accessed via a method, `args` are
        passed through to the method (e.g. an offset and a limit); otherwise
        they are ignored.
        """
        return self.get_source(source, collection).get(*args)

    def has(self, source: Any, collection: str, value: Any) -> bool:
        """
        Check whether the collection contains `value`. Members are compared
        strictly, so that `123` does not match `"123"` (or `123.0`).
        """
        return self.get_source(source, collection).has(value)

    def remove(self, source: Any, collection: str, value: Any) -> None:
        """
        Remove the first member of the collection strictly equal to `value`,
        if any.
        """
        self.get_source(source, collection).remove(value)

    def set(self, source: Any, collection: str, values: Any) -> None:
        """
        Replace the collection with `values`.
        """
        self.get_source(source, collection).set(values)

    def get_source(self, source: Any, collection: str) -> CollectionSource:
        """
        Wrap `source` in the `CollectionSource` appropriate for its shape.

        The source is checked before the collection name.

        Raises:
            InvalidSourceError: If `source` can hold no collection.
            TypeError: If `collection` is not a string.
        """
        if isinstance(source, Proxy):
            source = source.__wrapped__
        if not isinstance(source, MutableMapping) and isinstance(
            source, (Mapping, *INVALID_SOURCE_TYPES)
        ):
            raise InvalidSourceError.with_source(source, collection)
        if not isinstance(collection, str):
            raise TypeError(
                f"Collection names must be strings, not `{type(collection).__name__}`."
            )
        if isinstance(source, MutableMapping):
            return MappingSource(source, collection, strict=self.strict)
        return ObjectSource(
            source,
            collection,
            resolver=self.resolver,
            dynamic_invoker=self.dynamic_invoker,
        )
