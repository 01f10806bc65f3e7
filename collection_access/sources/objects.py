from typing import Any, Callable, Optional

from typing_extensions import Protocol, runtime_checkable

from collection_access.errors import DynamicDispatchError, InvalidCollectionError
from collection_access.resolution import AccessorResolver
from collection_access.types import AccessKind, AccessorDescriptor, MISSING
from collection_access.utils.collections import (
    append_item,
    contains_strict,
    is_collection,
    remove_first_strict,
)

from .base import CollectionSource


@runtime_checkable
class DynamicInvoker(Protocol):
    """
    Binds accessor method names selected by dynamic fallback. Returns `None`
    when the instance does not dispatch the name.
    """

    def bind(self, instance: Any, method_name: str) -> Optional[Callable]:
        ...  # pragma: no cover


class AttributeDispatchInvoker:
    """
    The default `DynamicInvoker`, which looks names up as attributes (and so
    honours `__getattr__`), accepting only callables.
    """

    def bind(self, instance: Any, method_name: str) -> Optional[Callable]:
        method = getattr(instance, method_name, MISSING)
        return method if callable(method) else None


class ObjectSource(CollectionSource):
    """
    Accesses a collection held by an object instance, via the accessor
    resolved for the instance's class and the operation being performed.

    A public field named after the collection always takes precedence over
    accessor methods. Field values that are unset (or `None`) are treated as
    an empty collection, and replaced by a new list when a value is added.

    Attributes:
        resolver: The resolver used to look up accessors.
        dynamic_invoker: Binds method names selected by dynamic fallback.
    """

    def __init__(
        self,
        source: Any,
        collection: str,
        *,
        resolver: AccessorResolver,
        dynamic_invoker: Optional[DynamicInvoker] = None,
    ):
        super().__init__(source, collection)
        self.resolver = resolver
        self.dynamic_invoker = dynamic_invoker or AttributeDispatchInvoker()

    def _resolve(self, kind: AccessKind) -> AccessorDescriptor:
        descriptor = self.resolver.resolve(self.source, self.collection, kind)
        if not descriptor.is_accessible:
            raise InvalidCollectionError.not_accessible(self.collection, self.source)
        return descriptor

    def _invoke(self, descriptor: AccessorDescriptor, *args: Any) -> Any:
        if descriptor.is_dynamic:
            method = self.dynamic_invoker.bind(self.source, descriptor.method_name)
            if method is None:
                raise DynamicDispatchError.for_method(
                    self.collection, self.source, descriptor.method_name
                )
        else:
            method = getattr(self.source, descriptor.method_name)
        return method(*args)

    def _read_property(self) -> Any:
        value = getattr(self.source, self.collection, None)
        if value is not None and not is_collection(value):
            raise InvalidCollectionError.not_list_like(self.collection, self.source)
        return value

    def _assign_property(self, value: Any):
        try:
            setattr(self.source, self.collection, value)
        except AttributeError as e:
            raise InvalidCollectionError(
                f"Cannot assign to `{type(self.source).__name__}.{self.collection}`. "
                "Is this a property without a setter?"
            ) from e

    def add(self, value: Any) -> None:
        descriptor = self._resolve(AccessKind.ADD)
        if not descriptor.is_property:
            self._invoke(descriptor, value)
            return
        collection = self._read_property()
        if collection is None:
            self._assign_property([value])
        else:
            append_item(collection, value)

    def get(self, *args: Any) -> Any:
        descriptor = self._resolve(AccessKind.GET)
        if descriptor.is_property:
            return getattr(self.source, self.collection, None)
        return self._invoke(descriptor, *args)

    def has(self, value: Any) -> bool:
        descriptor = self._resolve(AccessKind.HAS)
        if not descriptor.is_property:
            return bool(self._invoke(descriptor, value))
        collection = self._read_property()
        return collection is not None and contains_strict(collection, value)

    def remove(self, value: Any) -> None:
        descriptor = self._resolve(AccessKind.REMOVE)
        if not descriptor.is_property:
            self._invoke(descriptor, value)
            return
        collection = self._read_property()
        if collection is not None:
            remove_first_strict(collection, value)

    def set(self, values: Any) -> None:
        descriptor = self._resolve(AccessKind.SET)
        if descriptor.is_property:
            self._assign_property(values)
        else:
            self._invoke(descriptor, values)
