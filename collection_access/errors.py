from typing import Any, Optional


def _class_label(instance: Any) -> str:
    cls = type(instance)
    return f"{cls.__module__}.{cls.__qualname__}"


class CollectionAccessError(RuntimeError):
    """
    The base class of all errors raised while accessing a collection.
    """


class InvalidSourceError(CollectionAccessError, TypeError):
    """
    Raised when the value holding a collection is neither a mutable mapping nor
    an object instance.
    """

    @classmethod
    def with_source(cls, source: Any, collection: Any) -> "InvalidSourceError":
        return cls(
            f"Expected a mutable mapping or an object instance to hold the collection "
            f"`{collection}`, received `{type(source).__name__}`."
        )


class CollectionNotExistError(CollectionAccessError, LookupError):
    """
    Raised in strict mode when a mapping does not have the requested collection.
    """

    @classmethod
    def for_key(cls, collection: str) -> "CollectionNotExistError":
        return cls(f"A collection does not exist for the mapping key `{collection}`.")


class InvalidCollectionError(CollectionAccessError):
    """
    Raised when a collection exists but cannot be used, either because its
    value is not list- or mapping-like, or because an object exposes no way
    to reach it.
    """

    @classmethod
    def not_accessible(cls, collection: str, instance: Any) -> "InvalidCollectionError":
        return cls(
            f"The collection `{collection}` for `{_class_label(instance)}` is not accessible."
        )

    @classmethod
    def not_list_like(
        cls, collection: str, instance: Optional[Any] = None
    ) -> "InvalidCollectionError":
        owner = f" for `{_class_label(instance)}`" if instance is not None else ""
        return cls(
            f"The collection `{collection}`{owner} is not a mutable sequence or mapping."
        )


class DynamicDispatchError(InvalidCollectionError):
    """
    Raised when a method name selected by dynamic fallback turns out not to be
    callable on the object (i.e. the object does not dispatch it).
    """

    @classmethod
    def for_method(
        cls, collection: str, instance: Any, method_name: str
    ) -> "DynamicDispatchError":
        return cls(
            f"The collection `{collection}` for `{_class_label(instance)}` resolved to "
            f"`{method_name}` by dynamic fallback, but the object does not dispatch it."
        )
