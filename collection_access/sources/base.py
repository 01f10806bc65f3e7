from abc import ABCMeta, abstractmethod
from typing import Any


class CollectionSource(metaclass=ABCMeta):
    """
    Provides a consistent API by which a named collection held by a source can
    be accessed by `CollectionAccessor`.

    Subclasses implement the five operations for one shape of source: mappings
    are mutated in place, while objects are accessed through their resolved
    accessors. Sources are never copied; mutations are visible to the caller.

    Attributes:
        source: The mapping or object holding the collection.
        collection: The name of the collection.
    """

    def __init__(self, source: Any, collection: str):
        self.source = source
        self.collection = collection

    def __repr__(self):
        return f"<{self.__class__.__name__}: {self.collection!r} of {type(self.source).__name__}>"  # pragma: no cover

    @abstractmethod
    def add(self, value: Any) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def get(self, *args: Any) -> Any:
        ...  # pragma: no cover

    @abstractmethod
    def has(self, value: Any) -> bool:
        ...  # pragma: no cover

    @abstractmethod
    def remove(self, value: Any) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def set(self, values: Any) -> None:
        ...  # pragma: no cover
