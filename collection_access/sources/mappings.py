import logging
from typing import Any, MutableMapping

from collection_access.errors import CollectionNotExistError, InvalidCollectionError
from collection_access.types import MISSING
from collection_access.utils.collections import (
    append_item,
    contains_strict,
    is_collection,
    remove_first_strict,
)

from .base import CollectionSource

logger = logging.getLogger(__name__)


class MappingSource(CollectionSource):
    """
    Accesses a collection stored under a key of a mutable mapping.

    When the key is missing, strict mode raises `CollectionNotExistError`.
    Otherwise mutating operations first store an empty list under the key,
    whereas `get` and `has` see an empty collection without touching the
    mapping. Whatever the mode, a present value that is neither a mutable
    sequence nor a mutable mapping raises `InvalidCollectionError`.
    """

    def __init__(self, source: MutableMapping, collection: str, *, strict: bool = False):
        super().__init__(source, collection)
        self.strict = strict

    def _get_collection(self, create: bool) -> Any:
        value = self.source[self.collection] if self.collection in self.source else MISSING
        if value is MISSING:
            if self.strict:
                raise CollectionNotExistError.for_key(self.collection)
            value = []
            if create:
                logger.debug("Creating missing collection `%s`.", self.collection)
                self.source[self.collection] = value
        if not is_collection(value):
            raise InvalidCollectionError.not_list_like(self.collection)
        return value

    def add(self, value: Any) -> None:
        append_item(self._get_collection(create=True), value)

    def get(self, *args: Any) -> Any:
        # Positional arguments are only meaningful to object accessors.
        return self._get_collection(create=False)

    def has(self, value: Any) -> bool:
        return contains_strict(self._get_collection(create=False), value)

    def remove(self, value: Any) -> None:
        remove_first_strict(self._get_collection(create=True), value)

    def set(self, values: Any) -> None:
        self._get_collection(create=True)
        self.source[self.collection] = values
