from __future__ import annotations

import dataclasses
from typing import Any, List

import pytest

from collection_access import CollectionAccessor, MappingCacheStore
from collection_access.utils.collections import strictly_equal


class MethodCollection:
    """
    Reaches its collection only through accessor methods.
    """

    def __init__(self, values=None):
        self._values = list(values or [])

    def add_value(self, value):
        self._values.append(value)

    def get_values(self, offset=0, limit=None):
        return self._values[offset:None if limit is None else offset + limit]

    def has_value(self, value):
        return any(strictly_equal(item, value) for item in self._values)

    def remove_value(self, value):
        for i, item in enumerate(self._values):
            if strictly_equal(item, value):
                del self._values[i]
                return

    def set_values(self, values):
        self._values = list(values)


class InheritedMethodCollection(MethodCollection):
    pass


@dataclasses.dataclass
class PropertyCollection:
    """
    Exposes its collection as a public field.
    """

    values: List[Any] = dataclasses.field(default_factory=list)


class DynamicCollection:
    """
    Dispatches accessor methods dynamically through `__getattr__`.
    """

    PREFIXES = ("add_", "get_", "has_", "remove_", "set_")

    def __init__(self, values=None):
        self._values = list(values or [])

    def __getattr__(self, name):
        for prefix in self.PREFIXES:
            if name.startswith(prefix):
                operation = getattr(self, f"_{prefix.rstrip('_')}")
                return operation
        raise AttributeError(name)

    def _add(self, value):
        self._values.append(value)

    def _get(self):
        return list(self._values)

    def _has(self, value):
        return any(strictly_equal(item, value) for item in self._values)

    def _remove(self, value):
        for i, item in enumerate(self._values):
            if strictly_equal(item, value):
                del self._values[i]
                return

    def _set(self, values):
        self._values = list(values)


class Opaque:
    """
    Offers no way to reach any collection.
    """


@pytest.fixture
def accessor():
    return CollectionAccessor()


@pytest.fixture
def cache_store():
    return MappingCacheStore()


@pytest.fixture
def cached_accessor(cache_store):
    return CollectionAccessor(cache_store=cache_store)


@pytest.fixture(params=["mapping", "method", "property", "dynamic"])
def source_and_accessor(request):
    """
    A source holding an empty "values" collection, of each supported shape,
    and an accessor able to reach it.
    """
    if request.param == "mapping":
        return {"values": []}, CollectionAccessor()
    if request.param == "method":
        return MethodCollection(), CollectionAccessor()
    if request.param == "property":
        return PropertyCollection(), CollectionAccessor()
    return DynamicCollection(), CollectionAccessor(dynamic_fallback=True)
