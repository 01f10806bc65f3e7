import pytest

from collection_access import AccessorResolver, DynamicDispatchError, InvalidCollectionError
from collection_access.sources import AttributeDispatchInvoker, DynamicInvoker, ObjectSource

from conftest import DynamicCollection, MethodCollection, PropertyCollection


class RecordingInvoker:
    def __init__(self):
        self.calls = []

    def bind(self, instance, method_name):
        def method(*args):
            self.calls.append((method_name, args))

        return method


class TestObjectSource:
    def test_method_path(self):
        source = ObjectSource(MethodCollection([1]), "values", resolver=AccessorResolver())
        source.add(2)
        assert source.get() == [1, 2]
        assert source.get(1) == [2]
        assert source.has(2) is True
        source.remove(1)
        source.set(source.get() + [3])
        assert source.source.get_values() == [2, 3]

    def test_property_path(self):
        holder = PropertyCollection(values=["a", "b", "a"])
        source = ObjectSource(holder, "values", resolver=AccessorResolver())
        source.remove("a")
        assert holder.values == ["b", "a"]
        assert source.get("ignored") is holder.values

    def test_invalid_property_value(self):
        source = ObjectSource(PropertyCollection(values="abc"), "values", resolver=AccessorResolver())
        with pytest.raises(InvalidCollectionError, match="is not a mutable sequence or mapping"):
            source.add("d")
        assert source.get() == "abc"

    def test_unset_property(self):
        class Unset:
            values: list

        holder = Unset()
        source = ObjectSource(holder, "values", resolver=AccessorResolver())
        assert source.get() is None
        assert not source.has(1)
        source.remove(1)
        source.add(1)
        assert holder.values == [1]

    def test_dynamic_invoker(self):
        invoker = RecordingInvoker()
        source = ObjectSource(
            type("Anything", (), {})(),
            "values",
            resolver=AccessorResolver(dynamic_fallback=True),
            dynamic_invoker=invoker,
        )
        source.add(1)
        source.set([1])
        assert invoker.calls == [("add_value", (1,)), ("set_values", ([1],))]

    def test_dynamic_dispatch_error(self):
        class NoDispatch:
            has_value = "not callable"

        source = ObjectSource(
            NoDispatch(), "values", resolver=AccessorResolver(dynamic_fallback=True)
        )
        with pytest.raises(DynamicDispatchError):
            source.has(1)


def test_attribute_dispatch_invoker():
    invoker = AttributeDispatchInvoker()
    assert isinstance(invoker, DynamicInvoker)

    collection = DynamicCollection([1])
    assert invoker.bind(collection, "get_values")() == [1]
    assert invoker.bind(collection, "shuffle_values") is None
    assert invoker.bind(object(), "get_values") is None
