from collection_access import (
    CollectionAccessError,
    CollectionNotExistError,
    DynamicDispatchError,
    InvalidCollectionError,
    InvalidSourceError,
)


class Holder:
    pass


def test_hierarchy():
    for error in (
        CollectionNotExistError,
        DynamicDispatchError,
        InvalidCollectionError,
        InvalidSourceError,
    ):
        assert issubclass(error, CollectionAccessError)
    assert issubclass(InvalidSourceError, TypeError)
    assert issubclass(CollectionNotExistError, LookupError)
    assert issubclass(DynamicDispatchError, InvalidCollectionError)


def test_messages():
    assert str(InvalidSourceError.with_source(False, "items")) == (
        "Expected a mutable mapping or an object instance to hold the collection "
        "`items`, received `bool`."
    )
    assert str(CollectionNotExistError.for_key("items")) == (
        "A collection does not exist for the mapping key `items`."
    )
    assert str(InvalidCollectionError.not_accessible("items", Holder())) == (
        f"The collection `items` for `{__name__}.Holder` is not accessible."
    )
    assert str(InvalidCollectionError.not_list_like("items")) == (
        "The collection `items` is not a mutable sequence or mapping."
    )
    assert "`items` for `" in str(InvalidCollectionError.not_list_like("items", Holder()))
    assert "`get_items`" in str(DynamicDispatchError.for_method("items", Holder(), "get_items"))
