from collection_access.utils.naming import (
    get_capitalized_form,
    get_snake_case_form,
    InflectInflector,
    Inflector,
)


def test_word_forms():
    assert get_capitalized_form("user_roles") == "UserRoles"
    assert get_capitalized_form("user-roles.v2") == "UserRolesV2"
    assert get_capitalized_form("userRoles") == "UserRoles"
    assert get_snake_case_form("userRoles") == "user_roles"
    assert get_snake_case_form("User Roles") == "user_roles"
    assert get_snake_case_form("__values__") == "values"


def test_inflection():
    inflector = InflectInflector()
    assert isinstance(inflector, Inflector)

    assert inflector.singularize("values") == "value"
    assert inflector.singularize("classes") == "class"
    assert inflector.singularize("collection") == "collection"
    assert inflector.pluralize("value") == "values"
    assert inflector.pluralize("values") == "values"


def test_inflection_of_identifiers():
    inflector = InflectInflector()
    assert inflector.singularize("addUserRoles") == "addUserRole"
    assert inflector.singularize("add_user_roles") == "add_user_role"
    assert inflector.pluralize("getUserRole") == "getUserRoles"
    assert inflector.pluralize("get_user_role") == "get_user_roles"
    assert inflector.pluralize("get_") == "get_"


def test_inflection_of_singulars_ending_in_s():
    inflector = InflectInflector()
    assert inflector.singularize("add_address") == "add_address"
    assert inflector.singularize("addAddress") == "addAddress"
    assert inflector.singularize("class") == "class"
    assert inflector.singularize("process") == "process"
    assert inflector.pluralize("get_address") == "get_addresses"
    assert inflector.pluralize("getAddress") == "getAddresses"
    assert inflector.pluralize("class") == "classes"
    assert inflector.singularize("addresses") == "address"
