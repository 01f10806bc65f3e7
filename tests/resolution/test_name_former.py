import pytest

from collection_access import AccessKind, CAMEL_CASE_TEMPLATES, NameFormer
from collection_access.resolution.name_former import prepare_templates, validate_template


class UpperInflector:
    def pluralize(self, word):
        return word.upper() + "S"

    def singularize(self, word):
        return word.upper()


class TestNameFormer:
    def test_default_templates(self):
        former = NameFormer()
        assert former.form("values", AccessKind.ADD) == ["add_value", "assign_value"]
        assert former.form("values", AccessKind.GET) == ["get_values"]
        assert former.form("values", AccessKind.HAS) == ["has_value", "contains_value"]
        assert former.form("values", AccessKind.REMOVE) == ["remove_value", "unassign_value"]
        assert former.form("values", AccessKind.SET) == ["set_values", "replace_values"]

    def test_compound_names(self):
        former = NameFormer(CAMEL_CASE_TEMPLATES)
        assert former.form("user_roles", "add") == ["addUserRole", "assignUserRole"]
        assert former.form("user_roles", "get") == ["getUserRoles"]
        assert former.form("user-role", "set") == ["setUserRoles", "replaceUserRoles"]

        assert NameFormer().form("userRoles", "has") == ["has_user_role", "contains_user_role"]

    def test_inflection_applies_to_substituted_result(self):
        former = NameFormer({"get": ["{name}_list"], "add": ["{Name}Items"]})
        assert former.form("value", "get") == ["value_lists"]
        assert former.form("value", "add") == ["ValueItem"]

    def test_custom_inflector(self):
        former = NameFormer({"get": ["get_{name}"], "add": ["add_{name}"]}, UpperInflector())
        assert former.form("value", "get") == ["GET_VALUES"]
        assert former.form("value", "add") == ["ADD_VALUE"]


def test_validate_template():
    assert validate_template("add_{name}") == "add_{name}"
    assert validate_template("add{Name}") == "add{Name}"

    with pytest.raises(ValueError, match="does not reference the collection name"):
        validate_template("add")
    with pytest.raises(ValueError, match="unknown placeholders: collection"):
        validate_template("add_{collection}")
    with pytest.raises(ValueError, match="Invalid accessor template"):
        validate_template("add_{name")


def test_prepare_templates():
    templates = prepare_templates({"has": "includes_{name}", AccessKind.GET: ["list_{name}"]})
    assert templates[AccessKind.HAS] == ("includes_{name}",)
    assert templates[AccessKind.GET] == ("list_{name}",)
    assert templates[AccessKind.ADD] == ("add_{name}", "assign_{name}")

    with pytest.raises(ValueError, match="No accessor templates provided for `set`"):
        prepare_templates({"set": []})
