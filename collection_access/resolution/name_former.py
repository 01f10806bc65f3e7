import string
from typing import Dict, Iterable, List, Mapping, Optional, Union

from collection_access.types import AccessKind, DEFAULT_TEMPLATES
from collection_access.types.access_kind import Templates
from collection_access.utils.naming import (
    get_capitalized_form,
    get_snake_case_form,
    InflectInflector,
    Inflector,
)

TEMPLATE_FIELDS = frozenset({"name", "Name"})


def validate_template(template: str) -> str:
    """
    Check that `template` is a format string that references the collection
    name via `{name}` and/or `{Name}`, and nothing else.
    """
    try:
        fields = {
            field for _, field, _, _ in string.Formatter().parse(template) if field is not None
        }
    except ValueError as e:
        raise ValueError(f"Invalid accessor template `{template}`: {e}") from e
    if not fields:
        raise ValueError(
            f"Accessor template `{template}` does not reference the collection name (use `{{name}}` or `{{Name}}`)."
        )
    if not fields <= TEMPLATE_FIELDS:
        raise ValueError(
            f"Accessor template `{template}` has unknown placeholders: {', '.join(sorted(fields - TEMPLATE_FIELDS))}."
        )
    return template


def prepare_templates(
    templates: Optional[Mapping[Union[AccessKind, str], Iterable[str]]] = None,
) -> Dict[AccessKind, Templates]:
    """
    Merge user-provided templates over the defaults, coercing kinds and
    validating each template.
    """
    prepared = dict(DEFAULT_TEMPLATES)
    for kind, kind_templates in (templates or {}).items():
        if isinstance(kind_templates, str):
            kind_templates = (kind_templates,)
        kind_templates = tuple(validate_template(template) for template in kind_templates)
        if not kind_templates:
            raise ValueError(f"No accessor templates provided for `{AccessKind.coerce(kind).label}`.")
        prepared[AccessKind.coerce(kind)] = kind_templates
    return prepared


class NameFormer:
    """
    Derives the ordered candidate accessor method names for a collection.

    For each template of an access kind, the collection name is substituted in
    (as `{name}`: snake case, or `{Name}`: capitalized words), and the result
    is pluralized (for `GET` and `SET`) or singularized (for `ADD`, `HAS` and
    `REMOVE`). Earlier templates take priority over later ones.
    """

    def __init__(
        self,
        templates: Optional[Mapping[Union[AccessKind, str], Iterable[str]]] = None,
        inflector: Optional[Inflector] = None,
    ):
        self.templates = prepare_templates(templates)
        self.inflector = inflector or InflectInflector()

    def form(self, collection: str, kind: Union[AccessKind, str]) -> List[str]:
        kind = AccessKind.coerce(kind)
        inflect = self.inflector.pluralize if kind.pluralize else self.inflector.singularize
        name, capitalized = get_snake_case_form(collection), get_capitalized_form(collection)
        return [
            inflect(template.format(name=name, Name=capitalized))
            for template in self.templates[kind]
        ]
