import re
from typing import Dict, Tuple

import inflect
from typing_extensions import Protocol, runtime_checkable

INFLECT_ENGINE = inflect.engine()
INFLECT_CACHE: Dict[Tuple[str, bool], str] = {}

_SEPARATORS = re.compile(r"[^0-9a-zA-Z]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_TRAILING_WORD = re.compile(r"^(?P<head>.*?)(?P<word>[A-Z]?[a-z0-9]+|[A-Z]+)$")


def get_word_segments(collection: str):
    return [segment for segment in _SEPARATORS.split(collection) if segment]


def get_capitalized_form(collection: str) -> str:
    """
    Normalize a collection name into a capitalized word form, e.g.
    "user_roles" -> "UserRoles". Only the first letter of each segment is
    changed.
    """
    return "".join(
        segment[:1].upper() + segment[1:] for segment in get_word_segments(collection)
    )


def get_snake_case_form(collection: str) -> str:
    """
    Normalize a collection name into snake case, e.g. "userRoles" or
    "user-roles" -> "user_roles".
    """
    return "_".join(
        _CAMEL_BOUNDARY.sub("_", segment).lower()
        for segment in get_word_segments(collection)
    )


@runtime_checkable
class Inflector(Protocol):
    """
    The strategy used to derive singular and plural word forms.
    """

    def pluralize(self, word: str) -> str:
        ...  # pragma: no cover

    def singularize(self, word: str) -> str:
        ...  # pragma: no cover


class InflectInflector:
    """
    An `Inflector` backed by the `inflect` engine. Only the trailing word of an
    identifier is inflected, so that "addUserRoles" becomes "addUserRole" and
    "get_user_role" becomes "get_user_roles". Results are memoized.
    """

    def pluralize(self, word: str) -> str:
        return self._inflect(word, plural=True)

    def singularize(self, word: str) -> str:
        return self._inflect(word, plural=False)

    @staticmethod
    def _inflect(word: str, plural: bool) -> str:
        if (word, plural) not in INFLECT_CACHE:
            match = _TRAILING_WORD.match(word)
            if not match:
                INFLECT_CACHE[word, plural] = word
            else:
                head, noun = match.group("head"), match.group("word")
                singular = INFLECT_ENGINE.singular_noun(noun)
                # `singular_noun` also truncates singulars ending in "s" (e.g.
                # "address" -> "addres"); only a form that pluralizes back to
                # `noun` is a real singular.
                if singular and INFLECT_ENGINE.plural_noun(singular) != noun:
                    singular = False
                if plural:
                    noun = noun if singular else INFLECT_ENGINE.plural_noun(noun)
                elif singular:
                    noun = singular
                INFLECT_CACHE[word, plural] = head + noun
        return INFLECT_CACHE[word, plural]
