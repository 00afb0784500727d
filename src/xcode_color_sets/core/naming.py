"""Naming utilities: string cases, code-safe identifiers and token names."""

import logging
import re
import unicodedata
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set

from xcode_color_sets.core.models import Token, TokenGroup

if TYPE_CHECKING:
    from xcode_color_sets.core.ports import NameCoder

logger = logging.getLogger(__name__)

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")


class StringCase(str, Enum):
    """Casing styles used for folder and identifier names."""

    CAMEL = "camelCase"
    PASCAL = "pascalCase"
    SNAKE = "snakeCase"
    KEBAB = "kebabCase"
    CONSTANT = "constantCase"
    FLAT = "flatCase"


def split_words(raw: str) -> List[str]:
    """
    Split an arbitrary display name into words.

    Accents are folded to ASCII, camelCase and acronym boundaries start new
    words, and every other non-alphanumeric character is a separator.
    """
    folded = unicodedata.normalize("NFKD", raw).encode("ascii", "ignore").decode("ascii")
    spaced = _ACRONYM_BOUNDARY.sub(r"\1 \2", folded)
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", spaced)
    return [word for word in _NON_ALNUM.split(spaced) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def apply_case(words: Iterable[str], case: StringCase) -> str:
    """Join words using the given casing style."""
    words = list(words)
    if not words:
        return ""

    if case == StringCase.CAMEL:
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    if case == StringCase.PASCAL:
        return "".join(_capitalize(w) for w in words)
    if case == StringCase.SNAKE:
        return "_".join(w.lower() for w in words)
    if case == StringCase.KEBAB:
        return "-".join(w.lower() for w in words)
    if case == StringCase.CONSTANT:
        return "_".join(w.upper() for w in words)
    return "".join(w.lower() for w in words)


def code_safe_variable_name(raw: str, case: StringCase) -> str:
    """
    Convert a display name into an identifier in the requested case.

    The result never starts with a digit (an underscore is prepended) and is
    never empty (``"_"`` is returned for names without usable characters).
    """
    name = apply_case(split_words(raw), case)
    if not name:
        return "_"
    if name[0].isdigit():
        return f"_{name}"
    return name


class DefaultNameCoder:
    """NameCoder backed by :func:`code_safe_variable_name`."""

    def to_safe_name(self, raw: str, case: StringCase) -> str:
        return code_safe_variable_name(raw, case)


def group_path(token: Token, groups_by_id: Dict[str, TokenGroup]) -> List[str]:
    """
    Names of the non-root groups containing ``token``, outermost first.

    Unknown parents end the walk; cycles in the parent chain are cut.
    """
    path: List[str] = []
    seen: Set[str] = set()
    group_id = token.parent_group_id
    while group_id and group_id not in seen:
        seen.add(group_id)
        group = groups_by_id.get(group_id)
        if group is None:
            break
        if not group.is_root and group.name:
            path.append(group.name)
        group_id = group.parent_group_id
    path.reverse()
    return path


class TokenNameTracker:
    """Hands out unique, stable names for tokens within one export pass.

    The first call for a token decides its name; later calls for the same
    token return it unchanged. Tokens whose names would collide get a numeric
    suffix starting at 2.
    """

    def __init__(self, name_coder: Optional["NameCoder"] = None):
        self._name_coder = name_coder or DefaultNameCoder()
        self._names_by_token: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def token_name(
        self,
        token: Token,
        token_groups: Iterable[TokenGroup],
        case: StringCase,
        prefix: Optional[str] = None,
    ) -> str:
        if token.id in self._names_by_token:
            return self._names_by_token[token.id]

        groups_by_id = {group.id: group for group in token_groups}
        segments = group_path(token, groups_by_id) + [token.name]
        if prefix:
            segments.insert(0, prefix)
        raw = " ".join(segments)

        name = self._name_coder.to_safe_name(raw, case)
        suffix = 2
        while name in self._used_names:
            name = self._name_coder.to_safe_name(f"{raw} {suffix}", case)
            suffix += 1

        if suffix > 2:
            logger.debug(f"Renamed colliding token {token.id} to {name}")

        self._names_by_token[token.id] = name
        self._used_names.add(name)
        return name
