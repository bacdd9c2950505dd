from typing import Dict, FrozenSet, Iterable, Mapping

from .exceptions import CyclicAliasError
from .models import EmojiAlias

ALIAS_SEPARATOR = '::'


def build_table(aliases: Iterable[EmojiAlias]) -> Dict[str, str]:
    """Index emoji entries by short-code; later duplicates win"""
    return {alias.name: alias.char for alias in aliases}


def resolve_emoji(code: str, table: Mapping[str, str],
                  _path: FrozenSet[str] = frozenset(), _chain: tuple = ()) -> str:
    """
    Resolve a short-code (without colons) to its glyph.

    Unknown codes come back unchanged. A value holding '::' is split and each
    part resolved on its own, so 'hand::skin-tone-2' yields the hand glyph
    followed by the modifier. A value that names another entry is followed.

    Raises:
        CyclicAliasError: the chain comes back to a code it is still resolving
    """
    if code in _path:
        raise CyclicAliasError([*_chain, code])

    value = table.get(code)
    if value is None:
        return code

    path = _path | {code}
    chain = (*_chain, code)
    if ALIAS_SEPARATOR in value:
        return ''.join(resolve_emoji(part, table, path, chain)
                       for part in value.split(ALIAS_SEPARATOR))
    if value != code and value in table:
        return resolve_emoji(value, table, path, chain)
    return value


class EmojiResolver:
    """Short-code lookups over one loaded emoji table"""

    def __init__(self, aliases: Iterable[EmojiAlias]):
        self.table = build_table(aliases)

    def __call__(self, code: str) -> str:
        return resolve_emoji(code, self.table)

    def check(self) -> None:
        """Resolve every entry once, raising CyclicAliasError on the first loop"""
        for code in self.table:
            resolve_emoji(code, self.table)
