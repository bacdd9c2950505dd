import pytest

from slack_backup_viewer import CyclicAliasError, EmojiResolver, resolve_emoji
from slack_backup_viewer.models import EmojiAlias


def test_literal_glyph(emoji):
    assert emoji('thumbsup') == '👍'
    assert emoji('base') == '👋'


def test_composite_alias(emoji):
    assert emoji('wave') == '👋🏽'


def test_alias_of_alias(emoji):
    assert emoji('+1') == '👍'


def test_unknown_code_is_returned(emoji):
    assert emoji('not-a-real-emoji') == 'not-a-real-emoji'


def test_composite_with_unknown_part():
    assert resolve_emoji('x', {'x': 'base::skin-tone-9', 'base': '👋'}) == '👋skin-tone-9'


def test_repeated_part_is_not_a_cycle():
    assert resolve_emoji('twice', {'twice': 'a::a', 'a': '🅰'}) == '🅰🅰'


def test_cycle_raises():
    table = {'a': 'b', 'b': 'c::a', 'c': '©'}
    with pytest.raises(CyclicAliasError) as exc:
        resolve_emoji('a', table)
    assert exc.value.chain == ['a', 'b', 'a']


def test_check_reports_cycles():
    resolver = EmojiResolver([EmojiAlias(name='x', char='y'), EmojiAlias(name='y', char='x')])
    with pytest.raises(CyclicAliasError):
        resolver.check()
    EmojiResolver([EmojiAlias(name='ok', char='👌')]).check()
