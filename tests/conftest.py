import json

import pytest

from slack_backup_viewer import Directory, EmojiResolver, User
from slack_backup_viewer.models import EmojiAlias


@pytest.fixture
def directory():
    return Directory([User(id='U1', name='alice'), User(id='U2', name='bob')])


@pytest.fixture
def emoji():
    return EmojiResolver([
        EmojiAlias(name='wave', char='base::tone2'),
        EmojiAlias(name='base', char='👋'),
        EmojiAlias(name='tone2', char='🏽'),
        EmojiAlias(name='thumbsup', char='👍'),
        EmojiAlias(name='+1', char='thumbsup'),
    ])


@pytest.fixture
def backup(tmp_path):
    """A small backup directory in the layout of an export"""
    def write(name, data):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding='utf-8')

    write('users.json', [{'id': 'U1', 'name': 'alice'}, {'id': 'U2', 'name': 'bob'}])
    write('channels.json', [
        {'name': 'general', 'is_archived': False, 'is_private': False},
        {'name': 'old', 'is_archived': True, 'is_private': False},
    ])
    write('emoji.json', [{'name': 'thumbsup', 'char': '👍'}])
    write('general/all.json', [
        {'user': 'U1', 'text': 'hello <@U2>', 'ts': '1600000000.000100',
         'reactions': [{'name': 'thumbsup', 'users': ['U2'], 'count': 1}]},
        {'user': 'U2', 'text': 'photo', 'ts': '1600000001.000200', 'client_msg_id': 'xyz',
         'files': [{'url_private_file': 'general/abc.png'}]},
    ])
    write('old/2020-01-02.json', [{'user': 'U2', 'text': 'second', 'ts': '1577923200.0'}])
    write('old/2020-01-01.json', [{'user': 'U1', 'text': 'first', 'ts': '1577836800.0'}])
    return tmp_path
