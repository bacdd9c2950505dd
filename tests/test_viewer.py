import json
import logging

import pytest

from slack_backup_viewer import Archive, ArchiveError, SlackBackupViewer, ViewerConfig
from slack_backup_viewer.viewer import main


def test_render_channel(backup):
    active, html = SlackBackupViewer(Archive(backup)).render_channel('general')
    assert active == 'general'
    assert 'hello <span class="fw-bold">@bob</span>' in html
    assert '<span class="message-reaction-emoji">👍</span>' in html
    assert '/public/general/xyz/abc.png' in html
    assert html.index('hello') < html.index('photo')


def test_unknown_channel_falls_back_to_default(backup):
    active, _ = SlackBackupViewer(Archive(backup)).render_channel('nope')
    assert active == 'general'


def test_each_render_rereads_the_archive(backup):
    viewer = SlackBackupViewer(Archive(backup))
    viewer.render_channel('general')
    (backup / 'users.json').write_text('[{"id": "U2", "name": "robert"}]')
    _, html = viewer.render_channel('general')
    assert '@robert' in html


def test_broken_archive_fails_whole_page(backup):
    (backup / 'general' / 'all.json').write_text('not json')
    with pytest.raises(ArchiveError):
        SlackBackupViewer(Archive(backup)).render_channel('general')


def test_export_writes_pages(backup, tmp_path_factory):
    out = tmp_path_factory.mktemp('site')
    config = ViewerConfig(channel_href='{name}.html')
    written = SlackBackupViewer(Archive(backup), config).export(str(out))
    assert sorted(p.name for p in out.iterdir()) == ['general.html', 'index.html', 'old.html']
    assert len(written) == 3
    assert 'first' in (out / 'old.html').read_text(encoding='utf-8')


def test_main(backup, tmp_path_factory):
    out = tmp_path_factory.mktemp('cli')
    main([str(backup), '-o', str(out), '-channels', 'general', '--workspace', 'ACME'])
    html = (out / 'general.html').read_text(encoding='utf-8')
    assert 'ACME' in html
    assert backup.resolve().as_uri() + '/general/xyz/abc.png' in html


def test_main_unknown_channel(backup, tmp_path_factory):
    with pytest.raises(SystemExit) as exc:
        main([str(backup), '-o', str(tmp_path_factory.mktemp('cli')), '-channels', 'nope'])
    assert exc.value.code == 1


def test_main_missing_backup(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / 'absent')])


def test_export_without_general_channel(backup, tmp_path_factory):
    (backup / 'channels.json').write_text(json.dumps([{'name': 'team'}]))
    (backup / 'team').mkdir()
    (backup / 'team' / 'all.json').write_text(json.dumps([{'user': 'U1', 'text': 'hi team', 'ts': '1'}]))

    out = tmp_path_factory.mktemp('site')
    SlackBackupViewer(Archive(backup)).export(str(out))
    assert sorted(p.name for p in out.iterdir()) == ['index.html', 'team.html']
    assert 'hi team' in (out / 'index.html').read_text(encoding='utf-8')


def test_cyclic_emoji_table_is_reported_but_page_renders(backup, caplog):
    (backup / 'emoji.json').write_text(json.dumps([
        {'name': 'thumbsup', 'char': 'up'}, {'name': 'up', 'char': 'thumbsup'},
    ]))
    with caplog.at_level(logging.WARNING):
        _, html = SlackBackupViewer(Archive(backup)).render_channel('general')
    assert 'Emoji table has a loop' in caplog.text
    assert 'hello <span class="fw-bold">@bob</span>' in html
    assert 'class="message-reactions"' not in html
