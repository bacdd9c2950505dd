from slack_backup_viewer import Directory, MentionResolver, User
from slack_backup_viewer.markup import to_html


def test_every_known_mention_is_replaced(directory):
    resolver = MentionResolver(directory)
    out = resolver.resolve('@U1 said hi to @U2 and @U1')
    assert out == ('<span class="fw-bold">@alice</span> said hi to '
                   '<span class="fw-bold">@bob</span> and <span class="fw-bold">@alice</span>')


def test_unknown_mentions_pass_through(directory):
    assert MentionResolver(directory).resolve('ping @U999 now') == 'ping @U999 now'


def test_no_double_substitution():
    # bob's display name looks like another user's token
    directory = Directory([User(id='U1', name='U2'), User(id='U2', name='carol')])
    out = MentionResolver(directory).resolve('@U1')
    assert out == '<span class="fw-bold">@U2</span>'


def test_longest_id_wins():
    directory = Directory([User(id='U1', name='one'), User(id='U12', name='twelve')])
    out = MentionResolver(directory, mention_class='mention').resolve('@U12 @U1')
    assert out == '<span class="mention">@twelve</span> <span class="mention">@one</span>'


def test_display_names_are_escaped():
    directory = Directory([User(id='U1', name='<b>eve</b>')])
    assert MentionResolver(directory).resolve('@U1') == '<span class="fw-bold">@&lt;b&gt;eve&lt;/b&gt;</span>'


def test_empty_directory_leaves_text_alone():
    assert MentionResolver(Directory([])).resolve('@U1') == '@U1'


def test_mentions_inside_tags_are_left_alone(directory):
    out = MentionResolver(directory).resolve(to_html('<https://x.com/@U1>'))
    assert out == ('<a href="https://x.com/@U1" target="_blank">'
                   'https://x.com/<span class="fw-bold">@alice</span></a>')
