"""
Slack mrkdwn to HTML.

Handles:
- Angle-bracket tokens: <@U123> and <@U123|name> become the bare mention
  token @U123 (resolved to a name later by the mention resolver),
  <#C123|channel> becomes #channel, <!here> becomes @here and
  <url|label> / <url> become links
- ```code blocks```, `inline code`, *bold*, _italic_, ~strike~
- Lines starting with '>' become a blockquote
- Literal text is HTML-escaped; Slack's own &amp; &lt; &gt; entities are
  decoded first so they are not escaped twice
"""

import html
import re
from typing import List

_PLACEHOLDER = '\x00'
_RE_PLACEHOLDER = re.compile(_PLACEHOLDER + r'(\d+)' + _PLACEHOLDER)

_RE_ANGLE = re.compile(r'<([^<>\n]+)>')
_RE_CODE_BLOCK = re.compile(r'```\n?(.+?)```', re.DOTALL)
_RE_CODE = re.compile(r'`([^`\n]+)`')
_RE_BOLD = re.compile(r'(?<![\w*])\*(?!\s)([^*\n]+?)(?<!\s)\*(?![\w*])')
_RE_ITALIC = re.compile(r'(?<![\w_])_(?!\s)([^_\n]+?)(?<!\s)_(?![\w_])')
_RE_STRIKE = re.compile(r'(?<![\w~])~(?!\s)([^~\n]+?)(?<!\s)~(?![\w~])')
_RE_QUOTE = re.compile(r'^&gt;\s?')

_SLACK_ENTITIES = (('&lt;', '<'), ('&gt;', '>'), ('&amp;', '&'))
_LINK_SCHEMES = ('http://', 'https://', 'mailto:', 'ftp://')


def _unescape_slack(text: str) -> str:
    for entity, char in _SLACK_ENTITIES:
        text = text.replace(entity, char)
    return text


def _escape(text: str) -> str:
    return html.escape(_unescape_slack(text), quote=False)


class _Stash:
    """Holds finished HTML fragments so later passes leave them alone"""

    def __init__(self):
        self.fragments: List[str] = []

    def put(self, fragment: str) -> str:
        self.fragments.append(fragment)
        return f'{_PLACEHOLDER}{len(self.fragments) - 1}{_PLACEHOLDER}'

    def restore(self, text: str) -> str:
        # Fragments may themselves hold placeholders (a link inside code)
        while _RE_PLACEHOLDER.search(text):
            text = _RE_PLACEHOLDER.sub(lambda m: self.fragments[int(m.group(1))], text)
        return text


def _angle_token(body: str) -> str:
    """Translate the inside of a <...> token to HTML"""
    target, _, label = body.partition('|')
    if target.startswith('@'):
        # Keep the raw id; display names are filled in by the mention resolver
        return html.escape(target, quote=False)
    if target.startswith('#'):
        return '#' + _escape(label or target[1:])
    if target.startswith('!'):
        if label:
            return _escape(label)
        keyword = target[1:].split('^', 1)[0]
        return '@' + _escape(keyword)
    if target.startswith(_LINK_SCHEMES):
        url = html.escape(_unescape_slack(target), quote=True)
        text = _escape(label) if label else url
        return f'<a href="{url}" target="_blank">{text}</a>'
    return '&lt;' + _escape(body) + '&gt;'


def _blockquotes(text: str) -> str:
    out: List[str] = []
    quoted: List[str] = []
    for line in text.split('\n'):
        if _RE_QUOTE.match(line):
            quoted.append(_RE_QUOTE.sub('', line, count=1))
            continue
        if quoted:
            out.append('<blockquote>' + '<br>'.join(quoted) + '</blockquote>')
            quoted = []
        out.append(line)
    if quoted:
        out.append('<blockquote>' + '<br>'.join(quoted) + '</blockquote>')
    return '\n'.join(out)


def to_html(raw: str | None) -> str:
    """Convert raw message markup to an HTML fragment, leaving @<id> tokens intact"""
    if not raw:
        return ''

    stash = _Stash()
    text = raw.replace(_PLACEHOLDER, '')

    # Code first so its contents are never formatted or linked
    text = _RE_CODE_BLOCK.sub(
        lambda m: stash.put(f'<pre><code>{_escape(m.group(1))}</code></pre>'), text)
    text = _RE_CODE.sub(lambda m: stash.put(f'<code>{_escape(m.group(1))}</code>'), text)

    text = _RE_ANGLE.sub(lambda m: stash.put(_angle_token(m.group(1))), text)
    text = _escape(text)

    text = _RE_BOLD.sub(r'<strong>\1</strong>', text)
    text = _RE_ITALIC.sub(r'<em>\1</em>', text)
    text = _RE_STRIKE.sub(r'<del>\1</del>', text)

    text = _blockquotes(text)
    text = text.replace('\n', '<br>')
    return stash.restore(text)
