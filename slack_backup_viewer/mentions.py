import html
import re

from .directory import Directory


class MentionResolver:
    """
    Rewrites @<user-id> tokens into styled display-name spans.

    All known ids go into one regex alternation, longest first, so the text
    is scanned once and a substituted name is never matched again.
    """

    def __init__(self, directory: Directory, mention_class: str = 'fw-bold'):
        self.directory = directory
        self.mention_class = mention_class
        ids = sorted((u.id for u in directory if u.id), key=len, reverse=True)
        # Skip tokens inside a tag, e.g. an @ in a link's href
        self._pattern = re.compile('@(' + '|'.join(map(re.escape, ids)) + ')(?![^<]*>)') if ids else None

    def _span(self, match: re.Match) -> str:
        name = html.escape(self.directory.display_name(match.group(1)))
        return f'<span class="{self.mention_class}">@{name}</span>'

    def resolve(self, text: str) -> str:
        """Replace every known mention; unknown ids stay as raw @id text"""
        if not text or self._pattern is None:
            return text
        return self._pattern.sub(self._span, text)
