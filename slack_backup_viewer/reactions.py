import html
from typing import Callable, List

from pydantic import BaseModel, ConfigDict

from .directory import Directory
from .models import ReactionRecord


class ReactionGroup(BaseModel):
    """An emoji glyph and the names of everyone who reacted with it"""
    model_config = ConfigDict(frozen=True)

    emoji: str
    reactors: List[str]

    def to_html(self) -> str:
        names = ''.join(f'<li>{html.escape(name)}</li>' for name in self.reactors)
        return (f'<div class="message-reaction">'
                f'<span class="message-reaction-emoji">{html.escape(self.emoji)}</span>'
                f'<ul class="message-reaction-list">{names}</ul></div>')


def aggregate(reactions: List[ReactionRecord] | None, directory: Directory,
              emoji: Callable[[str], str]) -> List[ReactionGroup] | None:
    """
    Pair each reaction's glyph with its reactors' display names.

    Returns None when the message has no reactions at all, so callers can
    omit the block instead of rendering an empty one. A reaction whose user
    list is empty still produces a group.
    """
    if not reactions:
        return None
    return [
        ReactionGroup(emoji=emoji(r.emoji_code),
                      reactors=[directory.display_name(uid) for uid in r.reactor_ids])
        for r in reactions
    ]


def reactions_html(groups: List[ReactionGroup] | None) -> str | None:
    if groups is None:
        return None
    return '<div class="message-reactions">' + ''.join(g.to_html() for g in groups) + '</div>'
