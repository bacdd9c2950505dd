"""Render an exported Slack workspace backup into browsable HTML."""

from .archive import Archive
from .config import ViewerConfig
from .directory import Directory
from .emoji import EmojiResolver, resolve_emoji
from .exceptions import ArchiveError, CyclicAliasError, ViewerError
from .mentions import MentionResolver
from .models import Channel, EmojiAlias, FileRef, Message, ReactionRecord, RenderedMessage, User
from .renderer import MessageRenderer, render_history
from .viewer import SlackBackupViewer

__all__ = [
    'Archive', 'ArchiveError', 'Channel', 'CyclicAliasError', 'Directory', 'EmojiAlias',
    'EmojiResolver', 'FileRef', 'MentionResolver', 'Message', 'MessageRenderer',
    'ReactionRecord', 'RenderedMessage', 'SlackBackupViewer', 'User', 'ViewerConfig',
    'ViewerError', 'render_history', 'resolve_emoji',
]
