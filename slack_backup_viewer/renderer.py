from typing import Iterable, List

from . import markup
from .config import ViewerConfig
from .directory import Directory
from .emoji import EmojiResolver
from .exceptions import CyclicAliasError
from .logs import log
from .media import media_html
from .mentions import MentionResolver
from .models import EmojiAlias, Message, RenderedMessage, User
from .reactions import aggregate, reactions_html


class MessageRenderer:
    """Turns archived messages of one channel into display-ready records"""

    def __init__(self, directory: Directory, emoji: EmojiResolver, channel: str,
                 config: ViewerConfig | None = None):
        self.directory = directory
        self.emoji = emoji
        self.channel = channel
        self.config = config or ViewerConfig()
        self.mentions = MentionResolver(directory, self.config.mention_class)

    def content_html(self, message: Message) -> str | None:
        if message.text is None:
            return None
        return self.mentions.resolve(markup.to_html(message.text))

    def reaction_html(self, message: Message) -> str | None:
        try:
            groups = aggregate(message.reactions, self.directory, self.emoji)
        except CyclicAliasError as e:
            log('error', 'Skipping reactions on message {ts} in #{channel}: {error}',
                ts=message.ts, channel=self.channel, error=e)
            return None
        return reactions_html(groups)

    def render(self, message: Message) -> RenderedMessage:
        """Render one message; every facet is independent of the others"""
        if message.attachments:
            # Attachments (link unfurls, bot cards) are not rendered
            log('debug', 'Message {ts} in #{channel} has {count} attachments, not rendered',
                ts=message.ts, channel=self.channel, count=len(message.attachments))

        return RenderedMessage(
            author=self.directory.display_name(message.author_id),
            content_html=self.content_html(message),
            media_html=media_html(message, self.channel, self.config),
            reaction_html=self.reaction_html(message),
        )

    def render_history(self, messages: Iterable[Message]) -> List[RenderedMessage]:
        """Render a channel's history, keeping its order"""
        return [self.render(m) for m in messages]


def render_history(messages: Iterable[Message], channel: str, users: Iterable[User],
                   emoji: Iterable[EmojiAlias], config: ViewerConfig | None = None) -> List[RenderedMessage]:
    """Build fresh lookups from already-loaded archive data and render a channel"""
    renderer = MessageRenderer(Directory(users), EmojiResolver(emoji), channel, config)
    return renderer.render_history(messages)
