import html
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArchiveRecord(BaseModel):
    """Base for records read from the export; keys come in as Slack spells them"""
    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)


class User(ArchiveRecord):
    id: str
    name: str


# Returned for any id the directory does not know
UNKNOWN_USER = User(id='', name='none')


class EmojiAlias(ArchiveRecord):
    """
    One entry of the emoji table.

    `char` is a literal glyph, the name of another entry, or several names
    joined by '::' (e.g. a base emoji plus a skin-tone modifier).
    """
    name: str
    char: str


class Channel(ArchiveRecord):
    name: str
    is_archived: bool = False
    is_private: bool = False


class FileRef(ArchiveRecord):
    private_url: str | None = Field(default=None, alias='url_private_file')


class ReactionRecord(ArchiveRecord):
    emoji_code: str = Field(alias='name')
    reactor_ids: List[str] = Field(default_factory=list, alias='users')
    count: int = 0


class Message(ArchiveRecord):
    author_id: str | None = Field(default=None, alias='user')
    text: str | None = None
    ts: str
    client_msg_id: str | None = None
    blocks: List[Dict[str, Any]] | None = None
    files: List[FileRef] | None = None
    reactions: List[ReactionRecord] | None = None
    attachments: List[Dict[str, Any]] | None = None

    @field_validator('ts', mode='before')
    @classmethod
    def _coerce_ts(cls, value):
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def subfolder(self) -> str:
        """Directory holding this message's uploaded files"""
        return self.client_msg_id or self.ts


class RenderedMessage(BaseModel):
    """Display-ready message handed to the page layer"""
    model_config = ConfigDict(frozen=True)

    author: str
    content_html: str | None = None
    media_html: str = ''
    reaction_html: str | None = None

    def to_html(self) -> str:
        content = f'<div class="message_content">{self.content_html}</div>' if self.content_html else ''
        return f"""
      <div class="message">
        <span class="message_username">{html.escape(self.author)}</span>
        {content}
        {self.media_html}
        {self.reaction_html or ''}
      </div>
    """
