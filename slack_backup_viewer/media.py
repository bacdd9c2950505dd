import html
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .config import IMAGE_EXTENSIONS, ViewerConfig
from .models import FileRef, Message


class MediaItem(BaseModel):
    """One attached file, classified for display"""
    model_config = ConfigDict(frozen=True)

    kind: Literal['image', 'file']
    filename: str
    path: str

    def to_html(self) -> str:
        href = html.escape(self.path, quote=True)
        name = html.escape(self.filename, quote=True)
        if self.kind == 'image':
            return (f'<div class="message-image"><a href="{href}" target="_blank">'
                    f'<img src="{href}" alt="{name}"></a></div>')
        return f'<div class="message-file"><a href="{href}" target="_blank">{name}</a></div>'


def is_image(filename: str, extensions=IMAGE_EXTENSIONS) -> bool:
    """Exact, case-sensitive match on the text after the last dot"""
    if '.' not in filename:
        return False
    return filename.rsplit('.', 1)[1] in extensions


def classify(file: FileRef, message: Message, channel: str, config: ViewerConfig) -> MediaItem | None:
    """Build the display entry for a file, or None when it has no stored path"""
    if not file.private_url:
        return None

    filename = file.private_url.removeprefix(f'{channel}/')
    prefix = config.public_prefix.rstrip('/')
    path = f'{prefix}/{channel}/{message.subfolder}/{filename}'
    kind = 'image' if is_image(filename, config.image_extensions) else 'file'
    return MediaItem(kind=kind, filename=filename, path=path)


def media_html(message: Message, channel: str, config: ViewerConfig) -> str:
    """HTML for all of a message's files, in the order they were listed"""
    items = (classify(f, message, channel, config) for f in message.files or [])
    return ''.join(item.to_html() for item in items if item is not None)
