from pathlib import Path
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict

IMAGE_EXTENSIONS = frozenset({'jpg', 'jpeg', 'png', 'gif', 'heic'})


class ViewerConfig(BaseModel):
    """Look-and-feel and routing settings passed into every render call"""
    model_config = ConfigDict(frozen=True)

    workspace: str = 'SLACK BACKUP'
    default_channel: str = 'general'
    mention_class: str = 'fw-bold'
    # Served media lives under <public_prefix>/<channel>/<subfolder>/<filename>
    public_prefix: str = '/public'
    channel_href: str = '?channel={name}'
    image_extensions: FrozenSet[str] = IMAGE_EXTENSIONS
    emoji_path: Path | None = None
