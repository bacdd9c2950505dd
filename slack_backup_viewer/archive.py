import json
import os
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import ArchiveError
from .logs import log
from .models import Channel, EmojiAlias, Message, User

T = TypeVar('T', bound=BaseModel)


class Archive:
    """
    Read access to an exported workspace backup.

    The backup is either a directory or a zip file holding the same layout:
    channels.json, users.json, optionally emoji.json, and one directory per
    channel with all.json or per-day YYYY-MM-DD.json message files.

    Nothing is cached; each call reads the files again.
    """

    def __init__(self, path: str | os.PathLike):
        self.source = Path(path)
        self.temp_dir = None
        if self.source.is_file() and zipfile.is_zipfile(self.source):
            self.root = self.setup_zip_environment()
        else:
            self.root = self.source

        if not self.root.is_dir():
            raise ArchiveError(f'Backup directory not found: {self.root}')

    def setup_zip_environment(self) -> Path:
        """Extract zip file to temporary directory"""
        self.temp_dir = tempfile.mkdtemp()
        log('info', 'Extracting zip file to temporary directory: {dir}', dir=self.temp_dir)
        try:
            with zipfile.ZipFile(self.source, 'r') as zip_ref:
                zip_ref.extractall(self.temp_dir)
        except (zipfile.BadZipFile, OSError) as e:
            self.close()
            raise ArchiveError(f'Failed to extract zip file {self.source}: {e}') from e

        # Exports are sometimes zipped with a single top-level folder
        root = Path(self.temp_dir)
        if not (root / 'channels.json').exists():
            entries = [p for p in root.iterdir() if p.is_dir()]
            if len(entries) == 1 and (entries[0] / 'channels.json').exists():
                return entries[0]
        return root

    def close(self) -> None:
        """Cleanup temporary directory if it exists"""
        if self.temp_dir and os.path.exists(self.temp_dir):
            log('debug', 'Cleaning up temporary directory: {dir}', dir=self.temp_dir)
            shutil.rmtree(self.temp_dir)
        self.temp_dir = None

    def __del__(self):
        """Cleanup temporary directory if it exists"""
        if getattr(self, 'temp_dir', None):
            self.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def read_json(self, path: Path) -> Any:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise ArchiveError(f'Missing file in backup: {path}') from e
        except (OSError, json.JSONDecodeError) as e:
            raise ArchiveError(f'Failed to load {path}: {e}') from e

    def read_records(self, path: Path, model: Type[T]) -> List[T]:
        data = self.read_json(path)
        try:
            return TypeAdapter(List[model]).validate_python(data)
        except ValidationError as e:
            raise ArchiveError(f'Unexpected data in {path}: {e}') from e

    def users(self) -> List[User]:
        return self.read_records(self.root / 'users.json', User)

    def channels(self) -> List[Channel]:
        return self.read_records(self.root / 'channels.json', Channel)

    def emoji(self, path: str | os.PathLike | None = None) -> List[EmojiAlias]:
        """
        Load the emoji alias table.

        An explicit path must exist. Without one, emoji.json at the backup
        root is used when present; otherwise reactions show their short-codes.
        """
        if path is not None:
            return self.read_records(Path(path), EmojiAlias)

        default = self.root / 'emoji.json'
        if not default.exists():
            log('warning', 'No emoji table at {path}, reactions will show short-codes', path=default)
            return []
        return self.read_records(default, EmojiAlias)

    def history(self, channel: str) -> List[Message]:
        """Messages of a channel in archive order"""
        channel_dir = self.root / channel
        all_file = channel_dir / 'all.json'
        if all_file.exists():
            return self.read_records(all_file, Message)

        if not channel_dir.is_dir():
            raise ArchiveError(f'Channel directory not found: {channel_dir}')

        messages = []
        for day_file in sorted(channel_dir.glob('*.json')):
            messages.extend(self.read_records(day_file, Message))
        log('debug', 'Loaded {count} messages for #{channel}', count=len(messages), channel=channel)
        return messages
