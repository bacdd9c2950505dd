import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Tuple

from . import page
from .archive import Archive
from .config import ViewerConfig
from .directory import Directory
from .emoji import EmojiResolver
from .exceptions import ArchiveError, CyclicAliasError
from .logs import log, setup_logging
from .renderer import MessageRenderer


class SlackBackupViewer:
    def __init__(self, archive: Archive, config: ViewerConfig | None = None):
        self.archive = archive
        self.config = config or ViewerConfig()

    def render_channel(self, requested: str | None = None) -> Tuple[str, str]:
        """
        Load everything fresh from the archive and render one channel page.

        Returns the channel actually shown (unknown names fall back to the
        default channel) and the page HTML. Any ArchiveError propagates; no
        partial page is produced.
        """
        channels = self.archive.channels()
        directory = Directory(self.archive.users())
        emoji = EmojiResolver(self.archive.emoji(self.config.emoji_path))
        try:
            emoji.check()
        except CyclicAliasError as e:
            log('warning', 'Emoji table has a loop, reactions using it are skipped: {error}', error=e)

        active = page.select_channel(requested, channels, self.config)
        history = self.archive.history(active)

        renderer = MessageRenderer(directory, emoji, active, self.config)
        messages = ''.join(m.to_html() for m in renderer.render_history(history))
        listings = page.channel_listing(channels, active, self.config)

        log('debug', 'Rendered {count} messages for #{channel}', count=len(history), channel=active)
        return active, page.page(active, listings, messages, self.config)

    def export(self, output_dir: str, channels: List[str] | None = None) -> List[str]:
        """Write <channel>.html for each channel and index.html for the default one"""
        os.makedirs(output_dir, exist_ok=True)
        names = channels or [c.name for c in self.archive.channels()]

        written = []
        for name in names:
            log('info', 'Processing channel {channel}', channel=name)
            active, html = self.render_channel(name)
            path = os.path.join(output_dir, f'{active}.html')
            with open(path, 'w', encoding='utf-8') as f:
                f.write(html)
            written.append(path)

        _, html = self.render_channel(None)
        index_path = os.path.join(output_dir, 'index.html')
        with open(index_path, 'w', encoding='utf-8') as f:
            f.write(html)
        written.append(index_path)
        return written


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate browsable HTML pages from a Slack backup',
        epilog="""
Examples:
  Render every channel:
    %(prog)s path/to/backup

  Render specific channels from a zipped export:
    %(prog)s backup.zip -channels general random

  Use a separate emoji table and workspace title:
    %(prog)s path/to/backup --emoji emoji.json --workspace "ACME"
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('path', help='Backup directory or zip file')
    parser.add_argument('-o', '--output', default='output',
                        help='Output directory path (default: output)')
    parser.add_argument('-channels', nargs='+', help='Specific channels to render')
    parser.add_argument('--workspace', default=ViewerConfig.model_fields['workspace'].default,
                        help='Workspace name shown in the page header')
    parser.add_argument('--default-channel', default=ViewerConfig.model_fields['default_channel'].default,
                        help='Channel shown when none or an unknown one is requested')
    parser.add_argument('--emoji', help='Emoji alias table (default: emoji.json in the backup, if any)')
    parser.add_argument('--public-prefix',
                        help='URL prefix for attached files (default: the backup directory as a file:// URI)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not os.path.exists(args.path):
        log('error', 'Backup not found: {path}', path=args.path)
        sys.exit(1)

    try:
        with Archive(args.path) as archive:
            config = ViewerConfig(
                workspace=args.workspace,
                default_channel=args.default_channel,
                public_prefix=args.public_prefix or archive.root.resolve().as_uri(),
                channel_href='{name}.html',
                emoji_path=Path(args.emoji) if args.emoji else None,
            )
            if archive.temp_dir and not args.public_prefix:
                log('warning', 'Media links point into the extracted copy of {zip}, which is removed on exit; '
                    'pass --public-prefix to link to a kept copy', zip=args.path)
            viewer = SlackBackupViewer(archive, config)

            if args.channels:
                known = {c.name for c in archive.channels()}
                for channel in args.channels:
                    if channel not in known:
                        log('error', 'Channel not found: {channel}', channel=channel)
                        sys.exit(1)

            viewer.export(args.output, args.channels)
    except ArchiveError as e:
        log('error', '{error}', error=e)
        sys.exit(1)

    log('info', 'Done! Open {path}/index.html in your browser to view the backup.',
        path=args.output)


if __name__ == '__main__':
    main()
