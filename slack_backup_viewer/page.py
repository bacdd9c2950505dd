import html
from typing import Iterable, List

from .config import ViewerConfig
from .models import Channel

STYLE_CSS = """
        body { font-family: Arial, sans-serif; margin: 0; }
        .header { display: flex; background: #350d36; color: #fff; padding: 10px 20px; }
        .header a { color: #fff; text-decoration: none; font-weight: bold; }
        .team-menu { width: 220px; }
        .channel-menu_prefix { opacity: 0.7; }
        .main { display: flex; height: calc(100vh - 42px); }
        .listings { width: 240px; background: #3f0e40; color: #cfc3cf; overflow-y: auto; padding: 10px 0; }
        .listings_header { font-size: 0.9em; padding: 0 20px; }
        .channel_list { list-style: none; padding: 0; margin: 0; }
        .channel_list li a { display: block; padding: 2px 20px; color: #cfc3cf; text-decoration: none; }
        .channel_list li a:before { content: "# "; opacity: 0.7; }
        .channel_list li.active a { background: #1164a3; color: #fff; }
        .channel_list li.inactive a { opacity: 0.5; }
        .message-history { flex: 1; overflow-y: auto; padding: 10px 20px; }
        .message { margin: 10px 0; padding: 6px 0; border-bottom: 1px solid #eee; }
        .message_username { font-weight: bold; }
        .fw-bold, .mention { font-weight: bold; color: #1264A3; }
        .message_content { white-space: normal; word-wrap: break-word; margin: 4px 0; }
        .message_content blockquote { border-left: 4px solid #ddd; margin: 4px 0; padding-left: 10px; color: #555; }
        .message-image img { max-width: 360px; max-height: 360px; border-radius: 4px; margin: 4px 0; }
        .message-file a { display: inline-block; padding: 6px 12px; background: #f8f9fa; border-radius: 4px; color: #1264A3; }
        .message-reactions { display: flex; gap: 6px; margin-top: 4px; }
        .message-reaction { border: 1px solid #ddd; border-radius: 12px; padding: 0 8px; position: relative; }
        .message-reaction-list { display: none; position: absolute; background: #fff; border: 1px solid #ddd;
                                 list-style: none; padding: 4px 8px; margin: 0; z-index: 1; }
        .message-reaction:hover .message-reaction-list { display: block; }
"""


def select_channel(requested: str | None, channels: Iterable[Channel], config: ViewerConfig) -> str:
    """The requested channel if it exists, else the configured default, else the first listed one"""
    names = [c.name for c in channels]
    if requested and requested in names:
        return requested
    if config.default_channel in names or not names:
        return config.default_channel
    return names[0]


def channel_listing(channels: Iterable[Channel], active: str, config: ViewerConfig) -> str:
    """Sidebar entries; archived public channels are greyed out"""
    items: List[str] = []
    for channel in channels:
        classes = ['active'] if channel.name == active else ['']
        if channel.is_archived and not channel.is_private:
            classes.append('inactive')
        href = html.escape(config.channel_href.format(name=channel.name), quote=True)
        items.append(f'<li class="{" ".join(classes)}"><a href="{href}">{html.escape(channel.name)}</a></li>')
    return ''.join(items)


def page(active: str, listings: str, messages: str, config: ViewerConfig) -> str:
    """Generate the entire HTML document around the listing and message HTML"""
    workspace = html.escape(config.workspace)
    return f"""
    <!doctype html><html lang="en">
      <head>
          <meta charset="utf-8">
          <meta name="viewport" content="width=device-width, initial-scale=1">
          <title>Slack Viewer - #{html.escape(active)}</title>
          <style>{STYLE_CSS}</style>
      </head>
      <body>
      <header class="header">
          <div class="team-menu"><a href="{html.escape(config.channel_href.format(name=config.default_channel), quote=True)}">{workspace}</a></div>
          <div class="channel-menu">
              <span class="channel-menu_name">
                  <span class="channel-menu_prefix">#</span> {html.escape(active)}
              </span>
          </div>
      </header>
      <main class="main">
        <div class="listings">
          <div class="listings_channels">
            <h2 class="listings_header">Channels</h2>
            <ul class="channel_list">
              {listings}
            </ul>
          </div>
        </div>
        <div class="message-history">
          {messages}
        </div>
      </main>
      </body>
    </html>
  """
