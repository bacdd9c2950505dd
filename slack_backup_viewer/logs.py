import logging


def setup_logging(level=logging.INFO):
    """Configure logging for the application"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def log(level, message, **kwargs):
    """
    Utility function for consistent logging

    Args:
        level (str): Log level ('debug', 'info', 'warning', 'error', 'critical')
        message (str): Message template with optional placeholders
        **kwargs: Values to fill placeholders in message
    """
    log_func = getattr(logging.getLogger('slack_backup_viewer'), level.lower())
    if kwargs:
        message = message.format(**kwargs)
    log_func(message)
