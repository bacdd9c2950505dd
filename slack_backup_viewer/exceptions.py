from typing import List


class ViewerError(Exception):
    """Base class for errors raised by the viewer"""


class ArchiveError(ViewerError):
    """The backup archive is missing a file or holds data we cannot parse"""


class CyclicAliasError(ViewerError, ValueError):
    """An emoji alias chain leads back to a code already being resolved"""

    def __init__(self, chain: List[str]):
        self.chain = list(chain)
        super().__init__('Cyclic emoji alias: ' + ' -> '.join(self.chain))
