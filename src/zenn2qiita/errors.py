"""Exception hierarchy for zenn2qiita.

I/O failures are not wrapped: ``OSError`` raised while reading a prior
output document reaches the caller unchanged.
"""

from __future__ import annotations


class Zenn2QiitaError(Exception):
    """Base class for all zenn2qiita errors."""


class MalformedDocumentError(Zenn2QiitaError, ValueError):
    """A document has no well-formed frontmatter block.

    Attributes:
        source: Where the text came from (a path, or ``"<input>"``).
        reason: Short description of what is wrong with the block.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed frontmatter in {source}: {reason}")
