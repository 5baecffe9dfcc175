"""Filesystem access for prior output documents.

Pure parsing/rendering lives in :mod:`zenn2qiita.domain.document`
(dependency direction: infrastructure -> domain). This module performs
the actual reads. It never writes.

INVARIANT: an existing-but-unreadable prior output is an error, never
"not found". Treating it as missing would silently drop the Qiita ``id``
and publish a duplicate article.
"""

from __future__ import annotations

import logging
from pathlib import Path

from zenn2qiita.domain.document import Document, parse_document
from zenn2qiita.domain.prior import PriorState

logger = logging.getLogger(__name__)


def read_document(path: Path, *, encoding: str = "utf-8") -> Document:
    """Read and parse a Markdown file with frontmatter.

    Raises:
        OSError: If the file cannot be read.
        MalformedDocumentError: If its frontmatter block is malformed.
    """
    text = path.read_text(encoding=encoding)
    return parse_document(text, source=str(path))


class FilePriorStateLookup:
    """Recover prior state from an output document on disk."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def get(self, identity: str | Path) -> PriorState:
        path = Path(identity)
        if not path.exists():
            logger.debug("No prior output at %s", path)
            return PriorState()

        document = read_document(path, encoding=self._encoding)
        state = PriorState.from_frontmatter(document.frontmatter)
        logger.debug(
            "Recovered prior state from %s (id=%r, organization_url_name=%r)",
            path,
            state.id,
            state.organization_url_name,
        )
        return state
