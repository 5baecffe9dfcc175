"""Markdown documents with a leading YAML frontmatter block.

A :class:`Document` is the ordered pair ``(frontmatter, body)``. The body
is opaque: it is sliced out of the source text verbatim and written back
verbatim, so line endings and surrounding whitespace survive a
parse/render cycle untouched.

Parsing is strict. A document without a complete ``---`` delimited block,
or whose block is not a YAML mapping, raises
:class:`~zenn2qiita.errors.MalformedDocumentError` rather than degrading
to an empty mapping.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.representer import RoundTripRepresenter

from zenn2qiita.errors import MalformedDocumentError

_FRONTMATTER_DELIMITER = "---"

# Opening delimiter on the first line, lazily matched block, closing
# delimiter on a line of its own. The closing line may be the last line.
_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<block>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)

# ---------------------------------------------------------------------------
# YAML parser (round-trip preserves quote styles of pass-through scalars)
# ---------------------------------------------------------------------------


class _FrontmatterRepresenter(RoundTripRepresenter):
    """Round-trip representer that spells out ``null`` for ``None`` values."""

    def represent_none(self, data: None) -> Any:
        return self.represent_scalar("tag:yaml.org,2002:null", "null")


_FrontmatterRepresenter.add_representer(type(None), _FrontmatterRepresenter.represent_none)


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful, so each parse or dump gets its
    own instance.
    """
    y = YAML()
    y.Representer = _FrontmatterRepresenter
    y.preserve_quotes = True
    y.default_flow_style = False
    y.width = 4096
    return y


@dataclass(frozen=True)
class Document:
    """A frontmatter mapping plus the untouched body text."""

    frontmatter: dict[str, Any] = field(default_factory=dict)
    body: str = ""


def parse_document(text: str, *, source: str = "<input>") -> Document:
    """Split *text* into frontmatter and body and load the frontmatter.

    Args:
        text: Full document text, starting with a ``---`` line.
        source: Label used in error messages (usually the file path).

    Raises:
        MalformedDocumentError: If the delimiters are missing, the block is
            not valid YAML, or the block is not a mapping with string keys.
    """
    first_line = text.split("\n", 1)[0].rstrip("\r \t")
    if first_line != _FRONTMATTER_DELIMITER:
        raise MalformedDocumentError(source, "missing opening '---' delimiter")

    match = _FRONTMATTER_RE.match(text)
    if match is None:
        raise MalformedDocumentError(source, "missing closing '---' delimiter")

    try:
        loaded = _new_yaml().load(match.group("block"))
    except YAMLError as exc:
        raise MalformedDocumentError(source, f"invalid YAML: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = f"expected a mapping, got {type(loaded).__name__}"
        raise MalformedDocumentError(source, msg)
    for key in loaded:
        if not isinstance(key, str):
            raise MalformedDocumentError(source, f"non-string key {key!r}")

    return Document(frontmatter=loaded, body=text[match.end() :])


def render_frontmatter(frontmatter: dict[str, Any]) -> str:
    """Render *frontmatter* as a delimited YAML block, keys in insertion order."""
    if not frontmatter:
        return f"{_FRONTMATTER_DELIMITER}\n{_FRONTMATTER_DELIMITER}\n"
    buf = StringIO()
    _new_yaml().dump(dict(frontmatter), buf)
    return f"{_FRONTMATTER_DELIMITER}\n{buf.getvalue()}{_FRONTMATTER_DELIMITER}\n"


def render_document(document: Document) -> str:
    """Render *document* back to text: frontmatter block, then the body as-is."""
    return render_frontmatter(document.frontmatter) + document.body
