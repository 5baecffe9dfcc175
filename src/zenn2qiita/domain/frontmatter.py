"""Frontmatter schema models for the source (Zenn) and target (Qiita) layouts.

Target key ordering follows what Qiita CLI itself writes:
  title, tags, private, updated_at, id, organization_url_name, slide

Both models allow extra keys so that pass-through fields survive, and both
are frozen.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# Zenn-only keys that never reach the output.
DROPPED_KEYS: tuple[str, ...] = ("emoji", "type", "published", "topics")

# Keys recovered from a previously generated output document.
CARRIED_KEYS: tuple[str, ...] = ("id", "organization_url_name")

# Keys the converter computes; source values under these names are replaced.
DERIVED_KEYS: tuple[str, ...] = (
    "tags",
    "private",
    "updated_at",
    "id",
    "organization_url_name",
    "slide",
)

QIITA_KEY_ORDER: tuple[str, ...] = (
    "title",
    "tags",
    "private",
    "updated_at",
    "id",
    "organization_url_name",
    "slide",
)


class ZennFrontmatter(BaseModel):
    """Source frontmatter as written for Zenn.

    Only the keys the converter interprets are typed. ``emoji`` and
    ``type`` are accepted in any shape since they are discarded.
    """

    model_config = {"frozen": True, "extra": "allow"}

    emoji: Any = None
    type: Any = None
    published: bool | None = None
    topics: list[Any] | None = None

    @property
    def passthrough(self) -> dict[str, Any]:
        """Keys outside the Zenn schema, in source order."""
        return dict(self.model_extra or {})


class QiitaFrontmatter(BaseModel):
    """Target frontmatter as read by Qiita CLI."""

    model_config = {"frozen": True, "extra": "allow"}

    title: Any = None
    tags: list[Any] | None = None
    private: bool = True
    updated_at: str
    id: Any = None
    organization_url_name: Any = None
    slide: bool = False

    def to_mapping(self) -> dict[str, Any]:
        """Return the frontmatter as an ordered mapping ready to render.

        ``title`` and ``tags`` appear only when they were explicitly set.
        Extra keys follow the Qiita keys in the order they were supplied.
        """
        mapping: dict[str, Any] = {}
        for key in QIITA_KEY_ORDER:
            if key in ("title", "tags") and key not in self.model_fields_set:
                continue
            mapping[key] = getattr(self, key)
        mapping.update(self.model_extra or {})
        return mapping
