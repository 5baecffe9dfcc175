"""Zenn -> Qiita field mapping.

Pure functions only: the caller supplies the prior state and the
timestamp, so the mapping itself never touches the clock or the disk.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import ValidationError

from zenn2qiita.domain.frontmatter import (
    DERIVED_KEYS,
    DROPPED_KEYS,
    QiitaFrontmatter,
    ZennFrontmatter,
)
from zenn2qiita.domain.prior import PriorState
from zenn2qiita.errors import MalformedDocumentError

Timespec = Literal["seconds", "milliseconds", "microseconds"]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def format_timestamp(moment: datetime, *, timespec: Timespec = "milliseconds") -> str:
    """Format *moment* as ISO-8601 UTC with a ``Z`` suffix.

    Matches JavaScript's ``Date.prototype.toISOString()`` at the default
    precision, e.g. ``2023-01-01T00:00:00.000Z``. Naive datetimes are
    taken to already be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    text = moment.astimezone(UTC).isoformat(timespec=timespec)
    return text.removesuffix("+00:00") + "Z"


def load_source(frontmatter: dict[str, Any], *, source: str = "<input>") -> ZennFrontmatter:
    """Validate a raw frontmatter mapping against the Zenn schema.

    Raises:
        MalformedDocumentError: If ``published`` is not a boolean or
            ``topics`` is not a list.
    """
    try:
        return ZennFrontmatter.model_validate(frontmatter)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise MalformedDocumentError(source, f"invalid Zenn fields: {fields}") from exc


def map_frontmatter(
    source: ZennFrontmatter,
    *,
    prior: PriorState,
    updated_at: str,
) -> QiitaFrontmatter:
    """Derive Qiita frontmatter from Zenn frontmatter.

    - ``private`` is ``not published``; ``True`` when ``published`` is absent.
    - ``tags`` copies ``topics`` (empty list included); omitted without it.
    - ``id`` / ``organization_url_name`` come from *prior* only.
    - ``slide`` is always ``False``; ``updated_at`` is always *updated_at*.
    - Remaining keys pass through in source order.
    """
    fields: dict[str, Any] = {
        "private": True if source.published is None else not source.published,
        "updated_at": updated_at,
        "id": prior.id,
        "organization_url_name": prior.organization_url_name,
        "slide": False,
    }
    if source.topics is not None:
        fields["tags"] = list(source.topics)

    for key, value in source.passthrough.items():
        if key in DERIVED_KEYS or key in DROPPED_KEYS:
            continue
        fields[key] = value

    return QiitaFrontmatter.model_validate(fields)
