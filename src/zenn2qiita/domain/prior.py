"""Prior output state — Qiita identifiers carried across conversions.

Qiita CLI writes ``id`` and ``organization_url_name`` into an article
after its first publish. Re-converting the Zenn source must keep them,
or the next publish would create a duplicate article. The converter asks
a :class:`PriorStateLookup` for them, keyed by output document identity.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel

from zenn2qiita.domain.frontmatter import CARRIED_KEYS


class PriorState(BaseModel):
    """Identifiers recovered from a previously generated output document."""

    model_config = {"frozen": True}

    id: Any = None
    organization_url_name: Any = None

    @classmethod
    def from_frontmatter(cls, frontmatter: Mapping[str, Any]) -> PriorState:
        """Pick the carried keys out of *frontmatter*; absent keys become ``None``.

        Values are carried as written, whatever their YAML type.
        """
        return cls.model_validate({key: frontmatter.get(key) for key in CARRIED_KEYS})


class PriorStateLookup(Protocol):
    """Read-only lookup of prior state by document identity."""

    def get(self, identity: str | Path) -> PriorState: ...


class NullPriorStateLookup:
    """Lookup that never finds anything."""

    def get(self, identity: str | Path) -> PriorState:
        return PriorState()


class MappingPriorStateLookup:
    """In-memory lookup over ``{identity: frontmatter}``.

    Identities are compared as strings, so ``Path("a.md")`` and ``"a.md"``
    name the same document.
    """

    def __init__(self, states: Mapping[str | Path, Mapping[str, Any]]) -> None:
        self._states = {str(key): value for key, value in states.items()}

    def get(self, identity: str | Path) -> PriorState:
        frontmatter = self._states.get(str(identity))
        if frontmatter is None:
            return PriorState()
        return PriorState.from_frontmatter(frontmatter)
